"""Vehicle records."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import Field

from neurofleet.models._base import FleetBaseModel, NonNegative, Percent
from neurofleet.models.environment import GeoPoint


class VehicleType(StrEnum):
    CAR = "car"
    VAN = "van"
    TRUCK = "truck"
    SCOOTER = "scooter"


class VehicleStatus(StrEnum):
    """Operational status. Only ``IN_USE`` vehicles are simulated."""

    IDLE = "idle"
    IN_USE = "in_use"
    MAINTENANCE = "maintenance"

    @property
    def label(self) -> str:
        """Display text shown in the fleet table."""
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[VehicleStatus, str] = {
    VehicleStatus.IDLE: "Available",
    VehicleStatus.IN_USE: "In Use",
    VehicleStatus.MAINTENANCE: "Needs Service",
}


class VehicleSpec(FleetBaseModel):
    """Nominal capabilities of a vehicle type."""

    max_speed: float
    """Top speed in km/h."""
    capacity: int
    """Passenger or load capacity."""
    fuel_efficiency: float
    """km per unit of energy."""
    range_km: float
    """Range on a full charge."""


class TirePressure(FleetBaseModel):
    """Tire pressures in psi."""

    front_left: float = 32.0
    front_right: float = 32.0
    rear_left: float = 32.0
    rear_right: float = 32.0


class MaintenanceRecord(FleetBaseModel):
    """Component health percentages and cumulative mileage."""

    engine: Percent = 100.0
    tires: Percent = 100.0
    brakes: Percent = 100.0
    battery_health: Percent = 100.0
    mileage: NonNegative = 0.0

    @property
    def average_health(self) -> float:
        return (self.engine + self.tires + self.brakes + self.battery_health) / 4


class Telemetry(FleetBaseModel):
    temperature: float = 25.0
    rpm: float = 0.0
    fuel_level: Percent = 100.0
    tire_pressure: TirePressure = Field(default_factory=TirePressure)


class Vehicle(FleetBaseModel):
    """A fleet vehicle.

    ``battery`` is clamped into ``[0, 100]`` and ``speed`` to ``>= 0``
    whenever a record is validated. Code that builds updated copies with
    ``model_copy`` clamps explicitly.
    """

    id: int
    name: str
    type: VehicleType = VehicleType.CAR
    status: VehicleStatus = VehicleStatus.IDLE
    battery: Percent = 100.0
    location: GeoPoint
    speed: NonNegative = 0.0
    license_plate: str = ""
    driver: str = "Unassigned"
    phone: str = ""
    last_service: date | None = None
    next_service: date | None = None
    maintenance: MaintenanceRecord = Field(default_factory=MaintenanceRecord)
    telemetry: Telemetry = Field(default_factory=Telemetry)

    @property
    def is_active(self) -> bool:
        return self.status == VehicleStatus.IN_USE


class VehicleDraft(FleetBaseModel):
    """User input for adding a vehicle."""

    name: str = Field(min_length=1)
    type: VehicleType = VehicleType.CAR
    status: VehicleStatus = VehicleStatus.IDLE
    license_plate: str = ""
