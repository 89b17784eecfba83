"""Route optimization request and result."""

from __future__ import annotations

from enum import StrEnum

from neurofleet.models._base import FleetBaseModel
from neurofleet.models.environment import GeoPoint
from neurofleet.models.vehicle import VehicleType


class RoutePriority(StrEnum):
    FASTEST = "fastest"
    SHORTEST = "shortest"
    ECO = "eco"
    SAFE = "safe"


class RouteRequest(FleetBaseModel):
    origin: str = ""
    destination: str = ""
    vehicle_type: VehicleType = VehicleType.CAR
    priority: RoutePriority = RoutePriority.FASTEST


class RouteResult(FleetBaseModel):
    """Outcome of a (randomly generated) route optimization."""

    distance_km: int
    estimated_minutes: int
    fuel_savings_percent: int
    recommended_vehicle: VehicleType
    traffic_delay_minutes: int
    weather_impact: bool
    waypoints: tuple[GeoPoint, ...]
    co2_reduction_kg: int
    vehicle_range_km: float
    """Rated range of the recommended vehicle type."""

    @property
    def within_range(self) -> bool:
        return self.distance_km <= self.vehicle_range_km
