"""Derived views: analytics, maintenance summaries, map markers and exports."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from neurofleet.models._base import FleetBaseModel
from neurofleet.models.vehicle import VehicleType


class AnalyticsSnapshot(FleetBaseModel):
    """Static analytics figures shown on the analytics tab."""

    total_distance: float = 0.0
    fuel_saved: float = 0.0
    emissions_reduced: float = 0.0
    trips_completed: int = 0
    average_speed: float = 0.0
    utilization_rate: float = 0.0
    active_vehicles: int = 0
    revenue: float = 0.0


class MaintenanceStatus(StrEnum):
    HEALTHY = "Healthy"
    DUE = "Due"
    CRITICAL = "Critical"


class MaintenanceSummaryRow(FleetBaseModel):
    name: str
    maintenance_status: MaintenanceStatus
    last_service: date | None = None
    next_service: date | None = None


class MaintenanceBreakdown(FleetBaseModel):
    healthy: int = 0
    due: int = 0
    critical: int = 0


class FleetOverview(FleetBaseModel):
    """Counters for the dashboard header."""

    total_vehicles: int
    active_vehicles: int
    average_battery: float
    unread_notifications: int
    open_alerts: int


class MapMarker(FleetBaseModel):
    vehicle_id: int
    lat: float
    lng: float
    icon: VehicleType
    place: str


class ExportFormat(StrEnum):
    JSON = "json"
    CSV = "csv"
    PDF = "pdf"


class ExportDataType(StrEnum):
    FLEET = "fleet"
    MAINTENANCE = "maintenance"
    ANALYTICS = "analytics"


class ExportResult(FleetBaseModel):
    """Result of an export request.

    ``content`` is ``None`` for formats that are acknowledged but not
    serialized.
    """

    filename: str
    format: ExportFormat
    data_type: ExportDataType
    content: str | None = None
    message: str = ""
