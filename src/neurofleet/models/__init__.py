"""Pydantic records for the fleet session."""

from neurofleet.models._base import FleetBaseModel
from neurofleet.models.alerts import Alert, AlertPriority, AlertType, Notification, NotificationType
from neurofleet.models.environment import CongestionLevel, GeoPoint, TrafficReading, WeatherReading
from neurofleet.models.reports import (
    AnalyticsSnapshot,
    ExportDataType,
    ExportFormat,
    ExportResult,
    FleetOverview,
    MaintenanceBreakdown,
    MaintenanceStatus,
    MaintenanceSummaryRow,
    MapMarker,
)
from neurofleet.models.routes import RoutePriority, RouteRequest, RouteResult
from neurofleet.models.users import ROLE_PERMISSIONS, Permission, Role, SignupRequest, User
from neurofleet.models.vehicle import (
    MaintenanceRecord,
    Telemetry,
    TirePressure,
    Vehicle,
    VehicleDraft,
    VehicleSpec,
    VehicleStatus,
    VehicleType,
)

__all__ = [
    "Alert",
    "AlertPriority",
    "AlertType",
    "AnalyticsSnapshot",
    "CongestionLevel",
    "ExportDataType",
    "ExportFormat",
    "ExportResult",
    "FleetBaseModel",
    "FleetOverview",
    "GeoPoint",
    "MaintenanceBreakdown",
    "MaintenanceRecord",
    "MaintenanceStatus",
    "MaintenanceSummaryRow",
    "MapMarker",
    "Notification",
    "NotificationType",
    "Permission",
    "ROLE_PERMISSIONS",
    "Role",
    "RoutePriority",
    "RouteRequest",
    "RouteResult",
    "SignupRequest",
    "Telemetry",
    "TirePressure",
    "TrafficReading",
    "User",
    "Vehicle",
    "VehicleDraft",
    "VehicleSpec",
    "VehicleStatus",
    "VehicleType",
    "WeatherReading",
]
