"""neurofleet - In-memory fleet monitoring session with a telemetry simulation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("neurofleet")
except PackageNotFoundError:
    __version__ = "0+local"
from neurofleet.auth import Authenticator, UserRoster
from neurofleet.config import FleetConfig, GeoBounds
from neurofleet.dashboard import FleetDashboard
from neurofleet.exceptions import (
    AccountLockedError,
    DuplicateAccountError,
    FleetAuthError,
    FleetConfigError,
    FleetError,
    FleetPermissionError,
    InvalidCredentialsError,
    VehicleNotFoundError,
)
from neurofleet.models import (
    Alert,
    CongestionLevel,
    ExportDataType,
    ExportFormat,
    Notification,
    Permission,
    Role,
    RouteRequest,
    TrafficReading,
    Vehicle,
    VehicleDraft,
    VehicleStatus,
    VehicleType,
    WeatherReading,
)
from neurofleet.session import Session
from neurofleet.simulation import SimulationEngine, SimulationTask, TickResult
from neurofleet.state import FleetStore

__all__ = [
    "__version__",
    "AccountLockedError",
    "Alert",
    "Authenticator",
    "CongestionLevel",
    "DuplicateAccountError",
    "ExportDataType",
    "ExportFormat",
    "FleetAuthError",
    "FleetConfig",
    "FleetConfigError",
    "FleetDashboard",
    "FleetError",
    "FleetPermissionError",
    "FleetStore",
    "GeoBounds",
    "InvalidCredentialsError",
    "Notification",
    "Permission",
    "Role",
    "RouteRequest",
    "Session",
    "SimulationEngine",
    "SimulationTask",
    "TickResult",
    "TrafficReading",
    "UserRoster",
    "Vehicle",
    "VehicleDraft",
    "VehicleNotFoundError",
    "VehicleStatus",
    "VehicleType",
    "WeatherReading",
]
