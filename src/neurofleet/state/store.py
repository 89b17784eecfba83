"""In-memory session state store.

This is the only component allowed to mutate fleet state. Readers get
tuple snapshots, so a list handed out before a tick never changes under
them.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime, timedelta

from neurofleet import _seed
from neurofleet._constants import nearest_city_name
from neurofleet.config import FleetConfig
from neurofleet.exceptions import VehicleNotFoundError
from neurofleet.models.alerts import Alert, AlertPriority, AlertType, Notification, NotificationType
from neurofleet.models.environment import GeoPoint, TrafficReading, WeatherReading
from neurofleet.models.reports import (
    AnalyticsSnapshot,
    FleetOverview,
    MaintenanceBreakdown,
    MaintenanceStatus,
    MaintenanceSummaryRow,
    MapMarker,
)
from neurofleet.models.routes import RouteResult
from neurofleet.models.vehicle import (
    MaintenanceRecord,
    Telemetry,
    TirePressure,
    Vehicle,
    VehicleDraft,
    VehicleStatus,
    VehicleType,
)
from neurofleet.state.policy import maintenance_status

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _in_range(vehicle: Vehicle) -> bool:
    m = vehicle.maintenance
    percents = (vehicle.battery, m.engine, m.tires, m.brakes, m.battery_health, vehicle.telemetry.fuel_level)
    return all(0 <= p <= 100 for p in percents) and vehicle.speed >= 0 and m.mileage >= 0


def _clamped(vehicle: Vehicle) -> Vehicle:
    """Return *vehicle*, re-validated when a ``model_copy`` left a value out of range."""
    if _in_range(vehicle):
        return vehicle
    return Vehicle.model_validate(vehicle.model_dump())


class FleetStore:
    """Session state: vehicles, alerts, notifications and mock environment.

    Parameters
    ----------
    config : FleetConfig or None
        Session configuration. Defaults to ``FleetConfig()``.
    clock : callable
        Returns the current wall-clock time. Used for timestamps, ids and
        service dates.
    weather, traffic
        Initial environment readings. ``seed()`` replaces them with the
        demo defaults.
    """

    def __init__(
        self,
        config: FleetConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
        weather: WeatherReading | None = None,
        traffic: TrafficReading | None = None,
    ) -> None:
        self._config = config or FleetConfig()
        self._clock = clock
        self._vehicles: tuple[Vehicle, ...] = ()
        self._alerts: list[Alert] = []
        self._notifications: list[Notification] = []
        self._weather = weather
        self._traffic = traffic
        self._analytics = AnalyticsSnapshot()
        self._simulation_mode = self._config.simulation_enabled
        self._selected_vehicle_id: int | None = None
        self._selected_route: tuple[GeoPoint, ...] | None = None
        self._last_event_id = 0

    @property
    def config(self) -> FleetConfig:
        return self._config

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return self._clock().date()

    def _next_event_id(self) -> int:
        """Epoch-millisecond id, bumped when two events share a millisecond."""
        stamp = int(self._clock().timestamp() * 1000)
        self._last_event_id = max(stamp, self._last_event_id + 1)
        return self._last_event_id

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def seed(self) -> None:
        """Reset the store to the demo fleet and readings."""
        self._vehicles = _seed.seed_vehicles()
        self._alerts = []
        for alert_type, message, priority, vehicle_id in _seed.SEED_ALERTS:
            self.add_alert(alert_type, message, priority, vehicle_id=vehicle_id)
        self._analytics = _seed.seed_analytics()
        self._weather = _seed.default_weather()
        self._traffic = _seed.default_traffic()
        self._selected_vehicle_id = None
        self._selected_route = None
        _logger.info("Seeded store with %d vehicles", len(self._vehicles))

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return self._vehicles

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise VehicleNotFoundError(vehicle_id)

    def next_vehicle_id(self) -> int:
        if not self._vehicles:
            return 1
        return max(v.id for v in self._vehicles) + 1

    def add_vehicle(self, draft: VehicleDraft, rng: random.Random) -> Vehicle:
        """Create a fresh vehicle from *draft* at a random spot inside the bounds."""
        bounds = self._config.bounds
        today = self.today()
        vehicle = Vehicle(
            id=self.next_vehicle_id(),
            name=draft.name,
            type=draft.type,
            status=draft.status,
            license_plate=draft.license_plate,
            battery=100,
            location=GeoPoint(
                lat=rng.uniform(bounds.lat_min, bounds.lat_max),
                lng=rng.uniform(bounds.lng_min, bounds.lng_max),
            ),
            speed=0,
            driver="Unassigned",
            phone="+91 0000000000",
            last_service=today,
            next_service=today + timedelta(days=self._config.service_interval_days),
            maintenance=MaintenanceRecord(),
            telemetry=Telemetry(temperature=25, rpm=0, fuel_level=100, tire_pressure=TirePressure()),
        )
        self._vehicles = (*self._vehicles, vehicle)
        _logger.info("Added vehicle id=%d name=%s", vehicle.id, vehicle.name)
        self.add_notification(f"Vehicle {vehicle.name} added to fleet", NotificationType.SUCCESS)
        return vehicle

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Replace the record that has the same id as *vehicle*."""
        self.get_vehicle(vehicle.id)
        vehicle = _clamped(vehicle)
        self._vehicles = tuple(vehicle if v.id == vehicle.id else v for v in self._vehicles)
        _logger.info("Updated vehicle id=%d", vehicle.id)
        self.add_notification(f"Vehicle {vehicle.name} updated", NotificationType.SUCCESS)
        return vehicle

    def delete_vehicle(self, vehicle_id: int) -> Vehicle:
        vehicle = self.get_vehicle(vehicle_id)
        self._vehicles = tuple(v for v in self._vehicles if v.id != vehicle_id)
        if self._selected_vehicle_id == vehicle_id:
            self._selected_vehicle_id = None
        _logger.info("Deleted vehicle id=%d", vehicle_id)
        self.add_notification(f"Vehicle {vehicle.name} removed from fleet", NotificationType.WARNING)
        return vehicle

    def batch_update_status(self, status: VehicleStatus) -> None:
        self._vehicles = tuple(v.model_copy(update={"status": status}) for v in self._vehicles)
        _logger.info("Set status=%s on %d vehicles", status, len(self._vehicles))
        self.add_notification(f"All vehicles status updated to {status.label}", NotificationType.SUCCESS)

    def schedule_maintenance(self, vehicle_id: int, service_date: date) -> Vehicle:
        vehicle = self.get_vehicle(vehicle_id).model_copy(update={"next_service": service_date})
        self._vehicles = tuple(vehicle if v.id == vehicle_id else v for v in self._vehicles)
        self.add_notification(f"Maintenance scheduled for vehicle #{vehicle_id}", NotificationType.INFO)
        return vehicle

    def replace_vehicles(self, vehicles: Iterable[Vehicle]) -> None:
        """Swap in a whole new vehicle list in one step."""
        self._vehicles = tuple(_clamped(v) for v in vehicles)

    def search(
        self,
        term: str = "",
        *,
        status: VehicleStatus | None = None,
        vehicle_type: VehicleType | None = None,
    ) -> list[Vehicle]:
        """Filter vehicles by a name/plate/driver substring plus optional status and type."""
        needle = term.lower()
        matches = []
        for vehicle in self._vehicles:
            if needle and not any(
                needle in field.lower() for field in (vehicle.name, vehicle.license_plate, vehicle.driver)
            ):
                continue
            if status is not None and vehicle.status != status:
                continue
            if vehicle_type is not None and vehicle.type != vehicle_type:
                continue
            matches.append(vehicle)
        return matches

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------

    @property
    def alerts(self) -> tuple[Alert, ...]:
        return tuple(self._alerts)

    def add_alert(
        self,
        alert_type: AlertType,
        message: str,
        priority: AlertPriority = AlertPriority.MEDIUM,
        *,
        vehicle_id: int | None = None,
    ) -> Alert:
        alert = Alert(
            id=self._next_event_id(),
            type=alert_type,
            message=message,
            priority=priority,
            timestamp=self._clock(),
            vehicle_id=vehicle_id,
        )
        self._alerts.append(alert)
        _logger.info("Alert raised id=%d type=%s: %s", alert.id, alert.type, alert.message)
        return alert

    def has_alert_referencing(self, text: str) -> bool:
        return any(alert.references(text) for alert in self._alerts)

    def dismiss_alert(self, alert_id: int) -> bool:
        """Remove the alert with *alert_id*. Returns ``False`` if there was none."""
        remaining = [a for a in self._alerts if a.id != alert_id]
        if len(remaining) == len(self._alerts):
            return False
        self._alerts = remaining
        _logger.debug("Dismissed alert id=%d", alert_id)
        return True

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """Newest first."""
        return tuple(self._notifications)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._notifications if not n.read)

    def add_notification(self, message: str, notification_type: NotificationType = NotificationType.INFO) -> Notification:
        notification = Notification(
            id=self._next_event_id(),
            message=message,
            type=notification_type,
            timestamp=self._clock(),
        )
        self._notifications = [notification, *self._notifications][: self._config.notification_limit]
        return notification

    def mark_notification_read(self, notification_id: int) -> bool:
        found = False
        updated = []
        for notification in self._notifications:
            if notification.id == notification_id:
                notification = notification.model_copy(update={"read": True})
                found = True
            updated.append(notification)
        self._notifications = updated
        return found

    def clear_notifications(self) -> None:
        self._notifications = []

    # ------------------------------------------------------------------
    # Simulation mode and environment
    # ------------------------------------------------------------------

    @property
    def simulation_mode(self) -> bool:
        return self._simulation_mode

    def set_simulation_mode(self, enabled: bool) -> None:
        self._simulation_mode = enabled
        _logger.info("Simulation mode %s", "enabled" if enabled else "disabled")
        self.add_notification(f"Simulation mode {'enabled' if enabled else 'disabled'}", NotificationType.INFO)

    @property
    def weather(self) -> WeatherReading | None:
        return self._weather

    @property
    def traffic(self) -> TrafficReading | None:
        return self._traffic

    def set_weather(self, weather: WeatherReading) -> None:
        self._weather = weather

    def set_traffic(self, traffic: TrafficReading) -> None:
        self._traffic = traffic

    @property
    def analytics(self) -> AnalyticsSnapshot:
        return self._analytics

    # ------------------------------------------------------------------
    # Selection and routes
    # ------------------------------------------------------------------

    def select_vehicle(self, vehicle_id: int | None) -> Vehicle | None:
        """Mark a vehicle as selected on the map. ``None`` clears the selection."""
        if vehicle_id is None:
            self._selected_vehicle_id = None
            return None
        vehicle = self.get_vehicle(vehicle_id)
        self._selected_vehicle_id = vehicle_id
        return vehicle

    @property
    def selected_vehicle(self) -> Vehicle | None:
        if self._selected_vehicle_id is None:
            return None
        for vehicle in self._vehicles:
            if vehicle.id == self._selected_vehicle_id:
                return vehicle
        return None

    @property
    def selected_route(self) -> tuple[GeoPoint, ...] | None:
        return self._selected_route

    def apply_route(self, result: RouteResult) -> None:
        self._selected_route = result.waypoints
        self.add_notification("Route optimized successfully", NotificationType.SUCCESS)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def overview(self) -> FleetOverview:
        vehicles = self._vehicles
        average = sum(v.battery for v in vehicles) / len(vehicles) if vehicles else 0.0
        return FleetOverview(
            total_vehicles=len(vehicles),
            active_vehicles=sum(1 for v in vehicles if v.is_active),
            average_battery=average,
            unread_notifications=self.unread_count,
            open_alerts=len(self._alerts),
        )

    def maintenance_summary(self) -> list[MaintenanceSummaryRow]:
        return [
            MaintenanceSummaryRow(
                name=v.name,
                maintenance_status=maintenance_status(v.maintenance, self._config),
                last_service=v.last_service,
                next_service=v.next_service,
            )
            for v in self._vehicles
        ]

    def maintenance_breakdown(self) -> MaintenanceBreakdown:
        counts = dict.fromkeys(MaintenanceStatus, 0)
        for vehicle in self._vehicles:
            counts[maintenance_status(vehicle.maintenance, self._config)] += 1
        return MaintenanceBreakdown(
            healthy=counts[MaintenanceStatus.HEALTHY],
            due=counts[MaintenanceStatus.DUE],
            critical=counts[MaintenanceStatus.CRITICAL],
        )

    def map_markers(self) -> list[MapMarker]:
        return [
            MapMarker(
                vehicle_id=v.id,
                lat=v.location.lat,
                lng=v.location.lng,
                icon=v.type,
                place=nearest_city_name(v.location.lat, v.location.lng),
            )
            for v in self._vehicles
        ]
