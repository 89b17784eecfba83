"""High-level fleet dashboard: authentication, session store and simulation."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import Any

from neurofleet.auth import Authenticator, UserRoster
from neurofleet.config import FleetConfig
from neurofleet.exceptions import FleetAuthError, FleetPermissionError
from neurofleet.export import export_data
from neurofleet.models.alerts import NotificationType
from neurofleet.models.reports import ExportDataType, ExportFormat, ExportResult
from neurofleet.models.routes import RouteRequest, RouteResult
from neurofleet.models.users import Permission, SignupRequest
from neurofleet.models.vehicle import Vehicle, VehicleDraft, VehicleStatus
from neurofleet.routing import optimize_route
from neurofleet.session import Session
from neurofleet.simulation.engine import SimulationEngine, TickResult
from neurofleet.simulation.scheduler import SimulationTask
from neurofleet.state.store import FleetStore

_logger = logging.getLogger(__name__)

_EXPORT_PERMISSIONS: dict[ExportDataType, Permission] = {
    ExportDataType.FLEET: Permission.EXPORT_DATA,
    ExportDataType.ANALYTICS: Permission.EXPORT_DATA,
    ExportDataType.MAINTENANCE: Permission.VIEW_REPORTS,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class FleetDashboard:
    """Async facade over one dashboard session.

    Usage::

        async with FleetDashboard() as dashboard:
            dashboard.login("manager@neurofleetx.com", "manager123")
            dashboard.set_simulation_mode(True)

    Entering the context starts the periodic simulation task; leaving it
    stops the task. Mutations check the logged-in user's permissions.
    """

    def __init__(
        self,
        config: FleetConfig | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        monotonic: Callable[[], float] = time.monotonic,
        roster: UserRoster | None = None,
    ) -> None:
        self._config = config or FleetConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._monotonic = monotonic
        self._store = FleetStore(self._config, clock=clock or _utcnow)
        self._auth = Authenticator(roster or UserRoster(), self._config, clock=monotonic)
        self._engine = SimulationEngine(self._config, self._rng)
        self._task: SimulationTask | None = None
        self._session: Session | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> FleetDashboard:
        self._task = SimulationTask(self._store, self._engine, clock=self._monotonic)
        self._task.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._task is not None:
            await self._task.stop()
            self._task = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def store(self) -> FleetStore:
        return self._store

    @property
    def authenticator(self) -> Authenticator:
        return self._auth

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def simulation_task(self) -> SimulationTask | None:
        return self._task

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def _start_session(self, session: Session) -> Session:
        self._session = session
        self._store.seed()
        self._store.add_notification(f"Welcome back, {session.user.name}!", NotificationType.INFO)
        return session

    def login(self, email: str, password: str) -> Session:
        return self._start_session(self._auth.login(email, password))

    def signup(self, request: SignupRequest) -> Session:
        return self._start_session(self._auth.signup(request))

    def logout(self) -> None:
        self._session = None

    def _require_session(self) -> Session:
        if self._session is None:
            raise FleetAuthError("Not logged in")
        return self._session

    def _require(self, *permissions: Permission) -> Session:
        """Ensure the session holds at least one of *permissions*."""
        session = self._require_session()
        if not any(session.has_permission(p) for p in permissions):
            needed = " or ".join(p.value for p in permissions)
            _logger.info("Permission denied user=%d needs=%s", session.user.id, needed)
            raise FleetPermissionError(
                f"Role {session.role.value!r} lacks permission {needed}",
                permission=needed,
            )
        return session

    # ------------------------------------------------------------------
    # Fleet management
    # ------------------------------------------------------------------

    def add_vehicle(self, draft: VehicleDraft) -> Vehicle:
        self._require(Permission.EDIT)
        return self._store.add_vehicle(draft, self._rng)

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        self._require(Permission.EDIT)
        return self._store.update_vehicle(vehicle)

    def delete_vehicle(self, vehicle_id: int) -> Vehicle:
        self._require(Permission.EDIT)
        return self._store.delete_vehicle(vehicle_id)

    def batch_update_status(self, status: VehicleStatus) -> None:
        self._require(Permission.MANAGE_FLEET)
        self._store.batch_update_status(status)

    def schedule_maintenance(self, vehicle_id: int, service_date: date) -> Vehicle:
        self._require(Permission.EDIT, Permission.EDIT_LIMITED)
        return self._store.schedule_maintenance(vehicle_id, service_date)

    # ------------------------------------------------------------------
    # Routes and exports
    # ------------------------------------------------------------------

    def optimize_route(self, request: RouteRequest) -> RouteResult:
        self._require(Permission.OPTIMIZE_ROUTES)
        result = optimize_route(
            request,
            self._rng,
            config=self._config,
            weather=self._store.weather,
            traffic=self._store.traffic,
        )
        self._store.apply_route(result)
        return result

    def export(
        self,
        fmt: ExportFormat,
        data_type: ExportDataType = ExportDataType.FLEET,
    ) -> ExportResult:
        data_type = ExportDataType(data_type)
        self._require(_EXPORT_PERMISSIONS[data_type])
        return export_data(self._store, fmt, data_type)

    # ------------------------------------------------------------------
    # Simulation, alerts and notifications
    # ------------------------------------------------------------------

    def set_simulation_mode(self, enabled: bool) -> None:
        self._require_session()
        self._store.set_simulation_mode(enabled)

    def toggle_simulation(self) -> bool:
        enabled = not self._store.simulation_mode
        self.set_simulation_mode(enabled)
        return enabled

    def tick(self) -> TickResult:
        """Run one simulation step now, outside the schedule."""
        return self._engine.step(self._store)

    def dismiss_alert(self, alert_id: int) -> bool:
        self._require_session()
        return self._store.dismiss_alert(alert_id)

    def mark_notification_read(self, notification_id: int) -> bool:
        self._require_session()
        return self._store.mark_notification_read(notification_id)

    def clear_notifications(self) -> None:
        self._require_session()
        self._store.clear_notifications()
