"""Low-battery alert generation.

Runs after every tick. A vehicle gets at most one open low-battery alert;
dismissing it lets the next tick raise it again if the battery is still low.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from neurofleet.config import FleetConfig
from neurofleet.models.alerts import Alert, AlertPriority, AlertType, NotificationType
from neurofleet.models.vehicle import Vehicle
from neurofleet.state.policy import is_battery_low, low_battery_reference
from neurofleet.state.store import FleetStore

_logger = logging.getLogger(__name__)


class AlertGenerator:
    def __init__(self, config: FleetConfig) -> None:
        self._config = config

    def scan(self, store: FleetStore, vehicles: Iterable[Vehicle]) -> list[Alert]:
        """Raise alerts for low-battery *vehicles* that have none open.

        Returns the alerts created by this call.
        """
        created: list[Alert] = []
        for vehicle in vehicles:
            if not is_battery_low(vehicle, self._config):
                continue
            if store.has_alert_referencing(low_battery_reference(vehicle.id)):
                continue
            alert = store.add_alert(
                AlertType.BATTERY,
                f"{low_battery_reference(vehicle.id)} critically low",
                AlertPriority.HIGH,
                vehicle_id=vehicle.id,
            )
            store.add_notification(f"Vehicle {vehicle.name} battery critically low", NotificationType.WARNING)
            _logger.debug("Battery critically low vehicle=%d battery=%.1f", vehicle.id, vehicle.battery)
            created.append(alert)
        return created
