"""One simulation step against a store: advance active vehicles, then scan for alerts."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from neurofleet.config import FleetConfig
from neurofleet.models.alerts import Alert
from neurofleet.simulation.alerts import AlertGenerator
from neurofleet.simulation.tick import advance_fleet
from neurofleet.state.store import FleetStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """What a single step did."""

    advanced: int = 0
    """Number of vehicles recomputed."""
    alerts: list[Alert] = field(default_factory=list)
    """Alerts raised during the step."""
    skipped: bool = False
    """``True`` when simulation mode was off and nothing ran."""


class SimulationEngine:
    """Applies ticks to a :class:`FleetStore`.

    Parameters
    ----------
    config : FleetConfig
        Thresholds for alerting.
    rng : random.Random or None
        Random source for the walk. Defaults to ``random.Random(config.seed)``.
    """

    def __init__(self, config: FleetConfig, rng: random.Random | None = None) -> None:
        self._config = config
        self._rng = rng if rng is not None else random.Random(config.seed)
        self._alerts = AlertGenerator(config)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def step(self, store: FleetStore) -> TickResult:
        if not store.simulation_mode:
            return TickResult(skipped=True)

        updated = advance_fleet(store.vehicles, self._rng, store.weather, store.traffic)
        store.replace_vehicles(updated)
        active = [v for v in updated if v.is_active]
        alerts = self._alerts.scan(store, active)
        _logger.debug("Tick advanced %d vehicles, raised %d alerts", len(active), len(alerts))
        return TickResult(advanced=len(active), alerts=alerts)
