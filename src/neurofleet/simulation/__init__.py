"""Telemetry simulation: the per-tick random walk, alerting and scheduling."""

from neurofleet.simulation.alerts import AlertGenerator
from neurofleet.simulation.engine import SimulationEngine, TickResult
from neurofleet.simulation.scheduler import SimulationTask
from neurofleet.simulation.tick import advance_fleet, advance_vehicle

__all__ = [
    "AlertGenerator",
    "SimulationEngine",
    "SimulationTask",
    "TickResult",
    "advance_fleet",
    "advance_vehicle",
]
