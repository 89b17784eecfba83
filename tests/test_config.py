from __future__ import annotations

import pytest

from neurofleet.config import FleetConfig, GeoBounds
from neurofleet.exceptions import FleetConfigError


def test_defaults() -> None:
    config = FleetConfig()
    assert config.tick_interval == 3.0
    assert config.low_battery_threshold == 20
    assert (config.healthy_threshold, config.due_threshold) == (80, 50)
    assert config.notification_limit == 10
    assert (config.max_login_attempts, config.lockout_seconds) == (3, 30)
    assert config.service_interval_days == 90
    assert config.simulation_enabled is False
    assert config.bounds == GeoBounds(8.0, 37.0, 68.0, 97.0)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEUROFLEET_TICK_INTERVAL", "1.5")
    monkeypatch.setenv("NEUROFLEET_NOTIFICATION_LIMIT", "4")
    monkeypatch.setenv("NEUROFLEET_SIMULATION_ENABLED", "yes")
    monkeypatch.setenv("NEUROFLEET_SEED", "99")

    config = FleetConfig.from_env()

    assert config.tick_interval == 1.5
    assert config.notification_limit == 4
    assert config.simulation_enabled is True
    assert config.seed == 99


def test_overrides_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEUROFLEET_LOCKOUT_SECONDS", "10")
    monkeypatch.setenv("NEUROFLEET_SIMULATION_ENABLED", "1")

    config = FleetConfig.from_env(lockout_seconds=60.0, simulation_enabled=False)

    assert config.lockout_seconds == 60.0
    assert config.simulation_enabled is False


def test_unparseable_env_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEUROFLEET_MAX_LOGIN_ATTEMPTS", "three")
    with pytest.raises(FleetConfigError, match="NEUROFLEET_MAX_LOGIN_ATTEMPTS"):
        FleetConfig.from_env()


def test_non_finite_env_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEUROFLEET_TICK_INTERVAL", "nan")
    with pytest.raises(FleetConfigError, match="tick_interval must be finite"):
        FleetConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_interval": 0},
        {"tick_interval": float("nan")},
        {"lockout_seconds": float("inf")},
        {"route_average_speed": float("-inf")},
        {"healthy_threshold": 40, "due_threshold": 50},
        {"low_battery_threshold": 120},
        {"notification_limit": 0},
        {"max_login_attempts": 0},
        {"route_average_speed": 0},
        {"bounds": GeoBounds(lat_min=10, lat_max=5)},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(FleetConfigError):
        FleetConfig(**kwargs)  # type: ignore[arg-type]


def test_bounds_contains() -> None:
    bounds = GeoBounds()
    assert bounds.contains(28.6, 77.2)
    assert not bounds.contains(51.5, -0.1)
