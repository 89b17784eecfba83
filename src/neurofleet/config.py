"""Session configuration for neurofleet."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any

from neurofleet.exceptions import FleetConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class GeoBounds:
    """Bounding box used to place newly added vehicles.

    Defaults cover mainland India.
    """

    lat_min: float = 8.0
    lat_max: float = 37.0
    lng_min: float = 68.0
    lng_max: float = 97.0

    def contains(self, lat: float, lng: float) -> bool:
        return self.lat_min <= lat <= self.lat_max and self.lng_min <= lng <= self.lng_max


@dataclasses.dataclass(frozen=True)
class FleetConfig:
    """Fleet session configuration.

    Parameters
    ----------
    tick_interval : float
        Seconds between simulation ticks.
    low_battery_threshold : float
        Battery percentage below which a low-battery alert is raised.
    healthy_threshold : float
        Minimum average maintenance health for ``Healthy``.
    due_threshold : float
        Minimum average maintenance health for ``Due``; anything lower
        is ``Critical``.
    notification_limit : int
        Number of most recent notifications kept.
    max_login_attempts : int
        Consecutive failed logins before the authenticator locks.
    lockout_seconds : float
        Duration of the login lockout.
    service_interval_days : int
        Days between ``last_service`` and ``next_service`` for new vehicles.
    route_average_speed : float
        Average speed (km/h) used to derive route base times.
    simulation_enabled : bool
        Initial state of simulation mode.
    seed : int or None
        Seed for the session's random generator. ``None`` draws from
        system entropy.
    bounds : GeoBounds
        Area new vehicles are placed in.
    """

    tick_interval: float = 3.0
    low_battery_threshold: float = 20.0
    healthy_threshold: float = 80.0
    due_threshold: float = 50.0
    notification_limit: int = 10
    max_login_attempts: int = 3
    lockout_seconds: float = 30.0
    service_interval_days: int = 90
    route_average_speed: float = 40.0
    simulation_enabled: bool = False
    seed: int | None = None
    bounds: GeoBounds = dataclasses.field(default_factory=GeoBounds)

    def __post_init__(self) -> None:
        for name in (
            "tick_interval",
            "low_battery_threshold",
            "healthy_threshold",
            "due_threshold",
            "lockout_seconds",
            "route_average_speed",
        ):
            if not math.isfinite(getattr(self, name)):
                raise FleetConfigError(f"{name} must be finite, got {getattr(self, name)}")
        if self.tick_interval <= 0:
            raise FleetConfigError(f"tick_interval must be positive, got {self.tick_interval}")
        if not 0 <= self.due_threshold <= self.healthy_threshold <= 100:
            raise FleetConfigError(
                f"thresholds must satisfy 0 <= due ({self.due_threshold}) <= healthy ({self.healthy_threshold}) <= 100"
            )
        if not 0 <= self.low_battery_threshold <= 100:
            raise FleetConfigError(f"low_battery_threshold out of range: {self.low_battery_threshold}")
        if self.notification_limit < 1:
            raise FleetConfigError("notification_limit must be at least 1")
        if self.max_login_attempts < 1:
            raise FleetConfigError("max_login_attempts must be at least 1")
        if self.lockout_seconds < 0:
            raise FleetConfigError("lockout_seconds must not be negative")
        if self.route_average_speed <= 0:
            raise FleetConfigError("route_average_speed must be positive")
        if self.bounds.lat_min > self.bounds.lat_max or self.bounds.lng_min > self.bounds.lng_max:
            raise FleetConfigError(f"invalid bounds: {self.bounds}")

    @classmethod
    def from_env(cls, **overrides: Any) -> FleetConfig:
        """Create configuration from ``NEUROFLEET_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        FleetConfigError
            If a variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP: dict[str, tuple[str, type]] = {
            "NEUROFLEET_TICK_INTERVAL": ("tick_interval", float),
            "NEUROFLEET_LOW_BATTERY_THRESHOLD": ("low_battery_threshold", float),
            "NEUROFLEET_HEALTHY_THRESHOLD": ("healthy_threshold", float),
            "NEUROFLEET_DUE_THRESHOLD": ("due_threshold", float),
            "NEUROFLEET_NOTIFICATION_LIMIT": ("notification_limit", int),
            "NEUROFLEET_MAX_LOGIN_ATTEMPTS": ("max_login_attempts", int),
            "NEUROFLEET_LOCKOUT_SECONDS": ("lockout_seconds", float),
            "NEUROFLEET_SERVICE_INTERVAL_DAYS": ("service_interval_days", int),
            "NEUROFLEET_ROUTE_AVERAGE_SPEED": ("route_average_speed", float),
            "NEUROFLEET_SEED": ("seed", int),
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, (field_name, cast) in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = cast(val)
            except ValueError as exc:
                raise FleetConfigError(f"{env_key}={val!r} is not a valid {cast.__name__}") from exc

        if "simulation_enabled" not in overrides:
            config_kwargs["simulation_enabled"] = _env_bool(env.get("NEUROFLEET_SIMULATION_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
