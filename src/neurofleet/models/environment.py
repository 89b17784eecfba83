"""Map coordinates and mock weather/traffic readings."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from neurofleet.models._base import FleetBaseModel

RAIN = "Rain"


class GeoPoint(FleetBaseModel):
    """A latitude/longitude pair in degrees."""

    lat: float
    lng: float


class WeatherReading(FleetBaseModel):
    """Mock weather conditions.

    Only ``condition`` influences the simulation: rain slows battery
    drift and delays routes.
    """

    temperature: float = 28.0
    condition: str = "Partly Cloudy"
    humidity: float = Field(default=65.0, ge=0, le=100)
    wind_speed: float = Field(default=12.0, ge=0)

    @property
    def is_raining(self) -> bool:
        return self.condition == RAIN

    @property
    def battery_factor(self) -> float:
        """Multiplier applied to each tick's battery delta."""
        return 0.8 if self.is_raining else 1.0

    @property
    def delay_ratio(self) -> float:
        """Fraction of route base time added as weather delay."""
        return 0.2 if self.is_raining else 0.0


class CongestionLevel(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


_MOVEMENT_FACTORS: dict[CongestionLevel, float] = {
    CongestionLevel.HIGH: 0.7,
    CongestionLevel.MODERATE: 0.9,
    CongestionLevel.LOW: 1.0,
}

_DELAY_RATIOS: dict[CongestionLevel, float] = {
    CongestionLevel.HIGH: 0.30,
    CongestionLevel.MODERATE: 0.15,
    CongestionLevel.LOW: 0.0,
}


class TrafficReading(FleetBaseModel):
    """Mock traffic conditions."""

    congestion_level: CongestionLevel = CongestionLevel.MODERATE
    average_speed: float = Field(default=35.0, ge=0)
    incidents: int = Field(default=3, ge=0)

    @property
    def movement_factor(self) -> float:
        """Multiplier applied to speed and position changes per tick."""
        return _MOVEMENT_FACTORS[self.congestion_level]

    @property
    def delay_ratio(self) -> float:
        """Fraction of route base time added as traffic delay."""
        return _DELAY_RATIOS[self.congestion_level]
