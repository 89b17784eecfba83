"""Telemetry random walk applied to active vehicles on every tick.

Pure functions: nothing here touches the store. Random draws happen in a
fixed order per vehicle (battery, speed, lat, lng, temperature, rpm,
four tire pressures) so a seeded generator reproduces a tick exactly.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from neurofleet.models._base import clamp_non_negative, clamp_percent
from neurofleet.models.environment import GeoPoint, TrafficReading, WeatherReading
from neurofleet.models.vehicle import TirePressure, Vehicle

BATTERY_STEP = 1.0
SPEED_STEP = 5.0
POSITION_STEP = 0.0005
TEMPERATURE_RANGE = (20.0, 35.0)
RPM_RANGE = (1500.0, 3500.0)
TIRE_PRESSURE_RANGE = (30.0, 34.0)
# Battery health loses a tenth of what the battery itself loses.
BATTERY_HEALTH_RATIO = 10.0
# Mileage grows by speed / 60, i.e. one minute of travel per tick.
MINUTES_PER_HOUR = 60.0


def weather_factor(weather: WeatherReading | None) -> float:
    return weather.battery_factor if weather is not None else 1.0


def traffic_factor(traffic: TrafficReading | None) -> float:
    return traffic.movement_factor if traffic is not None else 1.0


def advance_vehicle(
    vehicle: Vehicle,
    rng: random.Random,
    weather: WeatherReading | None = None,
    traffic: TrafficReading | None = None,
) -> Vehicle:
    """Return *vehicle* one tick later.

    Vehicles that are not in use are returned unchanged (same object)
    and consume no random draws.
    """
    if not vehicle.is_active:
        return vehicle

    movement = traffic_factor(traffic)
    battery_delta = rng.uniform(-BATTERY_STEP, BATTERY_STEP) * weather_factor(weather)
    speed_delta = rng.uniform(-SPEED_STEP, SPEED_STEP) * movement
    lat_delta = rng.uniform(-POSITION_STEP, POSITION_STEP) * movement
    lng_delta = rng.uniform(-POSITION_STEP, POSITION_STEP) * movement

    maintenance = vehicle.maintenance.model_copy(
        update={
            "battery_health": clamp_percent(vehicle.maintenance.battery_health - battery_delta / BATTERY_HEALTH_RATIO),
            "mileage": clamp_non_negative(vehicle.maintenance.mileage + vehicle.speed / MINUTES_PER_HOUR),
        }
    )
    telemetry = vehicle.telemetry.model_copy(
        update={
            "temperature": rng.uniform(*TEMPERATURE_RANGE),
            "rpm": rng.uniform(*RPM_RANGE),
            "tire_pressure": TirePressure(
                front_left=rng.uniform(*TIRE_PRESSURE_RANGE),
                front_right=rng.uniform(*TIRE_PRESSURE_RANGE),
                rear_left=rng.uniform(*TIRE_PRESSURE_RANGE),
                rear_right=rng.uniform(*TIRE_PRESSURE_RANGE),
            ),
        }
    )
    return vehicle.model_copy(
        update={
            "battery": clamp_percent(vehicle.battery - battery_delta),
            "speed": clamp_non_negative(vehicle.speed + speed_delta),
            "location": GeoPoint(lat=vehicle.location.lat + lat_delta, lng=vehicle.location.lng + lng_delta),
            "maintenance": maintenance,
            "telemetry": telemetry,
        }
    )


def advance_fleet(
    vehicles: Iterable[Vehicle],
    rng: random.Random,
    weather: WeatherReading | None = None,
    traffic: TrafficReading | None = None,
) -> tuple[Vehicle, ...]:
    """Advance every vehicle, preserving order."""
    return tuple(advance_vehicle(v, rng, weather, traffic) for v in vehicles)
