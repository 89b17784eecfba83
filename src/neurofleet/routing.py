"""Route "optimization".

There is no graph or cost model: the distance and savings are random,
the delays come from the mock traffic and weather readings, and the path
is a fixed three-point route. The result carries the rated range of the
requested vehicle type so callers can flag trips it cannot cover.
"""

from __future__ import annotations

import math
import random

from neurofleet._constants import CO2_KG_PER_KM, DEMO_ROUTE_PATH, VEHICLE_SPECS
from neurofleet.config import FleetConfig
from neurofleet.models.environment import TrafficReading, WeatherReading
from neurofleet.models.routes import RouteRequest, RouteResult

DISTANCE_RANGE_KM = (20, 120)
FUEL_SAVINGS_RANGE = (5, 20)


def optimize_route(
    request: RouteRequest,
    rng: random.Random,
    *,
    config: FleetConfig,
    weather: WeatherReading | None = None,
    traffic: TrafficReading | None = None,
) -> RouteResult:
    """Build a route result for *request*.

    Distance is drawn from ``[20, 120)`` km and fuel savings from
    ``[5, 20)`` percent, in that order.
    """
    distance = rng.randrange(*DISTANCE_RANGE_KM)
    base_minutes = math.floor(distance / config.route_average_speed * 60)
    traffic_delay = base_minutes * (traffic.delay_ratio if traffic is not None else 0.0)
    weather_delay = base_minutes * (weather.delay_ratio if weather is not None else 0.0)
    savings = rng.randrange(*FUEL_SAVINGS_RANGE)

    return RouteResult(
        distance_km=distance,
        estimated_minutes=math.floor(base_minutes + traffic_delay + weather_delay),
        fuel_savings_percent=savings,
        recommended_vehicle=request.vehicle_type,
        traffic_delay_minutes=math.floor(traffic_delay),
        weather_impact=weather_delay > 0,
        waypoints=DEMO_ROUTE_PATH,
        co2_reduction_kg=math.floor(distance * CO2_KG_PER_KM * savings / 100),
        vehicle_range_km=VEHICLE_SPECS[request.vehicle_type].range_km,
    )
