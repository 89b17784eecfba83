"""Static fleet data: vehicle specs, city table and the demo route path."""

from __future__ import annotations

import math
from typing import Final

from neurofleet.models.environment import GeoPoint
from neurofleet.models.vehicle import VehicleSpec, VehicleType

VEHICLE_SPECS: Final[dict[VehicleType, VehicleSpec]] = {
    VehicleType.CAR: VehicleSpec(max_speed=120, capacity=4, fuel_efficiency=15, range_km=300),
    VehicleType.VAN: VehicleSpec(max_speed=100, capacity=8, fuel_efficiency=12, range_km=250),
    VehicleType.TRUCK: VehicleSpec(max_speed=80, capacity=2, fuel_efficiency=8, range_km=400),
    VehicleType.SCOOTER: VehicleSpec(max_speed=60, capacity=1, fuel_efficiency=40, range_km=80),
}

# (name, lat, lng) for the cities markers are labelled with.
INDIAN_CITIES: Final[tuple[tuple[str, float, float], ...]] = (
    ("New Delhi", 28.6139, 77.2090),
    ("Mumbai", 19.0760, 72.8777),
    ("Bangalore", 12.9716, 77.5946),
    ("Chennai", 13.0827, 80.2707),
    ("Kolkata", 22.5726, 88.3639),
    ("Hyderabad", 17.3850, 78.4867),
    ("Pune", 18.5204, 73.8567),
    ("Ahmedabad", 23.0225, 72.5714),
    ("Jaipur", 26.9124, 75.7873),
    ("Lucknow", 26.8467, 80.9462),
    ("Gurugram", 28.4595, 77.0266),
    ("Noida", 28.5355, 77.3910),
)

#: Max distance in degrees (roughly 150 km) for a point to take a city's name.
CITY_MATCH_DEGREES: Final[float] = 1.5

#: New Delhi -> Gurugram -> Noida.
DEMO_ROUTE_PATH: Final[tuple[GeoPoint, ...]] = (
    GeoPoint(lat=28.6139, lng=77.2090),
    GeoPoint(lat=28.4595, lng=77.0266),
    GeoPoint(lat=28.4089, lng=77.3178),
)

#: kg of CO2 per km used for the route CO2 reduction figure.
CO2_KG_PER_KM: Final[float] = 0.12


def nearest_city_name(lat: float, lng: float) -> str:
    """Return the closest city name, or ``"lat, lng"`` when none is near."""
    best_name, best_distance = INDIAN_CITIES[0][0], math.inf
    for name, city_lat, city_lng in INDIAN_CITIES:
        distance = math.hypot(city_lat - lat, city_lng - lng)
        if distance < best_distance:
            best_name, best_distance = name, distance
    if best_distance < CITY_MATCH_DEGREES:
        return best_name
    return f"{lat:.4f}, {lng:.4f}"
