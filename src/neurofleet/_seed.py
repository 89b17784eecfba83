"""Seed data loaded when a session starts.

Vehicles are kept as camelCase dicts, the shape the dashboard exports,
and validated through the models on every call so each session gets
fresh records.
"""

from __future__ import annotations

from typing import Any

from neurofleet.models.alerts import AlertPriority, AlertType
from neurofleet.models.environment import CongestionLevel, TrafficReading, WeatherReading
from neurofleet.models.reports import AnalyticsSnapshot
from neurofleet.models.users import Role, User
from neurofleet.models.vehicle import Vehicle

_SEED_VEHICLES: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Tata Nexon EV",
        "type": "car",
        "status": "in_use",
        "battery": 78,
        "location": {"lat": 28.6139, "lng": 77.2090},
        "speed": 45,
        "licensePlate": "DL01AB1234",
        "driver": "Raj Kumar",
        "phone": "+91 9876543210",
        "lastService": "2024-01-15",
        "nextService": "2024-04-15",
        "maintenance": {"engine": 85, "tires": 70, "brakes": 90, "batteryHealth": 78, "mileage": 12500},
        "telemetry": {
            "temperature": 24,
            "rpm": 2200,
            "fuelLevel": 78,
            "tirePressure": {"frontLeft": 32, "frontRight": 31, "rearLeft": 33, "rearRight": 32},
        },
    },
    {
        "id": 2,
        "name": "Mahindra eVerito",
        "type": "car",
        "status": "idle",
        "battery": 92,
        "location": {"lat": 28.4595, "lng": 77.0266},
        "speed": 0,
        "licensePlate": "HR26BR4567",
        "driver": "Priya Sharma",
        "phone": "+91 9876543211",
        "lastService": "2024-02-20",
        "nextService": "2024-05-20",
        "maintenance": {"engine": 92, "tires": 85, "brakes": 88, "batteryHealth": 92, "mileage": 8700},
        "telemetry": {
            "temperature": 26,
            "rpm": 0,
            "fuelLevel": 92,
            "tirePressure": {"frontLeft": 33, "frontRight": 33, "rearLeft": 32, "rearRight": 32},
        },
    },
    {
        "id": 3,
        "name": "Ashok Leyland Dost",
        "type": "truck",
        "status": "maintenance",
        "battery": 34,
        "location": {"lat": 12.9716, "lng": 77.5946},
        "speed": 0,
        "licensePlate": "KA01CD7890",
        "driver": "Anil Patel",
        "phone": "+91 9876543212",
        "lastService": "2023-12-10",
        "nextService": "2024-03-10",
        "maintenance": {"engine": 45, "tires": 30, "brakes": 60, "batteryHealth": 34, "mileage": 32500},
        "telemetry": {
            "temperature": 28,
            "rpm": 0,
            "fuelLevel": 34,
            "tirePressure": {"frontLeft": 28, "frontRight": 29, "rearLeft": 27, "rearRight": 28},
        },
    },
    {
        "id": 4,
        "name": "Ola S1 Pro",
        "type": "scooter",
        "status": "idle",
        "battery": 100,
        "location": {"lat": 19.0760, "lng": 72.8777},
        "speed": 0,
        "licensePlate": "MH02EF3456",
        "driver": "Suresh Kumar",
        "phone": "+91 9876543213",
        "lastService": "2024-01-30",
        "nextService": "2024-04-30",
        "maintenance": {"engine": 95, "tires": 90, "brakes": 92, "batteryHealth": 100, "mileage": 3200},
        "telemetry": {
            "temperature": 30,
            "rpm": 0,
            "fuelLevel": 100,
            "tirePressure": {"frontLeft": 25, "frontRight": 25, "rearLeft": 28, "rearRight": 28},
        },
    },
    {
        "id": 5,
        "name": "Tata Tigor EV",
        "type": "car",
        "status": "in_use",
        "battery": 65,
        "location": {"lat": 13.0827, "lng": 80.2707},
        "speed": 38,
        "licensePlate": "TN09GH6789",
        "driver": "Deepa Reddy",
        "phone": "+91 9876543214",
        "lastService": "2024-02-05",
        "nextService": "2024-05-05",
        "maintenance": {"engine": 80, "tires": 75, "brakes": 82, "batteryHealth": 65, "mileage": 15200},
        "telemetry": {
            "temperature": 32,
            "rpm": 1800,
            "fuelLevel": 65,
            "tirePressure": {"frontLeft": 31, "frontRight": 32, "rearLeft": 30, "rearRight": 31},
        },
    },
    {
        "id": 6,
        "name": "Mahindra eSupro",
        "type": "van",
        "status": "idle",
        "battery": 88,
        "location": {"lat": 22.5726, "lng": 88.3639},
        "speed": 0,
        "licensePlate": "WB05IJ9012",
        "driver": "Amit Verma",
        "phone": "+91 9876543215",
        "lastService": "2024-01-25",
        "nextService": "2024-04-25",
        "maintenance": {"engine": 88, "tires": 80, "brakes": 85, "batteryHealth": 88, "mileage": 18500},
        "telemetry": {
            "temperature": 29,
            "rpm": 0,
            "fuelLevel": 88,
            "tirePressure": {"frontLeft": 34, "frontRight": 34, "rearLeft": 33, "rearRight": 33},
        },
    },
)

# (type, message, priority, vehicle_id)
SEED_ALERTS: tuple[tuple[AlertType, str, AlertPriority, int], ...] = (
    (AlertType.MAINTENANCE, "Vehicle #3 needs immediate service", AlertPriority.HIGH, 3),
    (AlertType.BATTERY, "Vehicle #1 battery below 20%", AlertPriority.MEDIUM, 1),
)


def seed_vehicles() -> tuple[Vehicle, ...]:
    return tuple(Vehicle.model_validate(raw) for raw in _SEED_VEHICLES)


def seed_analytics() -> AnalyticsSnapshot:
    return AnalyticsSnapshot(
        total_distance=12500,
        fuel_saved=450,
        emissions_reduced=1200,
        trips_completed=345,
        average_speed=42,
        utilization_rate=78,
        active_vehicles=2,
        revenue=125000,
    )


def default_weather() -> WeatherReading:
    return WeatherReading(temperature=28, condition="Partly Cloudy", humidity=65, wind_speed=12)


def default_traffic() -> TrafficReading:
    return TrafficReading(congestion_level=CongestionLevel.MODERATE, average_speed=35, incidents=3)


def initial_users() -> list[User]:
    return [
        User(id=1, name="Admin User", email="admin@neurofleetx.com", password="admin123", role=Role.ADMIN),
        User(id=2, name="Fleet Manager", email="manager@neurofleetx.com", password="manager123", role=Role.MANAGER),
        User(id=3, name="Operator", email="operator@neurofleetx.com", password="operator123", role=Role.OPERATOR),
        User(id=4, name="Viewer", email="viewer@neurofleetx.com", password="viewer123", role=Role.VIEWER),
    ]
