from __future__ import annotations

import random
from datetime import UTC, date, datetime, timedelta

import pytest

from neurofleet.config import FleetConfig, GeoBounds
from neurofleet.exceptions import VehicleNotFoundError
from neurofleet.models.alerts import AlertPriority, AlertType, NotificationType
from neurofleet.models.environment import CongestionLevel, GeoPoint, TrafficReading, WeatherReading
from neurofleet.models.reports import MaintenanceStatus
from neurofleet.models.vehicle import Vehicle, VehicleDraft, VehicleStatus, VehicleType
from neurofleet.state.store import FleetStore


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def _seeded(config: FleetConfig | None = None) -> FleetStore:
    store = FleetStore(config, clock=_dt)
    store.seed()
    return store


def test_seed_loads_demo_session() -> None:
    store = _seeded()

    assert [v.id for v in store.vehicles] == [1, 2, 3, 4, 5, 6]
    assert [a.type for a in store.alerts] == [AlertType.MAINTENANCE, AlertType.BATTERY]
    assert store.alerts[1].message == "Vehicle #1 battery below 20%"
    assert store.weather == WeatherReading(temperature=28, condition="Partly Cloudy", humidity=65, wind_speed=12)
    assert store.traffic is not None
    assert store.traffic.congestion_level == CongestionLevel.MODERATE
    assert store.analytics.revenue == 125000
    assert store.simulation_mode is False


def test_next_vehicle_id_is_max_plus_one() -> None:
    store = FleetStore(clock=_dt)
    assert store.next_vehicle_id() == 1

    store.replace_vehicles(
        [
            Vehicle(id=1, name="a", location=GeoPoint(lat=10, lng=70)),
            Vehicle(id=5, name="b", location=GeoPoint(lat=10, lng=70)),
        ]
    )
    assert store.next_vehicle_id() == 6


def test_add_vehicle_defaults() -> None:
    bounds = GeoBounds(lat_min=10, lat_max=11, lng_min=70, lng_max=71)
    store = FleetStore(FleetConfig(bounds=bounds), clock=_dt)
    store.seed()

    draft = VehicleDraft(name="BYD e6", type=VehicleType.VAN, license_plate="KA05XY0001")
    vehicle = store.add_vehicle(draft, random.Random(4))

    assert vehicle.id == 7
    assert vehicle.battery == 100
    assert vehicle.speed == 0
    assert vehicle.type == VehicleType.VAN
    assert vehicle.status == VehicleStatus.IDLE
    assert bounds.contains(vehicle.location.lat, vehicle.location.lng)
    assert vehicle.driver == "Unassigned"
    assert vehicle.last_service == date(2026, 1, 1)
    assert vehicle.next_service == date(2026, 1, 1) + timedelta(days=90)
    assert vehicle.maintenance.average_health == 100
    assert vehicle.maintenance.mileage == 0
    assert vehicle.telemetry.tire_pressure.front_left == 32
    assert store.vehicles[-1] == vehicle
    assert store.notifications[0].message == "Vehicle BYD e6 added to fleet"
    assert store.notifications[0].type == NotificationType.SUCCESS


def test_add_vehicle_to_empty_fleet_gets_id_one() -> None:
    store = FleetStore(clock=_dt)
    vehicle = store.add_vehicle(VehicleDraft(name="First"), random.Random(0))
    assert vehicle.id == 1
    assert FleetConfig().bounds.contains(vehicle.location.lat, vehicle.location.lng)


def test_update_and_delete_vehicle() -> None:
    store = _seeded()
    edited = store.get_vehicle(2).model_copy(update={"driver": "New Driver"})

    store.update_vehicle(edited)
    assert store.get_vehicle(2).driver == "New Driver"
    assert store.notifications[0].message == "Vehicle Mahindra eVerito updated"

    removed = store.delete_vehicle(2)
    assert removed.id == 2
    assert 2 not in [v.id for v in store.vehicles]
    assert store.notifications[0].message == "Vehicle Mahindra eVerito removed from fleet"
    assert store.notifications[0].type == NotificationType.WARNING


def test_update_vehicle_clamps_out_of_range_values() -> None:
    store = _seeded()
    original = store.get_vehicle(2)
    edited = original.model_copy(
        update={
            "battery": 150.0,
            "speed": -10.0,
            "maintenance": original.maintenance.model_copy(update={"battery_health": 120.0, "mileage": -5.0}),
        }
    )

    store.update_vehicle(edited)

    stored = store.get_vehicle(2)
    assert stored.battery == 100
    assert stored.speed == 0
    assert stored.maintenance.battery_health == 100
    assert stored.maintenance.mileage == 0
    assert stored.driver == original.driver


def test_replace_vehicles_clamps_and_keeps_valid_records() -> None:
    store = _seeded()
    valid = store.get_vehicle(1)
    broken = store.get_vehicle(3).model_copy(update={"battery": -20.0})

    store.replace_vehicles([valid, broken])

    assert store.vehicles[0] is valid
    assert store.vehicles[1].battery == 0


def test_unknown_vehicle_raises() -> None:
    store = _seeded()
    with pytest.raises(VehicleNotFoundError) as excinfo:
        store.delete_vehicle(42)
    assert excinfo.value.vehicle_id == 42
    with pytest.raises(VehicleNotFoundError):
        store.update_vehicle(Vehicle(id=42, name="ghost", location=GeoPoint(lat=0, lng=0)))
    assert len(store.vehicles) == 6


def test_batch_status_and_schedule_maintenance() -> None:
    store = _seeded()
    store.batch_update_status(VehicleStatus.MAINTENANCE)
    assert {v.status for v in store.vehicles} == {VehicleStatus.MAINTENANCE}
    assert store.notifications[0].message == "All vehicles status updated to Needs Service"

    store.schedule_maintenance(4, date(2026, 2, 1))
    assert store.get_vehicle(4).next_service == date(2026, 2, 1)
    assert store.notifications[0].message == "Maintenance scheduled for vehicle #4"


def test_search_and_filters() -> None:
    store = _seeded()

    assert [v.id for v in store.search("tata")] == [1, 5]
    assert [v.id for v in store.search("ka01")] == [3]
    assert [v.id for v in store.search("priya")] == [2]
    assert [v.id for v in store.search(status=VehicleStatus.IN_USE)] == [1, 5]
    assert [v.id for v in store.search(vehicle_type=VehicleType.CAR, status=VehicleStatus.IDLE)] == [2]
    assert store.search("nothing-matches") == []


def test_notifications_capped_newest_first() -> None:
    store = FleetStore(clock=_dt)
    for i in range(25):
        store.add_notification(f"n{i}")
        assert len(store.notifications) <= 10
        assert store.notifications[0].message == f"n{i}"

    assert [n.message for n in store.notifications] == [f"n{i}" for i in range(24, 14, -1)]


def test_notification_limit_from_config() -> None:
    store = FleetStore(FleetConfig(notification_limit=3), clock=_dt)
    for i in range(5):
        store.add_notification(f"n{i}")
    assert len(store.notifications) == 3


def test_mark_read_and_clear_notifications() -> None:
    store = FleetStore(clock=_dt)
    first = store.add_notification("a")
    store.add_notification("b")
    assert store.unread_count == 2

    assert store.mark_notification_read(first.id) is True
    assert store.mark_notification_read(-1) is False
    assert store.unread_count == 1

    store.clear_notifications()
    assert store.notifications == ()


def test_event_ids_strictly_increase_under_frozen_clock() -> None:
    store = FleetStore(clock=_dt)
    ids = [store.add_notification("x").id for _ in range(5)]
    ids.append(store.add_alert(AlertType.BATTERY, "y").id)
    assert ids == sorted(set(ids))
    assert ids[0] == int(_dt().timestamp() * 1000)


def test_dismiss_alert_removes_exactly_one() -> None:
    store = _seeded()
    extra = store.add_alert(AlertType.BATTERY, "Vehicle #5 battery critically low", AlertPriority.HIGH, vehicle_id=5)
    target = store.alerts[0]

    assert store.dismiss_alert(target.id) is True
    assert target not in store.alerts
    assert len(store.alerts) == 2
    assert extra in store.alerts
    assert store.dismiss_alert(target.id) is False


def test_simulation_mode_toggle_notifies() -> None:
    store = FleetStore(clock=_dt)
    store.set_simulation_mode(True)
    assert store.simulation_mode is True
    assert store.notifications[0].message == "Simulation mode enabled"
    store.set_simulation_mode(False)
    assert store.notifications[0].message == "Simulation mode disabled"


def test_environment_setters() -> None:
    store = _seeded()
    store.set_weather(WeatherReading(condition="Rain"))
    store.set_traffic(TrafficReading(congestion_level=CongestionLevel.HIGH))
    assert store.weather is not None and store.weather.is_raining
    assert store.traffic is not None and store.traffic.movement_factor == 0.7


def test_overview_counts() -> None:
    store = _seeded()
    overview = store.overview()

    assert overview.total_vehicles == 6
    assert overview.active_vehicles == 2
    assert overview.average_battery == pytest.approx((78 + 92 + 34 + 100 + 65 + 88) / 6)
    assert overview.open_alerts == 2


def test_maintenance_summary_and_breakdown() -> None:
    store = _seeded()
    rows = {row.name: row.maintenance_status for row in store.maintenance_summary()}

    assert rows["Tata Nexon EV"] == MaintenanceStatus.HEALTHY
    assert rows["Tata Tigor EV"] == MaintenanceStatus.DUE
    assert rows["Ashok Leyland Dost"] == MaintenanceStatus.CRITICAL

    breakdown = store.maintenance_breakdown()
    assert (breakdown.healthy, breakdown.due, breakdown.critical) == (4, 1, 1)


def test_map_markers_and_selection() -> None:
    store = _seeded()
    markers = {m.vehicle_id: m for m in store.map_markers()}

    assert markers[1].place == "New Delhi"
    assert markers[4].place == "Mumbai"
    assert markers[6].icon == VehicleType.VAN

    assert store.select_vehicle(3) == store.get_vehicle(3)
    assert store.selected_vehicle is not None and store.selected_vehicle.id == 3
    store.delete_vehicle(3)
    assert store.selected_vehicle is None
    assert store.select_vehicle(None) is None
