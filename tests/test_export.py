from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from neurofleet.export import export_data, save_export
from neurofleet.models.reports import ExportDataType, ExportFormat
from neurofleet.state.store import FleetStore


@pytest.fixture
def store() -> FleetStore:
    s = FleetStore(clock=lambda: datetime(2026, 3, 4, 12, 0, tzinfo=UTC))
    s.seed()
    return s


def test_fleet_json_uses_camel_case(store: FleetStore) -> None:
    result = export_data(store, ExportFormat.JSON, ExportDataType.FLEET)

    assert result.filename == "fleet_data_2026-03-04.json"
    assert result.content is not None
    payload = json.loads(result.content)
    assert len(payload) == 6
    first = payload[0]
    assert first["licensePlate"] == "DL01AB1234"
    assert first["maintenance"]["batteryHealth"] == 78
    assert first["telemetry"]["tirePressure"]["frontLeft"] == 32
    assert first["lastService"] == "2024-01-15"
    assert result.content.startswith("[\n  {")


def test_maintenance_json(store: FleetStore) -> None:
    result = export_data(store, "json", "maintenance", today=date(2026, 1, 2))

    assert result.filename == "maintenance_data_2026-01-02.json"
    assert result.content is not None
    rows = json.loads(result.content)
    assert rows[2] == {
        "name": "Ashok Leyland Dost",
        "maintenanceStatus": "Critical",
        "lastService": "2023-12-10",
        "nextService": "2024-03-10",
    }


def test_analytics_json(store: FleetStore) -> None:
    result = export_data(store, ExportFormat.JSON, ExportDataType.ANALYTICS)
    assert result.content is not None
    assert json.loads(result.content)["tripsCompleted"] == 345


@pytest.mark.parametrize("fmt", [ExportFormat.CSV, ExportFormat.PDF])
def test_csv_and_pdf_only_acknowledge(store: FleetStore, fmt: ExportFormat) -> None:
    result = export_data(store, fmt, ExportDataType.ANALYTICS)

    assert result.content is None
    assert result.message == f"Exporting analytics_2026-03-04 as {fmt.value.upper()}"
    assert store.notifications[0].message == f"analytics data exported as {fmt.value.upper()}"


def test_every_export_notifies(store: FleetStore) -> None:
    export_data(store, ExportFormat.JSON, ExportDataType.FLEET)
    assert store.notifications[0].message == "fleet data exported as JSON"


def test_save_export(store: FleetStore, tmp_path: Path) -> None:
    result = export_data(store, ExportFormat.JSON, ExportDataType.FLEET)
    path = save_export(result, tmp_path)

    assert path == tmp_path / "fleet_data_2026-03-04.json"
    assert json.loads(path.read_text(encoding="utf-8"))[0]["id"] == 1

    assert save_export(export_data(store, ExportFormat.CSV), tmp_path) is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["fleet_data_2026-03-04.json"]
