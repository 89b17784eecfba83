"""Data export.

Only JSON is serialized. CSV and PDF requests are acknowledged with a
message and carry no content.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from neurofleet.models.alerts import NotificationType
from neurofleet.models.reports import ExportDataType, ExportFormat, ExportResult
from neurofleet.state.store import FleetStore

_logger = logging.getLogger(__name__)

_BASE_NAMES: dict[ExportDataType, str] = {
    ExportDataType.FLEET: "fleet_data",
    ExportDataType.MAINTENANCE: "maintenance_data",
    ExportDataType.ANALYTICS: "analytics",
}


def _collect(store: FleetStore, data_type: ExportDataType) -> Any:
    if data_type == ExportDataType.FLEET:
        return [v.to_json_dict() for v in store.vehicles]
    if data_type == ExportDataType.MAINTENANCE:
        return [row.to_json_dict() for row in store.maintenance_summary()]
    return store.analytics.to_json_dict()


def export_data(
    store: FleetStore,
    fmt: ExportFormat,
    data_type: ExportDataType = ExportDataType.FLEET,
    *,
    today: date | None = None,
) -> ExportResult:
    """Export *data_type* from *store* and add a notification."""
    fmt = ExportFormat(fmt)
    data_type = ExportDataType(data_type)
    day = today or store.today()
    base = f"{_BASE_NAMES[data_type]}_{day.isoformat()}"

    if fmt == ExportFormat.JSON:
        content: str | None = json.dumps(_collect(store, data_type), indent=2)
        result = ExportResult(
            filename=f"{base}.json",
            format=fmt,
            data_type=data_type,
            content=content,
            message=f"Exported {base}.json",
        )
    else:
        result = ExportResult(
            filename=f"{base}.{fmt.value}",
            format=fmt,
            data_type=data_type,
            message=f"Exporting {base} as {fmt.value.upper()}",
        )

    _logger.info("Export data_type=%s format=%s", data_type, fmt)
    store.add_notification(f"{data_type.value} data exported as {fmt.value.upper()}", NotificationType.SUCCESS)
    return result


def save_export(result: ExportResult, directory: str | Path) -> Path | None:
    """Write *result* into *directory*. Returns ``None`` when there is nothing to write."""
    if result.content is None:
        return None
    path = Path(directory) / result.filename
    path.write_text(result.content, encoding="utf-8")
    _logger.debug("Wrote export to %s", path)
    return path
