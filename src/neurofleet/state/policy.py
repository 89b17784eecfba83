"""Threshold decisions over vehicle records.

This module contains *no* state. The store and the alert generator call
into it so the thresholds live in one place and come from configuration.
"""

from __future__ import annotations

from neurofleet.config import FleetConfig
from neurofleet.models.reports import MaintenanceStatus
from neurofleet.models.vehicle import MaintenanceRecord, Vehicle


def maintenance_status(record: MaintenanceRecord, config: FleetConfig) -> MaintenanceStatus:
    """Classify average component health as healthy, due or critical."""
    avg = record.average_health
    if avg >= config.healthy_threshold:
        return MaintenanceStatus.HEALTHY
    if avg >= config.due_threshold:
        return MaintenanceStatus.DUE
    return MaintenanceStatus.CRITICAL


def is_battery_low(vehicle: Vehicle, config: FleetConfig) -> bool:
    return vehicle.battery < config.low_battery_threshold


def low_battery_reference(vehicle_id: int) -> str:
    """Text an alert message must contain to count as this vehicle's battery alert."""
    return f"Vehicle #{vehicle_id} battery"
