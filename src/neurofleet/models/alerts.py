"""Alerts and notifications."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from neurofleet.models._base import FleetBaseModel


class AlertType(StrEnum):
    MAINTENANCE = "maintenance"
    BATTERY = "battery"


class AlertPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Alert(FleetBaseModel):
    """An open alert. Alerts are never edited, only dismissed."""

    id: int
    type: AlertType
    message: str
    priority: AlertPriority = AlertPriority.MEDIUM
    timestamp: datetime
    vehicle_id: int | None = None

    def references(self, text: str) -> bool:
        return text in self.message


class NotificationType(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notification(FleetBaseModel):
    id: int
    message: str
    type: NotificationType = NotificationType.INFO
    timestamp: datetime
    read: bool = False
