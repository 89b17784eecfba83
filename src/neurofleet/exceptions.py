"""Custom exception hierarchy for neurofleet."""

from __future__ import annotations


class FleetError(Exception):
    """Base exception for all neurofleet errors."""


class FleetConfigError(FleetError):
    """Invalid configuration value."""


class FleetAuthError(FleetError):
    """Login, signup or session failure."""


class InvalidCredentialsError(FleetAuthError):
    """Email and password did not match any account."""

    def __init__(self, message: str, *, attempts_remaining: int) -> None:
        self.attempts_remaining = attempts_remaining
        super().__init__(message)


class AccountLockedError(FleetAuthError):
    """Too many failed logins; attempts are rejected until the lock expires."""

    def __init__(self, message: str, *, retry_after: float) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class DuplicateAccountError(FleetAuthError):
    """Signup used an email that is already registered."""

    def __init__(self, message: str, *, email: str) -> None:
        self.email = email
        super().__init__(message)


class FleetPermissionError(FleetError):
    """The current user's role does not grant the required permission."""

    def __init__(self, message: str, *, permission: str) -> None:
        self.permission = permission
        super().__init__(message)


class VehicleNotFoundError(FleetError):
    """No vehicle with the requested id exists in the store."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle #{vehicle_id} not found")
