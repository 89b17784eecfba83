"""Logged-in user session."""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field

from neurofleet.models.users import Permission, Role, User


class Session(BaseModel):
    """Session state after a successful login or signup.

    Parameters
    ----------
    user : User
        The authenticated account.
    started_at : float
        Monotonic timestamp (``time.monotonic()``) when the session was
        created. Defaults to *now* if not provided.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    user: User
    started_at: float = Field(default_factory=time.monotonic)

    @property
    def role(self) -> Role:
        return self.user.role

    def has_permission(self, permission: Permission) -> bool:
        return permission in self.user.permissions
