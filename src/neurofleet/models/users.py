"""User accounts, roles and permissions."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from pydantic import Field, field_validator

from neurofleet.models._base import FleetBaseModel


class Role(StrEnum):
    ADMIN = "admin"
    MANAGER = "manager"
    OPERATOR = "operator"
    VIEWER = "viewer"


class Permission(StrEnum):
    VIEW = "view"
    EDIT = "edit"
    EDIT_LIMITED = "edit_limited"
    MANAGE_FLEET = "manage_fleet"
    OPTIMIZE_ROUTES = "optimize_routes"
    VIEW_REPORTS = "view_reports"
    EXPORT_DATA = "export_data"


ROLE_PERMISSIONS: Final[dict[Role, frozenset[Permission]]] = {
    Role.ADMIN: frozenset(Permission),
    Role.MANAGER: frozenset(
        {
            Permission.VIEW,
            Permission.EDIT,
            Permission.MANAGE_FLEET,
            Permission.OPTIMIZE_ROUTES,
            Permission.VIEW_REPORTS,
            Permission.EXPORT_DATA,
        }
    ),
    Role.OPERATOR: frozenset({Permission.VIEW, Permission.EDIT_LIMITED, Permission.OPTIMIZE_ROUTES}),
    Role.VIEWER: frozenset({Permission.VIEW}),
}

_unmapped = set(Role) - ROLE_PERMISSIONS.keys()
if _unmapped:
    raise RuntimeError(f"roles without a permission set: {sorted(_unmapped)}")


class User(FleetBaseModel):
    """An account in the session roster.

    Passwords are stored and compared in plain text; this is a demo
    roster, not an identity provider.
    """

    id: int
    name: str
    email: str
    password: str = Field(repr=False)
    role: Role = Role.VIEWER

    @property
    def permissions(self) -> frozenset[Permission]:
        return ROLE_PERMISSIONS[self.role]


class SignupRequest(FleetBaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=6, repr=False)

    @field_validator("name", "email")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @field_validator("email")
    @classmethod
    def _require_at(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value
