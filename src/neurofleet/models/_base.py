"""Base model and value helpers for neurofleet records.

Every record inherits from :class:`FleetBaseModel` which provides:

* ``frozen=True`` so records are replaced, never mutated in place.
* ``alias_generator=to_camel`` so exported JSON uses the dashboard's
  camelCase keys (``licensePlate``, ``batteryHealth``) while Python code
  uses snake_case.
* ``populate_by_name=True`` so either spelling is accepted on input.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def clamp_percent(value: float) -> float:
    """Clamp *value* into ``[0, 100]``."""
    return max(0.0, min(100.0, value))


def clamp_non_negative(value: float) -> float:
    """Clamp *value* to ``>= 0``."""
    return max(0.0, value)


Percent = Annotated[float, AfterValidator(clamp_percent)]
"""Float clamped into ``[0, 100]`` on validation."""

NonNegative = Annotated[float, AfterValidator(clamp_non_negative)]
"""Float clamped to ``>= 0`` on validation."""


class FleetBaseModel(BaseModel):
    """Base for all fleet records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)
