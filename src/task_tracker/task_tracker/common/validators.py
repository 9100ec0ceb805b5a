from __future__ import annotations

from typing import Any, Union

from ..core.enums import Role
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value: Any, field_name: str) -> int:
    # JSON numbers only: no bools, no numeric strings, no fractional floats
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError(f"{field_name} must be an integer")


def require_role(value: Union[Role, str]) -> Role:
    """Coerce a role name ("admin") or member into a Role."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        allowed = ", ".join(r.value for r in Role)
        raise ValidationError(f"Unknown role {value!r} (expected one of: {allowed})")
