from __future__ import annotations

from typing import Union

from ..common.validators import require_role
from ..core.enums import Role
from .model import User


def create_user(user_id: int, name: str, role: Union[Role, str]) -> User:
    """Build a User; ``role`` may be a Role or its value, e.g. ``"admin"``.

    Uniqueness of ``user_id`` is up to the caller.
    """
    return User(user_id=user_id, name=name, role=require_role(role))
