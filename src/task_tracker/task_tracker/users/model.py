from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain immutable value. A user may be assigned to any number of tasks and
    keeps no reference back to them.
    """

    user_id: int
    name: str
    role: Role
