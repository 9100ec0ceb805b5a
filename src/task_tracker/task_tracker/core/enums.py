from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role. Recorded on the user, never checked against actions."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class TaskStatus(str, Enum):
    """Task lifecycle status, declared in progression order."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def ordered(cls) -> list[TaskStatus]:
        return list(cls)

    @property
    def rank(self) -> int:
        return type(self).ordered().index(self)

    @property
    def is_terminal(self) -> bool:
        return self is TaskStatus.COMPLETED


class TaskAction(str, Enum):
    """Lifecycle operations that can be requested on a task."""

    START = "start"
    COMPLETE = "complete"
