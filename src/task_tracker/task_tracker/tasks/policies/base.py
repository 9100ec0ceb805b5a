from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import TaskAction, TaskStatus


class TransitionPolicy(ABC):
    """Strategy Pattern: decide the status a lifecycle action leads to."""

    name: str = ""

    @abstractmethod
    def next_status(self, *, current: TaskStatus, action: TaskAction) -> TaskStatus:
        raise NotImplementedError
