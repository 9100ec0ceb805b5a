from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from ..core.enums import TaskAction, TaskStatus
from ..core.exceptions import InvalidTransition
from ..users.model import User
from .policies.base import TransitionPolicy
from .policies.guarded_policy import GuardedTransitionPolicy
from .reporter import format_task_summary

logger = logging.getLogger(__name__)


@runtime_checkable
class TaskLike(Protocol):
    """Shape callers depend on; ``Task`` is the in-memory implementation."""

    @property
    def task_id(self) -> int: ...

    @property
    def title(self) -> str: ...

    @property
    def status(self) -> TaskStatus: ...

    @property
    def assignee(self) -> User: ...

    def start(self) -> None: ...

    def complete(self) -> None: ...

    def get_summary(self) -> str: ...


class Task:
    """Domain entity: a unit of work bound to one assignee.

    Starts as Pending. ``start``/``complete`` are the only ways to move the
    status; which moves are allowed is up to the transition policy (guarded
    by default). Id, title and assignee are fixed at construction.
    """

    def __init__(self, task_id: int, title: str, assignee: User, *, policy: Optional[TransitionPolicy] = None):
        if assignee is None:
            raise TypeError("Task requires an assignee")
        self._task_id = task_id
        self._title = title
        self._assignee = assignee
        self._status = TaskStatus.PENDING
        self._policy = policy or GuardedTransitionPolicy()

    @property
    def task_id(self) -> int:
        return self._task_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def assignee(self) -> User:
        return self._assignee

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def policy(self) -> TransitionPolicy:
        return self._policy

    def start(self) -> None:
        self._apply(TaskAction.START)

    def complete(self) -> None:
        self._apply(TaskAction.COMPLETE)

    def get_summary(self) -> str:
        return format_task_summary(self)

    def _apply(self, action: TaskAction) -> None:
        try:
            target = self._policy.next_status(current=self._status, action=action)
        except InvalidTransition:
            logger.info("Rejected %s on task_id=%s status=%s", action.value, self._task_id, self._status.value)
            raise

        logger.debug(
            "task_id=%s %s: %s -> %s", self._task_id, action.value, self._status.value, target.value
        )
        self._status = target

    def __repr__(self) -> str:
        return (
            f"Task(task_id={self._task_id!r}, title={self._title!r}, "
            f"status={self._status.value!r}, assignee={self._assignee.name!r})"
        )
