from __future__ import annotations

from ...core.constants import POLICY_PERMISSIVE
from ...core.enums import TaskAction, TaskStatus
from .base import TransitionPolicy

_TARGETS = {
    TaskAction.START: TaskStatus.IN_PROGRESS,
    TaskAction.COMPLETE: TaskStatus.COMPLETED,
}


class PermissiveTransitionPolicy(TransitionPolicy):
    """Unconditional set: the action's target status wins regardless of the current one.

    Note: ``start`` on a completed task moves it back to InProgress.
    """

    name = POLICY_PERMISSIVE

    def next_status(self, *, current: TaskStatus, action: TaskAction) -> TaskStatus:
        return _TARGETS[action]
