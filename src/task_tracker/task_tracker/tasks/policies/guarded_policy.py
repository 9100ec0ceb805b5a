from __future__ import annotations

from ...core.constants import POLICY_GUARDED
from ...core.enums import TaskAction, TaskStatus
from ...core.exceptions import InvalidTransition
from .base import TransitionPolicy

# action -> (required current status, resulting status)
_TRANSITIONS = {
    TaskAction.START: (TaskStatus.PENDING, TaskStatus.IN_PROGRESS),
    TaskAction.COMPLETE: (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED),
}


class GuardedTransitionPolicy(TransitionPolicy):
    """Forward-only lifecycle: each action is valid from exactly one status."""

    name = POLICY_GUARDED

    def next_status(self, *, current: TaskStatus, action: TaskAction) -> TaskStatus:
        required, target = _TRANSITIONS[action]
        if current != required:
            raise InvalidTransition(current=current, action=action, allowed_from=required)
        return target
