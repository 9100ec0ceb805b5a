from __future__ import annotations

from typing import Optional

from .enums import TaskAction, TaskStatus


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransition(DomainError):
    """Raised when a lifecycle action is requested from the wrong status."""

    def __init__(self, *, current: TaskStatus, action: TaskAction, allowed_from: Optional[TaskStatus] = None):
        self.current = current
        self.action = action
        self.allowed_from = allowed_from
        message = f"Cannot {action.value} a task that is {current.value}"
        if allowed_from is not None:
            message += f" (only allowed from {allowed_from.value})"
        super().__init__(message)
