from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from ..core.constants import DETAILS_FORMAT, SUMMARY_FORMAT

if TYPE_CHECKING:
    from .model import TaskLike


def _status_text(task: TaskLike) -> str:
    status = task.status
    return getattr(status, "value", status)


def format_task_summary(task: TaskLike) -> str:
    """One-line summary, e.g. ``Write Guide [Completed] - Assigned to Saurabh``."""
    return SUMMARY_FORMAT.format(title=task.title, status=_status_text(task), assignee=task.assignee.name)


def format_task_details(task: TaskLike) -> str:
    return DETAILS_FORMAT.format(title=task.title, status=_status_text(task), assignee=task.assignee.name)


def log_task_details(task: TaskLike, stream: Optional[TextIO] = None) -> None:
    """Write the detail line for ``task`` to stdout (or ``stream``)."""
    print(format_task_details(task), file=stream or sys.stdout)
