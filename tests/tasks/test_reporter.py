import io
from types import SimpleNamespace

from src.task_tracker.task_tracker.core.enums import Role, TaskStatus
from src.task_tracker.task_tracker.tasks.model import Task
from src.task_tracker.task_tracker.tasks.reporter import format_task_details, format_task_summary, log_task_details
from src.task_tracker.task_tracker.users.factory import create_user


def test_log_task_details_writes_to_stdout(capsys):
    task = Task(101, "Write TypeScript Guide", create_user(1, "Saurabh", Role.ADMIN))
    task.start()

    log_task_details(task)

    out = capsys.readouterr().out
    assert out == "Task: Write TypeScript Guide, Status: InProgress, Assigned to: Saurabh\n"


def test_log_task_details_to_stream():
    task = Task(1, "Triage", create_user(2, "Ana", Role.EDITOR))
    buf = io.StringIO()

    log_task_details(task, stream=buf)

    assert buf.getvalue().strip() == "Task: Triage, Status: Pending, Assigned to: Ana"


def test_formatters_accept_any_task_shaped_value():
    task_like = SimpleNamespace(
        title="Ship",
        status=TaskStatus.COMPLETED,
        assignee=SimpleNamespace(name="Lee"),
    )

    assert format_task_summary(task_like) == "Ship [Completed] - Assigned to Lee"
    assert format_task_details(task_like) == "Task: Ship, Status: Completed, Assigned to: Lee"
