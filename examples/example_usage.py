"""Example: drive one task through its lifecycle without Flask."""

import importlib

from config import get_settings_module

from src.task_tracker.task_tracker.container import build_container
from src.task_tracker.task_tracker.core.enums import Role
from src.task_tracker.task_tracker.tasks.reporter import log_task_details
from src.task_tracker.task_tracker.users.factory import create_user


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(transition_policy=settings.TRANSITION_POLICY)

    user = create_user(1, "Saurabh", Role.ADMIN)
    task = container.new_task(101, "Write TypeScript Guide", user)

    task.start()
    log_task_details(task)

    task.complete()
    print(task.get_summary())


if __name__ == "__main__":
    main()
