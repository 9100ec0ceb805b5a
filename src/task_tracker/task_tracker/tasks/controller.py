from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_int, require_non_empty
from ..core.enums import TaskAction, TaskStatus
from ..core.exceptions import InvalidTransition, ValidationError
from ..container import Container
from ..users.factory import create_user

logger = logging.getLogger(__name__)


def _parse_actions(raw) -> list[TaskAction]:
    if not isinstance(raw, list):
        raise ValidationError("actions must be a list")
    actions = []
    for item in raw:
        try:
            actions.append(TaskAction(item))
        except ValueError:
            raise ValidationError(f"Unknown action {item!r}")
    return actions


def register(app: Flask, container: Container) -> None:
    @app.route("/tasks/lifecycle", methods=["GET"], endpoint="task_lifecycle_info")
    def task_lifecycle_info():
        return jsonify(
            statuses=[s.value for s in TaskStatus.ordered()],
            actions=[a.value for a in TaskAction],
            policy=container.transition_policy.name,
        )

    @app.route("/tasks/lifecycle", methods=["POST"], endpoint="run_task_lifecycle")
    def run_task_lifecycle():
        payload = request.get_json(silent=True)
        try:
            if not isinstance(payload, dict):
                raise ValidationError("Request body must be a JSON object")

            task_data = payload.get("task") or {}
            user_data = payload.get("assignee") or {}
            if not isinstance(task_data, dict) or not isinstance(user_data, dict):
                raise ValidationError("task and assignee must be JSON objects")

            assignee = create_user(
                require_int(user_data.get("id"), "assignee.id"),
                require_non_empty(user_data.get("name"), "assignee.name"),
                user_data.get("role", ""),
            )
            task = container.new_task(
                require_int(task_data.get("id"), "task.id"),
                require_non_empty(task_data.get("title"), "task.title"),
                assignee,
                policy=payload.get("policy"),
            )
            actions = _parse_actions(payload.get("actions", []))
        except ValidationError as e:
            return jsonify(error=str(e)), 400

        history = [task.status.value]
        for action in actions:
            try:
                if action is TaskAction.START:
                    task.start()
                else:
                    task.complete()
            except InvalidTransition as e:
                return (
                    jsonify(
                        error=str(e),
                        status=task.status.value,
                        action=action.value,
                        history=history,
                    ),
                    409,
                )
            history.append(task.status.value)

        return jsonify(
            task_id=task.task_id,
            title=task.title,
            status=task.status.value,
            assignee={
                "id": assignee.user_id,
                "name": assignee.name,
                "role": assignee.role.value,
            },
            summary=task.get_summary(),
            history=history,
        )
