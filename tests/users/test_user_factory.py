from __future__ import annotations

import dataclasses

import pytest

from src.task_tracker.task_tracker.core.enums import Role
from src.task_tracker.task_tracker.core.exceptions import ValidationError
from src.task_tracker.task_tracker.users.factory import create_user
from src.task_tracker.task_tracker.users.model import User


def test_create_user_from_role_name():
    user = create_user(1, "Saurabh", "admin")

    assert user == User(user_id=1, name="Saurabh", role=Role.ADMIN)
    assert user.role == "admin"


def test_create_user_keeps_role_member():
    user = create_user(2, "Mira", Role.VIEWER)

    assert user.role is Role.VIEWER


def test_create_user_rejects_unknown_role():
    with pytest.raises(ValidationError):
        create_user(3, "Ghost", "superuser")


def test_user_is_immutable():
    user = create_user(1, "Saurabh", Role.EDITOR)

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Someone else"


def test_user_ids_are_not_checked_for_uniqueness():
    a = create_user(7, "A", Role.VIEWER)
    b = create_user(7, "B", Role.VIEWER)

    assert a.user_id == b.user_id
    assert a != b
