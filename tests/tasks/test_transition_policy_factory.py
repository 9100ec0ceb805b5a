import pytest

from src.task_tracker.task_tracker.core.enums import TaskAction, TaskStatus
from src.task_tracker.task_tracker.core.exceptions import InvalidTransition, ValidationError
from src.task_tracker.task_tracker.tasks.factory import TransitionPolicyFactory
from src.task_tracker.task_tracker.tasks.policies.guarded_policy import GuardedTransitionPolicy
from src.task_tracker.task_tracker.tasks.policies.permissive_policy import PermissiveTransitionPolicy


def test_factory_defaults_to_guarded():
    factory = TransitionPolicyFactory()

    assert isinstance(factory.default(), GuardedTransitionPolicy)
    assert isinstance(factory.for_name(None), GuardedTransitionPolicy)


def test_factory_picks_permissive_case_insensitively():
    factory = TransitionPolicyFactory()

    assert isinstance(factory.for_name(" Permissive "), PermissiveTransitionPolicy)


def test_factory_rejects_unknown_name():
    with pytest.raises(ValidationError):
        TransitionPolicyFactory().for_name("lenient")


def test_guarded_policy_table():
    policy = GuardedTransitionPolicy()

    assert policy.next_status(current=TaskStatus.PENDING, action=TaskAction.START) is TaskStatus.IN_PROGRESS
    assert policy.next_status(current=TaskStatus.IN_PROGRESS, action=TaskAction.COMPLETE) is TaskStatus.COMPLETED
    with pytest.raises(InvalidTransition):
        policy.next_status(current=TaskStatus.COMPLETED, action=TaskAction.START)


def test_permissive_policy_ignores_current_status():
    policy = PermissiveTransitionPolicy()

    for current in TaskStatus:
        assert policy.next_status(current=current, action=TaskAction.START) is TaskStatus.IN_PROGRESS
        assert policy.next_status(current=current, action=TaskAction.COMPLETE) is TaskStatus.COMPLETED
