from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_TRANSITION_POLICY
from .tasks.factory import TransitionPolicyFactory
from .tasks.model import Task
from .tasks.policies.base import TransitionPolicy
from .users.model import User


@dataclass(frozen=True)
class Container:
    policy_factory: TransitionPolicyFactory
    transition_policy: TransitionPolicy

    def new_task(self, task_id: int, title: str, assignee: User, *, policy: Optional[str] = None) -> Task:
        """Create a task bound to the configured policy, or to ``policy`` when given."""
        chosen = self.policy_factory.for_name(policy) if policy else self.transition_policy
        return Task(task_id, title, assignee, policy=chosen)


def build_container(*, transition_policy: str = DEFAULT_TRANSITION_POLICY) -> Container:
    policy_factory = TransitionPolicyFactory(default_name=transition_policy)

    return Container(
        policy_factory=policy_factory,
        transition_policy=policy_factory.default(),
    )
