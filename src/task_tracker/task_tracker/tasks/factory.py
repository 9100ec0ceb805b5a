from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_TRANSITION_POLICY, POLICY_GUARDED, POLICY_PERMISSIVE
from ..core.exceptions import ValidationError
from .policies.base import TransitionPolicy
from .policies.guarded_policy import GuardedTransitionPolicy
from .policies.permissive_policy import PermissiveTransitionPolicy


@dataclass
class TransitionPolicyFactory:
    """Factory Pattern: choose the transition policy by its configured name."""

    default_name: str = DEFAULT_TRANSITION_POLICY

    def for_name(self, name: Optional[str] = None) -> TransitionPolicy:
        key = name or self.default_name
        if not isinstance(key, str):
            raise ValidationError(f"Unknown transition policy {name!r}")
        key = key.strip().lower()
        if key == POLICY_GUARDED:
            return GuardedTransitionPolicy()
        if key == POLICY_PERMISSIVE:
            return PermissiveTransitionPolicy()
        raise ValidationError(f"Unknown transition policy {name!r}")

    def default(self) -> TransitionPolicy:
        return self.for_name(self.default_name)
