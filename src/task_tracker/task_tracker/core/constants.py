"""Constants and defaults.

Note: Keep display formats here so every renderer agrees on them.
"""

SUMMARY_FORMAT = "{title} [{status}] - Assigned to {assignee}"
DETAILS_FORMAT = "Task: {title}, Status: {status}, Assigned to: {assignee}"

POLICY_GUARDED = "guarded"
POLICY_PERMISSIVE = "permissive"
DEFAULT_TRANSITION_POLICY = POLICY_GUARDED
