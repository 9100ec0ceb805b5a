"""Settings modules for the task tracker.

Each module exposes SECRET_KEY, DEBUG, LOG_LEVEL and TRANSITION_POLICY
(read from TASK_TRANSITION_POLICY: "guarded" or "permissive").
"""

import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # Anything not listed (including unset APP_ENV) runs with development settings
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
