import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# "guarded" rejects out-of-order start/complete; "permissive" always sets the target status
TRANSITION_POLICY = os.getenv("TASK_TRANSITION_POLICY", "guarded")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
