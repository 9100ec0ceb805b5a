import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

TRANSITION_POLICY = os.getenv("TASK_TRANSITION_POLICY", "guarded")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
