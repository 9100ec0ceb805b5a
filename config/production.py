import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

TRANSITION_POLICY = os.getenv("TASK_TRANSITION_POLICY", "guarded")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
