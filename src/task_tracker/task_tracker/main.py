from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import setup_logging
from .container import build_container
from .core.constants import DEFAULT_TRANSITION_POLICY
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    transition_policy = getattr(settings, "TRANSITION_POLICY", DEFAULT_TRANSITION_POLICY)
    app.config["TRANSITION_POLICY"] = transition_policy

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s transition_policy=%s", settings_module, transition_policy)

    container = build_container(transition_policy=transition_policy)
    app.extensions["task_tracker"] = container

    register_tasks(app, container)

    return app
