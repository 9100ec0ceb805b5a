from __future__ import annotations

import logging
import sys
from typing import Union

# Module loggers are named after __name__, so they all sit under this one.
PACKAGE_LOGGER = __name__.rsplit(".common.", 1)[0]

_HANDLER_NAME = "task_tracker.console"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure console logging on the package logger.

    Third-party loggers (werkzeug, ...) are left alone. Calling again
    replaces our handler instead of stacking a second one.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        if h.get_name() == _HANDLER_NAME:
            logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(_HANDLER_NAME)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    return logger
