from __future__ import annotations

import logging
import sys

from connectfour.config import LOG_LEVEL

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_HANDLER_NAME = "connectfour"


def configure_logging(level: str | int = LOG_LEVEL, stream=None) -> logging.Logger:
    """
    Attach a single stream handler to the ``connectfour`` logger.
    Calling it again only changes the level.
    """
    logger = logging.getLogger("connectfour")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)

    return logger
