"""Logging setup for the luna-speak command line."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for(verbosity: int, env_level: str | None = None) -> int:
    """Map ``-v`` counts to a level; a valid LOG_LEVEL name wins over them."""

    level = _VERBOSITY_LEVELS[max(0, min(verbosity, len(_VERBOSITY_LEVELS) - 1))]
    if env_level:
        named = logging.getLevelName(env_level.strip().upper())
        if isinstance(named, int):
            return named
    return level


def setup_logging(verbosity: int = 0) -> int:
    """Configure root logging for one CLI run and return the chosen level."""

    level = level_for(verbosity, os.getenv("LOG_LEVEL"))
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("luna").setLevel(level)
    return level
