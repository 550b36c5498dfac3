"""Mini README: Application-wide logging helpers for the finance tracker.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - installs the single root stream handler.
    * level_for_environment - maps the configured environment to a level.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. The root
    handler is installed exactly once so reloads under the development
    server do not duplicate log lines.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}


def level_for_environment(environment: str) -> int:
    """Return the log level for an environment label, INFO when unknown."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach one formatted stream handler to the root logger."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
