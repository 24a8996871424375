"""Mini README: Application-wide logging helpers for finledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - attach the root handler once, adjust level later.
    * level_for_environment - map ``LedgerSettings.environment`` to a level.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)``, which installs the
    handler at INFO on first import. Entry points (CLI, web factory) then
    call ``configure_root_logger(level_for_environment(settings.environment))``
    so production runs only report warnings while ``debug`` shows every
    derivation step.
"""

from __future__ import annotations

import logging
from typing import Dict, Final, Optional

_LOGGER_INITIALISED = False

ENVIRONMENT_LEVELS: Final[Dict[str, int]] = {
    "debug": logging.DEBUG,
    "development": logging.INFO,
    "test": logging.INFO,
    "production": logging.WARNING,
}


def level_for_environment(environment: str) -> int:
    """Return the log level for an environment label; unknown labels log at INFO."""

    return ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the root logger and set its level.

    Repeated calls only change the level; the handler is never duplicated.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, installing the root handler on first use."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
