"""Mini README: Application-wide logging helpers for Pennywise.

Structure:
    * level_for_environment - map a settings environment label to a level.
    * configure_root_logger - attach the shared handler once per process.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

Ledger mutations and session changes log at INFO, reads and construction
at DEBUG, and ignored corrupt storage at WARNING. Development runs show
DEBUG output; every other environment starts at INFO.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS: Dict[str, int] = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
}


def level_for_environment(environment: str) -> int:
    """Return the root level for an environment label, INFO if unlisted."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the root logger.

    Later calls only adjust the level, so an entry point can raise or lower
    verbosity after modules have already requested their loggers.
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
    """Return a module-specific logger, configuring the root on first use."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
