"""Mini README: Application-wide logging helpers for SnapClassify.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and sets the level.

Usage:
    Modules import ``get_logger`` and keep a module-level ``LOGGER``. The
    root handler is installed exactly once so reloading modules during
    development does not duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once; later calls only adjust the level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
