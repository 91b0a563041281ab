"""Mini README: Application-wide logging helpers for the dock planner.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-off root handler setup with a readable format.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The CLI
    and web entry points call ``configure_root_logger`` with the configured
    level before running the engine; repeated calls are ignored so reloading
    modules never stacks duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _coerce_level(level: Union[int, str]) -> int:
    """Translate names such as ``"debug"`` into numeric logging levels."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a timestamped, module-aware formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(_coerce_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
