"""Logging utilities for the config builder (thin wrappers).

Modules obtain loggers with ``logging.getLogger(__name__)``; this module only
centralizes level configuration so scripts and the config loader agree on it.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "litellm_config"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(verbose: bool = False, level: Optional[Union[str, int]] = None) -> None:
    """Configure the package logger.

    Args:
        verbose: Enable DEBUG output with timestamps and logger names.
        level: Explicit level overriding ``verbose`` (e.g. ``"WARNING"``).
    """
    if level is not None:
        resolved = _level_value(level)
    else:
        resolved = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolved)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else DEFAULT_FORMAT))
        logger.addHandler(handler)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    ``component`` may be a full logger name or a name relative to the package,
    e.g. ``"models.expansion"``.
    """
    name = component if component.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(name).setLevel(_level_value(level))


__all__ = ["get_logger", "configure_logging", "set_component_level"]
