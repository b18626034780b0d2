"""Logging utilities for grid generation."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(level: Union[int, str, None]) -> int:
    """Map a level number or name (``"debug"``, ``"WARNING"``) to a number.

    Unknown names fall back to INFO so a mistyped ``--log-level`` still runs.
    """

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    Generation may run hundreds of rejected attempts, so per-attempt detail is
    logged at DEBUG and only the outcome at INFO. Callers can reconfigure
    before invoking :class:`crossgrid.engine.generator.GridGenerator`.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossgrid")
