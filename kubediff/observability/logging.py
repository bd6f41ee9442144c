"""Structured logging for kubediff using structlog.

The diff engine itself never configures logging; host applications call
:func:`setup_logging` (or :func:`kubediff.config.configure`) once at startup.
Until then structlog's defaults apply.
"""

from __future__ import annotations

import logging
import sys

import structlog

_VALID_FORMATS = ("json", "console")


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog output to stderr.

    Args:
        level: Minimum level name (debug, info, warning, error).
        fmt:   ``json`` for machine-readable lines (default), ``console`` for
               coloured key/value output while developing locally.
    """
    if fmt not in _VALID_FORMATS:
        raise ValueError(f"Invalid log format: {fmt}. Must be one of {_VALID_FORMATS}")
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer: structlog.types.Processor
    if fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger bound with ``component`` (e.g. ``selector.evaluator``)."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
