"""Structured logging setup with structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from fii_core.config.schema import LoggingConfig


class _RoundFloats:
    """Round float event values so indicator logs stay readable."""

    def __init__(self, digits: int) -> None:
        self.digits = digits

    def __call__(self, _logger: Any, _method: str, event_dict: dict) -> dict:
        for key, value in event_dict.items():
            if isinstance(value, float):
                event_dict[key] = round(value, self.digits)
        return event_dict


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    float_digits: int = 4,
) -> None:
    """Configure structlog on top of the stdlib root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" for production, "console" for development.
        float_digits: Decimal places kept for float fields.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _RoundFloats(float_digits),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def configure_from(config: LoggingConfig) -> None:
    """Apply the ``logging`` section of an AppConfig."""
    setup_logging(level=config.level, log_format=config.format)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally pre-bound with context."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
