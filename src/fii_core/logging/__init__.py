"""Structured logging."""

from fii_core.logging.setup import configure_from, get_logger, setup_logging

__all__ = ["configure_from", "get_logger", "setup_logging"]
