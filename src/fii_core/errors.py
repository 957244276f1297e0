"""Exceptions raised by the engine."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised for numeric input the engine refuses to process.

    Covers NaN/infinite or negative prices, non-positive lookback periods
    and negative yield history entries.
    """
