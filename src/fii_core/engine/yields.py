"""Yield analysis — recent averages and a price-driven trend proxy."""

from __future__ import annotations

import math
import random
from statistics import mean
from typing import Sequence

from fii_core.errors import InvalidInputError
from fii_core.models import AssetSnapshot, YieldAnalysis, YieldTrend

# Price moves beyond +/- this many percent flip the trend.
TREND_THRESHOLD_PCT = 2.0


def average_yield(
    asset: AssetSnapshot,
    months: int,
    *,
    yield_history: Sequence[float] | None = None,
    rng: random.Random | None = None,
) -> float:
    """Representative dividend yield over the last *months* months.

    With a monthly *yield_history* (oldest first) this is the mean of its
    last *months* entries. Without one, the current yield is perturbed by a
    uniform factor in [0.9, 1.1].
    """
    if months <= 0:
        raise InvalidInputError(f"months must be positive, got {months}")

    if yield_history:
        recent = [float(y) for y in yield_history[-months:]]
        if any(not math.isfinite(y) or y < 0 for y in recent):
            raise InvalidInputError("yield history must hold finite, non-negative values")
        return mean(recent)

    rng = rng or random.Random()
    return asset.dividend_yield * rng.uniform(0.9, 1.1)


def yield_trend(asset: AssetSnapshot) -> YieldTrend:
    """Rising prices compress forward yield, falling prices expand it."""
    if asset.price_change_percent > TREND_THRESHOLD_PCT:
        return "DECREASING"
    if asset.price_change_percent < -TREND_THRESHOLD_PCT:
        return "INCREASING"
    return "STABLE"


def analyze_yield(
    asset: AssetSnapshot,
    *,
    yield_history: Sequence[float] | None = None,
    rng: random.Random | None = None,
) -> YieldAnalysis:
    return YieldAnalysis(
        current=asset.dividend_yield,
        average_3m=average_yield(asset, 3, yield_history=yield_history, rng=rng),
        average_6m=average_yield(asset, 6, yield_history=yield_history, rng=rng),
        trend=yield_trend(asset),
    )
