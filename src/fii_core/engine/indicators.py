"""Technical indicators — pure functions on price series.

Every function takes a chronological float sequence (oldest first) and
degrades to a neutral or placeholder value when the history is shorter
than the lookback window instead of failing.
"""

from __future__ import annotations

import math
import random
from statistics import mean
from typing import Sequence

import numpy as np

from fii_core.engine.yields import analyze_yield
from fii_core.errors import InvalidInputError
from fii_core.models import (
    MACD,
    AssetSnapshot,
    BollingerBands,
    MovingAverages,
    TechnicalIndicators,
)

# MACD signal line is approximated as a fixed fraction of the MACD line
# rather than a 9-period EMA of it.
MACD_SIGNAL_FACTOR = 0.9


def _check_period(period: int) -> None:
    if period <= 0:
        raise InvalidInputError(f"period must be positive, got {period}")


def validate_prices(prices: Sequence[float]) -> list[float]:
    """Return *prices* as a list of floats, rejecting NaN/inf/negative values."""
    out = [float(p) for p in prices]
    for i, p in enumerate(out):
        if not math.isfinite(p) or p < 0:
            raise InvalidInputError(f"invalid price at index {i}: {p!r}")
    return out


def sma(prices: Sequence[float], period: int) -> float:
    """Simple moving average of the last *period* prices.

    With fewer than *period* points, returns the last price (0.0 if empty).
    """
    _check_period(period)
    closes = validate_prices(prices)
    if len(closes) < period:
        return closes[-1] if closes else 0.0
    return mean(closes[-period:])


def ema(prices: Sequence[float], period: int) -> float:
    """Exponential moving average seeded with the first price.

    Blends forward through the whole series; the window is implied by the
    series length rather than truncated to *period*.
    """
    _check_period(period)
    closes = validate_prices(prices)
    if not closes:
        return 0.0
    multiplier = 2 / (period + 1)
    value = closes[0]
    for price in closes[1:]:
        # same as price*m + value*(1-m), but exact on flat stretches
        value += (price - value) * multiplier
    return value


def rsi(prices: Sequence[float], period: int = 14) -> float:
    """Relative Strength Index over the trailing *period* deltas.

    Uses a plain average of gains and losses (no Wilder smoothing).
    Returns 50.0 with fewer than ``period + 1`` points or when the window
    is flat, and 100.0 when there are gains but no losses.
    """
    _check_period(period)
    closes = validate_prices(prices)
    if len(closes) < period + 1:
        return 50.0

    window = closes[-(period + 1):]
    deltas = [b - a for a, b in zip(window, window[1:])]
    avg_gain = sum(d for d in deltas if d > 0) / period
    avg_loss = sum(-d for d in deltas if d < 0) / period

    if avg_loss == 0:
        return 50.0 if avg_gain == 0 else 100.0
    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def macd(prices: Sequence[float], fast: int = 12, slow: int = 26) -> MACD:
    """MACD line, approximated signal line and histogram."""
    value = ema(prices, fast) - ema(prices, slow)
    signal = value * MACD_SIGNAL_FACTOR
    return MACD(value=value, signal=signal, histogram=value - signal)


def bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    num_std: int | float = 2,
) -> BollingerBands:
    """Bollinger Bands (SMA +/- num_std * population stdev).

    Deviations are measured from the middle band over the last *period*
    prices and divided by *period*, so a short history gives narrower
    bands rather than an error.
    """
    closes = validate_prices(prices)
    middle = sma(closes, period)
    window = np.array(closes[-period:], dtype=np.float64)
    variance = float(np.sum((window - middle) ** 2)) / period
    offset = math.sqrt(variance) * num_std
    return BollingerBands(upper=middle + offset, middle=middle, lower=middle - offset)


def compute_indicators(
    asset: AssetSnapshot,
    prices: Sequence[float],
    *,
    window: int = 50,
    rsi_period: int = 14,
    bollinger_period: int = 20,
    yield_history: Sequence[float] | None = None,
    rng: random.Random | None = None,
) -> TechnicalIndicators:
    """Build the full indicator set for *asset* from its recent closes.

    Only the last *window* prices are used.
    """
    _check_period(window)
    closes = validate_prices(prices)[-window:]

    return TechnicalIndicators(
        rsi=rsi(closes, rsi_period),
        macd=macd(closes),
        moving_averages=MovingAverages(
            sma20=sma(closes, 20),
            sma50=sma(closes, 50),
            ema12=ema(closes, 12),
            ema26=ema(closes, 26),
        ),
        bollinger_bands=bollinger_bands(closes, bollinger_period),
        yield_=analyze_yield(asset, yield_history=yield_history, rng=rng),
    )
