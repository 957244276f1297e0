"""Shared test fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from fii_core.models import (
    MACD,
    BollingerBands,
    FIISnapshot,
    MovingAverages,
    TechnicalIndicators,
    YieldAnalysis,
)


@pytest.fixture
def make_fii() -> Callable[..., FIISnapshot]:
    """Factory for FII snapshots with sensible defaults."""

    def _make(**overrides) -> FIISnapshot:
        fields = {
            "ticker": "HGLG11",
            "name": "CSHG Logística",
            "current_price": 100.0,
            "dividend_yield": 8.0,
            "price_change_percent": 0.0,
            "sector": "Logístico",
            "volume": 50_000,
        }
        fields.update(overrides)
        return FIISnapshot(**fields)

    return _make


@pytest.fixture
def make_indicators() -> Callable[..., TechnicalIndicators]:
    """Factory for indicator sets that trigger no rule unless overridden.

    Defaults assume a price of 100: flat MACD, price below SMA20 < SMA50,
    price inside the bands and yield at its 6-month average.
    """

    def _make(
        rsi: float = 50.0,
        macd: tuple[float, float, float] = (0.0, 0.0, 0.0),
        sma20: float = 105.0,
        sma50: float = 110.0,
        bands: tuple[float, float, float] = (120.0, 100.0, 80.0),
        yield_current: float = 8.0,
        average_6m: float = 8.0,
    ) -> TechnicalIndicators:
        value, signal, histogram = macd
        upper, middle, lower = bands
        return TechnicalIndicators(
            rsi=rsi,
            macd=MACD(value=value, signal=signal, histogram=histogram),
            moving_averages=MovingAverages(sma20=sma20, sma50=sma50, ema12=100.0, ema26=100.0),
            bollinger_bands=BollingerBands(upper=upper, middle=middle, lower=lower),
            yield_=YieldAnalysis(
                current=yield_current,
                average_3m=average_6m,
                average_6m=average_6m,
                trend="STABLE",
            ),
        )

    return _make
