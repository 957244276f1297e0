"""Tests for technical indicators — known-value validation."""

from __future__ import annotations

import math
import random

import pytest

from fii_core.engine.indicators import (
    bollinger_bands,
    compute_indicators,
    ema,
    macd,
    rsi,
    sma,
)
from fii_core.errors import InvalidInputError


def _series_from_deltas(deltas: list[float], start: float = 100.0) -> list[float]:
    closes = [start]
    for d in deltas:
        closes.append(closes[-1] + d)
    return closes


class TestSMA:
    def test_mean_of_trailing_period(self):
        closes = [float(i) for i in range(1, 31)]
        assert sma(closes, 20) == pytest.approx(sum(range(11, 31)) / 20)

    def test_exact_length(self):
        assert sma([2.0, 4.0, 6.0], 3) == pytest.approx(4.0)

    def test_short_history_returns_last(self):
        assert sma([1.0, 2.0, 7.0], 20) == 7.0

    def test_empty_returns_zero(self):
        assert sma([], 20) == 0.0

    def test_rejects_non_positive_period(self):
        with pytest.raises(InvalidInputError):
            sma([1.0, 2.0], 0)


class TestEMA:
    @pytest.mark.parametrize("period", [1, 5, 12, 26, 200])
    def test_constant_series(self, period):
        assert ema([42.5] * 30, period) == pytest.approx(42.5)

    def test_empty_returns_zero(self):
        assert ema([], 12) == 0.0

    def test_single_value(self):
        assert ema([7.0], 12) == 7.0

    def test_known_value(self):
        # multiplier = 2/(3+1) = 0.5: 1 -> 1.5 -> 2.25
        assert ema([1.0, 2.0, 3.0], 3) == pytest.approx(2.25)

    def test_uses_whole_series(self):
        # Prefix before the last *period* points still moves the result
        tail = [10.0] * 5
        assert ema([50.0] * 5 + tail, 5) != pytest.approx(ema(tail, 5))


class TestRSI:
    def test_short_history_is_neutral(self):
        closes = [float(i) for i in range(10)]
        assert rsi(closes, period=14) == 50.0

    def test_length_equal_to_period_is_neutral(self):
        assert rsi([float(i) for i in range(14)], period=14) == 50.0

    def test_empty_is_neutral(self):
        assert rsi([], period=14) == 50.0

    def test_all_gains_returns_100(self):
        closes = [float(i) for i in range(1, 21)]
        assert rsi(closes, period=14) == 100.0

    def test_all_losses_returns_0(self):
        closes = [float(20 - i) for i in range(20)]
        assert rsi(closes, period=14) == pytest.approx(0.0)

    def test_flat_window_is_neutral(self):
        assert rsi([100.0] * 20, period=14) == 50.0

    def test_known_value(self):
        # 7 gains of +2 and 7 losses of -1: avg_gain 1.0, avg_loss 0.5, rs 2
        deltas = [2.0, -1.0] * 7
        assert rsi(_series_from_deltas(deltas), period=14) == pytest.approx(200 / 3)

    def test_only_trailing_window_counts(self):
        # Early crash is outside the 14-delta window
        deltas = [-5.0] * 10 + [1.0] * 14
        assert rsi(_series_from_deltas(deltas, start=200.0), period=14) == 100.0

    def test_non_increasing_as_losses_grow(self):
        values = []
        for loss in [0.25, 0.5, 1.0, 2.0, 4.0, 8.0]:
            deltas = [1.0, -loss] * 7
            values.append(rsi(_series_from_deltas(deltas), period=14))
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_non_increasing_randomised(self):
        rng = random.Random(7)
        for _ in range(25):
            gains = [rng.uniform(0, 3) for _ in range(7)]
            prev = 100.0
            for scale in [0.5, 1.0, 1.5, 3.0]:
                deltas = []
                for g in gains:
                    deltas += [g, -scale]
                value = rsi(_series_from_deltas(deltas), period=14)
                assert value <= prev + 1e-9
                prev = value

    def test_bounded(self):
        rng = random.Random(3)
        closes = [100 + rng.uniform(-10, 10) for _ in range(60)]
        assert 0.0 <= rsi(closes) <= 100.0

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError):
            rsi([1.0] * 10 + [math.nan] + [1.0] * 10)

    def test_rejects_negative_price(self):
        with pytest.raises(InvalidInputError):
            rsi([1.0] * 10 + [-1.0] + [1.0] * 10)


class TestMACD:
    def test_constant_series_is_flat(self):
        result = macd([50.0] * 40)
        assert result.value == pytest.approx(0.0)
        assert result.signal == pytest.approx(0.0)
        assert result.histogram == pytest.approx(0.0)

    def test_signal_is_ninety_percent_of_line(self):
        closes = [100.0 + i for i in range(40)]
        result = macd(closes)
        assert result.value == pytest.approx(ema(closes, 12) - ema(closes, 26))
        assert result.signal == pytest.approx(result.value * 0.9)
        assert result.histogram == pytest.approx(result.value * 0.1)

    def test_rising_series_is_bullish(self):
        result = macd([100.0 + i for i in range(40)])
        assert result.value > result.signal
        assert result.histogram > 0

    def test_empty_series(self):
        result = macd([])
        assert (result.value, result.signal, result.histogram) == (0.0, 0.0, 0.0)


class TestBollingerBands:
    def test_constant_prices_bands_equal_middle(self):
        bands = bollinger_bands([100.0] * 20, period=20)
        assert bands.upper == bands.middle == bands.lower == 100.0

    @pytest.mark.parametrize(
        "closes",
        [
            [100.0] * 10 + [110.0] * 10,
            [float(i % 7) + 50 for i in range(45)],
            [3.0, 9.0],
            [],
        ],
    )
    def test_symmetric_bands(self, closes):
        bands = bollinger_bands(closes, period=20)
        assert bands.upper - bands.middle == pytest.approx(bands.middle - bands.lower)

    def test_middle_is_sma(self):
        closes = [float(i) for i in range(1, 31)]
        assert bollinger_bands(closes, period=20).middle == pytest.approx(sma(closes, 20))

    def test_population_stdev(self):
        # mean 5, population variance 4 -> half-width 2 * 2
        closes = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        bands = bollinger_bands(closes, period=8)
        assert bands.middle == pytest.approx(5.0)
        assert bands.upper == pytest.approx(9.0)
        assert bands.lower == pytest.approx(1.0)

    def test_short_history_centres_on_last_price(self):
        # middle falls back to the last price; deviations are divided by period
        bands = bollinger_bands([10.0, 20.0], period=20)
        assert bands.middle == 20.0
        assert bands.upper == pytest.approx(20.0 + 2 * math.sqrt(5.0))

    def test_uses_last_n_closes(self):
        bands = bollinger_bands([50.0] * 20 + [100.0] * 20, period=20)
        assert bands.middle == pytest.approx(100.0)
        assert bands.upper == pytest.approx(100.0)

    def test_wider_std_gives_wider_bands(self):
        closes = [100.0 + i % 5 for i in range(25)]
        narrow = bollinger_bands(closes, period=20, num_std=1)
        wide = bollinger_bands(closes, period=20, num_std=3)
        assert wide.upper - wide.lower > narrow.upper - narrow.lower


class TestComputeIndicators:
    def test_full_bundle(self, make_fii):
        closes = [100.0 + math.sin(i / 3) for i in range(60)]
        ind = compute_indicators(make_fii(), closes, yield_history=[8.0] * 6)
        assert 0 <= ind.rsi <= 100
        assert ind.bollinger_bands.lower <= ind.bollinger_bands.middle <= ind.bollinger_bands.upper
        assert ind.yield_.current == 8.0
        assert ind.yield_.average_6m == pytest.approx(8.0)

    def test_only_last_window_is_used(self, make_fii):
        closes = [1000.0] * 50 + [100.0] * 50
        ind = compute_indicators(make_fii(), closes, window=50)
        assert ind.moving_averages.sma50 == pytest.approx(100.0)
        assert ind.moving_averages.ema26 == pytest.approx(100.0)

    def test_short_history_degrades(self, make_fii):
        ind = compute_indicators(make_fii(), [98.0, 99.0, 101.0])
        assert ind.rsi == 50.0
        assert ind.moving_averages.sma20 == 101.0
        assert ind.moving_averages.sma50 == 101.0

    def test_empty_history(self, make_fii):
        ind = compute_indicators(make_fii(), [])
        assert ind.rsi == 50.0
        assert ind.moving_averages.sma20 == 0.0
        assert ind.macd.value == 0.0

    def test_seeded_synthetic_yield_is_reproducible(self, make_fii):
        fii = make_fii(dividend_yield=10.0)
        a = compute_indicators(fii, [100.0] * 30, rng=random.Random(11))
        b = compute_indicators(fii, [100.0] * 30, rng=random.Random(11))
        assert a.yield_.average_6m == b.yield_.average_6m
        assert 9.0 <= a.yield_.average_3m <= 11.0

    def test_rejects_infinite_price(self, make_fii):
        with pytest.raises(InvalidInputError):
            compute_indicators(make_fii(), [100.0, math.inf])
