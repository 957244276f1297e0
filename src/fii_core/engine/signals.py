"""Signal engine — weighted heuristic rules consolidated into one signal.

Each rule that holds contributes a (direction, weight, reason) vote. Rules
are independent, so several can fire at once:

    net = sum(BUY weights) - sum(SELL weights)
    |net| > 0.5  -> BUY or SELL, otherwise HOLD
    |net| > 1.5  -> STRONG, > 0.8 -> MODERATE, otherwise WEAK
    confidence   = min(95, |net| * 20 + 50)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Literal

import structlog

from fii_core.models import AssetSnapshot, TechnicalIndicators, TradingSignal

log = structlog.get_logger("signals")

Direction = Literal["BUY", "SELL"]

ACTION_THRESHOLD = 0.5
MODERATE_THRESHOLD = 0.8
STRONG_THRESHOLD = 1.5
MAX_CONFIDENCE = 95
NO_SIGNAL_REASON = "No clear signals detected"

# (target, stop) multipliers on the current price
_EXITS: dict[str, tuple[float, float]] = {
    "BUY": (1.15, 0.92),
    "SELL": (0.90, 1.05),
}


@dataclass(frozen=True)
class SignalRule:
    """One heuristic vote."""

    name: str
    direction: Direction
    weight: float
    reason: str
    condition: Callable[[AssetSnapshot, TechnicalIndicators], bool]


@dataclass(frozen=True)
class Vote:
    direction: Direction
    weight: float
    reason: str


def _macd_bullish(_: AssetSnapshot, ind: TechnicalIndicators) -> bool:
    return ind.macd.value > ind.macd.signal and ind.macd.histogram > 0


def _macd_bearish(_: AssetSnapshot, ind: TechnicalIndicators) -> bool:
    return ind.macd.value < ind.macd.signal and ind.macd.histogram < 0


def _uptrend(asset: AssetSnapshot, ind: TechnicalIndicators) -> bool:
    ma = ind.moving_averages
    return asset.current_price > ma.sma20 and ma.sma20 > ma.sma50


RULES: tuple[SignalRule, ...] = (
    SignalRule("rsi_oversold", "BUY", 0.8, "RSI oversold (<30)",
               lambda a, i: i.rsi < 30),
    SignalRule("rsi_overbought", "SELL", 0.8, "RSI overbought (>70)",
               lambda a, i: i.rsi > 70),
    SignalRule("macd_bullish", "BUY", 0.7, "MACD bullish crossover", _macd_bullish),
    SignalRule("macd_bearish", "SELL", 0.7, "MACD bearish crossover", _macd_bearish),
    SignalRule("ma_uptrend", "BUY", 0.6, "Price above SMA20 and SMA20 > SMA50", _uptrend),
    SignalRule("yield_spike", "BUY", 0.9, "Yield 20% above 6-month average",
               lambda a, i: i.yield_.current > i.yield_.average_6m * 1.2),
    SignalRule("below_lower_band", "BUY", 0.7, "Price below lower Bollinger Band",
               lambda a, i: a.current_price < i.bollinger_bands.lower),
    SignalRule("above_upper_band", "SELL", 0.7, "Price above upper Bollinger Band",
               lambda a, i: a.current_price > i.bollinger_bands.upper),
)


def collect_votes(
    asset: AssetSnapshot,
    indicators: TechnicalIndicators,
    rules: tuple[SignalRule, ...] = RULES,
) -> list[Vote]:
    """Evaluate every rule in order and return the votes of those that hold."""
    return [
        Vote(rule.direction, rule.weight, rule.reason)
        for rule in rules
        if rule.condition(asset, indicators)
    ]


def consolidate_signals(votes: list[Vote], asset: AssetSnapshot) -> TradingSignal:
    """Weighted vote -> one TradingSignal with exits for BUY/SELL."""
    if not votes:
        return TradingSignal(
            type="HOLD",
            strength="WEAK",
            confidence=50,
            reasons=[NO_SIGNAL_REASON],
            ticker=asset.ticker,
        )

    buy = sum(v.weight for v in votes if v.direction == "BUY")
    sell = sum(v.weight for v in votes if v.direction == "SELL")
    # Weights have one decimal place; rounding drops float summation noise
    # that would otherwise push e.g. 0.8 over the MODERATE threshold.
    net = round(buy - sell, 6)
    magnitude = abs(net)

    confidence = min(MAX_CONFIDENCE, magnitude * 20 + 50)

    signal_type = "HOLD"
    strength = "WEAK"
    if magnitude > ACTION_THRESHOLD:
        signal_type = "BUY" if net > 0 else "SELL"
        if magnitude > STRONG_THRESHOLD:
            strength = "STRONG"
        elif magnitude > MODERATE_THRESHOLD:
            strength = "MODERATE"

    target_price = stop_loss = None
    if signal_type in _EXITS:
        target_mult, stop_mult = _EXITS[signal_type]
        target_price = asset.current_price * target_mult
        stop_loss = asset.current_price * stop_mult

    return TradingSignal(
        type=signal_type,
        strength=strength,
        confidence=int(math.floor(confidence + 0.5)),  # half-up
        reasons=[v.reason for v in votes],
        target_price=target_price,
        stop_loss=stop_loss,
        ticker=asset.ticker,
    )


def generate_signal(asset: AssetSnapshot, indicators: TechnicalIndicators) -> TradingSignal:
    """Score *asset* against every rule and return the consolidated signal."""
    votes = collect_votes(asset, indicators)
    signal = consolidate_signals(votes, asset)
    log.debug(
        "signal_generated",
        ticker=asset.ticker,
        type=signal.type,
        strength=signal.strength,
        confidence=signal.confidence,
        votes=len(votes),
    )
    return signal
