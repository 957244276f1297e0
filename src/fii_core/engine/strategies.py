"""Strategy catalog — the fixed set of strategies the dashboard offers.

Performance figures are illustrative constants, not backtest output.
"""

from __future__ import annotations

from typing import Mapping

import structlog

from fii_core.config.schema import StrategyOverride
from fii_core.models import StrategyPerformance, TradingStrategy

log = structlog.get_logger("strategies")

_CATALOG: tuple[TradingStrategy, ...] = (
    TradingStrategy(
        id="yield-hunter",
        name="Yield Hunter Pro",
        description="Finds FIIs with exceptionally high yields backed by solid fundamentals.",
        type="YIELD_HUNTING",
        parameters={"minYield": 8.0, "maxPremium": 5.0, "minVolume": 1_000_000},
        active=True,
        performance=StrategyPerformance(
            total_return=18.5, win_rate=72.3, sharpe_ratio=1.45, max_drawdown=8.2,
        ),
    ),
    TradingStrategy(
        id="momentum-trader",
        name="Momentum Trader AI",
        description="Follows trends using several technical indicators.",
        type="MOMENTUM",
        parameters={"rsiPeriod": 14, "macdFast": 12, "macdSlow": 26, "stopLoss": 5.0},
        active=True,
        performance=StrategyPerformance(
            total_return=24.1, win_rate=68.7, sharpe_ratio=1.62, max_drawdown=12.1,
        ),
    ),
    TradingStrategy(
        id="arbitrage-master",
        name="Arbitrage Master",
        description="Trades the gap between market price and net asset value.",
        type="ARBITRAGE",
        parameters={"minDiscount": 3.0, "maxPremium": 2.0, "holdingPeriod": 30},
        active=False,
        performance=StrategyPerformance(
            total_return=15.8, win_rate=85.2, sharpe_ratio=2.1, max_drawdown=4.5,
        ),
    ),
    TradingStrategy(
        id="mean-reversion",
        name="Mean Reversion Expert",
        description="Buys dips and sells rallies on reversion to the mean.",
        type="MEAN_REVERSION",
        parameters={"bbPeriod": 20, "bbStdDev": 2, "rsiOversold": 30, "rsiOverbought": 70},
        active=True,
        performance=StrategyPerformance(
            total_return=21.3, win_rate=74.6, sharpe_ratio=1.78, max_drawdown=9.8,
        ),
    ),
)

STRATEGY_IDS: tuple[str, ...] = tuple(s.id for s in _CATALOG)


def _apply(strategy: TradingStrategy, override: StrategyOverride) -> TradingStrategy:
    update: dict = {"parameters": {**strategy.parameters, **override.params}}
    if override.active is not None:
        update["active"] = override.active
    return strategy.model_copy(update=update)


def list_strategies(
    overrides: Mapping[str, StrategyOverride] | None = None,
) -> list[TradingStrategy]:
    """Fresh copies of every catalog entry, with config overrides applied.

    Callers may flip ``active`` on the returned objects without affecting
    later calls.
    """
    overrides = overrides or {}
    for unknown in set(overrides) - set(STRATEGY_IDS):
        log.warning("strategy_not_found", strategy=unknown)

    strategies = []
    for strategy in _CATALOG:
        copy = strategy.model_copy(deep=True)
        if strategy.id in overrides:
            copy = _apply(copy, overrides[strategy.id])
        strategies.append(copy)
    return strategies


def get_strategy(
    strategy_id: str,
    overrides: Mapping[str, StrategyOverride] | None = None,
) -> TradingStrategy:
    """Look up one strategy by id. Raises KeyError for unknown ids."""
    for strategy in list_strategies(overrides):
        if strategy.id == strategy_id:
            return strategy
    raise KeyError(strategy_id)
