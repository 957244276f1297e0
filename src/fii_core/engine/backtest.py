"""Backtest interface and trade-list summary.

No backtester ships with the engine. Anything implementing ``Backtester``
can be plugged into callers, and ``summarize_trades`` turns the trades it
produces into a ``BacktestResult``.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from fii_core.metrics import (
    annualized_return,
    max_drawdown,
    sharpe_ratio,
    total_return,
    volatility,
    win_rate,
)
from fii_core.models import AssetSnapshot, BacktestResult, BacktestTrade, TradingStrategy


@runtime_checkable
class Backtester(Protocol):
    def run(
        self,
        strategy: TradingStrategy,
        assets: Sequence[AssetSnapshot],
        period: str,
    ) -> BacktestResult:
        ...


def summarize_trades(
    strategy: TradingStrategy | str,
    period: str,
    trades: Sequence[BacktestTrade],
    *,
    periods_per_year: int = 12,
) -> BacktestResult:
    """Aggregate *trades* into a BacktestResult.

    *periods_per_year* scales the total return of *period* to an annual
    figure (12 for a monthly period).
    """
    name = strategy if isinstance(strategy, str) else strategy.name
    pnls = [t.pnl for t in trades]
    return BacktestResult(
        strategy=name,
        period=period,
        total_return=total_return(pnls),
        annualized_return=annualized_return(pnls, periods_per_year),
        volatility=volatility(pnls),
        sharpe_ratio=sharpe_ratio(pnls),
        max_drawdown=max_drawdown(pnls),
        win_rate=win_rate(pnls),
        trades=list(trades),
    )
