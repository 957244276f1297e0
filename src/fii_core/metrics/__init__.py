"""Backtest metrics — pure formulas over per-trade P&L."""

from fii_core.metrics.formulas import (
    annualized_return,
    max_drawdown,
    sharpe_ratio,
    total_return,
    volatility,
    win_rate,
)

__all__ = [
    "annualized_return",
    "max_drawdown",
    "sharpe_ratio",
    "total_return",
    "volatility",
    "win_rate",
]
