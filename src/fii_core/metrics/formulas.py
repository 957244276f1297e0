"""Pure metric functions over per-trade P&L — no I/O."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def total_return(pnls: Sequence[float]) -> float:
    """Sum of per-trade P&L."""
    return float(np.sum(np.asarray(pnls, dtype=np.float64))) if len(pnls) else 0.0


def annualized_return(pnls: Sequence[float], periods_per_year: int = 12) -> float:
    """Scale the period's total return to a year, assuming one period was traded."""
    return total_return(pnls) * periods_per_year


def volatility(pnls: Sequence[float]) -> float:
    """Population standard deviation of per-trade P&L (ddof=0)."""
    if len(pnls) == 0:
        return 0.0
    return float(np.std(np.asarray(pnls, dtype=np.float64)))


def sharpe_ratio(pnls: Sequence[float]) -> float:
    """Total return over P&L volatility; 0.0 when volatility is zero.

    No risk-free rate and no annualisation.
    """
    vol = volatility(pnls)
    if vol == 0:
        return 0.0
    return total_return(pnls) / vol


def max_drawdown(pnls: Sequence[float]) -> float:
    """Largest fall of cumulative P&L from its running peak, as a percentage 0-100.

    Points before cumulative P&L first turns positive are ignored.
    """
    if len(pnls) == 0:
        return 0.0
    running = np.cumsum(np.asarray(pnls, dtype=np.float64))
    peak = np.maximum.accumulate(np.maximum(running, 0.0))
    mask = peak > 0
    if not mask.any():
        return 0.0
    drawdowns = (peak[mask] - running[mask]) / peak[mask]
    return float(np.max(drawdowns) * 100)


def win_rate(pnls: Sequence[float]) -> float:
    """Share of trades with positive P&L, as a percentage 0-100."""
    if len(pnls) == 0:
        return 0.0
    wins = sum(1 for p in pnls if p > 0)
    return wins / len(pnls) * 100
