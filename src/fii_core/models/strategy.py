"""Strategy descriptors and backtest results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StrategyType = Literal["YIELD_HUNTING", "MOMENTUM", "ARBITRAGE", "MEAN_REVERSION"]


class StrategyPerformance(BaseModel):
    total_return: float
    win_rate: float
    sharpe_ratio: float
    max_drawdown: float


class TradingStrategy(BaseModel):
    """A named strategy the dashboard can toggle on and off."""

    id: str
    name: str
    description: str
    type: StrategyType
    parameters: dict[str, float] = Field(default_factory=dict)
    active: bool = False
    performance: StrategyPerformance


class BacktestTrade(BaseModel):
    """One simulated fill."""

    date: str
    ticker: str
    action: Literal["BUY", "SELL"]
    price: float
    quantity: float
    pnl: float


class BacktestResult(BaseModel):
    strategy: str
    period: str
    total_return: float
    annualized_return: float
    volatility: float
    sharpe_ratio: float
    max_drawdown: float
    win_rate: float
    trades: list[BacktestTrade] = Field(default_factory=list)
