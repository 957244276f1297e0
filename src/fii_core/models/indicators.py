"""Technical indicator bundle computed per asset."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

YieldTrend = Literal["INCREASING", "DECREASING", "STABLE"]


class MACD(BaseModel):
    value: float
    signal: float
    histogram: float


class MovingAverages(BaseModel):
    sma20: float
    sma50: float
    ema12: float
    ema26: float


class BollingerBands(BaseModel):
    upper: float
    middle: float
    lower: float


class YieldAnalysis(BaseModel):
    """Current dividend yield against its recent averages."""

    current: float
    average_3m: float
    average_6m: float
    trend: YieldTrend


class TechnicalIndicators(BaseModel):
    """Everything the signal engine looks at for one asset."""

    model_config = ConfigDict(populate_by_name=True)

    rsi: float = Field(ge=0, le=100)
    macd: MACD
    moving_averages: MovingAverages
    bollinger_bands: BollingerBands
    yield_: YieldAnalysis = Field(alias="yield")
