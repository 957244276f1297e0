"""Pydantic domain models."""

from fii_core.models.alert import Alert, AlertType
from fii_core.models.arbitrage import ArbitrageOpportunity
from fii_core.models.asset import (
    AssetSnapshot,
    BaseSnapshot,
    CommoditySnapshot,
    CryptoSnapshot,
    ETFSnapshot,
    FIISnapshot,
    StockSnapshot,
)
from fii_core.models.indicators import (
    MACD,
    BollingerBands,
    MovingAverages,
    TechnicalIndicators,
    YieldAnalysis,
    YieldTrend,
)
from fii_core.models.signal import SignalStrength, SignalType, TradingSignal
from fii_core.models.strategy import (
    BacktestResult,
    BacktestTrade,
    StrategyPerformance,
    StrategyType,
    TradingStrategy,
)

__all__ = [
    "MACD",
    "Alert",
    "AlertType",
    "ArbitrageOpportunity",
    "AssetSnapshot",
    "BacktestResult",
    "BacktestTrade",
    "BaseSnapshot",
    "BollingerBands",
    "CommoditySnapshot",
    "CryptoSnapshot",
    "ETFSnapshot",
    "FIISnapshot",
    "MovingAverages",
    "SignalStrength",
    "SignalType",
    "StockSnapshot",
    "StrategyPerformance",
    "StrategyType",
    "TechnicalIndicators",
    "TradingSignal",
    "TradingStrategy",
    "YieldAnalysis",
    "YieldTrend",
]
