"""Indicator, signal, arbitrage and alert engine.

Everything here is stateless; the call contracts used by the dashboard
are re-exported at package level.
"""

from fii_core.engine.alerts import AlertEvaluation, evaluate_alerts
from fii_core.engine.arbitrage import find_arbitrage
from fii_core.engine.backtest import Backtester, summarize_trades
from fii_core.engine.indicators import compute_indicators
from fii_core.engine.market import MarketAnalysis, analyze_market
from fii_core.engine.signals import generate_signal
from fii_core.engine.strategies import get_strategy, list_strategies

__all__ = [
    "AlertEvaluation",
    "Backtester",
    "MarketAnalysis",
    "analyze_market",
    "compute_indicators",
    "evaluate_alerts",
    "find_arbitrage",
    "generate_signal",
    "get_strategy",
    "list_strategies",
    "summarize_trades",
]
