"""FII signal core — indicators, signal scoring, arbitrage and alerts."""

__version__ = "0.1.0"
