"""Market scan — indicators and a signal for every asset, plus arbitrage."""

from __future__ import annotations

import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Mapping, Sequence

import structlog
from pydantic import BaseModel, Field

from fii_core.config.schema import ArbitrageConfig, IndicatorConfig
from fii_core.engine.arbitrage import find_arbitrage
from fii_core.engine.indicators import compute_indicators
from fii_core.engine.signals import generate_signal
from fii_core.models import (
    ArbitrageOpportunity,
    AssetSnapshot,
    TechnicalIndicators,
    TradingSignal,
)

log = structlog.get_logger("market")


class MarketAnalysis(BaseModel):
    """Per-ticker indicators and signals, plus arbitrage over the whole set."""

    indicators: dict[str, TechnicalIndicators] = Field(default_factory=dict)
    signals: dict[str, TradingSignal] = Field(default_factory=dict)
    arbitrage: list[ArbitrageOpportunity] = Field(default_factory=list)


def analyze_asset(
    asset: AssetSnapshot,
    prices: Sequence[float],
    config: IndicatorConfig | None = None,
    *,
    yield_history: Sequence[float] | None = None,
    rng: random.Random | None = None,
) -> tuple[TechnicalIndicators, TradingSignal]:
    cfg = config or IndicatorConfig()
    indicators = compute_indicators(
        asset,
        prices,
        window=cfg.window,
        rsi_period=cfg.rsi_period,
        bollinger_period=cfg.bollinger_period,
        yield_history=yield_history,
        rng=rng,
    )
    return indicators, generate_signal(asset, indicators)


def analyze_market(
    assets: Sequence[AssetSnapshot],
    histories: Mapping[str, Sequence[float]],
    *,
    yield_histories: Mapping[str, Sequence[float]] | None = None,
    indicator_config: IndicatorConfig | None = None,
    arbitrage_config: ArbitrageConfig | None = None,
    max_workers: int | None = None,
) -> MarketAnalysis:
    """Analyze every asset in parallel and scan the set for arbitrage.

    Assets missing from *histories* are analyzed with an empty series.
    When the same ticker appears twice, the later asset wins.
    """
    yield_histories = yield_histories or {}
    arb = arbitrage_config or ArbitrageConfig()
    started = time.monotonic()

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            asset.ticker: pool.submit(
                analyze_asset,
                asset,
                histories.get(asset.ticker, ()),
                indicator_config,
                yield_history=yield_histories.get(asset.ticker),
            )
            for asset in assets
        }
        results = {ticker: f.result() for ticker, f in futures.items()}

    analysis = MarketAnalysis(
        indicators={t: ind for t, (ind, _) in results.items()},
        signals={t: sig for t, (_, sig) in results.items()},
        arbitrage=find_arbitrage(
            assets,
            min_premium_pct=arb.min_premium_pct,
            multiples=arb.sector_multiples,
            default_multiple=arb.default_multiple,
        ),
    )

    log.info(
        "market_analyzed",
        assets=len(analysis.signals),
        buy=sum(1 for s in analysis.signals.values() if s.type == "BUY"),
        sell=sum(1 for s in analysis.signals.values() if s.type == "SELL"),
        arbitrage=len(analysis.arbitrage),
        elapsed_s=time.monotonic() - started,
    )
    return analysis
