"""FastAPI application exposing the engine to the dashboard."""

from __future__ import annotations

import os
import random
from datetime import datetime, timezone
from functools import lru_cache

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fii_core import __version__
from fii_core.config.loader import load_config
from fii_core.config.schema import AppConfig
from fii_core.engine import (
    analyze_market,
    evaluate_alerts,
    find_arbitrage,
    get_strategy,
    list_strategies,
)
from fii_core.engine.market import analyze_asset
from fii_core.errors import InvalidInputError
from fii_core.models import (
    Alert,
    ArbitrageOpportunity,
    AssetSnapshot,
    TechnicalIndicators,
    TradingSignal,
    TradingStrategy,
)

logger = structlog.get_logger("api")

app = FastAPI(
    title="FII Signal API",
    description="Technical indicators, trading signals, arbitrage and alerts for FIIs",
    version=__version__,
)

# CORS middleware - the dashboard is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Config dependency, loaded once from $FII_CONFIG_PATH (defaults if unset)."""
    return load_config(os.environ.get("FII_CONFIG_PATH"))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("invalid_input", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ═══════════════════════════════════════════════════════════════
# Request / response bodies
# ═══════════════════════════════════════════════════════════════


class AssetSeriesRequest(BaseModel):
    asset: AssetSnapshot
    prices: list[float] = Field(default_factory=list)
    yield_history: list[float] | None = None
    seed: int | None = None  # makes synthetic yield averages reproducible


class SignalResponse(BaseModel):
    indicators: TechnicalIndicators
    signal: TradingSignal


class MarketRequest(BaseModel):
    assets: list[AssetSnapshot]
    histories: dict[str, list[float]] = Field(default_factory=dict)
    yield_histories: dict[str, list[float]] = Field(default_factory=dict)


class AssetsRequest(BaseModel):
    assets: list[AssetSnapshot]


class ArbitrageResponse(BaseModel):
    opportunities: list[ArbitrageOpportunity]


class AlertsRequest(BaseModel):
    assets: list[AssetSnapshot]
    alerts: list[Alert]


class AlertsResponse(BaseModel):
    alerts: list[Alert]
    triggered: list[Alert]


# ═══════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


def _analyze(req: AssetSeriesRequest, config: AppConfig) -> SignalResponse:
    rng = random.Random(req.seed) if req.seed is not None else None
    indicators, signal = analyze_asset(
        req.asset,
        req.prices,
        config.indicators,
        yield_history=req.yield_history,
        rng=rng,
    )
    return SignalResponse(indicators=indicators, signal=signal)


@app.post("/api/indicators", response_model=TechnicalIndicators)
def post_indicators(req: AssetSeriesRequest, config: AppConfig = Depends(get_config)):
    """Technical indicators for one asset."""
    return _analyze(req, config).indicators


@app.post("/api/signals", response_model=SignalResponse)
def post_signal(req: AssetSeriesRequest, config: AppConfig = Depends(get_config)):
    """Indicators plus the consolidated trading signal for one asset."""
    result = _analyze(req, config)
    logger.info(
        "signal_served",
        ticker=req.asset.ticker,
        type=result.signal.type,
        confidence=result.signal.confidence,
    )
    return result


@app.post("/api/market/analyze")
def post_market_analysis(req: MarketRequest, config: AppConfig = Depends(get_config)):
    """Signals for every asset and arbitrage across the set."""
    analysis = analyze_market(
        req.assets,
        req.histories,
        yield_histories=req.yield_histories,
        indicator_config=config.indicators,
        arbitrage_config=config.arbitrage,
    )
    return analysis.model_dump(mode="json", by_alias=True)


@app.post("/api/arbitrage", response_model=ArbitrageResponse)
async def post_arbitrage(req: AssetsRequest, config: AppConfig = Depends(get_config)):
    """Premium/discount to estimated NAV above the configured threshold."""
    arb = config.arbitrage
    opportunities = find_arbitrage(
        req.assets,
        min_premium_pct=arb.min_premium_pct,
        multiples=arb.sector_multiples,
        default_multiple=arb.default_multiple,
    )
    return ArbitrageResponse(opportunities=opportunities)


@app.post("/api/alerts/evaluate", response_model=AlertsResponse)
async def post_alerts(req: AlertsRequest):
    """Evaluate stored alerts; the caller persists the returned ``alerts`` list."""
    evaluation = evaluate_alerts(req.assets, req.alerts)
    return AlertsResponse(alerts=evaluation.alerts, triggered=evaluation.triggered)


@app.get("/api/strategies", response_model=list[TradingStrategy])
async def get_strategies(config: AppConfig = Depends(get_config)):
    """Strategy catalog with config overrides applied."""
    return list_strategies(config.strategies)


@app.get("/api/strategies/{strategy_id}", response_model=TradingStrategy)
async def get_strategy_by_id(strategy_id: str, config: AppConfig = Depends(get_config)):
    try:
        return get_strategy(strategy_id, config.strategies)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id!r} not found")
