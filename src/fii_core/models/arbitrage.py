"""Arbitrage opportunity model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ArbitrageOpportunity(BaseModel):
    """Gap between market price and estimated NAV for one asset."""

    ticker: str
    type: Literal["PREMIUM", "DISCOUNT"]
    percentage: float = Field(ge=0)
    nav_price: float
    market_price: float
    opportunity: Literal["HIGH", "MODERATE", "LOW"]
