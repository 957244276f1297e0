"""Signal model — emitted by the signal engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SignalType = Literal["BUY", "SELL", "HOLD"]
SignalStrength = Literal["WEAK", "MODERATE", "STRONG"]


class TradingSignal(BaseModel):
    """A consolidated recommendation for one asset."""

    type: SignalType
    strength: SignalStrength
    confidence: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    target_price: float | None = None
    stop_loss: float | None = None
    ticker: str | None = None
