"""Asset snapshot models — one tagged variant per asset class."""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator


class BaseSnapshot(BaseModel):
    """Fields shared by every asset class, as seen at one refresh cycle."""

    model_config = ConfigDict(frozen=True)

    ticker: str
    name: str = ""
    current_price: float = Field(gt=0)
    dividend_yield: float = Field(default=0.0, ge=0)  # percent
    price_change_percent: float = 0.0
    sector: str = ""
    volume: int = Field(default=0, ge=0)

    @field_validator("current_price", "dividend_yield", "price_change_percent")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v


class FIISnapshot(BaseSnapshot):
    """Brazilian real-estate investment fund (fundo imobiliário)."""

    kind: Literal["fii"] = "fii"
    last_dividend: float = 0.0
    net_worth: float = 0.0
    nav_per_share: float | None = Field(default=None, gt=0)


class StockSnapshot(BaseSnapshot):
    kind: Literal["stock"] = "stock"
    market_cap: float = 0.0
    pe_ratio: float | None = None


class ETFSnapshot(BaseSnapshot):
    kind: Literal["etf"] = "etf"
    category: str = ""
    expense_ratio: float = 0.0


class CryptoSnapshot(BaseSnapshot):
    kind: Literal["crypto"] = "crypto"
    market_cap: float = 0.0
    rank: int = 0
    staking_yield: float | None = None


class CommoditySnapshot(BaseSnapshot):
    kind: Literal["commodity"] = "commodity"
    category: str = ""
    unit: str = ""


def _asset_kind(value: Any) -> str:
    # Untagged payloads are FIIs, the dashboard's primary asset class.
    if isinstance(value, dict):
        return value.get("kind", "fii")
    return getattr(value, "kind", "fii")


AssetSnapshot = Annotated[
    Union[
        Annotated[FIISnapshot, Tag("fii")],
        Annotated[StockSnapshot, Tag("stock")],
        Annotated[ETFSnapshot, Tag("etf")],
        Annotated[CryptoSnapshot, Tag("crypto")],
        Annotated[CommoditySnapshot, Tag("commodity")],
    ],
    Discriminator(_asset_kind),
]
