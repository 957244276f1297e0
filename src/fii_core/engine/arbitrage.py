"""NAV-based arbitrage detection.

NAV is estimated from the market price, the dividend yield and a
per-sector multiple:

    nav      = price * (1 - yield/100 * multiple)
    premium% = (price - nav) / nav * 100

FII snapshots that report ``nav_per_share`` use that value instead.
"""

from __future__ import annotations

from typing import Iterable, Literal, Mapping

import structlog

from fii_core.config.schema import DEFAULT_SECTOR_MULTIPLES
from fii_core.models import ArbitrageOpportunity, AssetSnapshot

log = structlog.get_logger("arbitrage")

SECTOR_MULTIPLES = DEFAULT_SECTOR_MULTIPLES
DEFAULT_MULTIPLE = 0.05
MIN_PREMIUM_PCT = 3.0


def sector_multiple(
    sector: str,
    multiples: Mapping[str, float] | None = None,
    default: float = DEFAULT_MULTIPLE,
) -> float:
    table = SECTOR_MULTIPLES if multiples is None else multiples
    return table.get(sector, default)


def estimate_nav(
    asset: AssetSnapshot,
    multiples: Mapping[str, float] | None = None,
    default_multiple: float = DEFAULT_MULTIPLE,
) -> float:
    """Reported NAV when the snapshot has one, otherwise the sector estimate."""
    reported = getattr(asset, "nav_per_share", None)
    if reported is not None:
        return reported
    multiple = sector_multiple(asset.sector, multiples, default_multiple)
    return asset.current_price * (1 - (asset.dividend_yield / 100) * multiple)


def classify_opportunity(percentage: float) -> Literal["HIGH", "MODERATE", "LOW"]:
    if percentage > 10:
        return "HIGH"
    if percentage > 5:
        return "MODERATE"
    return "LOW"


def find_arbitrage(
    assets: Iterable[AssetSnapshot],
    *,
    min_premium_pct: float = MIN_PREMIUM_PCT,
    multiples: Mapping[str, float] | None = None,
    default_multiple: float = DEFAULT_MULTIPLE,
) -> list[ArbitrageOpportunity]:
    """Premium/discount to NAV for each asset, keeping gaps above the threshold.

    Assets whose NAV does not come out positive are skipped.
    """
    opportunities: list[ArbitrageOpportunity] = []
    for asset in assets:
        nav = estimate_nav(asset, multiples, default_multiple)
        if nav <= 0:
            log.warning("arbitrage_skipped", ticker=asset.ticker, nav=nav, reason="non_positive_nav")
            continue

        premium = (asset.current_price - nav) / nav * 100
        percentage = abs(premium)
        if percentage <= min_premium_pct:
            continue

        opportunities.append(
            ArbitrageOpportunity(
                ticker=asset.ticker,
                type="PREMIUM" if premium > 0 else "DISCOUNT",
                percentage=percentage,
                nav_price=nav,
                market_price=asset.current_price,
                opportunity=classify_opportunity(percentage),
            )
        )

    log.debug("arbitrage_scanned", found=len(opportunities))
    return opportunities
