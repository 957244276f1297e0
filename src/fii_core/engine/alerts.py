"""Alert evaluation — match live metrics against user thresholds.

Triggering is one-shot: an alert that already fired is never evaluated
again. Alerts are immutable, so a trigger yields an updated copy; callers
keep ``AlertEvaluation.alerts`` as the new state of their alert list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, Sequence

import structlog

from fii_core.models import Alert, AlertType, AssetSnapshot

log = structlog.get_logger("alerts")

TechnicalCheck = Callable[[AssetSnapshot, Alert], bool]

_METRICS: dict[AlertType, Callable[[AssetSnapshot], float]] = {
    "PRICE": lambda a: a.current_price,
    "YIELD": lambda a: a.dividend_yield,
    "VOLUME": lambda a: float(a.volume),
}


@dataclass
class AlertEvaluation:
    """Outcome of one evaluation pass.

    ``alerts`` mirrors the input order with triggered entries replaced;
    ``triggered`` holds only the alerts that fired in this pass.
    """

    alerts: list[Alert] = field(default_factory=list)
    triggered: list[Alert] = field(default_factory=list)


def is_above(condition: str) -> bool:
    return "above" in condition


def threshold_met(value: float, alert: Alert) -> bool:
    if is_above(alert.condition):
        return value >= alert.target_value
    return value <= alert.target_value


def should_trigger(
    asset: AssetSnapshot,
    alert: Alert,
    technical_check: TechnicalCheck | None = None,
) -> bool:
    """True if *alert* fires against *asset*.

    TECHNICAL alerts have no built-in rule and only fire through
    *technical_check*.
    """
    if alert.type == "TECHNICAL":
        return technical_check is not None and technical_check(asset, alert)
    return threshold_met(_METRICS[alert.type](asset), alert)


def evaluate_alerts(
    assets: Iterable[AssetSnapshot],
    alerts: Sequence[Alert],
    *,
    technical_check: TechnicalCheck | None = None,
    now: Callable[[], datetime] | None = None,
) -> AlertEvaluation:
    """Evaluate every untriggered alert against the matching asset.

    Alerts whose ticker is not among *assets* are left untouched.
    """
    clock = now or (lambda: datetime.now(timezone.utc))
    by_ticker: dict[str, AssetSnapshot] = {}
    for asset in assets:
        by_ticker.setdefault(asset.ticker, asset)
    result = AlertEvaluation()

    for alert in alerts:
        if alert.triggered:
            result.alerts.append(alert)
            continue

        asset = by_ticker.get(alert.ticker)
        if asset is None:
            log.debug("alert_target_missing", alert_id=alert.id, ticker=alert.ticker)
            result.alerts.append(alert)
            continue

        if not should_trigger(asset, alert, technical_check):
            result.alerts.append(alert)
            continue

        metric = _METRICS.get(alert.type)
        fired = alert.model_copy(
            update={
                "triggered": True,
                "triggered_at": clock(),
                "current_value": metric(asset) if metric else alert.current_value,
            }
        )
        log.info(
            "alert_triggered",
            alert_id=alert.id,
            ticker=alert.ticker,
            type=alert.type,
            target=alert.target_value,
            value=fired.current_value,
        )
        result.alerts.append(fired)
        result.triggered.append(fired)

    return result
