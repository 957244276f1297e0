"""User-defined threshold alerts."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AlertType = Literal["PRICE", "YIELD", "VOLUME", "TECHNICAL"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Alert(BaseModel):
    """A threshold condition on one ticker.

    Immutable: the evaluator returns a triggered copy instead of touching
    the caller's instance. ``condition`` is free text; it is read as
    "greater or equal" when it contains ``above`` and "less or equal"
    otherwise.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    ticker: str
    type: AlertType
    condition: str
    target_value: float
    current_value: float = 0.0
    triggered: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    triggered_at: datetime | None = None
