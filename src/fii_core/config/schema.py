"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field


# NAV discount multiple per FII sector label
DEFAULT_SECTOR_MULTIPLES: dict[str, float] = {
    "Logístico": 0.05,
    "Corporativo": 0.03,
    "Shoppings": 0.08,
    "Residencial": 0.04,
    "Hoteleiro": 0.10,
    "Hospitalar": 0.06,
}


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000


class IndicatorConfig(BaseModel):
    window: int = Field(default=50, gt=0)  # most recent sessions fed to the indicators
    rsi_period: int = Field(default=14, gt=0)
    bollinger_period: int = Field(default=20, gt=0)


class ArbitrageConfig(BaseModel):
    min_premium_pct: float = 3.0
    default_multiple: float = 0.05
    sector_multiples: dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_SECTOR_MULTIPLES))


class StrategyOverride(BaseModel):
    active: bool | None = None
    params: dict[str, float] = Field(default_factory=dict)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    indicators: IndicatorConfig = Field(default_factory=IndicatorConfig)
    arbitrage: ArbitrageConfig = Field(default_factory=ArbitrageConfig)
    strategies: dict[str, StrategyOverride] = Field(default_factory=dict)
