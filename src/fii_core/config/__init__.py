"""Configuration system."""

from fii_core.config.loader import load_config
from fii_core.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]
