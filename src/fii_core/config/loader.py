"""Config loader — reads YAML, applies FII_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from fii_core.config.schema import AppConfig

# env var -> (section, key)
_ENV_OVERRIDES = {
    "FII_LOG_LEVEL": ("logging", "level"),
    "FII_LOG_FORMAT": ("logging", "format"),
    "FII_API_HOST": ("api", "host"),
    "FII_API_PORT": ("api", "port"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        FII_LOG_LEVEL   -> logging.level
        FII_LOG_FORMAT  -> logging.format
        FII_API_HOST    -> api.host
        FII_API_PORT    -> api.port
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data.setdefault(section, {})[key] = value

    return AppConfig.model_validate(data)
