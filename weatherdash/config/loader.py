"""YAML config loader with environment overrides and dotted-key reads."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.schema import AppConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields defaults. An empty provider API key
    is filled from the OPENWEATHER_API_KEY environment variable.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("api_key"):
        env_key = os.environ.get(API_KEY_ENV, "")
        if env_key:
            provider["api_key"] = env_key

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.max_days'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: AppConfig) -> str:
    """Config as JSON with the API key masked, for display."""
    data = config.model_dump(mode="json")
    if data["provider"]["api_key"]:
        data["provider"]["api_key"] = "***"
    return AppConfig(**data).model_dump_json(indent=2)
