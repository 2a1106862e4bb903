"""Shared test fixtures."""

import json
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import AppConfig, ProviderConfig
from weatherdash.models.forecast import RawSample

# Monday 2025-08-04 00:00 UTC
START_TS = int(datetime(2025, 8, 4, tzinfo=UTC).timestamp())
THREE_HOURS = 3 * 3600


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def start_ts() -> int:
    return START_TS


@pytest.fixture
def london_current(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "owm_current_london.json") as f:
        return json.load(f)


@pytest.fixture
def make_samples() -> Callable[..., list[RawSample]]:
    """Factory for evenly spaced 3-hour samples."""

    def build(
        count: int,
        start: int = START_TS,
        codes: Sequence[int] = (800,),
        temperature: float = 18.0,
    ) -> list[RawSample]:
        return [
            RawSample(
                timestamp=start + i * THREE_HOURS,
                condition_code=codes[i % len(codes)],
                temperature=temperature + i,
                temperature_max=temperature + i + 1,
                temperature_min=temperature + i - 1,
            )
            for i in range(count)
        ]

    return build


@pytest.fixture
def forecast_payload() -> Callable[..., dict]:
    """Factory for a /forecast response body."""

    def build(
        count: int = 40,
        start: int = START_TS,
        codes: Sequence[int] = (800, 801, 500),
    ) -> dict:
        items = []
        for i in range(count):
            temp = 15.0 + (i % 8)
            items.append({
                "dt": start + i * THREE_HOURS,
                "main": {"temp": temp, "temp_min": temp - 1.5, "temp_max": temp + 1.5},
                "weather": [{"id": codes[i % len(codes)], "main": "", "description": ""}],
            })
        return {"cod": "200", "cnt": count, "list": items, "city": {"name": "London"}}

    return build


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(provider=ProviderConfig(api_key="test-key"))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key"},
        "forecast": {"max_days": 5, "default_units": "metric"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
