"""Tests for assembling NormalizedWeather from parsed inputs."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from weatherdash.models.forecast import CurrentConditions, IconCategory
from weatherdash.normalize.assembler import normalize

NOW = datetime(2025, 8, 5, 14, 30, tzinfo=UTC)


@pytest.fixture
def current() -> CurrentConditions:
    return CurrentConditions(
        name="London",
        lat=51.5085,
        lon=-0.1257,
        temperature=20.0,
        feels_like=19.4,
        humidity=60,
        wind_speed=4.1,
        precipitation=0.0,
        condition_code=800,
    )


class TestNormalize:
    def test_merges_current_and_rollups(self, current, make_samples):
        samples = make_samples(40, codes=(800, 801, 500))
        weather = normalize(current, samples, now=NOW)

        assert weather.location == "London"
        assert weather.icon == IconCategory.SUN
        assert weather.temperature == 20.0
        assert weather.feels_like == 19.4
        assert weather.wind == 4.1
        assert weather.date == "Tuesday, August 5, 2025"
        assert len(weather.hourly_forecast) == 8
        assert len(weather.daily_forecast) == 5

    def test_idempotent(self, current, make_samples):
        samples = make_samples(40, codes=(800, 801, 500))
        first = normalize(current, samples, now=NOW)
        second = normalize(current, samples, now=NOW)

        assert first.hourly_forecast == second.hourly_forecast
        assert first.daily_forecast == second.daily_forecast
        assert first == second

    def test_window_and_day_limits(self, current, make_samples):
        weather = normalize(
            current, make_samples(40), now=NOW, hourly_window=4, max_days=2
        )
        assert len(weather.hourly_forecast) == 4
        assert len(weather.daily_forecast) == 2

    def test_date_uses_display_timezone(self, current):
        late = datetime(2025, 8, 5, 23, 30, tzinfo=UTC)
        weather = normalize(
            current, [], now=late, tz=timezone(timedelta(hours=2))
        )
        assert weather.date == "Wednesday, August 6, 2025"
        assert weather.hourly_forecast == []
        assert weather.daily_forecast == []
