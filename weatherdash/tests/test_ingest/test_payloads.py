"""Tests for OpenWeather payload parsing."""

import copy

import pytest

from weatherdash.errors import UpstreamUnavailable
from weatherdash.ingest.payloads import parse_current, parse_forecast


class TestParseCurrent:
    def test_london(self, london_current: dict):
        current = parse_current(london_current)
        assert current.name == "London"
        assert current.lat == 51.5085
        assert current.lon == -0.1257
        assert current.temperature == 20.0
        assert current.feels_like == 19.4
        assert current.humidity == 60
        assert current.wind_speed == 4.1
        assert current.condition_code == 800
        assert current.utc_offset_seconds == 3600

    def test_precipitation_defaults_to_zero(self, london_current: dict):
        assert parse_current(london_current).precipitation == 0.0

    def test_rain_volume(self, london_current: dict):
        raw = copy.deepcopy(london_current)
        raw["rain"] = {"1h": 2.5}
        raw["snow"] = {"1h": 0.7}
        assert parse_current(raw).precipitation == 2.5

    def test_snow_volume_when_no_rain(self, london_current: dict):
        raw = copy.deepcopy(london_current)
        raw["snow"] = {"1h": 0.7}
        assert parse_current(raw).precipitation == 0.7

    def test_rain_without_last_hour_window(self, london_current: dict):
        raw = copy.deepcopy(london_current)
        raw["rain"] = {"3h": 4.0}
        assert parse_current(raw).precipitation == 0.0

    @pytest.mark.parametrize("missing", ["main", "coord", "weather", "wind", "name"])
    def test_missing_field(self, london_current: dict, missing: str):
        raw = copy.deepcopy(london_current)
        del raw[missing]
        with pytest.raises(UpstreamUnavailable, match="Malformed"):
            parse_current(raw)

    def test_empty_weather_list(self, london_current: dict):
        raw = copy.deepcopy(london_current)
        raw["weather"] = []
        with pytest.raises(UpstreamUnavailable):
            parse_current(raw)

    @pytest.mark.parametrize("field", ["rain", "snow"])
    def test_precipitation_not_an_object(self, london_current: dict, field: str):
        raw = copy.deepcopy(london_current)
        raw[field] = [1.2]
        with pytest.raises(UpstreamUnavailable, match="Malformed"):
            parse_current(raw)

    def test_utc_offset_out_of_range(self, london_current: dict):
        raw = copy.deepcopy(london_current)
        raw["timezone"] = 10**9
        with pytest.raises(UpstreamUnavailable):
            parse_current(raw)


class TestParseForecast:
    def test_samples_in_source_order(self, forecast_payload, start_ts):
        samples = parse_forecast(forecast_payload(count=5, codes=(800, 500)))
        assert len(samples) == 5
        assert samples[0].timestamp == start_ts
        assert [s.condition_code for s in samples] == [800, 500, 800, 500, 800]
        assert samples[0].temperature_max == samples[0].temperature + 1.5
        assert samples[0].temperature_min == samples[0].temperature - 1.5

    def test_empty_list(self):
        assert parse_forecast({"list": []}) == []

    def test_missing_list(self):
        with pytest.raises(UpstreamUnavailable):
            parse_forecast({"cod": "200"})

    def test_bad_entry(self, forecast_payload):
        raw = forecast_payload(count=3)
        del raw["list"][1]["main"]["temp_max"]
        with pytest.raises(UpstreamUnavailable):
            parse_forecast(raw)

    def test_non_numeric_temperature(self, forecast_payload):
        raw = forecast_payload(count=2)
        raw["list"][0]["main"]["temp"] = "warm"
        with pytest.raises(UpstreamUnavailable):
            parse_forecast(raw)

    def test_timestamp_out_of_range(self, forecast_payload):
        raw = forecast_payload(count=2)
        raw["list"][0]["dt"] = 10**20
        with pytest.raises(UpstreamUnavailable, match="Malformed"):
            parse_forecast(raw)
