"""Forecast pipeline: fetch current conditions and forecast, then normalize."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from weatherdash.config.schema import AppConfig, ForecastConfig
from weatherdash.errors import ConfigurationError
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.payloads import parse_current, parse_forecast
from weatherdash.models.common import UnitSystem, utc_now
from weatherdash.models.forecast import NormalizedWeather
from weatherdash.models.query import LocationQuery
from weatherdash.normalize.assembler import normalize
from weatherdash.normalize.timefmt import offset_timezone

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        client: OpenWeatherClient,
        forecast_config: ForecastConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.forecast_config = forecast_config or ForecastConfig()
        self.clock = clock

    @classmethod
    def from_config(cls, config: AppConfig) -> "ForecastPipeline":
        """Build a pipeline with a live OpenWeather client.

        Raises ConfigurationError when no API key is configured.
        """
        provider = config.provider
        if not provider.api_key:
            raise ConfigurationError("OpenWeather API key not configured")
        client = OpenWeatherClient(
            api_key=provider.api_key,
            base_url=provider.base_url,
            timeout=provider.timeout_seconds,
            max_retries=provider.max_retries,
            retry_base_delay=provider.retry_base_delay_seconds,
        )
        return cls(client, config.forecast)

    def fetch_normalized(
        self, query: LocationQuery, units: UnitSystem | None = None
    ) -> NormalizedWeather:
        """Resolve a location and return its normalized weather.

        LocationNotFound from the current-conditions lookup ends the run
        before the forecast endpoint is called. The forecast is requested
        for the coordinates the provider resolved, not the raw query, so
        both halves describe the same place.
        """
        units = units or self.forecast_config.default_units
        logger.info("Fetching weather for %s (units=%s)", query.describe(), units)

        if query.has_coordinates:
            raw_current = self.client.get_current_by_coords(query.lat, query.lon, units)
        else:
            raw_current = self.client.get_current_by_name(query.location or "", units)
        current = parse_current(raw_current)

        raw_forecast = self.client.get_forecast(current.lat, current.lon, units)
        samples = parse_forecast(raw_forecast)

        tz = UTC
        if self.forecast_config.use_location_timezone:
            tz = offset_timezone(current.utc_offset_seconds)

        weather = normalize(
            current,
            samples,
            now=self.clock(),
            hourly_window=self.forecast_config.hourly_window,
            max_days=self.forecast_config.max_days,
            tz=tz,
        )
        logger.info(
            "Weather for %s: %d hourly, %d daily entries",
            weather.location, len(weather.hourly_forecast), len(weather.daily_forecast),
        )
        return weather
