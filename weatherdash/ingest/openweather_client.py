"""OpenWeather API client for current conditions and 3-hour forecasts."""

import logging
import time

import httpx

from weatherdash.errors import ConfigurationError, LocationNotFound, UpstreamUnavailable
from weatherdash.models.common import UnitSystem

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_USER_AGENT = "weatherdash/0.1.0"
RETRYABLE_STATUS = (429, 503)


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
        max_retries: int = 0,
        retry_base_delay: float = 1.0,
    ):
        if not api_key:
            raise ConfigurationError("OpenWeather API key not configured")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_current_by_name(self, name: str, units: UnitSystem) -> dict:
        """Current conditions for a free-text place name."""
        return self._get_current({"q": name, "units": units.value})

    def get_current_by_coords(self, lat: float, lon: float, units: UnitSystem) -> dict:
        return self._get_current({"lat": lat, "lon": lon, "units": units.value})

    def get_forecast(self, lat: float, lon: float, units: UnitSystem) -> dict:
        """5-day forecast at 3-hour resolution for a coordinate pair."""
        return self._get("/forecast", {"lat": lat, "lon": lon, "units": units.value})

    def _get_current(self, params: dict) -> dict:
        try:
            return self._get("/weather", params)
        except UpstreamUnavailable as e:
            if e.status_code == 404:
                raise LocationNotFound("Location not found") from e
            raise

    def _get(self, endpoint: str, params: dict) -> dict:
        """GET an endpoint and decode its JSON body.

        Retries on 429/503 with exponential backoff when max_retries > 0.
        Any other failure is raised as UpstreamUnavailable.
        """
        url = f"{self.base_url}{endpoint}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        query = {**params, "appid": self.api_key}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=query, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OpenWeather request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("OpenWeather request to %s failed: %s", endpoint, e)
                raise UpstreamUnavailable(f"Weather API request failed: {e}") from e

            if resp.status_code in RETRYABLE_STATUS and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "OpenWeather %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    endpoint, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue

            if not resp.is_success:
                logger.warning("OpenWeather %s returned %d", endpoint, resp.status_code)
                raise UpstreamUnavailable(
                    f"Weather API error: {resp.status_code}", resp.status_code
                )

            try:
                data = resp.json()
            except ValueError as e:
                raise UpstreamUnavailable(
                    f"Weather API returned invalid JSON from {endpoint}"
                ) from e
            if not isinstance(data, dict):
                raise UpstreamUnavailable(
                    f"Weather API returned unexpected payload from {endpoint}"
                )
            return data

        # Unreachable: the final attempt either returns or raises.
        raise UpstreamUnavailable(f"Weather API retries exhausted for {endpoint}")
