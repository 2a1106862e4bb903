"""Parse OpenWeather JSON payloads into typed models."""

import logging
from datetime import UTC, datetime

from weatherdash.errors import UpstreamUnavailable
from weatherdash.models.forecast import CurrentConditions, RawSample

logger = logging.getLogger(__name__)

MAX_UTC_OFFSET_SECONDS = 24 * 3600


def parse_current(raw: dict) -> CurrentConditions:
    """Extract current conditions from a /weather response.

    Precipitation is the last-hour rain volume, else snow volume, else 0.
    """
    try:
        main = raw["main"]
        coord = raw["coord"]
        return CurrentConditions(
            name=str(raw["name"]),
            lat=float(coord["lat"]),
            lon=float(coord["lon"]),
            temperature=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=float(main["humidity"]),
            wind_speed=float(raw["wind"]["speed"]),
            precipitation=_precipitation(raw),
            condition_code=int(raw["weather"][0]["id"]),
            utc_offset_seconds=_utc_offset(raw.get("timezone", 0)),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Malformed current-conditions payload: %r", e)
        raise UpstreamUnavailable("Malformed current-conditions payload") from e


def parse_forecast(raw: dict) -> list[RawSample]:
    """Extract the ordered 3-hour sample list from a /forecast response."""
    try:
        entries = raw["list"]
        samples = []
        for item in entries:
            main = item["main"]
            samples.append(
                RawSample(
                    timestamp=_timestamp(item["dt"]),
                    condition_code=int(item["weather"][0]["id"]),
                    temperature=float(main["temp"]),
                    temperature_max=float(main["temp_max"]),
                    temperature_min=float(main["temp_min"]),
                )
            )
        return samples
    except (KeyError, IndexError, TypeError, ValueError, OverflowError, OSError) as e:
        logger.error("Malformed forecast payload: %r", e)
        raise UpstreamUnavailable("Malformed forecast payload") from e


def _timestamp(value) -> int:
    ts = int(value)
    # raises OverflowError/OSError for epochs the platform cannot represent
    datetime.fromtimestamp(ts, UTC)
    return ts


def _utc_offset(value) -> int:
    offset = int(value)
    if abs(offset) >= MAX_UTC_OFFSET_SECONDS:
        raise ValueError(f"UTC offset out of range: {offset}")
    return offset


def _precipitation(raw: dict) -> float:
    rain = raw.get("rain") or {}
    snow = raw.get("snow") or {}
    if not isinstance(rain, dict) or not isinstance(snow, dict):
        raise TypeError("rain/snow must be objects")
    return float(rain.get("1h") or snow.get("1h") or 0)
