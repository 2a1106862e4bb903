"""Forecast data models: raw provider samples and display-ready rollups."""

from dataclasses import dataclass, field
from enum import StrEnum


class IconCategory(StrEnum):
    SUN = "sun"
    CLOUD = "cloud"
    RAIN = "rain"
    SNOW = "snow"
    DRIZZLE = "drizzle"
    WIND = "wind"
    PARTLY_CLOUDY = "partly-cloudy"


@dataclass(frozen=True)
class RawSample:
    timestamp: int  # epoch seconds, UTC
    condition_code: int
    temperature: float
    temperature_max: float
    temperature_min: float


@dataclass(frozen=True)
class HourlyEntry:
    display_time: str  # e.g. "3 PM"
    icon: IconCategory
    temperature: float


@dataclass(frozen=True)
class DailyEntry:
    day_label: str  # e.g. "Tue"
    icon: IconCategory
    high: float
    low: float


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    lat: float
    lon: float
    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    precipitation: float
    condition_code: int
    utc_offset_seconds: int = 0


@dataclass(frozen=True)
class NormalizedWeather:
    location: str
    date: str
    temperature: float
    icon: IconCategory
    feels_like: float
    humidity: float
    wind: float
    precipitation: float
    hourly_forecast: list[HourlyEntry] = field(default_factory=list)
    daily_forecast: list[DailyEntry] = field(default_factory=list)
