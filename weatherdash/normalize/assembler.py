"""Assemble current conditions and forecast samples into NormalizedWeather."""

from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo

from weatherdash.models.forecast import CurrentConditions, NormalizedWeather, RawSample
from weatherdash.normalize.classifier import classify
from weatherdash.normalize.daily import DEFAULT_MAX_DAYS, build_daily
from weatherdash.normalize.hourly import DEFAULT_HOURLY_WINDOW, build_hourly
from weatherdash.normalize.timefmt import long_date_label


def normalize(
    current: CurrentConditions,
    samples: Sequence[RawSample],
    *,
    now: datetime,
    hourly_window: int = DEFAULT_HOURLY_WINDOW,
    max_days: int = DEFAULT_MAX_DAYS,
    tz: tzinfo = UTC,
) -> NormalizedWeather:
    """Build the display record. Pure: no I/O, no clock reads."""
    hourly = build_hourly(samples, hourly_window, tz)
    daily = build_daily(samples, max_days, tz)

    return NormalizedWeather(
        location=current.name,
        date=long_date_label(now.astimezone(tz)),
        temperature=current.temperature,
        icon=classify(current.condition_code),
        feels_like=current.feels_like,
        humidity=current.humidity,
        wind=current.wind_speed,
        precipitation=current.precipitation,
        hourly_forecast=hourly,
        daily_forecast=daily,
    )
