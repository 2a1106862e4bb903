"""Derive weather alerts from normalized conditions and user preferences."""

from weatherdash.models.alerts import (
    AlertKind,
    AlertPreferences,
    AlertSeverity,
    WeatherAlert,
)
from weatherdash.models.common import UnitSystem
from weatherdash.models.forecast import IconCategory, NormalizedWeather

# Thresholds per unit system. Metric wind speed is m/s (provider native).
HEAT_THRESHOLD = {UnitSystem.METRIC: 35.0, UnitSystem.IMPERIAL: 95.0}
FREEZE_THRESHOLD = {UnitSystem.METRIC: 0.0, UnitSystem.IMPERIAL: 32.0}
WIND_THRESHOLD = {UnitSystem.METRIC: 13.4, UnitSystem.IMPERIAL: 30.0}
WIND_UNIT = {UnitSystem.METRIC: "m/s", UnitSystem.IMPERIAL: "mph"}


def derive_alerts(
    weather: NormalizedWeather,
    preferences: AlertPreferences | None = None,
    units: UnitSystem = UnitSystem.IMPERIAL,
) -> list[WeatherAlert]:
    prefs = preferences or AlertPreferences()
    alerts: list[WeatherAlert] = []

    if prefs.rain and weather.precipitation > 0:
        alerts.append(WeatherAlert(
            AlertKind.RAIN,
            AlertSeverity.WARNING,
            f"Rain expected today ({weather.precipitation:.1f}mm). "
            "Don't forget your umbrella!",
        ))

    if prefs.snow and weather.icon == IconCategory.SNOW:
        alerts.append(WeatherAlert(
            AlertKind.SNOW,
            AlertSeverity.WARNING,
            "Snow conditions detected. Drive carefully and dress warmly.",
        ))

    if prefs.extreme_temp:
        temp = round(weather.temperature)
        if weather.temperature > HEAT_THRESHOLD[units]:
            alerts.append(WeatherAlert(
                AlertKind.HEAT,
                AlertSeverity.WARNING,
                f"High temperature alert: {temp}°. "
                "Stay hydrated and avoid prolonged sun exposure.",
            ))
        elif weather.temperature < FREEZE_THRESHOLD[units]:
            alerts.append(WeatherAlert(
                AlertKind.COLD,
                AlertSeverity.WARNING,
                f"Freezing temperature alert: {temp}°. Dress in warm layers.",
            ))

    if prefs.wind and weather.wind > WIND_THRESHOLD[units]:
        alerts.append(WeatherAlert(
            AlertKind.WIND,
            AlertSeverity.INFO,
            f"Strong winds detected: {round(weather.wind)} {WIND_UNIT[units]}. "
            "Secure loose objects outdoors.",
        ))

    return alerts
