"""Output formatters for normalized weather."""

import json

from weatherdash.models.alerts import WeatherAlert
from weatherdash.models.common import UnitSystem
from weatherdash.models.forecast import NormalizedWeather


def weather_payload(w: NormalizedWeather) -> dict:
    """Client-facing dict with the camelCase keys the dashboard reads."""
    return {
        "location": w.location,
        "date": w.date,
        "temperature": w.temperature,
        "icon": w.icon.value,
        "feelsLike": w.feels_like,
        "humidity": w.humidity,
        "wind": w.wind,
        "precipitation": w.precipitation,
        "hourlyForecast": [
            {"time": h.display_time, "icon": h.icon.value, "temperature": h.temperature}
            for h in w.hourly_forecast
        ],
        "dailyForecast": [
            {"day": d.day_label, "icon": d.icon.value, "high": d.high, "low": d.low}
            for d in w.daily_forecast
        ],
    }


def alert_payload(a: WeatherAlert) -> dict:
    return {"type": a.kind.value, "severity": a.severity.value, "message": a.message}


def format_weather_json(w: NormalizedWeather) -> str:
    """JSON rendering for programmatic consumption."""
    return json.dumps(weather_payload(w), indent=2)


def format_weather_text(w: NormalizedWeather, units: UnitSystem = UnitSystem.IMPERIAL) -> str:
    """Plain text rendering for the terminal."""
    wind_unit = "m/s" if units == UnitSystem.METRIC else "mph"
    lines = [
        f"=== {w.location} | {w.date} ===",
        f"Now: {round(w.temperature)}° ({w.icon.value}), "
        f"feels like {round(w.feels_like)}°",
        f"Humidity: {round(w.humidity)}% | Wind: {w.wind:.1f} {wind_unit} | "
        f"Precipitation: {w.precipitation:.1f} mm",
    ]
    if w.hourly_forecast:
        lines.append("Hourly:")
        lines.append(
            "  " + "  ".join(
                f"{h.display_time} {round(h.temperature)}° {h.icon.value}"
                for h in w.hourly_forecast
            )
        )
    if w.daily_forecast:
        lines.append("Daily:")
        for d in w.daily_forecast:
            lines.append(
                f"  {d.day_label}  {round(d.high)}° / {round(d.low)}°  {d.icon.value}"
            )
    return "\n".join(lines)


def format_alerts_text(alerts: list[WeatherAlert]) -> str:
    if not alerts:
        return "No active weather alerts."
    return "\n".join(
        f"[{a.severity.value.upper()}] {a.kind.value}: {a.message}" for a in alerts
    )
