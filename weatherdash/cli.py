"""CLI entry point for the weather dashboard backend."""

import argparse
import json
import logging

from weatherdash.alerts.rules import derive_alerts
from weatherdash.alerts.travel import travel_recommendation
from weatherdash.config.loader import get_config_value, load_config, redacted_json
from weatherdash.errors import (
    ConfigurationError,
    LocationNotFound,
    UpstreamUnavailable,
    WeatherDashError,
)
from weatherdash.models.alerts import AlertPreferences
from weatherdash.models.common import UnitSystem
from weatherdash.models.query import build_query
from weatherdash.pipeline.forecast_pipeline import ForecastPipeline
from weatherdash.reporting.formatters import (
    alert_payload,
    format_alerts_text,
    format_weather_json,
    format_weather_text,
)

DEFAULT_CONFIG = "ops/configs/default.yaml"

EXIT_CODES: dict[type[WeatherDashError], int] = {
    LocationNotFound: 2,
    UpstreamUnavailable: 3,
    ConfigurationError: 4,
}


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("location", nargs="?", help="Place name, e.g. 'Berlin, Germany'")
    p.add_argument("--lat", type=float, help="Latitude")
    p.add_argument("--lon", type=float, help="Longitude")
    p.add_argument(
        "--units", choices=[u.value for u in UnitSystem], help="Unit system"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Weather dashboard forecast backend",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Show current weather and forecast")
    _add_location_args(forecast_p)
    forecast_p.add_argument("--json", action="store_true", help="Emit JSON")

    # travel
    travel_p = sub.add_parser("travel", help="Travel advice for a destination")
    _add_location_args(travel_p)

    # alerts
    alerts_p = sub.add_parser("alerts", help="Weather alerts for a location")
    _add_location_args(alerts_p)
    for kind in ("rain", "snow", "extreme-temp", "wind"):
        alerts_p.add_argument(
            f"--no-{kind}", action="store_true", help=f"Disable {kind} alerts"
        )
    alerts_p.add_argument("--json", action="store_true", help="Emit JSON")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Read a config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.max_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    try:
        query = build_query(args.location, args.lat, args.lon)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        pipeline = ForecastPipeline.from_config(config)
        units = UnitSystem(args.units) if args.units else config.forecast.default_units
        if args.command == "forecast":
            return _cmd_forecast(pipeline, query, units, args)
        elif args.command == "travel":
            return _cmd_travel(pipeline, query, units)
        elif args.command == "alerts":
            return _cmd_alerts(config, pipeline, query, units, args)
    except WeatherDashError as e:
        print(f"Error ({e.kind}): {e}")
        return EXIT_CODES.get(type(e), 1)

    parser.print_help()
    return 1


def _cmd_forecast(pipeline, query, units, args) -> int:
    weather = pipeline.fetch_normalized(query, units)
    if args.json:
        print(format_weather_json(weather))
    else:
        print(format_weather_text(weather, units))
    return 0


def _cmd_travel(pipeline, query, units) -> int:
    weather = pipeline.fetch_normalized(query, units)
    print(f"{weather.location}: {round(weather.temperature)}°, {weather.icon.value}")
    print(travel_recommendation(weather, units))
    return 0


def _cmd_alerts(config, pipeline, query, units, args) -> int:
    if not config.alerts.enabled:
        print("Alerts are disabled in config")
        return 0
    prefs = AlertPreferences(
        rain=not args.no_rain,
        snow=not args.no_snow,
        extreme_temp=not args.no_extreme_temp,
        wind=not args.no_wind,
    )
    weather = pipeline.fetch_normalized(query, units)
    alerts = derive_alerts(weather, prefs, units)
    if args.json:
        print(json.dumps([alert_payload(a) for a in alerts], indent=2))
    else:
        print(format_alerts_text(alerts))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        if args.key.endswith("api_key"):
            print("***" if value else "")
        elif hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1
