"""Weather Dashboard API: FastAPI backend serving normalized forecasts."""

import logging
import os
from collections.abc import Callable
from datetime import UTC, datetime
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from weatherdash.alerts.rules import derive_alerts
from weatherdash.alerts.travel import travel_recommendation
from weatherdash.config.loader import load_config
from weatherdash.config.schema import AppConfig
from weatherdash.errors import (
    ConfigurationError,
    LocationNotFound,
    UpstreamUnavailable,
    WeatherDashError,
)
from weatherdash.models.alerts import AlertPreferences
from weatherdash.models.common import UnitSystem
from weatherdash.models.query import LocationQuery, build_query
from weatherdash.pipeline.forecast_pipeline import ForecastPipeline
from weatherdash.reporting.formatters import alert_payload, weather_payload

logger = logging.getLogger(__name__)

CONFIG_ENV = "WEATHERDASH_CONFIG"
DEFAULT_CONFIG = "ops/configs/default.yaml"

ERROR_STATUS: dict[type[WeatherDashError], int] = {
    LocationNotFound: 404,
    UpstreamUnavailable: 502,
    ConfigurationError: 500,
}

app = FastAPI(title="Weather Dashboard API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@lru_cache
def get_config() -> AppConfig:
    return load_config(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG))


PipelineFactory = Callable[[], ForecastPipeline]


def get_pipeline_factory(config: AppConfig = Depends(get_config)) -> PipelineFactory:
    """Endpoints build the pipeline only after the request body is validated."""
    return lambda: ForecastPipeline.from_config(config)


@app.exception_handler(WeatherDashError)
async def handle_weather_error(request: Request, exc: WeatherDashError) -> JSONResponse:
    status = ERROR_STATUS.get(type(exc), 500)
    if status >= 500:
        logger.error("Error in %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status, content={"error": exc.kind, "message": str(exc)}
    )


# ── Request bodies ──────────────────────────────────────────────


class WeatherRequest(BaseModel):
    location: str | None = None
    lat: float | None = None
    lon: float | None = None
    units: UnitSystem | None = None

    def to_query(self) -> LocationQuery:
        try:
            return build_query(self.location, self.lat, self.lon)
        except ValueError as e:
            raise HTTPException(422, str(e)) from e


class AlertPreferencesBody(BaseModel):
    alert_rain: bool = True
    alert_snow: bool = True
    alert_extreme_temp: bool = True
    alert_wind: bool = True

    def to_preferences(self) -> AlertPreferences:
        return AlertPreferences(
            rain=self.alert_rain,
            snow=self.alert_snow,
            extreme_temp=self.alert_extreme_temp,
            wind=self.alert_wind,
        )


class AlertsRequest(WeatherRequest):
    preferences: AlertPreferencesBody = AlertPreferencesBody()


# ── Weather endpoints ───────────────────────────────────────────


@app.post("/api/weather")
def get_weather(
    body: WeatherRequest,
    make_pipeline: PipelineFactory = Depends(get_pipeline_factory),
):
    """Current conditions plus hourly and daily forecast."""
    query = body.to_query()
    weather = make_pipeline().fetch_normalized(query, body.units)
    return weather_payload(weather)


@app.post("/api/travel")
def get_travel(
    body: WeatherRequest,
    make_pipeline: PipelineFactory = Depends(get_pipeline_factory),
):
    """Destination weather with a travel recommendation."""
    query = body.to_query()
    pipeline = make_pipeline()
    units = body.units or pipeline.forecast_config.default_units
    weather = pipeline.fetch_normalized(query, units)
    return {
        "weather": weather_payload(weather),
        "recommendation": travel_recommendation(weather, units),
    }


@app.post("/api/alerts")
def get_alerts(
    body: AlertsRequest,
    config: AppConfig = Depends(get_config),
    make_pipeline: PipelineFactory = Depends(get_pipeline_factory),
):
    """Alerts for a location, filtered by the caller's preferences."""
    query = body.to_query()
    if not config.alerts.enabled:
        return {"location": query.describe(), "alerts": []}
    pipeline = make_pipeline()
    units = body.units or pipeline.forecast_config.default_units
    weather = pipeline.fetch_normalized(query, units)
    alerts = derive_alerts(weather, body.preferences.to_preferences(), units)
    return {
        "location": weather.location,
        "alerts": [alert_payload(a) for a in alerts],
    }


@app.get("/api/health")
def get_health(config: AppConfig = Depends(get_config)):
    """Quick health check."""
    return {
        "ok": True,
        "provider_configured": bool(config.provider.api_key),
        "timestamp": datetime.now(UTC).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
