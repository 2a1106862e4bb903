"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherdash.ingest.openweather_client import OPENWEATHER_BASE_URL
from weatherdash.models.common import UnitSystem


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay_seconds: float = Field(default=1.0, ge=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_window: int = Field(default=8, ge=1, le=40)
    max_days: int = Field(default=7, ge=1, le=16)
    default_units: UnitSystem = UnitSystem.IMPERIAL
    use_location_timezone: bool = False


class AlertConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    forecast: ForecastConfig = ForecastConfig()
    alerts: AlertConfig = AlertConfig()
