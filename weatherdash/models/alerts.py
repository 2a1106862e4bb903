"""Weather alert models."""

from dataclasses import dataclass
from enum import StrEnum


class AlertKind(StrEnum):
    RAIN = "rain"
    SNOW = "snow"
    HEAT = "heat"
    COLD = "cold"
    WIND = "wind"


class AlertSeverity(StrEnum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class AlertPreferences:
    """Which alert kinds a user has opted into. Supplied by the caller."""

    rain: bool = True
    snow: bool = True
    extreme_temp: bool = True
    wind: bool = True


@dataclass(frozen=True)
class WeatherAlert:
    kind: AlertKind
    severity: AlertSeverity
    message: str
