"""Error taxonomy for weather lookups.

Every error carries a stable ``kind`` so outer surfaces (CLI, HTTP API) can
map it to an exit code or status without string matching.
"""


class WeatherDashError(Exception):
    """Base class for errors surfaced to callers of the forecast pipeline."""

    kind = "error"


class LocationNotFound(WeatherDashError):
    """The provider reported no match for the requested place."""

    kind = "location_not_found"


class UpstreamUnavailable(WeatherDashError):
    """A provider call failed or returned a payload we cannot read."""

    kind = "upstream_unavailable"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(WeatherDashError):
    """A required setting, such as the provider API key, is missing."""

    kind = "configuration_error"
