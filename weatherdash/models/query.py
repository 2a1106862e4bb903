"""Location query accepted by the forecast pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationQuery:
    """Either a free-text place name or a coordinate pair, never both."""

    location: str | None = None
    lat: float | None = None
    lon: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None

    def describe(self) -> str:
        if self.has_coordinates:
            return f"{self.lat},{self.lon}"
        return self.location or ""


def build_query(
    location: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> LocationQuery:
    """Validate caller input and build a LocationQuery.

    Raises ValueError unless exactly one of ``location`` or the
    ``lat``/``lon`` pair is provided.
    """
    name = location.strip() if location else None
    has_name = bool(name)
    has_lat = lat is not None
    has_lon = lon is not None

    if has_lat != has_lon:
        raise ValueError("lat and lon must be given together")
    if has_name and has_lat:
        raise ValueError("Give either a location name or coordinates, not both")
    if not has_name and not has_lat:
        raise ValueError("A location name or lat/lon coordinates are required")
    if has_lat and not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise ValueError(f"Coordinates out of range: {lat},{lon}")

    return LocationQuery(location=name, lat=lat, lon=lon)
