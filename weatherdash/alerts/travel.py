"""One-line travel advice for a destination's current weather."""

from weatherdash.models.common import UnitSystem
from weatherdash.models.forecast import NormalizedWeather

HOT_THRESHOLD = {UnitSystem.METRIC: 30.0, UnitSystem.IMPERIAL: 86.0}
COLD_THRESHOLD = {UnitSystem.METRIC: 10.0, UnitSystem.IMPERIAL: 50.0}


def travel_recommendation(
    weather: NormalizedWeather, units: UnitSystem = UnitSystem.IMPERIAL
) -> str:
    """First matching rule wins: rain, then heat, then cold."""
    if weather.precipitation > 0:
        return "Rain expected at destination. Consider bringing an umbrella."
    if weather.temperature > HOT_THRESHOLD[units]:
        return "Hot weather at destination. Stay hydrated and use sun protection."
    if weather.temperature < COLD_THRESHOLD[units]:
        return "Cold weather at destination. Dress warmly."
    return "Weather conditions are favorable for travel."
