"""Map provider condition codes to icon categories.

Codes follow the OpenWeather condition groups: 2xx thunderstorm, 3xx drizzle,
5xx rain, 6xx snow, 7xx atmosphere, 800 clear, 80x clouds.
"""

from weatherdash.models.forecast import IconCategory

# (low inclusive, high exclusive, category)
_CODE_BANDS: list[tuple[int, int, IconCategory]] = [
    (200, 300, IconCategory.RAIN),  # thunderstorms render as rain
    (300, 400, IconCategory.DRIZZLE),
    (500, 600, IconCategory.RAIN),
    (600, 700, IconCategory.SNOW),
    (700, 800, IconCategory.WIND),
]

_EXACT_CODES: dict[int, IconCategory] = {
    800: IconCategory.SUN,
    801: IconCategory.PARTLY_CLOUDY,
    802: IconCategory.PARTLY_CLOUDY,
}


def classify(code: int) -> IconCategory:
    """Return the icon category for a condition code.

    Total over all integers: anything unmapped (803, 804, 4xx, negatives)
    falls back to cloud.
    """
    for low, high, category in _CODE_BANDS:
        if low <= code < high:
            return category
    return _EXACT_CODES.get(code, IconCategory.CLOUD)
