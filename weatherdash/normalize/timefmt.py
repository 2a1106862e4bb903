"""Locale-independent time and date labels.

Labels use fixed English tables rather than strftime so output does not
depend on the process locale.
"""

from datetime import datetime, timedelta, timezone, tzinfo

SHORT_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
LONG_DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def to_local(timestamp: int, tz: tzinfo) -> datetime:
    """Convert epoch seconds to an aware datetime in ``tz``."""
    return datetime.fromtimestamp(timestamp, tz)


def offset_timezone(utc_offset_seconds: int) -> tzinfo:
    return timezone(timedelta(seconds=utc_offset_seconds))


def hour_label(dt: datetime) -> str:
    """12-hour clock label, e.g. "12 AM", "3 PM"."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour} {suffix}"


def short_day_label(dt: datetime) -> str:
    return SHORT_DAY_NAMES[dt.weekday()]


def long_date_label(dt: datetime) -> str:
    """Full date, e.g. "Tuesday, August 5, 2025"."""
    return (
        f"{LONG_DAY_NAMES[dt.weekday()]}, "
        f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"
    )
