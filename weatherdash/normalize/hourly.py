"""Hourly rollup: the next few forecast samples as display entries."""

from collections.abc import Sequence
from datetime import UTC, tzinfo

from weatherdash.models.forecast import HourlyEntry, RawSample
from weatherdash.normalize.classifier import classify
from weatherdash.normalize.timefmt import hour_label, to_local

DEFAULT_HOURLY_WINDOW = 8  # 8 x 3h samples = next 24 hours


def build_hourly(
    samples: Sequence[RawSample],
    window_size: int = DEFAULT_HOURLY_WINDOW,
    tz: tzinfo = UTC,
) -> list[HourlyEntry]:
    """Take the first ``window_size`` samples, in the order given.

    The provider already returns samples in ascending time order, so no
    sorting happens here. Shorter inputs are returned whole, without padding.
    """
    if window_size <= 0:
        return []
    return [
        HourlyEntry(
            display_time=hour_label(to_local(s.timestamp, tz)),
            icon=classify(s.condition_code),
            temperature=s.temperature,
        )
        for s in samples[:window_size]
    ]
