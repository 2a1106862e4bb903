"""Daily rollup: one high/low/condition summary per calendar day."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, tzinfo

from weatherdash.models.forecast import DailyEntry, IconCategory, RawSample
from weatherdash.normalize.classifier import classify
from weatherdash.normalize.timefmt import short_day_label, to_local

DEFAULT_MAX_DAYS = 7


@dataclass
class _DayBucket:
    label: str
    icon: IconCategory
    high: float
    low: float

    def fold(self, sample: RawSample) -> None:
        # icon stays with the first sample of the day
        self.high = max(self.high, sample.temperature_max)
        self.low = min(self.low, sample.temperature_min)

    def to_entry(self) -> DailyEntry:
        return DailyEntry(
            day_label=self.label, icon=self.icon, high=self.high, low=self.low
        )


def build_daily(
    samples: Sequence[RawSample],
    max_days: int = DEFAULT_MAX_DAYS,
    tz: tzinfo = UTC,
) -> list[DailyEntry]:
    """Bucket samples by calendar day and fold each bucket.

    Buckets are keyed by the full date in ``tz`` and labelled with the short
    weekday name, so series longer than a week never merge two different
    Mondays. The first sample of a day fixes the bucket's icon; later
    samples only widen its high/low range. Buckets come out in first-seen
    order, truncated to ``max_days``.
    """
    if max_days <= 0:
        return []

    buckets: dict[date, _DayBucket] = {}
    for sample in samples:
        local = to_local(sample.timestamp, tz)
        key = local.date()
        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = _DayBucket(
                label=short_day_label(local),
                icon=classify(sample.condition_code),
                high=sample.temperature_max,
                low=sample.temperature_min,
            )
        else:
            bucket.fold(sample)

    return [b.to_entry() for b in list(buckets.values())[:max_days]]
