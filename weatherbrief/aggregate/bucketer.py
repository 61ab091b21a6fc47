"""Group hourly series into per-date morning/afternoon buckets."""

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from weatherbrief.models.common import DateKey, Period

MORNING_HOURS = range(6, 12)  # 06:00-11:59
AFTERNOON_HOURS = range(12, 18)  # 12:00-17:59

_HOURLY_TIME_RE = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2})T([0-9]{2}):")


class ShapeError(ValueError):
    """Raised when response arrays are missing or have mismatched lengths."""


@dataclass
class PeriodBuckets:
    morning: list[float] = field(default_factory=list)
    afternoon: list[float] = field(default_factory=list)

    def for_period(self, period: Period) -> list[float]:
        return self.morning if period == Period.MORNING else self.afternoon


DateBuckets = dict[DateKey, dict[str, PeriodBuckets]]


def is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def classify_hour(hour: int) -> Period | None:
    if hour in MORNING_HOURS:
        return Period.MORNING
    if hour in AFTERNOON_HOURS:
        return Period.AFTERNOON
    return None


def require_series(
    payload: Mapping[str, Any] | None, section: str, keys: Sequence[str], source: str
) -> dict[str, list]:
    """Pull the named arrays out of ``payload[section]``.

    Raises ShapeError if the section or any array is missing, is not a list,
    or if the arrays differ in length.
    """
    block = payload.get(section) if isinstance(payload, Mapping) else None
    arrays: dict[str, list] = {}
    for key in keys:
        value = block.get(key) if isinstance(block, Mapping) else None
        if not isinstance(value, list):
            raise ShapeError(
                f"{source} 응답에 {section}.{'/'.join(keys)} 배열이 없습니다."
            )
        arrays[key] = value

    lengths = {len(v) for v in arrays.values()}
    if len(lengths) > 1:
        raise ShapeError(f"{source} {section} 응답 배열 길이가 일치하지 않습니다.")
    return arrays


def bucket_by_period(time: Sequence[Any], series: Mapping[str, Sequence[Any]]) -> DateBuckets:
    """Split each named series into date -> name -> morning/afternoon samples.

    Samples keep their original (time) order. Timestamps that do not start
    with ``YYYY-MM-DDTHH:`` are skipped. A date with a well-formed timestamp
    always gets an entry, even when none of its hours fall inside a window.
    Non-finite values are left out of the bucket entirely.
    """
    if not isinstance(time, Sequence) or isinstance(time, str):
        raise ShapeError("time 배열이 없습니다.")
    for name, values in series.items():
        if not isinstance(values, Sequence) or isinstance(values, str):
            raise ShapeError(f"{name} 배열이 없습니다.")
        if len(values) != len(time):
            raise ShapeError(
                f"{name} 배열 길이({len(values)})가 time 배열 길이({len(time)})와 다릅니다."
            )

    buckets: DateBuckets = {}
    for i, stamp in enumerate(time):
        m = _HOURLY_TIME_RE.match(stamp) if isinstance(stamp, str) else None
        if m is None:
            continue

        date_key = m.group(1)
        hour = int(m.group(2))

        day = buckets.setdefault(date_key, {name: PeriodBuckets() for name in series})

        period = classify_hour(hour)
        if period is None:
            continue

        for name, values in series.items():
            value = values[i]
            if is_finite_number(value):
                day[name].for_period(period).append(value)

    return buckets
