"""Reducers turning bucket samples into period values."""

from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

from weatherbrief.aggregate.bucketer import PeriodBuckets
from weatherbrief.models.summary import PeriodAverage

T = TypeVar("T", bound=Hashable)


def average(values: Sequence[float]) -> float | None:
    """Arithmetic mean, or None for an empty bucket. No rounding."""
    if not values:
        return None
    return sum(values) / len(values)


def representative_value(values: Sequence[T]) -> T | None:
    """Most frequent value; on a count tie the earliest-seen value wins.

    Used for categorical samples such as weather codes, where a mean has no
    meaning.
    """
    if not values:
        return None

    counts: dict[T, int] = {}
    first_index: dict[T, int] = {}
    for i, value in enumerate(values):
        if value in counts:
            counts[value] += 1
        else:
            counts[value] = 1
            first_index[value] = i

    best = values[0]
    for value, count in counts.items():
        if count > counts[best] or (
            count == counts[best] and first_index[value] < first_index[best]
        ):
            best = value
    return best


def reduce_period(
    buckets: PeriodBuckets, reducer: Callable[[Sequence[float]], float | None]
) -> PeriodAverage:
    return PeriodAverage(
        morning=reducer(buckets.morning),
        afternoon=reducer(buckets.afternoon),
    )
