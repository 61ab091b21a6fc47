"""Civil-date helpers: YYYY-MM-DD parsing, weekend lookup, zoned "today"."""

import re
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weatherbrief.config.defaults import DEFAULT_TIMEZONE
from weatherbrief.models.summary import WeekendDates

_CIVIL_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class FormatError(ValueError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""


class ResolutionError(RuntimeError):
    """Raised when the calendar date for a timezone cannot be computed."""


def parse_civil_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date (no time, no zone)."""
    m = _CIVIL_DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        raise FormatError(f"유효하지 않은 날짜 형식: {value}")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise FormatError(f"유효하지 않은 날짜 형식: {value}") from e


def format_civil_date(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def next_weekend(date_str: str) -> WeekendDates:
    """Return the upcoming Saturday/Sunday on or after ``date_str``.

    A Saturday reference date counts as its own weekend; a Sunday reference
    date rolls forward to the following Saturday.
    """
    today = parse_civil_date(date_str)
    day_of_week = (today.weekday() + 1) % 7  # 0: Sun ... 6: Sat
    days_until_saturday = (6 - day_of_week + 7) % 7
    saturday = today + timedelta(days=days_until_saturday)
    sunday = saturday + timedelta(days=1)
    return WeekendDates(
        saturday=format_civil_date(saturday),
        sunday=format_civil_date(sunday),
    )


def today_in_zone(instant: datetime, zone: str = DEFAULT_TIMEZONE) -> str:
    """Calendar date of ``instant`` in the civil timezone ``zone``.

    Naive instants are taken as UTC.
    """
    try:
        tz = ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ResolutionError(f"{zone} 날짜 계산에 실패했습니다.") from e

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    try:
        local = instant.astimezone(tz)
    except (OverflowError, ValueError) as e:
        raise ResolutionError(f"{zone} 날짜 계산에 실패했습니다.") from e
    return format_civil_date(local.date())
