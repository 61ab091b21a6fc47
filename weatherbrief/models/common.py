"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeAlias

DateKey: TypeAlias = str  # YYYY-MM-DD


class Period(StrEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


def utc_now() -> datetime:
    return datetime.now(UTC)
