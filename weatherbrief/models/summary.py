"""Date-keyed forecast summary models.

Absent values are ``None``. ``0`` is a real measurement and must never be
used to mean "no data".
"""

from dataclasses import dataclass
from typing import TypeAlias

from weatherbrief.models.common import DateKey


@dataclass(frozen=True)
class DailyExtremes:
    min: float | None = None
    max: float | None = None


@dataclass(frozen=True)
class PeriodAverage:
    morning: float | None = None
    afternoon: float | None = None


@dataclass(frozen=True)
class AirDaySummary:
    pm10: PeriodAverage
    pm2_5: PeriodAverage

    @classmethod
    def empty(cls) -> "AirDaySummary":
        return cls(pm10=PeriodAverage(), pm2_5=PeriodAverage())


@dataclass(frozen=True)
class WeatherDayPeriodSummary:
    temperature: PeriodAverage
    weather_code: PeriodAverage  # categorical WMO codes, not averages

    @classmethod
    def empty(cls) -> "WeatherDayPeriodSummary":
        return cls(temperature=PeriodAverage(), weather_code=PeriodAverage())


@dataclass(frozen=True)
class WeekendDates:
    saturday: DateKey
    sunday: DateKey


WeatherByDate: TypeAlias = dict[DateKey, DailyExtremes]
WeatherPeriodByDate: TypeAlias = dict[DateKey, WeatherDayPeriodSummary]
AirPeriodSummaryByDate: TypeAlias = dict[DateKey, AirDaySummary]


@dataclass(frozen=True)
class ReportInput:
    today_date: DateKey
    weekend: WeekendDates
    weather_by_date: WeatherByDate
    weather_periods_by_date: WeatherPeriodByDate
    air_by_date: AirPeriodSummaryByDate
