"""Build date-keyed summaries from raw Open-Meteo payloads."""

import logging
from collections.abc import Mapping
from typing import Any

from weatherbrief.aggregate.bucketer import bucket_by_period, is_finite_number, require_series
from weatherbrief.aggregate.reducers import average, reduce_period, representative_value
from weatherbrief.config.defaults import AIR_SOURCE, WEATHER_SOURCE
from weatherbrief.models.summary import (
    AirDaySummary,
    AirPeriodSummaryByDate,
    DailyExtremes,
    WeatherByDate,
    WeatherDayPeriodSummary,
    WeatherPeriodByDate,
)

logger = logging.getLogger(__name__)


def map_weather_daily_by_date(payload: Mapping[str, Any]) -> WeatherByDate:
    """Pass through the daily min/max temperature per date.

    Open-Meteo already aggregates these, so no bucketing is done. A
    non-numeric entry becomes None for that date.
    """
    arrays = require_series(
        payload, "daily", ("time", "temperature_2m_min", "temperature_2m_max"), WEATHER_SOURCE
    )
    time = arrays["time"]
    low = arrays["temperature_2m_min"]
    high = arrays["temperature_2m_max"]

    result: WeatherByDate = {}
    for i, date_key in enumerate(time):
        if not isinstance(date_key, str):
            continue
        result[date_key] = DailyExtremes(
            min=low[i] if is_finite_number(low[i]) else None,
            max=high[i] if is_finite_number(high[i]) else None,
        )
    return result


def aggregate_weather_periods_by_date(payload: Mapping[str, Any]) -> WeatherPeriodByDate:
    """Average hourly temperature and pick a representative weather code."""
    arrays = require_series(
        payload, "hourly", ("time", "temperature_2m", "weather_code"), WEATHER_SOURCE
    )
    buckets = bucket_by_period(
        arrays["time"],
        {
            "temperature": arrays["temperature_2m"],
            "weather_code": arrays["weather_code"],
        },
    )

    result: WeatherPeriodByDate = {}
    for date_key, day in buckets.items():
        result[date_key] = WeatherDayPeriodSummary(
            temperature=reduce_period(day["temperature"], average),
            weather_code=reduce_period(day["weather_code"], representative_value),
        )
    logger.debug("Aggregated weather periods for %d dates", len(result))
    return result


def aggregate_air_quality_by_date(payload: Mapping[str, Any]) -> AirPeriodSummaryByDate:
    """Average hourly PM10 and PM2.5 per morning/afternoon window."""
    arrays = require_series(payload, "hourly", ("time", "pm10", "pm2_5"), AIR_SOURCE)
    buckets = bucket_by_period(
        arrays["time"],
        {"pm10": arrays["pm10"], "pm2_5": arrays["pm2_5"]},
    )

    result: AirPeriodSummaryByDate = {}
    for date_key, day in buckets.items():
        result[date_key] = AirDaySummary(
            pm10=reduce_period(day["pm10"], average),
            pm2_5=reduce_period(day["pm2_5"], average),
        )
    logger.debug("Aggregated air quality periods for %d dates", len(result))
    return result
