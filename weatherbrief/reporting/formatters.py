"""Report text builders for the Telegram briefing."""

from weatherbrief.config.defaults import DEFAULT_LOCATION_NAME
from weatherbrief.models.summary import (
    AirDaySummary,
    DailyExtremes,
    PeriodAverage,
    ReportInput,
    WeatherDayPeriodSummary,
)
from weatherbrief.reporting.labels import (
    Pollutant,
    format_pollutant,
    format_temperature,
    weather_label,
)


def _format_weather_pair(summary: WeatherDayPeriodSummary) -> list[str]:
    return [
        f"- 오전: {weather_label(summary.temperature.morning, summary.weather_code.morning)}",
        f"- 오후: {weather_label(summary.temperature.afternoon, summary.weather_code.afternoon)}",
    ]


def _format_pollutant_pair(kind: Pollutant, period: PeriodAverage) -> list[str]:
    return [
        f"- 오전: {format_pollutant(kind, period.morning)}",
        f"- 오후: {format_pollutant(kind, period.afternoon)}",
    ]


def _format_day(report: ReportInput, date_key: str, header: str) -> list[str]:
    """One date section; dates missing from a map render as no-data."""
    extremes = report.weather_by_date.get(date_key) or DailyExtremes()
    periods = (
        report.weather_periods_by_date.get(date_key)
        or WeatherDayPeriodSummary.empty()
    )
    air = report.air_by_date.get(date_key) or AirDaySummary.empty()

    return [
        f"{header}({date_key})",
        "🌡️ 기온",
        f"- 최저: {format_temperature(extremes.min)}",
        f"- 최고: {format_temperature(extremes.max)}",
        "🌤️ 날씨",
        *_format_weather_pair(periods),
        "😷 미세먼지",
        *_format_pollutant_pair(Pollutant.PM10, air.pm10),
        "🫁 초미세먼지",
        *_format_pollutant_pair(Pollutant.PM2_5, air.pm2_5),
    ]


def build_report_message(
    report: ReportInput, location_name: str = DEFAULT_LOCATION_NAME
) -> str:
    """Render today's and the upcoming weekend's briefing as plain text."""
    lines = [
        f"[{location_name}]",
        *_format_day(report, report.today_date, "오늘"),
        "",
        "[주말]",
        *_format_day(report, report.weekend.saturday, "토"),
        "",
        *_format_day(report, report.weekend.sunday, "일"),
    ]
    return "\n".join(lines)


def build_failure_message(
    reason: str, source_failure: bool, location_name: str = DEFAULT_LOCATION_NAME
) -> str:
    """Short failure notice sent in place of the briefing."""
    if source_failure:
        return f"[{location_name}] 날씨/미세먼지 알림 생성 실패\n원인: {reason}"
    return f"[{location_name}] 날씨/미세먼지 알림 실행 실패\n원인: {reason}"
