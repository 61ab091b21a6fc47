"""Report pipeline: fetch -> aggregate -> format -> send."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from weatherbrief.aggregate.summaries import (
    aggregate_air_quality_by_date,
    aggregate_weather_periods_by_date,
    map_weather_daily_by_date,
)
from weatherbrief.config.schema import BriefingConfig
from weatherbrief.dates import next_weekend, today_in_zone
from weatherbrief.delivery.telegram_client import TelegramClient, TelegramClientError
from weatherbrief.ingest.openmeteo_client import OpenMeteoClient, SourceApiError
from weatherbrief.models.common import utc_now
from weatherbrief.models.reporting import ReportRun
from weatherbrief.models.summary import ReportInput
from weatherbrief.reporting.formatters import build_failure_message, build_report_message

logger = logging.getLogger(__name__)


class ReportPipeline:
    def __init__(
        self,
        config: BriefingConfig,
        source: OpenMeteoClient | None = None,
        telegram: TelegramClient | None = None,
    ):
        self.config = config
        self.source = source or OpenMeteoClient(
            weather_base_url=config.sources.weather_base_url,
            air_base_url=config.sources.air_base_url,
            timeout=config.sources.timeout,
        )
        self.telegram = telegram

    def build_report(self, now: datetime | None = None, today: str | None = None) -> ReportRun:
        """Fetch both payloads and render the briefing. Errors propagate.

        ``today`` (YYYY-MM-DD) overrides the date resolved from ``now``.
        """
        location = self.config.location
        if today is None:
            today = today_in_zone(now or utc_now(), location.timezone)
        weekend = next_weekend(today)

        with ThreadPoolExecutor(max_workers=2) as pool:
            weather_future = pool.submit(self.source.get_weather, location)
            air_future = pool.submit(self.source.get_air_quality, location)
            weather = weather_future.result()
            air = air_future.result()

        report = ReportInput(
            today_date=today,
            weekend=weekend,
            weather_by_date=map_weather_daily_by_date(weather),
            weather_periods_by_date=aggregate_weather_periods_by_date(weather),
            air_by_date=aggregate_air_quality_by_date(air),
        )
        message = build_report_message(report, location.name)
        logger.info("Built report for %s (weekend %s/%s)", today, weekend.saturday, weekend.sunday)
        return ReportRun(today_date=today, message=message)

    def run(self, now: datetime | None = None, send: bool = True) -> ReportRun:
        """Build the report and deliver it; on failure deliver a failure notice."""
        try:
            result = self.build_report(now)
            logger.info("Report:\n%s", result.message)
            if send:
                self._telegram().send_message(result.message)
                result.sent = True
            return result
        except Exception as e:
            logger.exception("Report run failed")
            failure = build_failure_message(
                str(e), isinstance(e, SourceApiError), self.config.location.name
            )
            result = ReportRun(message=failure, errors=[str(e)])
            if send:
                try:
                    self._telegram().send_message(failure)
                    result.sent = True
                except TelegramClientError as send_error:
                    logger.error("Failed to deliver failure notice: %s", send_error)
                    result.errors.append(str(send_error))
            return result

    def _telegram(self) -> TelegramClient:
        if self.telegram is None:
            tg = self.config.telegram
            self.telegram = TelegramClient(
                bot_token=tg.bot_token,
                chat_id=tg.chat_id,
                base_url=tg.api_base_url,
                timeout=tg.timeout,
            )
        return self.telegram
