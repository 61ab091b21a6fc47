"""Open-Meteo forecast and air-quality API client."""

import logging

import httpx

from weatherbrief.config.defaults import (
    AIR_QUALITY_BASE_URL,
    AIR_SOURCE,
    FORECAST_BASE_URL,
    WEATHER_SOURCE,
)
from weatherbrief.config.schema import LocationConfig

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherbrief/0.1.0"
BODY_PREVIEW_CHARS = 300


class SourceApiError(Exception):
    """Raised when a forecast source cannot be fetched or decoded."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class OpenMeteoClient:
    """Fetches raw forecast payloads for one location.

    Requests are made once; no retries.
    """

    def __init__(
        self,
        weather_base_url: str = FORECAST_BASE_URL,
        air_base_url: str = AIR_QUALITY_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.weather_base_url = weather_base_url.rstrip("/")
        self.air_base_url = air_base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_weather(self, location: LocationConfig) -> dict:
        """Daily min/max temperature plus hourly temperature and weather code."""
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "daily": "temperature_2m_max,temperature_2m_min",
            "hourly": "temperature_2m,weather_code",
            "timezone": location.timezone,
        }
        return self._get_json(f"{self.weather_base_url}/v1/forecast", params, WEATHER_SOURCE)

    def get_air_quality(self, location: LocationConfig) -> dict:
        """Hourly PM10 and PM2.5 concentrations."""
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "hourly": "pm10,pm2_5",
            "timezone": location.timezone,
        }
        return self._get_json(f"{self.air_base_url}/v1/air-quality", params, AIR_SOURCE)

    def _get_json(self, url: str, params: dict, source: str) -> dict:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("%s request failed: %s", source, e)
            raise SourceApiError(source, f"{source} 요청 실패: {e}") from e

        if resp.status_code >= 400:
            body = resp.text.strip()
            suffix = f" - {body[:BODY_PREVIEW_CHARS]}" if body else ""
            logger.error("%s returned HTTP %d: %s", source, resp.status_code, body)
            raise SourceApiError(
                source,
                f"{source} 응답 오류 (HTTP {resp.status_code}){suffix}",
                resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.error("%s returned invalid JSON: %s", source, e)
            raise SourceApiError(source, f"{source} JSON 파싱 실패: {e}") from e
