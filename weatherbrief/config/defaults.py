"""Default location and endpoint settings."""

DEFAULT_LOCATION_NAME = "서울"
SEOUL_LATITUDE = 37.5665
SEOUL_LONGITUDE = 126.9780
DEFAULT_TIMEZONE = "Asia/Seoul"

FORECAST_BASE_URL = "https://api.open-meteo.com"
AIR_QUALITY_BASE_URL = "https://air-quality-api.open-meteo.com"
TELEGRAM_API_BASE = "https://api.telegram.org"

DEFAULT_CONFIG = "config/weatherbrief.yaml"
DEFAULT_ENV_FILE = ".env"

ENV_BOT_TOKEN = "TELEGRAM_BOT_TOKEN"
ENV_CHAT_ID = "TELEGRAM_CHAT_ID"

# source names used in error messages
WEATHER_SOURCE = "Weather API"
AIR_SOURCE = "Air API"
