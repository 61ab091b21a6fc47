"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherbrief.config.defaults import (
    AIR_QUALITY_BASE_URL,
    DEFAULT_LOCATION_NAME,
    DEFAULT_TIMEZONE,
    FORECAST_BASE_URL,
    SEOUL_LATITUDE,
    SEOUL_LONGITUDE,
    TELEGRAM_API_BASE,
)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = DEFAULT_LOCATION_NAME
    latitude: float = Field(default=SEOUL_LATITUDE, ge=-90.0, le=90.0)
    longitude: float = Field(default=SEOUL_LONGITUDE, ge=-180.0, le=180.0)
    timezone: str = DEFAULT_TIMEZONE


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather_base_url: str = FORECAST_BASE_URL
    air_base_url: str = AIR_QUALITY_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)


class TelegramConfig(BaseModel):
    model_config = {"extra": "forbid"}

    bot_token: str = ""
    chat_id: str = ""
    api_base_url: str = TELEGRAM_API_BASE
    timeout: float = Field(default=30.0, gt=0.0)


class BriefingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig = LocationConfig()
    sources: SourceConfig = SourceConfig()
    telegram: TelegramConfig = TelegramConfig()
