"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherbrief.config.schema import BriefingConfig, TelegramConfig


@pytest.fixture
def default_config() -> BriefingConfig:
    """Return default BriefingConfig with test Telegram credentials."""
    return BriefingConfig(telegram=TelegramConfig(bot_token="test-token", chat_id="123456"))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"name": "서울", "timezone": "Asia/Seoul"},
        "sources": {"timeout": 10.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Telegram credentials from the process environment."""
    # setenv first so teardown also undoes values written by load_dotenv
    for name in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def weather_payload() -> dict:
    """Open-Meteo forecast payload covering Thursday 2026-02-26 and the weekend."""
    return {
        "daily": {
            "time": ["2026-02-26", "2026-02-27", "2026-02-28", "2026-03-01"],
            "temperature_2m_min": [2.0, 1.4, 1.05, None],
            "temperature_2m_max": [9.04, 10.0, 8.0, 7.0],
        },
        "hourly": {
            "time": [
                "2026-02-26T06:00",
                "2026-02-26T09:00",
                "2026-02-26T12:00",
                "2026-02-26T15:00",
                "2026-02-26T20:00",
                "2026-02-28T08:00",
                "2026-02-28T13:00",
            ],
            "temperature_2m": [2.0, 4.0, 8.0, 10.0, 5.0, 3.0, None],
            "weather_code": [0, 0, 3, 61, 95, 71, 2],
        },
    }


@pytest.fixture
def air_payload() -> dict:
    """Open-Meteo air-quality payload matching weather_payload."""
    return {
        "hourly": {
            "time": [
                "2026-02-26T06:00",
                "2026-02-26T09:00",
                "2026-02-26T12:00",
                "2026-02-26T15:00",
                "2026-02-26T20:00",
                "2026-02-27T07:00",
            ],
            "pm10": [30, 40, 50, None, 80, None],
            "pm2_5": [15, 25, None, 35, 45, None],
        },
    }
