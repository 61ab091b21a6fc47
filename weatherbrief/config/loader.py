"""Config loading: optional YAML file, .env file, and environment overlay."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from weatherbrief.config.defaults import ENV_BOT_TOKEN, ENV_CHAT_ID
from weatherbrief.config.schema import BriefingConfig

logger = logging.getLogger(__name__)

SECRET_KEY = "telegram.bot_token"


class ConfigError(Exception):
    """Raised when configuration or credentials cannot be loaded."""


def load_env_file(path: str | Path = ".env") -> bool:
    """Load variables from a .env file into os.environ.

    A missing file is not an error. Variables already set in the environment
    are left untouched. Returns True if the file was found and loaded.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No env file at %s", path)
        return False
    if not path.is_file():
        raise ConfigError(f".env 파일 로드 실패: {path} is not a file")
    try:
        return load_dotenv(dotenv_path=path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f".env 파일 로드 실패: {e}") from e


def load_config(
    path: str | Path | None = None, env: Mapping[str, str] | None = None
) -> BriefingConfig:
    """Load and validate config.

    Reads the YAML file at ``path`` if given (it must exist), then overlays
    Telegram credentials from the environment.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"설정 파일이 없습니다: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"설정 파일 파싱 실패: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"설정 파일 읽기 실패: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"설정 파일 형식이 올바르지 않습니다: {path}")

    env = os.environ if env is None else env
    telegram = raw.get("telegram") or {}
    if not isinstance(telegram, dict):
        raise ConfigError("설정 파일의 telegram 항목은 매핑이어야 합니다.")
    telegram = dict(telegram)
    token = env.get(ENV_BOT_TOKEN, "").strip()
    chat_id = env.get(ENV_CHAT_ID, "").strip()
    if token:
        telegram["bot_token"] = token
    if chat_id:
        telegram["chat_id"] = chat_id
    raw["telegram"] = telegram

    return BriefingConfig.model_validate(raw)


def require_telegram_credentials(config: BriefingConfig) -> None:
    if not config.telegram.bot_token.strip() or not config.telegram.chat_id.strip():
        raise ConfigError(
            f"필수 환경변수가 없습니다. {ENV_BOT_TOKEN} 과 {ENV_CHAT_ID} 를 설정한 뒤 다시 실행하세요."
        )


def _redacted_dump(config: BriefingConfig) -> dict[str, Any]:
    data = json.loads(config.model_dump_json())
    if data["telegram"]["bot_token"]:
        data["telegram"]["bot_token"] = "***"
    return data


def redacted_config_json(config: BriefingConfig) -> str:
    """Config as JSON with the bot token masked."""
    return json.dumps(_redacted_dump(config), indent=2, ensure_ascii=False)


def get_config_value(config: BriefingConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'location.timezone'.

    Only declared fields resolve. A section comes back as a plain dict with
    the bot token masked, and the bot token itself is refused.
    """
    if dotted_key == SECRET_KEY:
        raise ConfigError(f"{SECRET_KEY} 값은 출력할 수 없습니다.")
    obj: Any = _redacted_dump(config)
    for part in dotted_key.split("."):
        if not isinstance(obj, dict) or part not in obj:
            raise KeyError(f"Config key not found: {dotted_key}")
        obj = obj[part]
    return obj
