"""Telegram Bot API client for delivering the briefing."""

import html
import logging

import httpx

from weatherbrief.config.defaults import TELEGRAM_API_BASE

logger = logging.getLogger(__name__)

BODY_PREVIEW_CHARS = 300


class TelegramClientError(Exception):
    """Raised when the Telegram API rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def escape_html(text: str) -> str:
    """Escape &, < and > for parse_mode=HTML. Quotes are left as-is."""
    return html.escape(text, quote=False)


class TelegramClient:
    """Thin wrapper around the Bot API sendMessage endpoint."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        base_url: str = TELEGRAM_API_BASE,
        timeout: float = 30.0,
    ):
        if not bot_token or not chat_id:
            raise TelegramClientError("bot token and chat id are required")
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def send_message(self, text: str) -> dict:
        """Send ``text`` as an HTML message. Returns the API response body."""
        url = f"{self.base_url}/bot{self.bot_token}/sendMessage"
        payload = {
            "chat_id": self.chat_id,
            "text": escape_html(text),
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }
        try:
            resp = httpx.post(url, json=payload, timeout=self.timeout)
        except httpx.RequestError as e:
            # exception text can carry the token-bearing URL
            logger.error("Telegram sendMessage request failed: %s", type(e).__name__)
            raise TelegramClientError(f"Telegram sendMessage 요청 실패: {type(e).__name__}") from e

        if resp.status_code >= 400:
            body = resp.text.strip()
            suffix = f" - {body[:BODY_PREVIEW_CHARS]}" if body else ""
            logger.error("Telegram API %d: %s", resp.status_code, body)
            raise TelegramClientError(
                f"Telegram sendMessage 실패 (HTTP {resp.status_code}){suffix}",
                resp.status_code,
            )
        logger.info("Sent %d chars to chat %s", len(text), self.chat_id)
        return resp.json() if resp.content else {}
