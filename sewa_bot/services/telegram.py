# sewa_bot/services/telegram.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

TELEGRAM_API_ROOT = "https://api.telegram.org"


class TelegramError(RuntimeError):
    """The Bot API refused a request or a file could not be fetched."""


class TelegramClient:
    """
    Minimal Telegram Bot API client: replies, file downloads and webhook
    registration.
    """

    def __init__(self, token: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "TelegramClient":
        return cls(settings.telegram_token, timeout=settings.http_timeout)

    @property
    def api_base(self) -> str:
        return f"{TELEGRAM_API_ROOT}/bot{self.token}"

    def _call(self, method: str, payload: Dict[str, Any]) -> Any:
        try:
            response = self.session.post(f"{self.api_base}/{method}", json=payload, timeout=self.timeout)
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TelegramError(f"{method} failed: {type(e).__name__}") from e

        if not body.get("ok"):
            raise TelegramError(f"{method} failed: {body.get('description', 'unknown error')}")
        return body.get("result")

    def send_message(self, chat_id: int | str, text: str) -> None:
        """
        Send a plain-text message. Failures are logged, never raised, so a
        lost reply cannot turn into a webhook error.
        """
        try:
            self._call("sendMessage", {"chat_id": chat_id, "text": text})
        except TelegramError as e:
            logging.error("[TELEGRAM] sendMessage to %s failed: %s", chat_id, e)

    def get_file_url(self, file_id: str) -> str:
        """Direct download link for an attachment."""
        result = self._call("getFile", {"file_id": file_id})
        file_path = (result or {}).get("file_path")
        if not file_path:
            raise TelegramError(f"getFile returned no file_path for {file_id}")
        return f"{TELEGRAM_API_ROOT}/file/bot{self.token}/{file_path}"

    def download_file(self, file_id: str) -> bytes:
        url = self.get_file_url(file_id)
        # Request errors quote the URL, which carries the bot token.
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TelegramError(f"Download of {file_id} failed: {type(e).__name__}") from e
        if response.status_code != 200:
            raise TelegramError(f"Download of {file_id} failed: HTTP {response.status_code}")
        return response.content

    def set_webhook(self, url: str) -> None:
        self._call("setWebhook", {"url": url, "allowed_updates": ["message"]})
        logging.info("[TELEGRAM] webhook set to %s", url)
