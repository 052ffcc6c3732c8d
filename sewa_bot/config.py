from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


class ConfigurationError(RuntimeError):
    """A required setting is missing; the process must not start."""


def _parse_admin_ids(raw: Optional[str]) -> FrozenSet[int]:
    ids = set()
    for part in (raw or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.add(int(part))
        except ValueError:
            logging.warning("[CONFIG] Ignoring non-numeric admin id %r", part)
    return frozenset(ids)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().strip('"').strip("'")
    return value or None


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup.

    Every component receives this object through its constructor; nothing
    reads the environment after startup.
    """

    telegram_token: Optional[str] = None
    admin_ids: FrozenSet[int] = field(default_factory=frozenset)
    webhook_url: Optional[str] = None

    github_token: Optional[str] = None
    github_owner: str = "KUL236"
    github_repo: str = "sewa-digital-ganv"
    github_branch: str = "main"

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"

    website_url: str = "sewa-digital-ganv.vercel.app"
    port: int = 3000
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            telegram_token=_clean(os.getenv("TELEGRAM_BOT_TOKEN")),
            admin_ids=_parse_admin_ids(os.getenv("ADMIN_IDS")),
            webhook_url=_clean(os.getenv("TELEGRAM_WEBHOOK_URL")),
            github_token=_clean(os.getenv("GITHUB_TOKEN")),
            github_owner=os.getenv("GITHUB_OWNER", "KUL236"),
            github_repo=os.getenv("GITHUB_REPO", "sewa-digital-ganv"),
            github_branch=os.getenv("GITHUB_BRANCH", "main"),
            openai_api_key=_clean(os.getenv("OPENAI_API_KEY")),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            gemini_api_key=_clean(os.getenv("GEMINI_API_KEY")),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            website_url=os.getenv("WEBSITE_URL", "sewa-digital-ganv.vercel.app"),
            port=int(os.getenv("PORT", "3000")),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
        )

    def validate(self) -> None:
        """Raise ConfigurationError if a credential the bot cannot run without is absent."""
        if not self.telegram_token:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN is required")
        if not self.github_token:
            raise ConfigurationError("GITHUB_TOKEN is required")

    def is_admin(self, user_id: Optional[int]) -> bool:
        # An empty allow-list means the bot is open to everyone.
        if not self.admin_ids:
            return True
        return user_id in self.admin_ids
