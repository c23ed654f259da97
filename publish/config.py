"""Webhook configuration loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ingest.errors import ConfigurationError

load_dotenv()

WEBHOOK_BASE_URL = "https://discord.com/api/webhooks"


@dataclass(frozen=True)
class WebhookConfig:
    """Identifier and secret token of the delivery webhook."""

    id: str
    token: str

    @classmethod
    def from_env(cls) -> "WebhookConfig":
        """Read ``DISCORD_ID`` and ``DISCORD_TOKEN``, also from a ``.env`` file."""
        webhook_id = (os.getenv("DISCORD_ID") or "").strip()
        token = (os.getenv("DISCORD_TOKEN") or "").strip()
        if not webhook_id or not token:
            raise ConfigurationError("Missing DISCORD_ID / DISCORD_TOKEN")
        return cls(id=webhook_id, token=token)

    @property
    def webhook_url(self) -> str:
        return f"{WEBHOOK_BASE_URL}/{self.id}/{self.token}"

    @property
    def redacted_url(self) -> str:
        """Webhook URL safe for log output."""
        return f"{WEBHOOK_BASE_URL}/{self.id}/***"

    def __repr__(self) -> str:
        return f"WebhookConfig(id={self.id!r}, token='***')"
