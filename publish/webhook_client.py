"""Client for posting messages to the delivery webhook."""
from __future__ import annotations

import os
import logging
from typing import Any

import requests
from dotenv import load_dotenv

from ingest.errors import NetworkError, ParseError
from ingest.schemas import Message
from publish.config import WebhookConfig

load_dotenv()

REQUEST_TIMEOUT = 30

logger = logging.getLogger(__name__)
if os.getenv("CLIPPY_DEBUG"):
    logging.basicConfig(level=logging.INFO, format="%(message)s")


def _make_headers() -> dict[str, str]:
    return {"Content-Type": "application/json"}


def post(message: Message, config: WebhookConfig) -> requests.Response:
    """POST ``message`` to the webhook; error statuses raise ``NetworkError``.

    Every request is bounded by ``REQUEST_TIMEOUT`` seconds, so a hung webhook
    fails with ``NetworkError`` instead of blocking until the process is killed.
    The ``requests`` cause is not chained: its message carries the webhook URL
    and therefore the token.
    """
    payload = message.to_dict()
    logger.info("POST %s (%d embed(s))", config.redacted_url, len(message.embeds))
    try:
        response = requests.post(
            config.webhook_url,
            json=payload,
            headers=_make_headers(),
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        resp = exc.response
        status = resp.status_code if resp is not None else None
        raise NetworkError(
            f"Webhook answered {status}",
            status_code=status,
            body=resp.text if resp is not None else None,
        ) from None
    except requests.RequestException as exc:
        raise NetworkError(f"Failed to reach webhook {config.redacted_url}: {type(exc).__name__}") from None
    return response


def parse_response(response: requests.Response) -> Any:
    """Decode a webhook reply; an empty body (``204 No Content``) gives ``None``."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"Webhook returned invalid JSON: {exc}") from exc
