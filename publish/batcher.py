"""Split embeds into webhook-sized messages."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

import requests

from ingest.schemas import Embed, Message
from publish.config import WebhookConfig
from publish.webhook_client import post

MAX_EMBEDS_PER_MESSAGE = 10

logger = logging.getLogger(__name__)

Poster = Callable[[Message, WebhookConfig], requests.Response]


def _chunked(items: Sequence[Embed], size: int) -> Iterable[list[Embed]]:
    for idx in range(0, len(items), size):
        yield list(items[idx : idx + size])


def post_embeds(
    embeds: Sequence[Embed],
    config: WebhookConfig,
    content: Optional[str] = None,
    poster: Poster = post,
) -> list[requests.Response]:
    """Deliver ``embeds`` in order, at most ten per message.

    Only the first message carries ``content``. Messages are sent one after
    another; the first failure propagates and later batches are not sent.
    """
    results: list[requests.Response] = []
    for index, batch in enumerate(_chunked(embeds, MAX_EMBEDS_PER_MESSAGE)):
        message = Message(embeds=batch, content=content if index == 0 else None)
        results.append(poster(message, config))
        logger.info("Posted batch %d with %d embed(s)", index + 1, len(batch))
    return results
