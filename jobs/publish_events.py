"""Fetch this week's events and announce them on the webhook.

Run on a schedule with ``python -m jobs.publish_events``.
"""
from __future__ import annotations

import os
import sys
import random
import logging
from typing import Any, Optional

from ingest.events_client import get_events
from publish.batcher import post_embeds
from publish.config import WebhookConfig
from publish.formatter import format_event
from publish.webhook_client import parse_response

logger = logging.getLogger(__name__)
if os.getenv("CLIPPY_DEBUG"):
    logging.basicConfig(level=logging.INFO, format="%(message)s")

# One entry is picked per run with a uniform random index.
PREAMBLES = (
    "@everyone\nMark these events down in your schedule for the upcoming week:",
    "@everyone, we've got some awesome events planned in the next week!",
)


def choose_preamble(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return PREAMBLES[rng.randrange(len(PREAMBLES))]


def publish_events(
    config: WebhookConfig,
    rng: Optional[random.Random] = None,
    now: Optional[float] = None,
) -> list[Any]:
    """Run the pipeline once and return the parsed webhook replies."""
    events = get_events(now=now)
    embeds = [format_event(event) for event in events]
    preamble = choose_preamble(rng)
    responses = post_embeds(embeds, config, content=preamble)
    logger.info("Published %d event(s) in %d message(s)", len(embeds), len(responses))
    return [parse_response(response) for response in responses]


def run() -> None:
    """Scheduled entrypoint: publish and discard the result."""
    config = WebhookConfig.from_env()
    try:
        publish_events(config)
    except Exception:
        logger.exception("Scheduled publish failed")
        raise


if __name__ == "__main__":
    try:
        run()
    except Exception as exc:
        print("❌ Failed to publish events:", exc)
        sys.exit(1)
    print("✅ Events published")
