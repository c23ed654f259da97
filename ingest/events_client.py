"""Client for reading upcoming events from the events API."""
from __future__ import annotations

import os
import logging
import time
from typing import Any, Iterable

import requests
from dotenv import load_dotenv

from ingest.errors import NetworkError, ParseError
from ingest.schemas import Event

load_dotenv()

EVENTS_API_URL = "https://compsoc.io/api/events/all"
HORIZON_SECONDS = 7 * 24 * 60 * 60
REQUEST_TIMEOUT = 30

logger = logging.getLogger(__name__)
if os.getenv("CLIPPY_DEBUG"):
    logging.basicConfig(level=logging.INFO, format="%(message)s")


def filter_upcoming(events: Iterable[Event], now: float) -> list[Event]:
    """Return visible events starting within the next seven days of ``now``.

    Input order is preserved.
    """
    threshold = now + HORIZON_SECONDS
    return [event for event in events if event.unix_start_time < threshold and not event.hidden]


def _fetch_records(url: str) -> list[Any]:
    logger.info("GET %s", url)
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.HTTPError as exc:
        resp = exc.response
        status = resp.status_code if resp is not None else None
        raise NetworkError(
            f"Events API answered {status}",
            status_code=status,
            body=resp.text if resp is not None else None,
        ) from exc
    except requests.RequestException as exc:
        raise NetworkError(f"Failed to fetch events from {url}: {exc}") from exc

    try:
        data = response.json()
    except ValueError as exc:
        raise ParseError(f"Events API returned invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError(f"Expected a list of events, got {type(data).__name__}")
    return data


def get_events(now: float | None = None, url: str = EVENTS_API_URL) -> list[Event]:
    """Fetch every event and keep the ones worth announcing this week.

    The request is bounded by ``REQUEST_TIMEOUT`` seconds; a hung events API
    raises ``NetworkError`` rather than blocking the whole run.
    """
    records = _fetch_records(url)
    events = [Event.from_dict(record) for record in records]
    upcoming = filter_upcoming(events, time.time() if now is None else now)
    logger.info("Fetched %d event(s), %d upcoming", len(events), len(upcoming))
    return upcoming
