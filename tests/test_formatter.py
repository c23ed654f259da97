import os
import sys
from dataclasses import replace
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from ingest.schemas import EMBED_COLOR, Event
from publish.formatter import format_event, time_span

MONDAY = 1717372800  # Monday 3 June 2024, 00:00 UTC
HOUR = 3600


@pytest.fixture
def event():
    return Event(
        id=42,
        name="Intro to Rust",
        unix_start_time=MONDAY + 18 * HOUR,
        unix_end_time=MONDAY + 20 * HOUR + 30 * 60,
        location="Building 32, Room 1015",
        mazemap_link="https://use.mazemap.com/#v=1&sharepoitype=poi&sharepoi=1",
        summary="Learn the basics.",
        description="Bring a laptop with rustup installed.",
        organizer="CompSoc",
        image="https://compsoc.io/images/rust.png",
    )


def test_single_day_span():
    assert time_span(MONDAY + 18 * HOUR, MONDAY + 20 * HOUR + 30 * 60) == "Monday, 3 June, 18:00 to 20:30"


def test_single_day_span_pads_hours():
    assert time_span(MONDAY + 9 * HOUR + 5 * 60, MONDAY + 10 * HOUR) == "Monday, 3 June, 09:05 to 10:00"


def test_cross_day_span():
    start = MONDAY + 4 * 24 * HOUR + 22 * HOUR
    end = MONDAY + 5 * 24 * HOUR + 2 * HOUR + 15 * 60
    assert time_span(start, end) == "Friday, 7 June, 22:00 to Saturday, 8 June, 02:15"


def test_format_event_fields(event):
    embed = format_event(event)
    assert embed.title == "Intro to Rust"
    assert embed.url == "https://compsoc.io/events/42"
    assert embed.author.name == "CompSoc"
    assert embed.color == EMBED_COLOR == 0xD14537
    assert embed.image is not None and embed.image.url == "https://compsoc.io/images/rust.png"
    assert embed.description == (
        ":calendar_spiral: Monday, 3 June, 18:00 to 20:30\n"
        ":map: Building 32, Room 1015 [Mazemap](https://use.mazemap.com/#v=1&sharepoitype=poi&sharepoi=1)\n"
        "\n"
        "Learn the basics.\n"
        "\n"
        "Bring a laptop with rustup installed."
    )


def test_format_event_without_map_link_or_image(event):
    embed = format_event(replace(event, mazemap_link="", image=""))
    assert ":map: Building 32, Room 1015\n\n" in embed.description
    assert "Mazemap" not in embed.description
    assert embed.image is None
    assert "image" not in embed.to_dict()


def test_format_event_to_dict(event):
    data = format_event(event).to_dict()
    assert data["author"] == {"name": "CompSoc"}
    assert data["image"] == {"url": "https://compsoc.io/images/rust.png"}
    assert data["color"] == 0xD14537
    assert "icon_url" not in data["author"]


def test_format_event_ignores_current_time(event):
    first = format_event(event)
    with patch("time.time", return_value=0):
        second = format_event(event)
    assert first == second
