"""Turn events into webhook embeds."""
from __future__ import annotations

from datetime import datetime, timezone

from ingest.schemas import EMBED_COLOR, Embed, EmbedAuthor, EmbedImage, Event

EVENT_LINK_TEMPLATE = "https://compsoc.io/events/{id}"

# English names, independent of the process locale.
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def unix_to_datetime(value: float) -> datetime:
    """Return an aware UTC datetime for a unix timestamp in seconds."""
    return datetime.fromtimestamp(value, tz=timezone.utc)


def just_time(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


def full_date(dt: datetime) -> str:
    """Render ``dt`` as ``Monday, 3 June, 18:00``."""
    return f"{WEEKDAYS[dt.weekday()]}, {dt.day} {MONTHS[dt.month - 1]}, {just_time(dt)}"


def time_span(start: float, end: float) -> str:
    """Render a start/end pair, collapsing the end date when both share a UTC day."""
    start_dt = unix_to_datetime(start)
    end_dt = unix_to_datetime(end)
    if start_dt.date() == end_dt.date():
        return f"{full_date(start_dt)} to {just_time(end_dt)}"
    return f"{full_date(start_dt)} to {full_date(end_dt)}"


def format_event(event: Event) -> Embed:
    """Build the embed announcing ``event``.

    The output depends only on ``event``; the current time plays no part.
    """
    description = f":calendar_spiral: {time_span(event.unix_start_time, event.unix_end_time)}\n"
    description += f":map: {event.location}"
    if event.mazemap_link:
        description += f" [Mazemap]({event.mazemap_link})"
    description += "\n\n"
    description += f"{event.summary}\n\n{event.description}"

    return Embed(
        title=event.name,
        url=EVENT_LINK_TEMPLATE.format(id=event.id),
        description=description,
        author=EmbedAuthor(name=event.organizer),
        color=EMBED_COLOR,
        image=EmbedImage(url=event.image) if event.image else None,
    )
