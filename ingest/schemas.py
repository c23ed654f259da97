"""Shared data models for the events publisher."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ingest.errors import ParseError

EMBED_COLOR = 0xD14537

REQUIRED_EVENT_KEYS = ("id", "name", "unixStartTime", "unixEndTime")


@dataclass(frozen=True)
class Event:
    """A single event as served by the events API."""

    id: int
    name: str
    unix_start_time: float
    unix_end_time: float
    location: str = ""
    mazemap_link: str = ""
    summary: str = ""
    description: str = ""
    slides: str = ""
    organizer: str = ""
    difficulty: str = ""
    image: str = ""
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Event":
        """Build an ``Event`` from a camelCase API record.

        Raises ``ParseError`` when ``data`` is not an object or lacks one of
        the keys needed to place the event in time.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Expected an event object, got {type(data).__name__}")
        missing = [key for key in REQUIRED_EVENT_KEYS if key not in data]
        if missing:
            raise ParseError(f"Event record is missing {', '.join(missing)}")
        try:
            start = float(data["unixStartTime"])
            end = float(data["unixEndTime"])
        except (TypeError, ValueError) as exc:
            raise ParseError(f"Event {data.get('id')} has a non-numeric timestamp") from exc

        return cls(
            id=data["id"],
            name=data["name"] or "",
            unix_start_time=start,
            unix_end_time=end,
            location=data.get("location") or "",
            mazemap_link=data.get("mazemapLink") or "",
            summary=data.get("summary") or "",
            description=data.get("description") or "",
            slides=data.get("slides") or "",
            organizer=data.get("organizer") or "",
            difficulty=data.get("difficulty") or "",
            image=data.get("image") or "",
            hidden=bool(data.get("hidden", False)),
        )


@dataclass
class EmbedAuthor:
    name: str


@dataclass
class EmbedImage:
    url: str


@dataclass
class Embed:
    """Rich content block rendered for one event."""

    title: str
    description: str
    author: EmbedAuthor
    url: Optional[str] = None
    color: int = EMBED_COLOR
    image: Optional[EmbedImage] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "author": {"name": self.author.name},
            "color": self.color,
        }
        if self.url:
            data["url"] = self.url
        if self.image is not None:
            data["image"] = {"url": self.image.url}
        return data


@dataclass
class Message:
    """Webhook payload: embeds plus optional leading text."""

    embeds: list[Embed] = field(default_factory=list)
    content: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"embeds": [embed.to_dict() for embed in self.embeds]}
        if self.content is not None:
            data["content"] = self.content
        return data
