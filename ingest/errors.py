"""Exceptions raised by the events publisher."""
from __future__ import annotations


class PublisherError(Exception):
    """Base class for every error raised by the publisher."""


class AuthGuardError(PublisherError):
    """Raised when an inbound trigger lacks the ``X-Clippy: true`` header."""


class ConfigurationError(PublisherError):
    """Raised when a required environment value is missing."""


class NetworkError(PublisherError):
    """Raised when a remote call fails or answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(PublisherError):
    """Raised when a remote response cannot be decoded."""
