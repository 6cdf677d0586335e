"""wordnik_api.exceptions

Error types raised by the transport and the client.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "WordnikError",
    "ConfigurationError",
    "InvalidDateError",
    "RequestError",
    "InvalidAPIKeyError",
    "ResponseFormatError",
]


class WordnikError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WordnikError):
    """The client was constructed without a usable API key."""


class InvalidDateError(WordnikError, ValueError):
    """A word-of-the-day date string is not in ``yyyy-MM-dd`` form."""


class RequestError(WordnikError):
    """A request to the service did not produce a usable response."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidAPIKeyError(RequestError):
    """The service rejected the API key (HTTP 401)."""

    def __init__(self, message: str = "Invalid API key.") -> None:
        super().__init__(message, status_code=401)


class ResponseFormatError(RequestError):
    """The response body was not JSON or did not have the expected shape."""
