"""Custom exceptions raised by the search client."""

from __future__ import annotations

from typing import Any


class SearchClientError(Exception):
    """Base exception for this project."""


class ConfigError(SearchClientError):
    """Raised when client configuration is invalid."""


class InvalidArgument(SearchClientError, ValueError):
    """Raised before any network call when operation input is malformed."""


class RequestFailed(SearchClientError):
    """Raised when the API answers with a non-success status or cannot be reached."""

    def __init__(self, message: str, *, operation: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code


class CrawlError(SearchClientError):
    """Raised when the crawl stream reports an ``error`` event."""

    def __init__(self, message: str, *, event: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.event = event or {}
