"""Validation and pre-flight guardrails."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .errors import ConfigError, InvalidArgument


def normalize_api_url(api_url: str) -> str:
    """Drop the trailing slash so endpoint paths can be appended directly."""
    return api_url[:-1] if api_url.endswith("/") else api_url


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def validate_client_settings(
    *,
    client_id: str,
    client_secret: str,
    api_url: str,
    request_timeout: float,
    connect_timeout: float,
) -> None:
    """Validate client configuration and raise ConfigError on invalid values."""
    if not client_id:
        raise ConfigError("client_id is required")
    if not client_secret:
        raise ConfigError("client_secret is required")
    if not api_url or not api_url.startswith(("http://", "https://")):
        raise ConfigError("api_url must be an absolute http(s) URL")
    if request_timeout <= 0:
        raise ConfigError("request_timeout must be > 0")
    if connect_timeout <= 0:
        raise ConfigError("connect_timeout must be > 0")


def validate_queries(queries: Sequence[str] | None) -> list[str]:
    """Return the query batch as a list, or raise InvalidArgument when it is empty."""
    if queries is None or not _is_list_like(queries) or len(queries) == 0:
        raise InvalidArgument("queries must be a non-empty list")
    return list(queries)


def validate_pages(pages: Sequence[Mapping[str, Any]] | None) -> list[Mapping[str, Any]]:
    """Check every extraction page locally, failing on the first offending index."""
    if pages is None or not _is_list_like(pages) or len(pages) == 0:
        raise InvalidArgument("pages must be a non-empty list")

    for index, page in enumerate(pages):
        if not isinstance(page, Mapping):
            raise InvalidArgument(f"Page at index {index} must be a mapping")
        if not page.get("url"):
            raise InvalidArgument(f"Page at index {index} is missing required field: url")
        details = page.get("details")
        if not details or not _is_list_like(details):
            raise InvalidArgument(
                f"Page at index {index} is missing required field: details "
                "(must be a non-empty list)"
            )
    return list(pages)


def validate_instructions(instructions: str | None) -> str:
    """Require crawl instructions to be a non-empty string."""
    if not instructions or not isinstance(instructions, str):
        raise InvalidArgument("instructions is required and must be a string")
    return instructions


def validate_handler(on_event: Any) -> None:
    """Reject event handlers that cannot be called."""
    if on_event is not None and not callable(on_event):
        raise InvalidArgument("on_event must be callable")
