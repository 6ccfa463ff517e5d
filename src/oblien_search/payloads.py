"""Request body builders for the three API operations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .validation import validate_instructions, validate_pages, validate_queries

SEARCH_PATH = "/search"
EXTRACT_PATH = "/search/extract"
CRAWL_PATH = "/search/crawl"

DEFAULT_CRAWL_OPTIONS: Mapping[str, Any] = {
    "type": "deep",
    "thinking": True,
    "allow_thinking_callback": True,
    "stream_text": True,
}


def build_search_payload(
    queries: Sequence[str] | None,
    include_answers: bool = False,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """One batched body for all queries; the server fans them out."""
    return {
        "queries": validate_queries(queries),
        "includeAnswers": bool(include_answers),
        "options": dict(options or {}),
    }


def build_extract_payload(
    pages: Sequence[Mapping[str, Any]] | None,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Pages are forwarded unmodified once they pass local validation."""
    return {"pages": validate_pages(pages), "options": dict(options or {})}


def merge_crawl_options(options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Overlay caller options on the crawl defaults, field by field."""
    merged = dict(DEFAULT_CRAWL_OPTIONS)
    merged.update(options or {})
    return merged


def build_crawl_payload(
    instructions: str | None, options: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    return {
        "instructions": validate_instructions(instructions),
        "options": merge_crawl_options(options),
    }
