"""Reduction of a crawl stream to its terminal result."""

from __future__ import annotations

from typing import Any

from .models import CrawlResult

DEFAULT_CRAWL_RESULT = CrawlResult(success=True, time_took=0)


def reduce_crawl_result(payload: Any) -> CrawlResult:
    """Return the ``crawl_end`` data as a result, or the default when none was usable."""
    if not isinstance(payload, dict):
        return DEFAULT_CRAWL_RESULT
    return CrawlResult.from_payload(payload)
