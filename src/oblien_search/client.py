"""Public client for the Oblien search, extract and crawl API."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .config import DEFAULT_API_URL, ClientConfig
from .logging_utils import get_logger
from .models import CrawlResult, EventHandler, HttpSession
from .payloads import (
    CRAWL_PATH,
    EXTRACT_PATH,
    SEARCH_PATH,
    build_crawl_payload,
    build_extract_payload,
    build_search_payload,
)
from .stream import read_crawl_stream
from .transport import Transport, iter_stream_chunks, make_session
from .validation import validate_handler


class SearchClient:
    """Client for batch search, multi-page extraction and streaming crawl.

    Each call issues exactly one request. The client keeps no per-call state,
    so one instance may serve concurrent callers.

    Example::

        with SearchClient(client_id, client_secret) as client:
            results = client.search(["What is machine learning?"], include_answers=True)
            outcome = client.crawl(
                "Crawl https://example.com/blog and summarize all articles",
                lambda event: print(event.type, event.data),
            )
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        api_url: str = DEFAULT_API_URL,
        *,
        config: ClientConfig | None = None,
        session: HttpSession | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or ClientConfig(
            client_id=client_id or "",
            client_secret=client_secret or "",
            api_url=api_url,
        )
        self._logger = logger or get_logger()
        self._owns_session = session is None
        self._session: HttpSession = session or make_session(self._config.user_agent)
        self._transport = Transport(
            session=self._session, config=self._config, logger=self._logger
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def search(
        self,
        queries: Sequence[str],
        include_answers: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run a batch of queries; the response holds one result per query, in order."""
        body = build_search_payload(queries, include_answers, options)
        self._logger.info("Searching %d queries", len(body["queries"]))
        return self._transport.post_json(SEARCH_PATH, body, operation="Search")

    def extract(
        self,
        pages: Sequence[Mapping[str, Any]],
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Extract content from pages; every page needs a ``url`` and non-empty ``details``."""
        body = build_extract_payload(pages, options)
        self._logger.info("Extracting from %d pages", len(body["pages"]))
        return self._transport.post_json(EXTRACT_PATH, body, operation="Extract")

    def crawl(
        self,
        instructions: str,
        on_event: EventHandler | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> CrawlResult:
        """Run a crawl, passing each streamed event to ``on_event`` as it arrives.

        Raises CrawlError if the server reports an error mid-stream; events
        delivered before it are not retracted. The response is closed on
        every exit path.
        """
        validate_handler(on_event)
        body = build_crawl_payload(instructions, options)
        self._logger.info("Starting %s crawl", body["options"].get("type"))
        with self._transport.open_stream(CRAWL_PATH, body, operation="Crawl") as response:
            chunks = iter_stream_chunks(response, operation="Crawl")
            result = read_crawl_stream(chunks, on_event, logger=self._logger)
        self._logger.info(
            "Crawl finished: success=%s time_took=%s", result.success, result.time_took
        )
        return result

    def close(self) -> None:
        """Release the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> SearchClient:
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()
