"""Server-sent event reader for the crawl endpoint.

The body arrives in arbitrary chunks. ``LineBuffer`` carries any unterminated
tail over to the next chunk, so a ``data:`` line split across network reads is
reassembled before it is parsed. Each complete line starting with ``data: ``
is decoded as JSON; other lines (comments, keep-alives, blanks) are ignored.
"""

from __future__ import annotations

import codecs
import json
import logging
from collections.abc import Iterable, Iterator
from contextlib import closing

from .errors import CrawlError
from .logging_utils import get_logger
from .models import (
    CONTENT,
    CRAWL_END,
    ERROR,
    PAGE_CRAWLED,
    THINKING,
    CrawlEvent,
    CrawlResult,
    EventHandler,
)
from .results import reduce_crawl_result

DATA_PREFIX = "data: "
DEFAULT_CRAWL_ERROR = "Crawl error"
KNOWN_EVENT_TYPES = frozenset({PAGE_CRAWLED, CONTENT, THINKING, ERROR, CRAWL_END})


class LineBuffer:
    """Accumulates stream text and hands out complete lines."""

    def __init__(self) -> None:
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def feed(self, chunk: str | bytes) -> list[str]:
        """Append a chunk and return the lines it completed, without terminators."""
        if isinstance(chunk, (bytes, bytearray)):
            chunk = self._decoder.decode(bytes(chunk))
        self._pending += chunk
        *lines, self._pending = self._pending.split("\n")
        return [line.rstrip("\r") for line in lines]

    def flush(self) -> list[str]:
        """Return the unterminated tail left at end of stream, if any."""
        tail = (self._pending + self._decoder.decode(b"", final=True)).rstrip("\r")
        self._pending = ""
        return [tail] if tail else []


def parse_event_line(line: str, logger: logging.Logger | None = None) -> CrawlEvent | None:
    """Decode one line; None for non-data lines and malformed payloads."""
    if not line.startswith(DATA_PREFIX):
        return None
    log = logger or get_logger()
    raw = line[len(DATA_PREFIX):]
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        log.debug("Skipping malformed stream line (%s): %.200s", exc, raw)
        return None
    if not isinstance(payload, dict) or not isinstance(payload.get("type"), str):
        log.debug("Skipping stream payload without a type: %.200s", raw)
        return None
    return CrawlEvent.from_payload(payload)


def iter_events(
    chunks: Iterable[str | bytes], logger: logging.Logger | None = None
) -> Iterator[CrawlEvent]:
    """Yield every well-formed event in arrival order, terminal ones included."""
    buffer = LineBuffer()
    for chunk in chunks:
        if not chunk:
            continue
        for line in buffer.feed(chunk):
            event = parse_event_line(line, logger)
            if event is not None:
                yield event
    for line in buffer.flush():
        event = parse_event_line(line, logger)
        if event is not None:
            yield event


def read_crawl_stream(
    chunks: Iterable[str | bytes],
    on_event: EventHandler | None = None,
    *,
    logger: logging.Logger | None = None,
) -> CrawlResult:
    """Dispatch crawl events to ``on_event`` and reduce the stream to its result.

    An ``error`` event stops reading and raises CrawlError. ``crawl_end`` is
    kept as the result and never forwarded; if several arrive the last one
    wins. Everything else, unknown types included, goes to ``on_event``
    synchronously and in order.
    """
    log = logger or get_logger()
    final_payload = None
    seen_end = False
    with closing(iter_events(chunks, log)) as events:
        for event in events:
            if event.type == ERROR:
                message = event.get("error") or DEFAULT_CRAWL_ERROR
                log.warning("Crawl aborted by server: %s", message)
                raise CrawlError(str(message), event=event.data)
            if event.type == CRAWL_END:
                if seen_end:
                    log.warning("Received more than one crawl_end event; keeping the latest")
                seen_end = True
                final_payload = event.get("data")
                log.debug("Captured crawl_end: %s", final_payload)
                continue
            if event.type not in KNOWN_EVENT_TYPES:
                log.debug("Forwarding unrecognized crawl event type: %s", event.type)
            if on_event is not None:
                on_event(event)
    return reduce_crawl_result(final_payload)
