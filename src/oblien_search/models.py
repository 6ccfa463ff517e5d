"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, TypedDict

PAGE_CRAWLED = "page_crawled"
CONTENT = "content"
THINKING = "thinking"
ERROR = "error"
CRAWL_END = "crawl_end"

SummaryLevel = Literal["low", "medium", "intelligent"]
OutputFormat = Literal["markdown", "html", "text"]


class StreamResponse(Protocol):
    """The slice of ``requests.Response`` the client relies on."""

    status_code: int
    reason: str
    raw: Any

    def json(self) -> Any:
        """Decode the body as JSON."""

    def close(self) -> None:
        """Release the underlying connection."""


class HttpSession(Protocol):
    """Contract for the HTTP session used by the transport."""

    def post(self, url: str, **kwargs: Any) -> StreamResponse:
        """Issue a POST request."""

    def close(self) -> None:
        """Release pooled connections."""


@dataclass(frozen=True)
class CrawlEvent:
    """One decoded ``data:`` payload from the crawl stream.

    ``type`` is the discriminant; ``data`` keeps the full payload, ``type``
    included, so unknown event kinds reach the caller untouched.
    """

    type: str
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CrawlEvent:
        return cls(type=payload["type"], data=dict(payload))

    @property
    def is_terminal(self) -> bool:
        return self.type in (CRAWL_END, ERROR)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[CrawlEvent], Any]


@dataclass(frozen=True)
class CrawlResult:
    """Terminal outcome of a crawl; fields keep the values the server sent."""

    success: bool = True
    time_took: float = 0
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CrawlResult:
        extra = {k: v for k, v in payload.items() if k not in ("success", "time_took")}
        return cls(
            success=payload.get("success", True),
            time_took=payload.get("time_took", 0),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "time_took": self.time_took, **self.extra}


class SearchOptions(TypedDict, total=False):
    includeMetadata: bool
    summaryLevel: SummaryLevel
    maxResults: int
    language: str
    region: str
    freshness: Literal["day", "week", "month", "year", "all"]
    startDate: str
    endDate: str
    includeImages: bool
    includeImageDescriptions: bool
    includeFavicon: bool
    includeRawContent: Literal["none", "with_links", "with_images_and_links"]
    chunksPerSource: int
    country: str
    includeDomains: list[str]
    excludeDomains: list[str]
    searchTopic: Literal["general", "news", "finance"]
    searchDepth: Literal["basic", "advanced"]
    timeRange: Literal["none", "day", "week", "month", "year"]


class SearchResult(TypedDict, total=False):
    success: bool
    query: str
    results: list[dict[str, Any]]
    answer: str
    metadata: Any
    time_took: float


class ExtractPage(TypedDict, total=False):
    url: str
    details: list[str]
    summaryLevel: SummaryLevel


class ExtractOptions(TypedDict, total=False):
    includeMetadata: bool
    timeout: int
    maxContentLength: int
    format: OutputFormat
    extractDepth: Literal["basic", "advanced"]
    includeImages: bool
    includeFavicon: bool
    maxLength: int


class ExtractResult(TypedDict):
    result: Any
    page: ExtractPage


class ExtractResponse(TypedDict):
    success: bool
    data: list[ExtractResult]
    errors: list[str]
    time_took: float


class CrawlOptions(TypedDict, total=False):
    type: Literal["deep", "shallow", "focused"]
    thinking: bool
    allow_thinking_callback: bool
    stream_text: bool
    maxDepth: int
    maxPages: int
    includeExternal: bool
    timeout: int
    crawlDepth: Literal["basic", "advanced"]
    format: OutputFormat
    includeImages: bool
    includeFavicon: bool
    followLinks: bool
