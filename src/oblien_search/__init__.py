"""Python client for the Oblien search, extract and crawl API."""

from .client import SearchClient
from .config import ClientConfig, __version__
from .errors import ConfigError, CrawlError, InvalidArgument, RequestFailed, SearchClientError
from .models import CrawlEvent, CrawlResult
from .stream import iter_events, read_crawl_stream

__all__ = [
    "ClientConfig",
    "ConfigError",
    "CrawlError",
    "CrawlEvent",
    "CrawlResult",
    "InvalidArgument",
    "RequestFailed",
    "SearchClient",
    "SearchClientError",
    "__version__",
    "iter_events",
    "read_crawl_stream",
]
