import pytest

from oblien_search.errors import InvalidArgument
from oblien_search.payloads import (
    DEFAULT_CRAWL_OPTIONS,
    build_crawl_payload,
    build_extract_payload,
    build_search_payload,
    merge_crawl_options,
)


def test_search_payload_keeps_query_order() -> None:
    body = build_search_payload(["first", "second", "third"], True, {"maxResults": 5})
    assert body == {
        "queries": ["first", "second", "third"],
        "includeAnswers": True,
        "options": {"maxResults": 5},
    }


def test_search_payload_defaults() -> None:
    body = build_search_payload(["q"])
    assert body["includeAnswers"] is False
    assert body["options"] == {}


def test_extract_payload_forwards_pages_unmodified() -> None:
    page = {"url": "https://example.com", "details": ["Extract title"], "summaryLevel": "low"}
    body = build_extract_payload([page], {"format": "markdown"})
    assert body["pages"][0] is page
    assert body["options"] == {"format": "markdown"}


def test_crawl_options_merge_field_by_field() -> None:
    merged = merge_crawl_options({"thinking": False, "maxPages": 3})
    assert merged == {
        "type": "deep",
        "thinking": False,
        "allow_thinking_callback": True,
        "stream_text": True,
        "maxPages": 3,
    }


def test_crawl_defaults_are_not_mutated() -> None:
    merge_crawl_options({"type": "shallow"})
    assert DEFAULT_CRAWL_OPTIONS["type"] == "deep"


def test_crawl_payload_requires_instructions() -> None:
    with pytest.raises(InvalidArgument):
        build_crawl_payload("")
    body = build_crawl_payload("Crawl https://example.com")
    assert body["instructions"] == "Crawl https://example.com"
    assert body["options"] == dict(DEFAULT_CRAWL_OPTIONS)
