import pytest

from oblien_search.errors import ConfigError, InvalidArgument
from oblien_search.validation import (
    normalize_api_url,
    validate_client_settings,
    validate_handler,
    validate_instructions,
    validate_pages,
    validate_queries,
)


def _settings(**overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "client_id": "id",
        "client_secret": "secret",
        "api_url": "https://api.oblien.com",
        "request_timeout": 30.0,
        "connect_timeout": 10.0,
    }
    values.update(overrides)
    return values


def test_normalize_api_url_drops_trailing_slash() -> None:
    assert normalize_api_url("https://api.oblien.com/") == "https://api.oblien.com"
    assert normalize_api_url("https://api.oblien.com") == "https://api.oblien.com"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"client_id": ""}, "client_id is required"),
        ({"client_secret": ""}, "client_secret is required"),
        ({"api_url": "ftp://example.com"}, "api_url"),
        ({"request_timeout": 0}, "request_timeout"),
        ({"connect_timeout": -1}, "connect_timeout"),
    ],
)
def test_validate_client_settings_rejects_invalid_values(
    overrides: dict[str, object], message: str
) -> None:
    with pytest.raises(ConfigError, match=message):
        validate_client_settings(**_settings(**overrides))  # type: ignore[arg-type]


def test_validate_queries_accepts_tuple_and_keeps_order() -> None:
    assert validate_queries(("b", "a")) == ["b", "a"]


@pytest.mark.parametrize("queries", [None, [], (), "single query"])
def test_validate_queries_rejects_empty_or_non_list(queries: object) -> None:
    with pytest.raises(InvalidArgument):
        validate_queries(queries)  # type: ignore[arg-type]


def test_validate_pages_names_first_offending_index() -> None:
    pages = [
        {"url": "https://example.com", "details": ["Extract title"]},
        {"url": "", "details": ["Extract title"]},
        {"details": []},
    ]
    with pytest.raises(InvalidArgument, match="index 1 is missing required field: url"):
        validate_pages(pages)


@pytest.mark.parametrize("details", [None, [], "Extract title"])
def test_validate_pages_requires_non_empty_details_list(details: object) -> None:
    with pytest.raises(InvalidArgument, match="index 0 is missing required field: details"):
        validate_pages([{"url": "https://example.com", "details": details}])


def test_validate_pages_passes_extra_fields_through() -> None:
    page = {"url": "https://example.com", "details": ["x"], "summaryLevel": "high", "tag": 1}
    assert validate_pages([page]) == [page]


def test_validate_pages_rejects_non_mapping_entry() -> None:
    with pytest.raises(InvalidArgument, match="index 0"):
        validate_pages(["https://example.com"])  # type: ignore[list-item]


@pytest.mark.parametrize("pages", [None, []])
def test_validate_pages_rejects_empty_batch(pages: object) -> None:
    with pytest.raises(InvalidArgument, match="pages must be a non-empty list"):
        validate_pages(pages)  # type: ignore[arg-type]


@pytest.mark.parametrize("instructions", [None, "", 42])
def test_validate_instructions_requires_string(instructions: object) -> None:
    with pytest.raises(InvalidArgument):
        validate_instructions(instructions)  # type: ignore[arg-type]


def test_validate_handler() -> None:
    validate_handler(None)
    validate_handler(print)
    with pytest.raises(InvalidArgument):
        validate_handler("not callable")
