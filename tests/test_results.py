from oblien_search.models import CrawlResult
from oblien_search.results import DEFAULT_CRAWL_RESULT, reduce_crawl_result


def test_missing_crawl_end_reduces_to_default() -> None:
    assert reduce_crawl_result(None) == DEFAULT_CRAWL_RESULT
    assert reduce_crawl_result(None).to_dict() == {"success": True, "time_took": 0}


def test_crawl_end_payload_is_returned() -> None:
    result = reduce_crawl_result({"success": False, "time_took": 1200, "pages": 4})
    assert result == CrawlResult(success=False, time_took=1200, extra={"pages": 4})
    assert result.to_dict() == {"success": False, "time_took": 1200, "pages": 4}


def test_non_mapping_payload_is_ignored() -> None:
    assert reduce_crawl_result("done") == DEFAULT_CRAWL_RESULT


def test_success_keeps_the_server_value() -> None:
    result = reduce_crawl_result({"success": "false", "time_took": 3})
    assert result.success == "false"
    assert result.to_dict() == {"success": "false", "time_took": 3}
