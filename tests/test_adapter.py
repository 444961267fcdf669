import logging

from paginator import (
    PaginatedResult,
    PaginationInfo,
    PaginationNormalizer,
    QueryAdapter,
    extract_meta,
    extract_result,
    to_query_variables,
)
from paginator.config import Settings

POSTS_ENVELOPE = {
    "posts": {
        "entities": [1, 2],
        "pagination": {"total_count": 2, "limit": 10, "offset": 0},
    }
}


def test_to_query_variables_first_page():
    assert to_query_variables({"page": 1, "pageSize": 20}) == {"limit": 20, "offset": 0}


def test_to_query_variables_normalizes_first():
    assert to_query_variables({"page": 0, "page_size": 1000}) == {"limit": 100, "offset": 0}
    assert to_query_variables({}) == {"limit": 20, "offset": 0}
    assert to_query_variables() == {"limit": 20, "offset": 0}


def test_to_query_variables_passes_filters_through():
    variables = to_query_variables(
        {
            "page": 3,
            "page_size": 10,
            "searchKey": "cats",
            "friendsOnly": False,
            "sortOrder": None,
        }
    )
    assert variables == {
        "searchKey": "cats",
        "friendsOnly": False,
        "sortOrder": None,
        "limit": 10,
        "offset": 20,
    }


def test_to_query_variables_drops_total_count():
    variables = to_query_variables({"page": 2, "pageSize": 5, "totalCount": 99})
    assert variables == {"limit": 5, "offset": 5}


def test_computed_addressing_wins_over_caller_values():
    variables = to_query_variables({"page": 2, "page_size": 10, "limit": 1, "offset": 999})
    assert variables == {"limit": 10, "offset": 10}


def test_passthrough_values_are_copied():
    params = {"page": 1, "filters": {"tags": ["a"]}}
    variables = to_query_variables(params)
    params["filters"]["tags"].append("b")
    params["filters"]["status"] = "draft"
    assert variables["filters"] == {"tags": ["a"]}


def test_to_query_variables_uses_injected_bounds():
    adapter = QueryAdapter(PaginationNormalizer(default_page_size=50, max_page_size=200))
    assert adapter.to_query_variables({"page": 2}) == {"limit": 50, "offset": 50}
    assert adapter.to_query_variables({"page": 1, "page_size": 150})["limit"] == 150


def test_adapter_from_settings():
    adapter = QueryAdapter.from_settings(Settings(default_page_size=30))
    assert adapter.to_query_variables({}) == {"limit": 30, "offset": 0}


def test_extract_result():
    result = extract_result(POSTS_ENVELOPE, "posts")
    assert result == PaginatedResult(
        data=[1, 2], pagination=PaginationInfo(total=2, limit=10, offset=0)
    )
    assert result.model_dump() == {
        "data": [1, 2],
        "pagination": {"total": 2, "limit": 10, "offset": 0},
    }


def test_extract_result_missing_key():
    result = extract_result({}, "posts")
    assert result.data == []
    assert result.pagination is None
    assert extract_result({"posts": None}, "posts") == result


def test_extract_result_missing_envelope():
    assert extract_result(None, "posts") == PaginatedResult(data=[], pagination=None)
    assert extract_result("not a mapping", "posts").data == []


def test_extract_result_malformed_entry(caplog):
    envelope = {"posts": {"entities": "nope", "pagination": {"total_count": "many"}}}
    with caplog.at_level(logging.WARNING, logger="paginator"):
        result = extract_result(envelope, "posts")
    assert result == PaginatedResult(data=[], pagination=None)
    assert "Malformed paginated entry" in caplog.text


def test_extract_result_without_pagination_block():
    result = extract_result({"posts": {"entities": ["a"]}}, "posts")
    assert result.data == ["a"]
    assert result.pagination is None


def test_extract_result_does_not_alias_envelope():
    envelope = {
        "posts": {
            "entities": [{"id": 1}],
            "pagination": {"total_count": 1, "limit": 10, "offset": 0},
        }
    }
    result = extract_result(envelope, "posts")
    envelope["posts"]["entities"].append({"id": 2})
    envelope["posts"]["entities"][0]["id"] = 999
    assert result.data == [{"id": 1}]


def test_extract_meta():
    envelope = {
        "activities": {
            "entities": list(range(10)),
            "pagination": {"total_count": 55, "limit": 10, "offset": 10},
        }
    }
    meta = extract_meta(envelope, "activities")
    assert meta.current_page == 2
    assert meta.page_size == 10
    assert meta.total_pages == 6
    assert meta.has_next_page is True
    assert meta.has_prev_page is True


def test_extract_meta_without_pagination():
    assert extract_meta({}, "posts") is None


def test_extract_meta_zero_limit_uses_default_page_size():
    envelope = {"posts": {"entities": [], "pagination": {"total_count": 45, "limit": 0, "offset": 0}}}
    meta = extract_meta(envelope, "posts")
    assert meta.current_page == 1
    assert meta.page_size == 20
    assert meta.total_pages == 3
