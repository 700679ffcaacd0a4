"""Tests for list query parameters."""
from nairim.services.query import ListParams, Page


class TestFromQuery:
    """Query string pairs become paging, sort and filter options."""

    def test_paging_and_search(self) -> None:
        params = ListParams.from_query([("limit", "5"), ("page", "3"), ("search", " joão ")])
        assert params.take == 5
        assert params.skip == 10
        assert params.search_term == "joão"

    def test_invalid_numbers_fall_back(self) -> None:
        params = ListParams.from_query([("limit", "abc"), ("page", "-2")])
        assert params.take == 10
        assert params.current_page == 1

    def test_limit_is_capped(self) -> None:
        assert ListParams.from_query([("limit", "5000")]).take == 100

    def test_both_sort_notations(self) -> None:
        params = ListParams.from_query([("sort_owner_name", "DESC"), ("sort[title]", "asc")])
        assert params.sort_options == {"owner_name": "desc", "title": "asc"}
        assert params.sort_field == "owner_name"

    def test_range_bounds_and_filters(self) -> None:
        params = ListParams.from_query([
            ("created_at[from]", "2024-01-01"),
            ("created_at[to]", "2024-01-31"),
            ("city", "Santos"),
            ("state", ""),
            ("includeInactive", "true"),
        ])
        assert params.filters == {"created_at": {"from": "2024-01-01", "to": "2024-01-31"}, "city": "Santos"}
        assert params.include_inactive is True


class TestPage:
    def test_total_pages(self) -> None:
        params = ListParams(limit=10)
        assert Page.build([], 21, params).total_pages == 3
        assert Page.build([], 0, params).total_pages == 0
