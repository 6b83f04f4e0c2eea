"""Unit tests for pagination primitives."""

from __future__ import annotations

import math

import pytest

from scoped_search.application.pagination import PageableResult, Pagination, Sort, SortDirection
from scoped_search.kernel.errors import ValidationError


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPagination:
    def test_defaults(self) -> None:
        p = Pagination()
        assert p.page == 1
        assert p.size == 10
        assert p.sort == ()

    def test_offset(self) -> None:
        assert Pagination(page=3, size=10).offset == 20

    def test_sort_list_is_frozen_in_order(self) -> None:
        p = Pagination(sort=[Sort.desc("createdAt"), Sort.asc("id")])  # type: ignore[arg-type]
        assert p.sort == (Sort("createdAt", SortDirection.DESC), Sort("id", SortDirection.ASC))

    def test_direction_string_is_coerced(self) -> None:
        assert Sort("name", "DESC").direction is SortDirection.DESC

    def test_with_page(self) -> None:
        p = Pagination(page=1, size=5, sort=(Sort.asc("name"),))
        assert p.with_page(4) == Pagination(page=4, size=5, sort=(Sort.asc("name"),))


# ---------------------------------------------------------------------------
# PageableResult
# ---------------------------------------------------------------------------


class TestPageableResult:
    def test_of_slices_items(self) -> None:
        page = PageableResult.of(list(range(100)), Pagination(page=2, size=10))
        assert page.content == tuple(range(10, 20))
        assert page.total_elements == 100
        assert page.total_pages == 10

    @pytest.mark.parametrize("total,size", [(0, 10), (1, 10), (10, 10), (11, 10), (25, 7), (99, 1)])
    def test_total_pages_is_ceiling(self, total: int, size: int) -> None:
        page = PageableResult.of(list(range(total)), Pagination(page=1, size=size))
        assert page.total_pages == math.ceil(total / size)
        assert len(page.content) <= size

    def test_last_partial_page(self) -> None:
        page = PageableResult.of(list(range(25)), Pagination(page=3, size=10))
        assert page.content == (20, 21, 22, 23, 24)
        assert not page.has_next(3)
        assert page.has_next(2)

    def test_empty(self) -> None:
        page = PageableResult.empty()
        assert page.content == ()
        assert page.total_elements == 0
        assert page.total_pages == 0

    def test_from_dict_with_factory(self) -> None:
        page = PageableResult.from_dict(
            {"content": [{"id": 1}, {"id": 2}], "totalElements": 12, "totalPages": 6},
            item_factory=lambda item: item["id"],
        )
        assert page.content == (1, 2)
        assert page.total_elements == 12
        assert page.total_pages == 6

    def test_from_dict_rejects_malformed(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PageableResult.from_dict({"content": None, "totalElements": -1, "totalPages": True})
        assert {e["loc"] for e in exc_info.value.errors} == {"content", "totalElements", "totalPages"}

    def test_from_dict_checks_arithmetic_against_page_size(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PageableResult.from_dict({"content": [1, 2, 3], "totalElements": 25, "totalPages": 2}, size=2)
        assert [e["loc"] for e in exc_info.value.errors] == ["content", "totalPages"]

    def test_from_dict_consistent_envelope_with_size(self) -> None:
        page = PageableResult.from_dict({"content": [1, 2], "totalElements": 25, "totalPages": 13}, size=2)
        assert page.total_pages == 13
        assert PageableResult.from_dict({"content": [], "totalElements": 0, "totalPages": 0}, size=10) == PageableResult.empty()

    def test_to_dict_round_trip(self) -> None:
        payload = {"content": [{"id": 1}], "totalElements": 1, "totalPages": 1}
        assert PageableResult.from_dict(payload).to_dict() == payload

    def test_map_keeps_totals(self) -> None:
        page = PageableResult(content=(1, 2), total_elements=20, total_pages=10).map(str)
        assert page.content == ("1", "2")
        assert page.total_elements == 20
        assert page.total_pages == 10
