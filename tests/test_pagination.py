"""Tests for page arithmetic."""

import pytest

from newsroom.core.pagination import Pagination


class TestPagination:
    def test_defaults(self):
        pagination = Pagination.from_params(None, None)
        assert pagination.page == 1
        assert pagination.limit == 10
        assert pagination.offset == 0

    def test_zero_treated_as_missing(self):
        pagination = Pagination.from_params(0, 0, default_limit=5)
        assert (pagination.page, pagination.limit) == (1, 5)

    def test_offset(self):
        assert Pagination.from_params(3, 20).offset == 40

    @pytest.mark.parametrize(
        "total,limit,expected",
        [
            (0, 10, 0),
            (1, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (30, 10, 3),
            (7, 3, 3),
        ],
    )
    def test_count_pages(self, total, limit, expected):
        assert Pagination(page=1, limit=limit).count_pages(total) == expected
