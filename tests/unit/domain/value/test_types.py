"""Unit tests for pagination value objects."""

import pytest

from commentary.domain.value import MAX_PAGE_LIMIT, PageRequest, Pagination
from commentary.domain.value.types import Handle


class TestPageRequestClamp:
    """Tests for PageRequest.clamp."""

    def test_defaults_apply_when_nothing_requested(self):
        page = PageRequest.clamp(None, None, default_limit=10)

        assert page.limit == 10
        assert page.offset == 0

    @pytest.mark.parametrize(
        ("limit", "expected"),
        [(0, 1), (-5, 1), (50, 50), (1000, MAX_PAGE_LIMIT)],
    )
    def test_limit_is_clamped(self, limit, expected):
        page = PageRequest.clamp(limit, 0, default_limit=10)

        assert page.limit == expected

    def test_negative_offset_becomes_zero(self):
        page = PageRequest.clamp(10, -3, default_limit=10)

        assert page.offset == 0

    def test_custom_max_limit(self):
        page = PageRequest.clamp(80, 0, default_limit=10, max_limit=25)

        assert page.limit == 25


class TestPagination:
    """Tests for Pagination.for_page."""

    def test_has_more_when_items_remain(self):
        page = PageRequest(limit=10, offset=0)

        pagination = Pagination.for_page(page, returned=10, total=25)

        assert pagination.has_more is True
        assert pagination.total == 25

    def test_last_page_has_no_more(self):
        page = PageRequest(limit=10, offset=20)

        pagination = Pagination.for_page(page, returned=5, total=25)

        assert pagination.has_more is False

    def test_offset_past_total_has_no_more(self):
        page = PageRequest(limit=10, offset=40)

        pagination = Pagination.for_page(page, returned=0, total=25)

        assert pagination.has_more is False
        assert pagination.offset == 40


class TestHandle:
    """Tests for Handle validation."""

    def test_valid_handle(self):
        assert str(Handle("jane_doe")) == "jane_doe"

    @pytest.mark.parametrize("value", ["ab", "has space", "x" * 51])
    def test_invalid_handle(self, value):
        with pytest.raises(ValueError):
            Handle(value)
