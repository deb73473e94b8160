"""
Unit tests for value objects.
"""

import pytest

from core.domain.exceptions import ValidationError
from core.domain.value_objects import DEFAULT_PAGE_SIZE, CodeStatus, PageRequest


class TestCodeStatus:
    """Tests for CodeStatus value object."""

    def test_parse_valid(self):
        """Test parsing known statuses."""
        assert CodeStatus.parse("enabled") == CodeStatus.ENABLED
        assert CodeStatus.parse("disabled") == CodeStatus.DISABLED

    @pytest.mark.parametrize("value", ["ENABLED", "paused", ""])
    def test_parse_invalid(self, value):
        """Test unknown statuses raise ValidationError."""
        with pytest.raises(ValidationError):
            CodeStatus.parse(value)

    def test_str(self):
        """Test string conversion."""
        assert str(CodeStatus.DISABLED) == "disabled"


class TestPageRequest:
    """Tests for PageRequest value object."""

    def test_normalize_defaults(self):
        """Test in-range values pass through."""
        page = PageRequest.normalize(2, 10, 100)

        assert page.page == 2
        assert page.page_size == 10
        assert page.offset == 10
        assert page.limit == 10

    @pytest.mark.parametrize("requested", [0, -3])
    def test_page_below_one(self, requested):
        """Test pages below 1 become 1."""
        assert PageRequest.normalize(requested, 10, 100).page == 1

    @pytest.mark.parametrize("requested", [0, -1])
    def test_page_size_below_one(self, requested):
        """Test page sizes below 1 fall back to the default."""
        assert PageRequest.normalize(1, requested, 100).page_size == DEFAULT_PAGE_SIZE

    def test_page_size_capped(self):
        """Test page sizes above the maximum are clamped."""
        assert PageRequest.normalize(1, 1000, 100).page_size == 100

    @pytest.mark.parametrize("total,expected", [(0, 0), (1, 1), (10, 1), (11, 2), (25, 3)])
    def test_total_pages(self, total, expected):
        """Test total pages rounds up."""
        assert PageRequest.normalize(1, 10, 100).total_pages(total) == expected

    def test_equality(self):
        """Test value equality."""
        assert PageRequest(page=1, page_size=10) == PageRequest(page=1, page_size=10)
