"""Unit tests for construction-time validation helpers."""

import pytest

from clientgallery.core.validation import (
    MAX_PAGE_SIZE,
    require_page,
    require_positive_id,
    require_text,
)


@pytest.mark.unit
class TestValidationHelpers:
    def test_positive_id(self):
        require_positive_id(1, "gallery_id")

    @pytest.mark.parametrize("value", [0, -1, "1", 1.0, True, None])
    def test_positive_id_rejects(self, value):
        with pytest.raises(ValueError, match="gallery_id must be a positive integer"):
            require_positive_id(value, "gallery_id")

    def test_text_is_trimmed(self):
        assert require_text("  Anna  ", "name") == "Anna"

    def test_text_rejects_blank(self):
        with pytest.raises(ValueError, match="name cannot be empty"):
            require_text(" \t ", "name")

    def test_text_max_length(self):
        assert require_text("x" * 10, "name", max_length=10) == "x" * 10
        with pytest.raises(ValueError, match="cannot exceed 10 characters"):
            require_text("x" * 11, "name", max_length=10)

    def test_page_bounds(self):
        require_page(1, 0)
        require_page(MAX_PAGE_SIZE, 1000)
        with pytest.raises(ValueError, match="limit must be between"):
            require_page(MAX_PAGE_SIZE + 1, 0)
        with pytest.raises(ValueError, match="offset cannot be negative"):
            require_page(10, -1)
