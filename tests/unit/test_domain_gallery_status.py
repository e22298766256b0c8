"""Unit tests for the GalleryStatus value object."""

import pytest

from clientgallery.domain.value_objects.gallery_status import (
    GalleryStatus,
    InvalidStatusError,
)


@pytest.mark.unit
class TestGalleryStatus:
    """Test parsing, predicates and display properties."""

    def test_values(self):
        assert GalleryStatus.values() == ["draft", "published", "archived"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("draft", GalleryStatus.DRAFT),
            (" Published ", GalleryStatus.PUBLISHED),
            ("ARCHIVED", GalleryStatus.ARCHIVED),
        ],
    )
    def test_from_string_ignores_case_and_whitespace(self, raw, expected):
        assert GalleryStatus.from_string(raw) is expected

    @pytest.mark.parametrize(
        "raw", ["draft", "Draft", " PUBLISHED", "published\n", "\tArchived "]
    )
    def test_value_parses_back_to_same_status(self, raw):
        status = GalleryStatus.from_string(raw)

        assert GalleryStatus.from_string(status.value) is status

    def test_from_string_rejects_unknown_status(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            GalleryStatus.from_string("Deleted")

        assert str(exc_info.value) == (
            'Invalid gallery status "deleted". '
            "Valid statuses are: draft, published, archived"
        )

    def test_invalid_status_error_is_value_error(self):
        with pytest.raises(ValueError):
            GalleryStatus.from_string("")

    def test_is_valid(self):
        assert GalleryStatus.is_valid("Draft")
        assert not GalleryStatus.is_valid("hidden")

    def test_predicates(self):
        assert GalleryStatus.DRAFT.is_draft
        assert GalleryStatus.PUBLISHED.is_published
        assert GalleryStatus.ARCHIVED.is_archived
        assert not GalleryStatus.DRAFT.is_published

    def test_labels_and_colors(self):
        assert GalleryStatus.DRAFT.label == "Draft"
        assert GalleryStatus.PUBLISHED.label == "Published"
        assert GalleryStatus.DRAFT.color == "orange"
        assert GalleryStatus.PUBLISHED.color == "green"
        assert GalleryStatus.ARCHIVED.color == "gray"

    def test_only_archived_forbids_editing(self):
        assert GalleryStatus.DRAFT.allows_editing()
        assert GalleryStatus.PUBLISHED.allows_editing()
        assert not GalleryStatus.ARCHIVED.allows_editing()

    def test_is_a_string(self):
        assert GalleryStatus.PUBLISHED == "published"
