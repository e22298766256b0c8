"""Unit tests for the Gallery entity.

Tests cover:
- Construction validation
- Status transitions and their refusals
- Edits refused while archived
- Image count bookkeeping
"""

import pytest

from clientgallery.core.result import Failure, Success
from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.errors import GalleryError
from clientgallery.domain.value_objects.gallery_slug import GallerySlug
from clientgallery.domain.value_objects.gallery_status import GalleryStatus


def create_gallery(status: GalleryStatus = GalleryStatus.DRAFT, **overrides) -> Gallery:
    fields = {
        "name": "Summer Wedding",
        "slug": GallerySlug("summer-wedding"),
        "client_id": 1,
        "status": status,
    }
    fields.update(overrides)
    return Gallery(**fields)


@pytest.mark.unit
class TestGalleryCreation:
    def test_create_starts_as_empty_draft(self):
        gallery = Gallery.create(
            name="  Summer Wedding  ",
            slug=GallerySlug("summer-wedding"),
            client_id=7,
            settings={"theme": "dark"},
            sort_order=3,
        )

        assert gallery.id is None
        assert gallery.name == "Summer Wedding"
        assert gallery.status is GalleryStatus.DRAFT
        assert gallery.is_empty()
        assert gallery.settings == {"theme": "dark"}
        assert gallery.sort_order == 3

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match=GalleryError.NAME_REQUIRED):
            create_gallery(name="   ")

    def test_long_name_rejected(self):
        with pytest.raises(ValueError, match=GalleryError.NAME_TOO_LONG):
            create_gallery(name="x" * 256)

    def test_client_required(self):
        with pytest.raises(ValueError, match=GalleryError.CLIENT_REQUIRED):
            create_gallery(client_id=0)

    def test_negative_image_count_rejected(self):
        with pytest.raises(ValueError, match=GalleryError.NEGATIVE_IMAGE_COUNT):
            create_gallery(image_count=-1)


@pytest.mark.unit
class TestGalleryTransitions:
    def test_publish_draft(self):
        gallery = create_gallery()
        before = gallery.updated_at

        assert isinstance(gallery.publish(), Success)
        assert gallery.status is GalleryStatus.PUBLISHED
        assert gallery.updated_at >= before

    def test_publish_twice_refused(self):
        gallery = create_gallery(GalleryStatus.PUBLISHED)

        result = gallery.publish()

        assert result == Failure(error=GalleryError.ALREADY_PUBLISHED)

    def test_publish_archived_refused(self):
        gallery = create_gallery(GalleryStatus.ARCHIVED)

        assert gallery.publish() == Failure(error=GalleryError.CANNOT_PUBLISH_ARCHIVED)
        assert gallery.status is GalleryStatus.ARCHIVED

    def test_unpublish_draft_refused(self):
        assert create_gallery().unpublish() == Failure(error=GalleryError.ALREADY_DRAFT)

    @pytest.mark.parametrize("status", [GalleryStatus.PUBLISHED, GalleryStatus.ARCHIVED])
    def test_unpublish_returns_to_draft(self, status):
        gallery = create_gallery(status)

        assert isinstance(gallery.unpublish(), Success)
        assert gallery.status is GalleryStatus.DRAFT

    @pytest.mark.parametrize("status", [GalleryStatus.DRAFT, GalleryStatus.PUBLISHED])
    def test_archive(self, status):
        gallery = create_gallery(status)

        assert isinstance(gallery.archive(), Success)
        assert gallery.status is GalleryStatus.ARCHIVED

    def test_archive_twice_refused(self):
        gallery = create_gallery(GalleryStatus.ARCHIVED)

        assert gallery.archive() == Failure(error=GalleryError.ALREADY_ARCHIVED)

    def test_change_status_dispatches(self):
        gallery = create_gallery()

        assert isinstance(gallery.change_status(GalleryStatus.PUBLISHED), Success)
        assert isinstance(gallery.change_status(GalleryStatus.ARCHIVED), Success)
        assert isinstance(gallery.change_status(GalleryStatus.DRAFT), Success)
        assert gallery.status is GalleryStatus.DRAFT

    def test_publish_requirements(self):
        assert create_gallery().publish_requirements() == []
        assert create_gallery().can_be_published()

        archived = create_gallery(GalleryStatus.ARCHIVED)
        assert archived.publish_requirements() == [
            "Gallery must be restored from the archive"
        ]
        assert not archived.can_be_published()


@pytest.mark.unit
class TestGalleryEditing:
    def test_rename(self):
        gallery = create_gallery()

        assert isinstance(gallery.rename("  Engagement "), Success)
        assert gallery.name == "Engagement"

    def test_update_settings_merges(self):
        gallery = create_gallery(settings={"theme": "dark", "watermark": True})

        gallery.update_settings({"theme": "light", "columns": 3})

        assert gallery.settings == {"theme": "light", "watermark": True, "columns": 3}

    def test_change_slug_and_description(self):
        gallery = create_gallery(GalleryStatus.PUBLISHED)

        gallery.change_slug(GallerySlug("engagement"))
        gallery.update_description("Proofs")

        assert gallery.slug.value == "engagement"
        assert gallery.description == "Proofs"

    def test_archived_gallery_refuses_edits(self):
        gallery = create_gallery(GalleryStatus.ARCHIVED, image_count=2)
        expected = Failure(error=GalleryError.NOT_EDITABLE)

        assert not gallery.can_be_edited()
        assert gallery.rename("Other") == expected
        assert gallery.change_slug(GallerySlug("other")) == expected
        assert gallery.update_description("x") == expected
        assert gallery.update_settings({"a": 1}) == expected
        assert gallery.add_image() == expected
        assert gallery.remove_image() == expected
        assert gallery.name == "Summer Wedding"
        assert gallery.image_count == 2

    def test_image_count_never_negative(self):
        gallery = create_gallery()

        gallery.add_image()
        gallery.remove_image()
        gallery.remove_image()

        assert gallery.image_count == 0

    def test_to_dict(self):
        gallery = create_gallery(GalleryStatus.PUBLISHED, id=5)

        data = gallery.to_dict()

        assert data["id"] == 5
        assert data["slug"] == "summer-wedding"
        assert data["status"] == "published"
        assert data["status_label"] == "Published"
        assert isinstance(data["created_at"], str)
