"""End-to-end gallery workflow through the command and query buses.

Tests cover:
- Client onboarding, gallery creation with slug de-duplication
- Client sign-in by access key and key regeneration
- Image upload, ordering and featured image
- Publishing and client ratings with summary statistics
- Deletion rules (client with galleries, gallery with images)

Architecture:
- Real buses built by the container, real SQLite database
- One session per step, so every step reads committed state
"""

import pytest

from clientgallery.application.commands import (
    AddImage,
    ArchiveGallery,
    ChangeClientStatus,
    CreateClient,
    CreateGallery,
    DeleteClient,
    DeleteGallery,
    PublishGallery,
    RateImage,
    RegenerateAccessKey,
    ReorderImages,
    SetFeaturedImage,
    UpdateGallery,
)
from clientgallery.application.queries import (
    GetClient,
    GetClientByAccessKey,
    GetGalleryBySlug,
    GetGalleryRatingSummary,
    GetGalleryStatistics,
    ListGalleries,
    ListGalleryImages,
    ListImageRatings,
)
from clientgallery.core.container import build_command_bus, build_query_bus
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import ConflictError, NotFoundError
from clientgallery.core.result import Failure, Success
from clientgallery.domain.enums import ClientStatus, RatingValue


@pytest.fixture
def run(test_database, mock_logger):
    """Execute one command or query in its own committed session."""

    async def _run(message):
        async with test_database.get_session() as session:
            if type(message).__module__.startswith("clientgallery.application.queries"):
                bus = build_query_bus(session, mock_logger)
            else:
                bus = build_command_bus(session, mock_logger)
            return await bus.execute(message)

    return _run


def image(gallery_id: int, filename: str) -> AddImage:
    return AddImage(
        gallery_id=gallery_id,
        filename=filename,
        original_filename=filename.upper(),
        file_size=4096,
        mime_type="image/jpeg",
        width=3000,
        height=2000,
    )


@pytest.mark.integration
class TestGalleryWorkflow:
    async def test_client_reviews_published_gallery(self, run):
        created = await run(CreateClient(name="Anna Berg", email="anna@example.com"))
        assert isinstance(created, Success)
        client_id = created.value.client.id
        assert len(created.value.access_key) == 64

        activated = await run(
            ChangeClientStatus(client_id=client_id, status=ClientStatus.ACTIVE)
        )
        assert activated.value.status == "active"

        first = await run(CreateGallery(name="Summer Wedding", client_id=client_id))
        second = await run(CreateGallery(name="Summer Wedding!", client_id=client_id))
        assert first.value.slug == "summer-wedding"
        assert second.value.slug == "summer-wedding-1"
        gallery_id = first.value.id

        added = [
            (await run(image(gallery_id, name))).value
            for name in ("a.jpg", "b.jpg", "c.jpg")
        ]
        assert [i.sort_order for i in added] == [0, 1, 2]

        reordered = await run(
            ReorderImages(
                gallery_id=gallery_id,
                image_ids=(added[2].id, added[0].id, added[1].id),
            )
        )
        assert isinstance(reordered, Success)
        await run(SetFeaturedImage(image_id=added[1].id))
        await run(SetFeaturedImage(image_id=added[2].id))

        listed = await run(ListGalleryImages(gallery_id=gallery_id))
        assert [i.filename for i in listed.value] == ["c.jpg", "a.jpg", "b.jpg"]
        assert [i.is_featured for i in listed.value] == [True, False, False]

        not_yet = await run(
            RateImage(image_id=added[0].id, client_id=client_id, rating=RatingValue.MAYBE)
        )
        assert isinstance(not_yet, Failure)
        assert not_yet.error.code == ErrorCode.GALLERY_NOT_PUBLISHED

        published = await run(PublishGallery(gallery_id=gallery_id))
        assert published.value.status == "published"
        assert published.value.image_count == 3

        await run(
            RateImage(
                image_id=added[0].id,
                client_id=client_id,
                rating=RatingValue.MAYBE,
                score=5,
            )
        )
        revised = await run(
            RateImage(
                image_id=added[0].id,
                client_id=client_id,
                rating=RatingValue.FAVORITE,
                score=9,
                comment="Frame this one",
            )
        )
        await run(
            RateImage(image_id=added[1].id, client_id=client_id, rating=RatingValue.REJECTED)
        )
        assert revised.value.rating == "favorite"

        ratings = await run(ListImageRatings(image_id=added[0].id))
        assert [(r.rating, r.score) for r in ratings.value] == [("favorite", 9)]

        summary = await run(GetGalleryRatingSummary(gallery_id=gallery_id))
        assert summary.value.total_ratings == 2
        assert summary.value.distribution["favorite"] == 1
        assert summary.value.distribution["rejected"] == 1
        assert summary.value.average_score == pytest.approx(9.0)

        by_slug = await run(GetGalleryBySlug(slug=" Summer-Wedding "))
        assert by_slug.value.id == gallery_id

    async def test_client_signs_in_with_access_key(self, run):
        created = (
            await run(CreateClient(name="Anna Berg", email="anna@example.com"))
        ).value
        old_key = created.access_key

        signed_in = await run(GetClientByAccessKey(access_key=old_key))
        assert signed_in.value.id == created.client.id

        regenerated = await run(RegenerateAccessKey(client_id=created.client.id))
        assert isinstance(regenerated, Success)
        new_key = regenerated.value.access_key
        assert new_key != old_key

        stale = await run(GetClientByAccessKey(access_key=old_key))
        assert isinstance(stale, Failure)
        assert stale.error.code == ErrorCode.CLIENT_NOT_FOUND
        fresh = await run(GetClientByAccessKey(access_key=new_key))
        assert fresh.value.email == "anna@example.com"

    async def test_other_client_cannot_rate(self, run):
        owner = (await run(CreateClient(name="Anna Berg", email="anna@example.com"))).value
        stranger = (await run(CreateClient(name="Ben Ode", email="ben@example.com"))).value
        gallery = (
            await run(CreateGallery(name="Portraits", client_id=owner.client.id))
        ).value
        photo = (await run(image(gallery.id, "p.jpg"))).value
        await run(PublishGallery(gallery_id=gallery.id))

        result = await run(
            RateImage(
                image_id=photo.id,
                client_id=stranger.client.id,
                rating=RatingValue.SELECTED,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED

    async def test_archived_gallery_is_frozen(self, run):
        client = (await run(CreateClient(name="Anna Berg", email="anna@example.com"))).value
        gallery = (
            await run(CreateGallery(name="Old Event", client_id=client.client.id))
        ).value

        await run(ArchiveGallery(gallery_id=gallery.id))
        renamed = await run(UpdateGallery(gallery_id=gallery.id, name="New Name"))
        upload = await run(image(gallery.id, "late.jpg"))

        assert isinstance(renamed, Failure)
        assert renamed.error.code == ErrorCode.GALLERY_NOT_EDITABLE
        assert isinstance(upload, Failure)
        assert isinstance(upload.error, ConflictError)

    async def test_deleting_client_and_gallery(self, run):
        client_id = (
            await run(CreateClient(name="Anna Berg", email="anna@example.com"))
        ).value.client.id
        gallery = (await run(CreateGallery(name="Proofs", client_id=client_id))).value
        await run(image(gallery.id, "a.jpg"))

        refused = await run(DeleteClient(client_id=client_id))
        assert isinstance(refused, Failure)
        assert refused.error.code == ErrorCode.CLIENT_HAS_GALLERIES

        assert isinstance(await run(DeleteGallery(gallery_id=gallery.id)), Success)
        assert (await run(ListGalleryImages(gallery_id=gallery.id))).error.code == (
            ErrorCode.GALLERY_NOT_FOUND
        )

        assert isinstance(await run(DeleteClient(client_id=client_id)), Success)
        missing = await run(GetClient(client_id=client_id))
        assert isinstance(missing.error, NotFoundError)

    async def test_statistics_and_listing(self, run):
        client_id = (
            await run(CreateClient(name="Anna Berg", email="anna@example.com"))
        ).value.client.id
        ids = [
            (await run(CreateGallery(name=f"Session {n}", client_id=client_id))).value.id
            for n in range(3)
        ]
        await run(image(ids[0], "a.jpg"))
        await run(image(ids[0], "b.jpg"))
        await run(PublishGallery(gallery_id=ids[0]))
        await run(ArchiveGallery(gallery_id=ids[1]))

        stats = await run(GetGalleryStatistics(client_id=client_id))
        page = await run(ListGalleries(client_id=client_id, limit=2))

        assert stats.value.total == 3
        assert stats.value.by_status == {"draft": 1, "published": 1, "archived": 1}
        assert stats.value.total_images == 2
        assert page.value.total_count == 3
        assert len(page.value.galleries) == 2
