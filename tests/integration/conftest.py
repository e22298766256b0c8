"""Row builders for integration tests.

Each fixture returns an async function bound to the test's session, so a
test can set up only the rows it needs:

    client = await add_client(email="anna@example.com")
    gallery = await add_gallery(client.id, "summer-wedding")
"""

from datetime import UTC, datetime, timedelta

import pytest

from clientgallery.domain.entities import Client, Gallery, Image
from clientgallery.domain.value_objects import Email, GallerySlug
from clientgallery.infrastructure.persistence.repositories import (
    ClientRepository,
    GalleryRepository,
    ImageRepository,
)


@pytest.fixture
def add_client(session):
    async def _add(name="Anna Berg", email="anna@example.com", **fields):
        client = Client.create(name=name, email=Email(email), **fields)
        return await ClientRepository(session).save(client)

    return _add


@pytest.fixture
def add_gallery(session):
    async def _add(client_id, slug, *, age_minutes=0, image_count=0, **fields):
        gallery = Gallery.create(
            name=fields.pop("name", slug.replace("-", " ").title()),
            slug=GallerySlug(slug),
            client_id=client_id,
            **fields,
        )
        gallery.image_count = image_count
        # Distinct creation times keep newest-first ordering deterministic
        gallery.created_at = datetime.now(UTC) - timedelta(minutes=age_minutes)
        return await GalleryRepository(session).save(gallery)

    return _add


@pytest.fixture
def add_image(session):
    async def _add(gallery_id, filename="img-001.jpg", **fields):
        image = Image(
            gallery_id=gallery_id,
            filename=filename,
            original_filename=fields.pop("original_filename", filename.upper()),
            file_size=fields.pop("file_size", 2048),
            mime_type=fields.pop("mime_type", "image/jpeg"),
            width=fields.pop("width", 1600),
            height=fields.pop("height", 1200),
            **fields,
        )
        return await ImageRepository(session).save(image)

    return _add
