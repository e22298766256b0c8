"""Gallery repository protocol.

Defines the persistence port for galleries. The slug column is unique;
``exists_by_slug`` is the lookup that slug uniqueness generation calls.
"""

from typing import Protocol

from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.value_objects.gallery_status import GalleryStatus


class GalleryRepository(Protocol):
    """Protocol for gallery persistence operations.

    Read methods return domain entities, never database models.
    """

    async def find_by_id(self, gallery_id: int) -> Gallery | None:
        """Find gallery by ID.

        Args:
            gallery_id: Gallery identifier.

        Returns:
            Gallery entity if found, None otherwise.
        """
        ...

    async def find_by_slug(self, slug: str) -> Gallery | None:
        """Find gallery by its (normalized) slug.

        Args:
            slug: Slug text, e.g. ``GallerySlug.value``.

        Returns:
            Gallery entity if found, None otherwise.
        """
        ...

    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        """Check whether a slug is taken.

        Args:
            slug: Slug text to check.
            exclude_id: Gallery ID to ignore (the gallery being updated).

        Returns:
            True if another gallery uses the slug.
        """
        ...

    async def list_galleries(
        self,
        *,
        client_id: int | None = None,
        status: GalleryStatus | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Gallery]:
        """List galleries, newest first, optionally filtered.

        Args:
            client_id: Only galleries of this client.
            status: Only galleries in this status.
            limit: Page size.
            offset: Rows to skip.

        Returns:
            Matching galleries ordered by created_at descending.
        """
        ...

    async def count_galleries(
        self,
        *,
        client_id: int | None = None,
        status: GalleryStatus | None = None,
    ) -> int:
        """Count galleries matching the same filters as list_galleries."""
        ...

    async def count_by_status(self, client_id: int | None = None) -> dict[GalleryStatus, int]:
        """Count galleries per status (statuses with no galleries map to 0)."""
        ...

    async def total_image_count(self, client_id: int | None = None) -> int:
        """Sum of image_count over matching galleries."""
        ...

    async def next_sort_order(self, client_id: int) -> int:
        """Sort position for a client's next gallery (max + 1, or 0)."""
        ...

    async def save(self, gallery: Gallery) -> Gallery:
        """Insert or update a gallery.

        Assigns ``gallery.id`` on insert.

        Args:
            gallery: Gallery entity to persist.

        Returns:
            The same entity, with its ID set.

        Raises:
            DuplicateRecordError: If the slug is already used by another row.
        """
        ...

    async def delete(self, gallery_id: int) -> bool:
        """Delete a gallery row.

        Returns:
            True if a row was deleted.
        """
        ...
