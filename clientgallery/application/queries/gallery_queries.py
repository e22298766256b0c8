"""Gallery queries (CQRS read operations).

Queries are immutable, keyword-only and side-effect free. They validate
on construction, raising ValueError for malformed input.
"""

from dataclasses import dataclass

from clientgallery.core.validation import require_page, require_positive_id
from clientgallery.domain.value_objects.gallery_slug import GallerySlug
from clientgallery.domain.value_objects.gallery_status import GalleryStatus


@dataclass(frozen=True, kw_only=True)
class GetGallery:
    """Fetch one gallery by ID."""

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")


@dataclass(frozen=True, kw_only=True)
class GetGalleryBySlug:
    """Fetch one gallery by slug.

    The slug is normalized on construction, so ``"Summer Wedding"`` finds
    the gallery stored as ``summer-wedding``.

    Raises:
        InvalidSlugError: If the text cannot be a slug.
    """

    slug: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "slug", GallerySlug.from_string(self.slug).value)


@dataclass(frozen=True, kw_only=True)
class ListGalleries:
    """List galleries, newest first.

    Attributes:
        client_id: Only this client's galleries.
        status: Only galleries in this status (enum or status text).
        limit: Page size.
        offset: Rows to skip.

    Example:
        >>> query = ListGalleries(client_id=4, status="published", limit=20)
        >>> result = await query_bus.execute(query)
    """

    client_id: int | None = None
    status: GalleryStatus | None = None
    limit: int = 10
    offset: int = 0

    def __post_init__(self) -> None:
        if self.client_id is not None:
            require_positive_id(self.client_id, "client_id")
        if self.status is not None and not isinstance(self.status, GalleryStatus):
            object.__setattr__(self, "status", GalleryStatus.from_string(self.status))
        require_page(self.limit, self.offset)


@dataclass(frozen=True, kw_only=True)
class GetGalleryStatistics:
    """Count galleries per status and images overall, optionally per client."""

    client_id: int | None = None

    def __post_init__(self) -> None:
        if self.client_id is not None:
            require_positive_id(self.client_id, "client_id")
