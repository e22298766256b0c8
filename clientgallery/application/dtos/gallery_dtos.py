"""Gallery DTOs (Data Transfer Objects).

Result dataclasses returned by gallery command and query handlers.

DTOs:
    - GalleryResult: One gallery (create/update/transition/get results)
    - GalleryListResult: One page of galleries with total count
    - GalleryStatistics: Per-status counts
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from clientgallery.domain.entities.gallery import Gallery


@dataclass
class GalleryResult:
    """Single gallery result DTO.

    Attributes:
        id: Gallery identifier.
        name: Display name.
        slug: Slug text.
        description: Optional description.
        status: Status value (``draft``, ``published``, ``archived``).
        status_label: Human-readable status.
        status_color: Display color for the status.
        client_id: Owning client.
        settings: Display settings.
        image_count: Number of images.
        sort_order: Position among the client's galleries.
        is_editable: Whether content edits are accepted.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: int
    name: str
    slug: str
    description: str | None
    status: str
    status_label: str
    status_color: str
    client_id: int
    settings: dict[str, Any]
    image_count: int
    sort_order: int
    is_editable: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, gallery: Gallery) -> "GalleryResult":
        """Map a persisted Gallery entity to its DTO."""
        assert gallery.id is not None, "gallery must be saved before mapping"
        return cls(
            id=gallery.id,
            name=gallery.name,
            slug=gallery.slug.value,
            description=gallery.description,
            status=gallery.status.value,
            status_label=gallery.status.label,
            status_color=gallery.status.color,
            client_id=gallery.client_id,
            settings=dict(gallery.settings),
            image_count=gallery.image_count,
            sort_order=gallery.sort_order,
            is_editable=gallery.can_be_edited(),
            created_at=gallery.created_at,
            updated_at=gallery.updated_at,
        )


@dataclass
class GalleryListResult:
    """Page of galleries.

    Attributes:
        galleries: Galleries on this page.
        total_count: Galleries matching the filters across all pages.
        limit: Requested page size.
        offset: Requested offset.
    """

    galleries: list[GalleryResult]
    total_count: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.galleries) < self.total_count


@dataclass
class GalleryStatistics:
    """Gallery counts.

    Attributes:
        total: All galleries.
        by_status: Count per status value (every status present).
        total_images: Sum of image counts.
    """

    total: int
    by_status: dict[str, int] = field(default_factory=dict)
    total_images: int = 0
