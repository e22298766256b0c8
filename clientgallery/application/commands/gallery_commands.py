"""Gallery commands (CQRS write operations).

All commands are immutable (frozen=True), keyword-only (kw_only=True) and
validate themselves on construction, raising ValueError for malformed input.
Handlers return Result types.
"""

from dataclasses import dataclass
from typing import Any

from clientgallery.core.validation import require_positive_id, require_text
from clientgallery.domain.value_objects.gallery_slug import GallerySlug


@dataclass(frozen=True, kw_only=True)
class CreateGallery:
    """Create a draft gallery for a client.

    When ``slug`` is omitted it is derived from ``name`` and suffixed
    (``-1``, ``-2`` ...) until unique. An explicit slug must be free.

    Attributes:
        name: Display name (trimmed).
        client_id: Owning client.
        slug: Optional explicit slug (stored normalized).
        description: Optional description.
        settings: Initial display settings.

    Raises:
        ValueError: Blank name, non-positive client_id, or invalid slug.

    Example:
        >>> command = CreateGallery(name="Summer Wedding", client_id=4)
        >>> result = await command_bus.execute(command)
    """

    name: str
    client_id: int
    slug: str | None = None
    description: str | None = None
    settings: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, "name"))
        require_positive_id(self.client_id, "client_id")
        if self.slug is not None:
            object.__setattr__(self, "slug", GallerySlug.from_string(self.slug).value)


@dataclass(frozen=True, kw_only=True)
class UpdateGallery:
    """Edit a gallery's name, slug, description or settings.

    Fields left as None are unchanged; ``settings`` is merged into the
    existing settings. Archived galleries are refused.

    Attributes:
        gallery_id: Gallery to update.
        name: New display name.
        slug: New slug (must not belong to another gallery).
        description: New description.
        settings: Settings to merge.
    """

    gallery_id: int
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    settings: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
        if self.name is not None:
            object.__setattr__(self, "name", require_text(self.name, "name"))
        if self.slug is not None:
            object.__setattr__(self, "slug", GallerySlug.from_string(self.slug).value)


@dataclass(frozen=True, kw_only=True)
class DeleteGallery:
    """Delete a gallery together with its images and their ratings."""

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")


@dataclass(frozen=True, kw_only=True)
class PublishGallery:
    """Make a draft gallery visible to its client.

    State Transition: DRAFT → PUBLISHED
    """

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")


@dataclass(frozen=True, kw_only=True)
class UnpublishGallery:
    """Return a gallery to draft (also restores an archived gallery).

    State Transition: PUBLISHED/ARCHIVED → DRAFT
    """

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")


@dataclass(frozen=True, kw_only=True)
class ArchiveGallery:
    """Freeze a gallery.

    State Transition: DRAFT/PUBLISHED → ARCHIVED
    """

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
