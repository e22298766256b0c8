"""Gallery domain entity.

A named collection of images prepared for one client. The gallery owns its
slug, publication status, free-form display settings and a denormalized
image count kept in step by the image handlers.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types (railway-oriented programming)
    - State machine with validated transitions

Usage:
    from clientgallery.domain.entities import Gallery

    gallery = Gallery.create(name="Summer Wedding", slug=slug, client_id=4)

    match gallery.publish():
        case Success(_):
            assert gallery.status.is_published
        case Failure(error=error):
            # Handle error
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.errors.gallery_error import GalleryError
from clientgallery.domain.value_objects.gallery_slug import GallerySlug
from clientgallery.domain.value_objects.gallery_status import GalleryStatus

MAX_NAME_LENGTH = 255


@dataclass
class Gallery:
    """Client photo gallery.

    State Machine:
        DRAFT ↔ PUBLISHED, DRAFT/PUBLISHED → ARCHIVED, ARCHIVED → DRAFT

    Railway-Oriented Programming:
        Transitions and edits return Result[None, str] instead of raising.
        Construction still raises ValueError for invalid fields.

    Attributes:
        name: Display name (trimmed, 1-255 characters).
        slug: Unique URL identifier.
        client_id: Owning client's ID.
        id: Database ID, None until first save.
        description: Optional longer text.
        status: Publication status.
        settings: Free-form display settings (merged on update).
        image_count: Number of images in the gallery.
        sort_order: Position among the client's galleries.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    name: str
    slug: GallerySlug
    client_id: int
    id: int | None = None
    description: str | None = None
    status: GalleryStatus = GalleryStatus.DRAFT
    settings: dict[str, Any] = field(default_factory=dict)
    image_count: int = 0
    sort_order: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate gallery after initialization.

        Raises:
            ValueError: If name, client or image count is invalid.
        """
        self.name = _clean_name(self.name)
        if self.client_id <= 0:
            raise ValueError(GalleryError.CLIENT_REQUIRED)
        if self.image_count < 0:
            raise ValueError(GalleryError.NEGATIVE_IMAGE_COUNT)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        slug: GallerySlug,
        client_id: int,
        description: str | None = None,
        settings: dict[str, Any] | None = None,
        sort_order: int = 0,
    ) -> "Gallery":
        """Create a new draft gallery.

        Args:
            name: Display name.
            slug: Slug already checked for uniqueness.
            client_id: Owning client's ID.
            description: Optional description.
            settings: Initial display settings.
            sort_order: Position among the client's galleries.

        Returns:
            Gallery: Unsaved gallery in DRAFT status.
        """
        return cls(
            name=name,
            slug=slug,
            client_id=client_id,
            description=description,
            settings=dict(settings or {}),
            sort_order=sort_order,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        return self.image_count == 0

    def can_be_edited(self) -> bool:
        return self.status.allows_editing()

    def publish_requirements(self) -> list[str]:
        """List unmet publishing requirements.

        Returns:
            list[str]: Human-readable issues; empty when publishable.
        """
        issues = []
        if not self.name:
            issues.append("Gallery must have a name")
        if self.client_id <= 0:
            issues.append("Gallery must be assigned to a client")
        if self.status.is_archived:
            issues.append("Gallery must be restored from the archive")
        return issues

    def can_be_published(self) -> bool:
        return not self.publish_requirements()

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def publish(self) -> Result[None, str]:
        """Transition to PUBLISHED.

        Returns:
            Success(None): Gallery is now published.
            Failure(error): Already published, archived, or requirements unmet.
        """
        if self.status.is_published:
            return Failure(error=GalleryError.ALREADY_PUBLISHED)
        if self.status.is_archived:
            return Failure(error=GalleryError.CANNOT_PUBLISH_ARCHIVED)
        if not self.can_be_published():
            return Failure(error=GalleryError.PUBLISH_REQUIREMENTS_NOT_MET)

        self._set_status(GalleryStatus.PUBLISHED)
        return Success(value=None)

    def unpublish(self) -> Result[None, str]:
        """Transition back to DRAFT (also restores archived galleries).

        Returns:
            Success(None): Gallery is now a draft.
            Failure(error): Already a draft.
        """
        if self.status.is_draft:
            return Failure(error=GalleryError.ALREADY_DRAFT)

        self._set_status(GalleryStatus.DRAFT)
        return Success(value=None)

    def archive(self) -> Result[None, str]:
        """Transition to ARCHIVED.

        Returns:
            Success(None): Gallery is now archived.
            Failure(error): Already archived.
        """
        if self.status.is_archived:
            return Failure(error=GalleryError.ALREADY_ARCHIVED)

        self._set_status(GalleryStatus.ARCHIVED)
        return Success(value=None)

    def change_status(self, status: GalleryStatus) -> Result[None, str]:
        """Dispatch to the transition matching ``status``."""
        match status:
            case GalleryStatus.PUBLISHED:
                return self.publish()
            case GalleryStatus.DRAFT:
                return self.unpublish()
            case GalleryStatus.ARCHIVED:
                return self.archive()

    # -------------------------------------------------------------------------
    # Editing Methods (refused while archived)
    # -------------------------------------------------------------------------

    def rename(self, name: str) -> Result[None, str]:
        """Change the display name.

        Raises:
            ValueError: If the new name is empty or too long.
        """
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.name = _clean_name(name)
        self._touch()
        return Success(value=None)

    def change_slug(self, slug: GallerySlug) -> Result[None, str]:
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.slug = slug
        self._touch()
        return Success(value=None)

    def update_description(self, description: str | None) -> Result[None, str]:
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.description = description
        self._touch()
        return Success(value=None)

    def update_settings(self, settings: dict[str, Any]) -> Result[None, str]:
        """Merge ``settings`` into the existing settings (new keys win)."""
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.settings = {**self.settings, **settings}
        self._touch()
        return Success(value=None)

    def add_image(self) -> Result[None, str]:
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.image_count += 1
        self._touch()
        return Success(value=None)

    def remove_image(self) -> Result[None, str]:
        """Decrement the image count, never below zero."""
        if not self.can_be_edited():
            return Failure(error=GalleryError.NOT_EDITABLE)
        self.image_count = max(0, self.image_count - 1)
        self._touch()
        return Success(value=None)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain types (ISO timestamps, string enums)."""
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug.value,
            "description": self.description,
            "status": self.status.value,
            "status_label": self.status.label,
            "client_id": self.client_id,
            "settings": dict(self.settings),
            "image_count": self.image_count,
            "sort_order": self.sort_order,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def _set_status(self, status: GalleryStatus) -> None:
        self.status = status
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError(GalleryError.NAME_REQUIRED)
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValueError(GalleryError.NAME_TOO_LONG)
    return cleaned
