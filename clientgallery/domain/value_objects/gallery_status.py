"""Gallery publication status.

State Machine:
    DRAFT ↔ PUBLISHED
    DRAFT/PUBLISHED → ARCHIVED
    ARCHIVED → DRAFT (restore)

    - DRAFT: Being prepared, not visible to the client
    - PUBLISHED: Visible to the client for viewing and rating
    - ARCHIVED: Read-only, kept for reference

Usage:
    from clientgallery.domain.value_objects import GalleryStatus

    status = GalleryStatus.from_string(" Published ")
    status.is_published  # True
    status.color         # 'green'
"""

from enum import Enum


class InvalidStatusError(ValueError):
    """Raised when text is not one of the known gallery statuses."""


class GalleryStatus(str, Enum):
    """Gallery publication status.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase.
    """

    DRAFT = "draft"
    """Initial state. Editable, hidden from the client."""

    PUBLISHED = "published"
    """Visible to the owning client, who may rate its images."""

    ARCHIVED = "archived"
    """Frozen. Only a status change back to draft is accepted."""

    @classmethod
    def from_string(cls, raw: str) -> "GalleryStatus":
        """Parse a status name, ignoring case and surrounding whitespace.

        Args:
            raw: Status text such as ``"PUBLISHED"`` or ``" draft "``.

        Returns:
            GalleryStatus: Matching status.

        Raises:
            InvalidStatusError: If the text is not a known status.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError(
                f'Invalid gallery status "{value}". '
                f"Valid statuses are: {', '.join(cls.values())}"
            ) from None

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status (case-insensitive)."""
        return value.strip().lower() in cls.values()

    @property
    def is_draft(self) -> bool:
        return self is GalleryStatus.DRAFT

    @property
    def is_published(self) -> bool:
        return self is GalleryStatus.PUBLISHED

    @property
    def is_archived(self) -> bool:
        return self is GalleryStatus.ARCHIVED

    @property
    def label(self) -> str:
        """Human-readable label (``Draft``, ``Published``, ``Archived``)."""
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Display color used by listings."""
        return _COLORS[self]

    def allows_editing(self) -> bool:
        """Whether gallery content may be changed in this status.

        Returns:
            bool: False only for ARCHIVED.
        """
        return self is not GalleryStatus.ARCHIVED


_COLORS = {
    GalleryStatus.DRAFT: "orange",
    GalleryStatus.PUBLISHED: "green",
    GalleryStatus.ARCHIVED: "gray",
}
