"""Image and rating queries (CQRS read operations)."""

from dataclasses import dataclass

from clientgallery.core.validation import require_page, require_positive_id


@dataclass(frozen=True, kw_only=True)
class ListGalleryImages:
    """List a gallery's images in display order."""

    gallery_id: int
    limit: int = 50
    offset: int = 0

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
        require_page(self.limit, self.offset)


@dataclass(frozen=True, kw_only=True)
class ListImageRatings:
    """List every client rating of one image."""

    image_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.image_id, "image_id")


@dataclass(frozen=True, kw_only=True)
class GetGalleryRatingSummary:
    """Aggregate ratings over all images of a gallery."""

    gallery_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
