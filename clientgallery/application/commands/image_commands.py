"""Image and rating commands (CQRS write operations)."""

from dataclasses import dataclass, field
from typing import Any

from clientgallery.core.validation import require_positive_id, require_text
from clientgallery.domain.enums.rating_value import RatingValue
from clientgallery.domain.errors.image_error import ImageError, RatingError


@dataclass(frozen=True, kw_only=True)
class AddImage:
    """Attach an uploaded image file to a gallery.

    The image is appended after the gallery's last image and the gallery's
    image count is incremented.

    Attributes:
        gallery_id: Target gallery.
        filename: Stored file name (unique within the gallery).
        original_filename: Name of the uploaded file.
        file_size: Size in bytes.
        mime_type: ``image/*`` content type.
        width: Pixel width.
        height: Pixel height.
        title: Optional caption title.
        description: Optional caption text.
        alt_text: Accessibility text.
        metadata: Free-form metadata (EXIF etc.).

    Raises:
        ValueError: Missing filename, non-positive sizes, non-image MIME type.
    """

    gallery_id: int
    filename: str
    original_filename: str
    file_size: int
    mime_type: str
    width: int
    height: int
    title: str | None = None
    description: str | None = None
    alt_text: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
        object.__setattr__(self, "filename", require_text(self.filename, "filename"))
        object.__setattr__(
            self,
            "original_filename",
            require_text(self.original_filename, "original_filename"),
        )
        if self.file_size <= 0:
            raise ValueError(ImageError.INVALID_FILE_SIZE)
        if not self.mime_type.startswith("image/"):
            raise ValueError(ImageError.INVALID_MIME_TYPE)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(ImageError.INVALID_DIMENSIONS)


@dataclass(frozen=True, kw_only=True)
class RemoveImage:
    """Delete an image and its ratings, decrementing the gallery count."""

    image_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.image_id, "image_id")


@dataclass(frozen=True, kw_only=True)
class SetFeaturedImage:
    """Make an image its gallery's single featured (cover) image."""

    image_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.image_id, "image_id")


@dataclass(frozen=True, kw_only=True)
class ReorderImages:
    """Set a gallery's image order.

    Attributes:
        gallery_id: Gallery whose images are reordered.
        image_ids: Image IDs in their new order; position becomes sort_order.
    """

    gallery_id: int
    image_ids: tuple[int, ...]

    def __post_init__(self) -> None:
        require_positive_id(self.gallery_id, "gallery_id")
        object.__setattr__(self, "image_ids", tuple(self.image_ids))
        if not self.image_ids:
            raise ValueError("image_ids cannot be empty")
        for image_id in self.image_ids:
            require_positive_id(image_id, "image_ids")
        if len(set(self.image_ids)) != len(self.image_ids):
            raise ValueError("image_ids cannot contain duplicates")


@dataclass(frozen=True, kw_only=True)
class RateImage:
    """Record a client's verdict on an image (replaces any earlier one).

    Attributes:
        image_id: Image being rated.
        client_id: Rating client (must own the gallery).
        rating: Verdict (enum or its string value).
        score: Optional 1-10 score.
        comment: Optional free text.
    """

    image_id: int
    client_id: int
    rating: RatingValue
    score: int | None = None
    comment: str | None = None

    def __post_init__(self) -> None:
        require_positive_id(self.image_id, "image_id")
        require_positive_id(self.client_id, "client_id")
        object.__setattr__(self, "rating", RatingValue(self.rating))
        if self.score is not None and not 1 <= self.score <= 10:
            raise ValueError(RatingError.INVALID_SCORE)
