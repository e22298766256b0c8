"""Image and rating domain entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from clientgallery.domain.enums.image_status import ImageStatus
from clientgallery.domain.enums.rating_value import RatingValue
from clientgallery.domain.errors.image_error import ImageError, RatingError

MIN_SCORE = 1
MAX_SCORE = 10


@dataclass
class Image:
    """Photo stored in a gallery.

    ``filename`` is the stored file name and is unique within a gallery;
    ``original_filename`` is what the photographer uploaded.

    Attributes:
        gallery_id: Owning gallery's ID.
        filename: Stored file name.
        original_filename: Uploaded file name.
        file_size: Size in bytes.
        mime_type: ``image/*`` content type.
        width: Pixel width.
        height: Pixel height.
        id: Database ID, None until first save.
        title: Optional caption title.
        description: Optional caption text.
        alt_text: Accessibility text.
        sort_order: Position within the gallery.
        status: Processing status.
        is_featured: Whether this is the gallery's cover image.
        metadata: Free-form EXIF-like metadata.
    """

    gallery_id: int
    filename: str
    original_filename: str
    file_size: int
    mime_type: str
    width: int
    height: int
    id: int | None = None
    title: str | None = None
    description: str | None = None
    alt_text: str | None = None
    sort_order: int = 0
    status: ImageStatus = ImageStatus.UPLOADED
    is_featured: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate image after initialization.

        Raises:
            ValueError: If any required field is invalid.
        """
        if self.gallery_id <= 0:
            raise ValueError(ImageError.GALLERY_REQUIRED)
        if not self.filename.strip() or not self.original_filename.strip():
            raise ValueError(ImageError.FILENAME_REQUIRED)
        if self.file_size <= 0:
            raise ValueError(ImageError.INVALID_FILE_SIZE)
        if not self.mime_type.startswith("image/"):
            raise ValueError(ImageError.INVALID_MIME_TYPE)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(ImageError.INVALID_DIMENSIONS)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def is_ready(self) -> bool:
        return self.status == ImageStatus.READY

    def set_featured(self, featured: bool = True) -> None:
        self.is_featured = featured
        self._touch()

    def move_to(self, sort_order: int) -> None:
        self.sort_order = sort_order
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)


@dataclass
class Rating:
    """A client's verdict on one image.

    One rating exists per (image, client) pair; rating again replaces it.

    Attributes:
        image_id: Rated image's ID.
        client_id: Rating client's ID.
        rating: Verdict.
        score: Optional 1-10 score.
        comment: Optional free text.
        id: Database ID, None until first save.
    """

    image_id: int
    client_id: int
    rating: RatingValue
    score: int | None = None
    comment: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate rating after initialization.

        Raises:
            ValueError: If references or score are invalid.
        """
        if self.image_id <= 0:
            raise ValueError(RatingError.IMAGE_REQUIRED)
        if self.client_id <= 0:
            raise ValueError(RatingError.CLIENT_REQUIRED)
        _check_score(self.score)

    def revise(
        self, rating: RatingValue, score: int | None, comment: str | None
    ) -> None:
        """Replace verdict, score and comment.

        Raises:
            ValueError: If score is outside 1-10.
        """
        _check_score(score)
        self.rating = rating
        self.score = score
        self.comment = comment
        self.updated_at = datetime.now(UTC)


def _check_score(score: int | None) -> None:
    if score is not None and not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(RatingError.INVALID_SCORE)
