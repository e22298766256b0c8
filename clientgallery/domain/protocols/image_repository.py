"""Image and rating repository protocols."""

from typing import Protocol

from clientgallery.domain.entities.image import Image, Rating
from clientgallery.domain.enums.rating_value import RatingValue


class ImageRepository(Protocol):
    """Protocol for image persistence operations."""

    async def find_by_id(self, image_id: int) -> Image | None:
        """Find image by ID."""
        ...

    async def list_by_gallery(
        self, gallery_id: int, *, limit: int | None = None, offset: int = 0
    ) -> list[Image]:
        """List a gallery's images by sort_order, then ID.

        Args:
            gallery_id: Gallery identifier.
            limit: Page size, None for all images.
            offset: Rows to skip.
        """
        ...

    async def next_sort_order(self, gallery_id: int) -> int:
        """Sort position for the gallery's next image (max + 1, or 0)."""
        ...

    async def save(self, image: Image) -> Image:
        """Insert or update an image, assigning its ID on insert.

        Raises:
            DuplicateRecordError: If the filename already exists in the gallery.
        """
        ...

    async def clear_featured(self, gallery_id: int) -> None:
        """Unset is_featured on every image of the gallery."""
        ...

    async def delete(self, image_id: int) -> bool:
        """Delete an image and its ratings. Returns True if it existed."""
        ...

    async def delete_by_gallery(self, gallery_id: int) -> int:
        """Delete all images of a gallery and their ratings.

        Returns:
            Number of images deleted.
        """
        ...


class RatingRepository(Protocol):
    """Protocol for rating persistence operations."""

    async def find_by_image_and_client(
        self, image_id: int, client_id: int
    ) -> Rating | None:
        """Find the single rating a client gave an image."""
        ...

    async def list_by_image(self, image_id: int) -> list[Rating]:
        """List all ratings of an image, most recently updated first."""
        ...

    async def rating_distribution(self, gallery_id: int) -> dict[RatingValue, int]:
        """Count ratings per value over all images of a gallery.

        Returns:
            Mapping with every RatingValue present (0 when unused).
        """
        ...

    async def average_score(self, gallery_id: int) -> float | None:
        """Average of non-null scores over a gallery, None if there are none."""
        ...

    async def save(self, rating: Rating) -> Rating:
        """Insert or update a rating, assigning its ID on insert.

        Raises:
            DuplicateRecordError: If the client already rated the image.
        """
        ...
