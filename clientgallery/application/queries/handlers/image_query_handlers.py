"""Image and rating query handlers."""

from clientgallery.application.dtos.image_dtos import (
    ImageResult,
    RatingResult,
    RatingSummary,
)
from clientgallery.application.errors import gallery_not_found, image_not_found
from clientgallery.application.queries.image_queries import (
    GetGalleryRatingSummary,
    ListGalleryImages,
    ListImageRatings,
)
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import (
    ImageRepository,
    RatingRepository,
)


class ListGalleryImagesHandler:
    """Handler for ListGalleryImages query."""

    def __init__(self, gallery_repo: GalleryRepository, image_repo: ImageRepository) -> None:
        self._gallery_repo = gallery_repo
        self._image_repo = image_repo

    async def handle(
        self, query: ListGalleryImages
    ) -> Result[list[ImageResult], DomainError]:
        """Handle ListGalleryImages query.

        Returns:
            Success(list[ImageResult]): Images in display order.
            Failure(NotFoundError): Gallery does not exist.
        """
        if await self._gallery_repo.find_by_id(query.gallery_id) is None:
            return Failure(error=gallery_not_found(query.gallery_id))

        images = await self._image_repo.list_by_gallery(
            query.gallery_id, limit=query.limit, offset=query.offset
        )
        return Success(value=[ImageResult.from_entity(image) for image in images])


class ListImageRatingsHandler:
    """Handler for ListImageRatings query."""

    def __init__(self, image_repo: ImageRepository, rating_repo: RatingRepository) -> None:
        self._image_repo = image_repo
        self._rating_repo = rating_repo

    async def handle(
        self, query: ListImageRatings
    ) -> Result[list[RatingResult], DomainError]:
        """Handle ListImageRatings query.

        Returns:
            Success(list[RatingResult]): Ratings, most recently updated first.
            Failure(NotFoundError): Image does not exist.
        """
        if await self._image_repo.find_by_id(query.image_id) is None:
            return Failure(error=image_not_found(query.image_id))

        ratings = await self._rating_repo.list_by_image(query.image_id)
        return Success(value=[RatingResult.from_entity(r) for r in ratings])


class GetGalleryRatingSummaryHandler:
    """Handler for GetGalleryRatingSummary query."""

    def __init__(self, gallery_repo: GalleryRepository, rating_repo: RatingRepository) -> None:
        self._gallery_repo = gallery_repo
        self._rating_repo = rating_repo

    async def handle(
        self, query: GetGalleryRatingSummary
    ) -> Result[RatingSummary, DomainError]:
        """Handle GetGalleryRatingSummary query.

        Returns:
            Success(RatingSummary): Distribution and average score.
            Failure(NotFoundError): Gallery does not exist.
        """
        if await self._gallery_repo.find_by_id(query.gallery_id) is None:
            return Failure(error=gallery_not_found(query.gallery_id))

        distribution = await self._rating_repo.rating_distribution(query.gallery_id)
        average = await self._rating_repo.average_score(query.gallery_id)
        return Success(
            value=RatingSummary(
                gallery_id=query.gallery_id,
                total_ratings=sum(distribution.values()),
                distribution={value.value: count for value, count in distribution.items()},
                average_score=round(average, 2) if average is not None else None,
            )
        )
