"""Gallery query handlers.

Return DTOs (not domain entities). Queries are side-effect free, so these
handlers take no logger.
"""

from clientgallery.application.dtos.gallery_dtos import (
    GalleryListResult,
    GalleryResult,
    GalleryStatistics,
)
from clientgallery.application.errors import gallery_not_found
from clientgallery.application.queries.gallery_queries import (
    GetGallery,
    GetGalleryBySlug,
    GetGalleryStatistics,
    ListGalleries,
)
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.protocols.gallery_repository import GalleryRepository


class GetGalleryHandler:
    """Handler for GetGallery query."""

    def __init__(self, gallery_repo: GalleryRepository) -> None:
        self._gallery_repo = gallery_repo

    async def handle(self, query: GetGallery) -> Result[GalleryResult, DomainError]:
        """Handle GetGallery query.

        Returns:
            Success(GalleryResult): Gallery found.
            Failure(NotFoundError): No gallery with this ID.
        """
        gallery = await self._gallery_repo.find_by_id(query.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(query.gallery_id))
        return Success(value=GalleryResult.from_entity(gallery))


class GetGalleryBySlugHandler:
    """Handler for GetGalleryBySlug query."""

    def __init__(self, gallery_repo: GalleryRepository) -> None:
        self._gallery_repo = gallery_repo

    async def handle(self, query: GetGalleryBySlug) -> Result[GalleryResult, DomainError]:
        """Handle GetGalleryBySlug query.

        Returns:
            Success(GalleryResult): Gallery found.
            Failure(NotFoundError): No gallery with this slug.
        """
        gallery = await self._gallery_repo.find_by_slug(query.slug)
        if gallery is None:
            return Failure(error=gallery_not_found(query.slug))
        return Success(value=GalleryResult.from_entity(gallery))


class ListGalleriesHandler:
    """Handler for ListGalleries query."""

    def __init__(self, gallery_repo: GalleryRepository) -> None:
        self._gallery_repo = gallery_repo

    async def handle(self, query: ListGalleries) -> Result[GalleryListResult, DomainError]:
        """Handle ListGalleries query.

        An empty page is a successful result.

        Returns:
            Success(GalleryListResult): Requested page plus total count.
        """
        galleries = await self._gallery_repo.list_galleries(
            client_id=query.client_id,
            status=query.status,
            limit=query.limit,
            offset=query.offset,
        )
        total = await self._gallery_repo.count_galleries(
            client_id=query.client_id, status=query.status
        )
        return Success(
            value=GalleryListResult(
                galleries=[GalleryResult.from_entity(g) for g in galleries],
                total_count=total,
                limit=query.limit,
                offset=query.offset,
            )
        )


class GetGalleryStatisticsHandler:
    """Handler for GetGalleryStatistics query."""

    def __init__(self, gallery_repo: GalleryRepository) -> None:
        self._gallery_repo = gallery_repo

    async def handle(
        self, query: GetGalleryStatistics
    ) -> Result[GalleryStatistics, DomainError]:
        """Handle GetGalleryStatistics query.

        Returns:
            Success(GalleryStatistics): Counts (all zero when nothing exists).
        """
        by_status = await self._gallery_repo.count_by_status(query.client_id)
        total_images = await self._gallery_repo.total_image_count(query.client_id)
        return Success(
            value=GalleryStatistics(
                total=sum(by_status.values()),
                by_status={status.value: count for status, count in by_status.items()},
                total_images=total_images,
            )
        )
