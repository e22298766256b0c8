"""RateImage command handler.

A client rates images of its own published galleries. Rating an image
again replaces the earlier verdict.
"""

from clientgallery.application.commands.image_commands import RateImage
from clientgallery.application.dtos.image_dtos import RatingResult
from clientgallery.application.errors import (
    client_not_found,
    gallery_not_found,
    image_not_found,
    not_owned,
)
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import ConflictError, DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.entities.image import Rating
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import (
    ImageRepository,
    RatingRepository,
)
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class RateImageHandler:
    """Handler for RateImage command.

    Dependencies (injected via constructor):
        - ImageRepository: Image lookup
        - GalleryRepository: Status and ownership checks
        - ClientRepository: Client existence
        - RatingRepository: Upsert of the rating
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        image_repo: ImageRepository,
        gallery_repo: GalleryRepository,
        client_repo: ClientRepository,
        rating_repo: RatingRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._image_repo = image_repo
        self._gallery_repo = gallery_repo
        self._client_repo = client_repo
        self._rating_repo = rating_repo
        self._logger = logger

    async def handle(self, cmd: RateImage) -> Result[RatingResult, DomainError]:
        """Handle RateImage command.

        Returns:
            Success(RatingResult): Rating stored (created or revised).
            Failure(NotFoundError): Image, gallery or client does not exist.
            Failure(AuthorizationError): Gallery belongs to another client.
            Failure(ConflictError): Gallery is not published, or a concurrent
                first rating by the same client was stored first.
        """
        image = await self._image_repo.find_by_id(cmd.image_id)
        if image is None:
            return Failure(error=image_not_found(cmd.image_id))

        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        gallery = await self._gallery_repo.find_by_id(image.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(image.gallery_id))
        if gallery.client_id != cmd.client_id:
            self._logger.warning(
                "rating_not_owned", gallery_id=gallery.id, client_id=cmd.client_id
            )
            return Failure(error=not_owned("Gallery", gallery.id))
        if not gallery.status.is_published:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.GALLERY_NOT_PUBLISHED,
                    message="Only images of published galleries can be rated",
                    resource_type="Gallery",
                    conflicting_field="status",
                )
            )

        rating = await self._rating_repo.find_by_image_and_client(
            cmd.image_id, cmd.client_id
        )
        if rating is None:
            rating = Rating(
                image_id=cmd.image_id,
                client_id=cmd.client_id,
                rating=cmd.rating,
                score=cmd.score,
                comment=cmd.comment,
            )
        else:
            rating.revise(cmd.rating, cmd.score, cmd.comment)

        try:
            rating = await self._rating_repo.save(rating)
        except DuplicateRecordError:
            # A concurrent first rating by the same client won the insert
            self._logger.warning(
                "rating_conflict", image_id=cmd.image_id, client_id=cmd.client_id
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT,
                    message="Image was rated concurrently; retry to revise the rating",
                    resource_type="Rating",
                    conflicting_field="image_id, client_id",
                )
            )

        self._logger.info(
            "image_rated",
            image_id=cmd.image_id,
            client_id=cmd.client_id,
            rating=rating.rating.value,
        )
        return Success(value=RatingResult.from_entity(rating))
