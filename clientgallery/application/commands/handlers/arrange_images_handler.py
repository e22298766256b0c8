"""SetFeaturedImage and ReorderImages command handlers.

Both change how a gallery presents its images without adding or removing
any, and both are refused for archived galleries.
"""

from clientgallery.application.commands.image_commands import (
    ReorderImages,
    SetFeaturedImage,
)
from clientgallery.application.dtos.image_dtos import ImageResult
from clientgallery.application.errors import (
    gallery_not_editable,
    gallery_not_found,
    image_not_found,
    invalid_field,
)
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.errors import GalleryError
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import ImageRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class SetFeaturedImageHandler:
    """Handler for SetFeaturedImage command.

    Clears the flag on every other image of the gallery, so a gallery has
    at most one featured image.
    """

    def __init__(
        self,
        gallery_repo: GalleryRepository,
        image_repo: ImageRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._gallery_repo = gallery_repo
        self._image_repo = image_repo
        self._logger = logger

    async def handle(self, cmd: SetFeaturedImage) -> Result[ImageResult, DomainError]:
        """Handle SetFeaturedImage command.

        Returns:
            Success(ImageResult): The newly featured image.
            Failure(NotFoundError): Image or gallery does not exist.
            Failure(ConflictError): Gallery archived.
        """
        image = await self._image_repo.find_by_id(cmd.image_id)
        if image is None:
            return Failure(error=image_not_found(cmd.image_id))

        gallery = await self._gallery_repo.find_by_id(image.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(image.gallery_id))
        if not gallery.can_be_edited():
            return Failure(
                error=gallery_not_editable(gallery.id, GalleryError.NOT_EDITABLE)
            )

        await self._image_repo.clear_featured(image.gallery_id)
        image.set_featured()
        image = await self._image_repo.save(image)

        self._logger.info(
            "image_featured", gallery_id=image.gallery_id, image_id=image.id
        )
        return Success(value=ImageResult.from_entity(image))


class ReorderImagesHandler:
    """Handler for ReorderImages command.

    The list must name every image of the gallery exactly once, so positions
    stay unique. A list naming a foreign image or leaving one out is refused
    as a whole.
    """

    def __init__(
        self,
        gallery_repo: GalleryRepository,
        image_repo: ImageRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._gallery_repo = gallery_repo
        self._image_repo = image_repo
        self._logger = logger

    async def handle(self, cmd: ReorderImages) -> Result[list[ImageResult], DomainError]:
        """Handle ReorderImages command.

        Returns:
            Success(list[ImageResult]): Gallery images in their new order.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Gallery archived.
            Failure(ValidationError): An ID is not an image of this gallery,
                or an image of the gallery is missing from the list.
        """
        gallery = await self._gallery_repo.find_by_id(cmd.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(cmd.gallery_id))
        if not gallery.can_be_edited():
            return Failure(
                error=gallery_not_editable(gallery.id, GalleryError.NOT_EDITABLE)
            )

        images = {
            image.id: image
            for image in await self._image_repo.list_by_gallery(cmd.gallery_id)
        }
        unknown = [image_id for image_id in cmd.image_ids if image_id not in images]
        if unknown:
            return Failure(
                error=invalid_field(
                    "image_ids",
                    f"Images {unknown} do not belong to gallery {cmd.gallery_id}",
                    ErrorCode.INVALID_IMAGE_ORDER,
                )
            )
        missing = sorted(images.keys() - set(cmd.image_ids))
        if missing:
            return Failure(
                error=invalid_field(
                    "image_ids",
                    f"Images {missing} of gallery {cmd.gallery_id} are not listed",
                    ErrorCode.INVALID_IMAGE_ORDER,
                )
            )

        reordered = []
        for position, image_id in enumerate(cmd.image_ids):
            image = images[image_id]
            image.move_to(position)
            reordered.append(await self._image_repo.save(image))

        self._logger.info(
            "images_reordered", gallery_id=cmd.gallery_id, count=len(reordered)
        )
        return Success(value=[ImageResult.from_entity(image) for image in reordered])
