"""RemoveImage command handler."""

from clientgallery.application.commands.image_commands import RemoveImage
from clientgallery.application.errors import (
    gallery_not_editable,
    gallery_not_found,
    image_not_found,
)
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.errors import GalleryError
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import ImageRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class RemoveImageHandler:
    """Handler for RemoveImage command.

    Deletes the image with its ratings and decrements the gallery's count.
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

    async def handle(self, cmd: RemoveImage) -> Result[None, DomainError]:
        """Handle RemoveImage command.

        Returns:
            Success(None): Image removed.
            Failure(NotFoundError): Image (or its gallery) does not exist.
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

        await self._image_repo.delete(cmd.image_id)
        gallery.remove_image()
        await self._gallery_repo.save(gallery)

        self._logger.info(
            "image_removed", gallery_id=gallery.id, image_id=cmd.image_id
        )
        return Success(value=None)
