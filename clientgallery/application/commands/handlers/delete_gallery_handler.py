"""DeleteGallery command handler.

Removes a gallery together with its images and their ratings.
"""

from clientgallery.application.commands.gallery_commands import DeleteGallery
from clientgallery.application.errors import gallery_not_found
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import ImageRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class DeleteGalleryHandler:
    """Handler for DeleteGallery command.

    Dependencies (injected via constructor):
        - GalleryRepository: Gallery removal
        - ImageRepository: Image and rating removal
        - LoggerProtocol: Structured logging
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

    async def handle(self, cmd: DeleteGallery) -> Result[None, DomainError]:
        """Handle DeleteGallery command.

        Returns:
            Success(None): Gallery and its images deleted.
            Failure(NotFoundError): Gallery does not exist.
        """
        gallery = await self._gallery_repo.find_by_id(cmd.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(cmd.gallery_id))

        removed_images = await self._image_repo.delete_by_gallery(cmd.gallery_id)
        await self._gallery_repo.delete(cmd.gallery_id)

        self._logger.info(
            "gallery_deleted",
            gallery_id=cmd.gallery_id,
            slug=gallery.slug.value,
            removed_images=removed_images,
        )
        return Success(value=None)
