"""AddImage command handler.

Appends an image at the end of a gallery and keeps the gallery's image
count in step.
"""

from clientgallery.application.commands.image_commands import AddImage
from clientgallery.application.dtos.image_dtos import ImageResult
from clientgallery.application.errors import gallery_not_editable, gallery_not_found
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import ConflictError, DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.entities.image import Image
from clientgallery.domain.errors import DuplicateRecordError, GalleryError
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.image_repository import ImageRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class AddImageHandler:
    """Handler for AddImage command.

    Dependencies (injected via constructor):
        - GalleryRepository: Gallery lookup and image count update
        - ImageRepository: Image persistence
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

    async def handle(self, cmd: AddImage) -> Result[ImageResult, DomainError]:
        """Handle AddImage command.

        Returns:
            Success(ImageResult): Image stored at the next sort position.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Gallery archived, or filename already used.
        """
        gallery = await self._gallery_repo.find_by_id(cmd.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(cmd.gallery_id))

        if not gallery.can_be_edited():
            return Failure(
                error=gallery_not_editable(cmd.gallery_id, GalleryError.NOT_EDITABLE)
            )

        image = Image(
            gallery_id=cmd.gallery_id,
            filename=cmd.filename,
            original_filename=cmd.original_filename,
            file_size=cmd.file_size,
            mime_type=cmd.mime_type,
            width=cmd.width,
            height=cmd.height,
            title=cmd.title,
            description=cmd.description,
            alt_text=cmd.alt_text,
            metadata=dict(cmd.metadata),
            sort_order=await self._image_repo.next_sort_order(cmd.gallery_id),
        )

        try:
            image = await self._image_repo.save(image)
        except DuplicateRecordError:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.IMAGE_ALREADY_EXISTS,
                    message=f"Gallery already contains {cmd.filename}",
                    resource_type="Image",
                    conflicting_field="filename",
                )
            )

        gallery.add_image()
        await self._gallery_repo.save(gallery)

        self._logger.info(
            "image_added",
            gallery_id=cmd.gallery_id,
            image_id=image.id,
            file_size=image.file_size,
        )
        return Success(value=ImageResult.from_entity(image))
