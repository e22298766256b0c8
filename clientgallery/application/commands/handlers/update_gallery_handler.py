"""UpdateGallery command handler.

Applies name, slug, description and settings changes. Renaming does not
touch the slug; slugs only change when explicitly given.
"""

from clientgallery.application.commands.gallery_commands import UpdateGallery
from clientgallery.application.dtos.gallery_dtos import GalleryResult
from clientgallery.application.errors import (
    gallery_not_editable,
    gallery_not_found,
    slug_taken,
)
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.errors import DuplicateRecordError, GalleryError
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.domain.value_objects.gallery_slug import GallerySlug


class UpdateGalleryHandler:
    """Handler for UpdateGallery command.

    Dependencies (injected via constructor):
        - GalleryRepository: For persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(self, gallery_repo: GalleryRepository, logger: LoggerProtocol) -> None:
        self._gallery_repo = gallery_repo
        self._logger = logger

    async def handle(self, cmd: UpdateGallery) -> Result[GalleryResult, DomainError]:
        """Handle UpdateGallery command.

        Returns:
            Success(GalleryResult): Updated gallery.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Gallery archived, or slug used by another gallery.
        """
        gallery = await self._gallery_repo.find_by_id(cmd.gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(cmd.gallery_id))

        if not gallery.can_be_edited():
            return Failure(
                error=gallery_not_editable(cmd.gallery_id, GalleryError.NOT_EDITABLE)
            )

        if cmd.slug is not None and cmd.slug != gallery.slug.value:
            if await self._gallery_repo.exists_by_slug(cmd.slug, exclude_id=gallery.id):
                self._logger.warning(
                    "gallery_slug_conflict", gallery_id=gallery.id, slug=cmd.slug
                )
                return Failure(error=slug_taken(cmd.slug))
            gallery.change_slug(GallerySlug.from_string(cmd.slug))

        # Editability was checked above, so these edits cannot be refused
        if cmd.name is not None:
            gallery.rename(cmd.name)
        if cmd.description is not None:
            gallery.update_description(cmd.description)
        if cmd.settings is not None:
            gallery.update_settings(cmd.settings)

        try:
            gallery = await self._gallery_repo.save(gallery)
        except DuplicateRecordError:
            return Failure(error=slug_taken(gallery.slug.value))

        self._logger.info("gallery_updated", gallery_id=gallery.id)
        return Success(value=GalleryResult.from_entity(gallery))
