"""Gallery status transition handlers.

PublishGallery, UnpublishGallery and ArchiveGallery share one flow: load
the gallery, ask the entity to transition, persist, log. The entity owns
the transition rules; these handlers only translate its refusals into
ConflictError results.
"""

from collections.abc import Callable

from clientgallery.application.commands.gallery_commands import (
    ArchiveGallery,
    PublishGallery,
    UnpublishGallery,
)
from clientgallery.application.dtos.gallery_dtos import GalleryResult
from clientgallery.application.errors import gallery_not_found, invalid_transition
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import ConflictError, DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.errors import GalleryError
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class _GalleryTransitionHandler:
    """Shared load → transition → save flow.

    Subclasses set ``event`` (log event name) and ``transition`` (entity
    method returning Result[None, str]).
    """

    event: str
    transition: Callable[[Gallery], Result[None, str]]

    def __init__(self, gallery_repo: GalleryRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            gallery_repo: Gallery repository.
            logger: Structured logger.
        """
        self._gallery_repo = gallery_repo
        self._logger = logger

    async def _transition(self, gallery_id: int) -> Result[GalleryResult, DomainError]:
        gallery = await self._gallery_repo.find_by_id(gallery_id)
        if gallery is None:
            return Failure(error=gallery_not_found(gallery_id))

        previous = gallery.status
        match type(self).transition(gallery):
            case Failure(error=reason):
                self._logger.warning(
                    f"{self.event}_refused",
                    gallery_id=gallery_id,
                    status=previous.value,
                    reason=reason,
                )
                return Failure(error=_refusal(reason))

        gallery = await self._gallery_repo.save(gallery)
        self._logger.info(
            self.event,
            gallery_id=gallery.id,
            from_status=previous.value,
            to_status=gallery.status.value,
        )
        return Success(value=GalleryResult.from_entity(gallery))


def _refusal(reason: str) -> ConflictError:
    if reason == GalleryError.PUBLISH_REQUIREMENTS_NOT_MET:
        return ConflictError(
            code=ErrorCode.GALLERY_NOT_PUBLISHABLE,
            message=reason,
            resource_type="Gallery",
            conflicting_field="status",
        )
    return invalid_transition("Gallery", reason)


class PublishGalleryHandler(_GalleryTransitionHandler):
    """Handler for PublishGallery command (DRAFT → PUBLISHED)."""

    event = "gallery_published"
    transition = Gallery.publish

    async def handle(self, cmd: PublishGallery) -> Result[GalleryResult, DomainError]:
        """Handle PublishGallery command.

        Returns:
            Success(GalleryResult): Gallery now published.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Already published, archived, or not publishable.
        """
        return await self._transition(cmd.gallery_id)


class UnpublishGalleryHandler(_GalleryTransitionHandler):
    """Handler for UnpublishGallery command (PUBLISHED/ARCHIVED → DRAFT)."""

    event = "gallery_unpublished"
    transition = Gallery.unpublish

    async def handle(self, cmd: UnpublishGallery) -> Result[GalleryResult, DomainError]:
        """Handle UnpublishGallery command.

        Returns:
            Success(GalleryResult): Gallery now a draft.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Already a draft.
        """
        return await self._transition(cmd.gallery_id)


class ArchiveGalleryHandler(_GalleryTransitionHandler):
    """Handler for ArchiveGallery command (DRAFT/PUBLISHED → ARCHIVED)."""

    event = "gallery_archived"
    transition = Gallery.archive

    async def handle(self, cmd: ArchiveGallery) -> Result[GalleryResult, DomainError]:
        """Handle ArchiveGallery command.

        Returns:
            Success(GalleryResult): Gallery now archived.
            Failure(NotFoundError): Gallery does not exist.
            Failure(ConflictError): Already archived.
        """
        return await self._transition(cmd.gallery_id)
