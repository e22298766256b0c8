"""CreateGallery command handler.

Creates a draft gallery for an existing client. The slug is either the
caller's explicit slug (which must be free) or derived from the gallery name
and suffixed until unique.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, value objects)
- Uses Result types for error handling
"""

from clientgallery.application.commands.gallery_commands import CreateGallery
from clientgallery.application.dtos.gallery_dtos import GalleryResult
from clientgallery.application.errors import (
    client_not_found,
    invalid_field,
    slug_taken,
)
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.entities.gallery import Gallery
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.domain.value_objects.gallery_slug import (
    MAX_LENGTH,
    GallerySlug,
    InvalidSlugError,
    SlugExhaustedError,
    normalize_slug,
)


class CreateGalleryHandler:
    """Handler for CreateGallery command.

    Dependencies (injected via constructor):
        - GalleryRepository: Slug lookups and persistence
        - ClientRepository: Owner existence check
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        gallery_repo: GalleryRepository,
        client_repo: ClientRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            gallery_repo: Gallery repository.
            client_repo: Client repository.
            logger: Structured logger.
        """
        self._gallery_repo = gallery_repo
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: CreateGallery) -> Result[GalleryResult, DomainError]:
        """Handle CreateGallery command.

        Args:
            cmd: CreateGallery command.

        Returns:
            Success(GalleryResult): Gallery created in DRAFT status.
            Failure(NotFoundError): Client does not exist.
            Failure(ConflictError): Explicit slug taken, or no free variant.
            Failure(ValidationError): Name cannot be turned into a slug.

        Side Effects:
            - Inserts a gallery row (flushed, committed by the session owner)
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        if cmd.slug is not None:
            slug = GallerySlug.from_string(cmd.slug)
            if await self._gallery_repo.exists_by_slug(slug.value):
                self._logger.warning("gallery_slug_conflict", slug=slug.value)
                return Failure(error=slug_taken(slug.value))
        else:
            try:
                # Names may be longer than a slug; the derived slug is cut to fit
                base = GallerySlug.from_name(normalize_slug(cmd.name)[:MAX_LENGTH])
            except InvalidSlugError as e:
                return Failure(error=invalid_field("name", str(e), ErrorCode.INVALID_SLUG))
            try:
                slug = await base.make_unique_async(self._gallery_repo.exists_by_slug)
            except SlugExhaustedError as e:
                self._logger.error("gallery_slug_exhausted", error=e, slug=base.value)
                return Failure(error=slug_taken(base.value))

        gallery = Gallery.create(
            name=cmd.name,
            slug=slug,
            client_id=cmd.client_id,
            description=cmd.description,
            settings=cmd.settings,
            sort_order=await self._gallery_repo.next_sort_order(cmd.client_id),
        )

        try:
            gallery = await self._gallery_repo.save(gallery)
        except DuplicateRecordError:
            # Lost a race for the slug between the check and the insert
            self._logger.warning("gallery_slug_conflict", slug=slug.value)
            return Failure(error=slug_taken(slug.value))

        self._logger.info(
            "gallery_created",
            gallery_id=gallery.id,
            client_id=gallery.client_id,
            slug=gallery.slug.value,
        )
        return Success(value=GalleryResult.from_entity(gallery))
