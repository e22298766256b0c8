"""DeleteClient command handler."""

from clientgallery.application.commands.client_commands import DeleteClient
from clientgallery.application.errors import client_not_found
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import ConflictError, DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


class DeleteClientHandler:
    """Handler for DeleteClient command.

    A client that still owns galleries is not deleted; its galleries must be
    deleted first.

    Dependencies (injected via constructor):
        - ClientRepository: Client removal
        - GalleryRepository: Ownership check
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        gallery_repo: GalleryRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._client_repo = client_repo
        self._gallery_repo = gallery_repo
        self._logger = logger

    async def handle(self, cmd: DeleteClient) -> Result[None, DomainError]:
        """Handle DeleteClient command.

        Returns:
            Success(None): Client deleted.
            Failure(NotFoundError): Client does not exist.
            Failure(ConflictError): Client still owns galleries.
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        gallery_count = await self._gallery_repo.count_galleries(client_id=cmd.client_id)
        if gallery_count:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CLIENT_HAS_GALLERIES,
                    message=f"Client still owns {gallery_count} galleries",
                    resource_type="Client",
                    details={"gallery_count": str(gallery_count)},
                )
            )

        await self._client_repo.delete(cmd.client_id)
        self._logger.info("client_deleted", client_id=cmd.client_id)
        return Success(value=None)
