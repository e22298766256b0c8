"""CreateClient command handler.

Registers a client with a unique email and returns its one-time access key.
"""

from clientgallery.application.commands.client_commands import CreateClient
from clientgallery.application.dtos.client_dtos import ClientResult, CreatedClient
from clientgallery.application.errors import email_taken
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.entities.client import Client
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.domain.value_objects.email import Email


class CreateClientHandler:
    """Handler for CreateClient command.

    Dependencies (injected via constructor):
        - ClientRepository: For persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(self, client_repo: ClientRepository, logger: LoggerProtocol) -> None:
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: CreateClient) -> Result[CreatedClient, DomainError]:
        """Handle CreateClient command.

        Returns:
            Success(CreatedClient): Client created, with its access key.
            Failure(ConflictError): Email already registered.
        """
        if await self._client_repo.exists_by_email(cmd.email):
            self._logger.warning("client_email_conflict", email=cmd.email)
            return Failure(error=email_taken(cmd.email))

        client = Client.create(
            name=cmd.name,
            email=Email(cmd.email),
            company=cmd.company,
            phone=cmd.phone,
            website=cmd.website,
        )

        try:
            client = await self._client_repo.save(client)
        except DuplicateRecordError:
            return Failure(error=email_taken(cmd.email))

        self._logger.info("client_created", client_id=client.id)
        return Success(
            value=CreatedClient(
                client=ClientResult.from_entity(client),
                access_key=client.access_key,
            )
        )
