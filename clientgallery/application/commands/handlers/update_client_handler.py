"""UpdateClient, ChangeClientStatus and RegenerateAccessKey command handlers."""

from clientgallery.application.commands.client_commands import (
    ChangeClientStatus,
    RegenerateAccessKey,
    UpdateClient,
)
from clientgallery.application.dtos.client_dtos import ClientResult, CreatedClient
from clientgallery.application.errors import (
    client_not_found,
    email_taken,
    invalid_transition,
)
from clientgallery.core.errors import DomainError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.domain.value_objects.email import Email


class UpdateClientHandler:
    """Handler for UpdateClient command.

    Dependencies (injected via constructor):
        - ClientRepository: For persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(self, client_repo: ClientRepository, logger: LoggerProtocol) -> None:
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: UpdateClient) -> Result[ClientResult, DomainError]:
        """Handle UpdateClient command.

        Returns:
            Success(ClientResult): Updated client.
            Failure(NotFoundError): Client does not exist.
            Failure(ConflictError): New email belongs to another client.
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        email = None
        if cmd.email is not None and cmd.email != client.email.value:
            if await self._client_repo.exists_by_email(cmd.email, exclude_id=client.id):
                return Failure(error=email_taken(cmd.email))
            email = Email(cmd.email)

        client.update_contact(
            name=cmd.name,
            email=email,
            company=cmd.company,
            phone=cmd.phone,
            website=cmd.website,
        )

        try:
            client = await self._client_repo.save(client)
        except DuplicateRecordError:
            return Failure(error=email_taken(client.email.value))

        self._logger.info("client_updated", client_id=client.id)
        return Success(value=ClientResult.from_entity(client))


class ChangeClientStatusHandler:
    """Handler for ChangeClientStatus command."""

    def __init__(self, client_repo: ClientRepository, logger: LoggerProtocol) -> None:
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: ChangeClientStatus) -> Result[ClientResult, DomainError]:
        """Handle ChangeClientStatus command.

        Returns:
            Success(ClientResult): Client in its new status.
            Failure(NotFoundError): Client does not exist.
            Failure(ConflictError): Transition refused (e.g. activating a blocked client).
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        previous = client.status
        match client.change_status(cmd.status):
            case Failure(error=reason):
                return Failure(error=invalid_transition("Client", reason))

        client = await self._client_repo.save(client)
        self._logger.info(
            "client_status_changed",
            client_id=client.id,
            from_status=previous.value,
            to_status=client.status.value,
        )
        return Success(value=ClientResult.from_entity(client))


class RegenerateAccessKeyHandler:
    """Handler for RegenerateAccessKey command.

    The new key is returned once, like the key issued by CreateClient, and
    is never logged.
    """

    def __init__(self, client_repo: ClientRepository, logger: LoggerProtocol) -> None:
        self._client_repo = client_repo
        self._logger = logger

    async def handle(self, cmd: RegenerateAccessKey) -> Result[CreatedClient, DomainError]:
        """Handle RegenerateAccessKey command.

        Returns:
            Success(CreatedClient): Client with its new access key.
            Failure(NotFoundError): Client does not exist.
        """
        client = await self._client_repo.find_by_id(cmd.client_id)
        if client is None:
            return Failure(error=client_not_found(cmd.client_id))

        access_key = client.regenerate_access_key()
        client = await self._client_repo.save(client)

        self._logger.info("client_access_key_regenerated", client_id=client.id)
        return Success(
            value=CreatedClient(
                client=ClientResult.from_entity(client), access_key=access_key
            )
        )
