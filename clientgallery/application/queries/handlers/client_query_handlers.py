"""Client query handlers."""

from clientgallery.application.dtos.client_dtos import ClientListResult, ClientResult
from clientgallery.application.errors import client_not_found
from clientgallery.application.queries.client_queries import (
    GetClient,
    GetClientByAccessKey,
    ListClients,
)
from clientgallery.core.enums import ErrorCode
from clientgallery.core.errors import DomainError, NotFoundError
from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.protocols.client_repository import ClientRepository


class GetClientHandler:
    """Handler for GetClient query."""

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    async def handle(self, query: GetClient) -> Result[ClientResult, DomainError]:
        """Handle GetClient query.

        Returns:
            Success(ClientResult): Client found (access key not included).
            Failure(NotFoundError): No client with this ID.
        """
        client = await self._client_repo.find_by_id(query.client_id)
        if client is None:
            return Failure(error=client_not_found(query.client_id))
        return Success(value=ClientResult.from_entity(client))


class GetClientByAccessKeyHandler:
    """Handler for GetClientByAccessKey query.

    Returns the client whatever its status; callers decide whether a
    blocked or inactive client may proceed.
    """

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    async def handle(
        self, query: GetClientByAccessKey
    ) -> Result[ClientResult, DomainError]:
        client = await self._client_repo.find_by_access_key(query.access_key)
        if client is None:
            # The key itself is not echoed back
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.CLIENT_NOT_FOUND,
                    message="No client has this access key",
                    resource_type="Client",
                    resource_id="access_key",
                )
            )
        return Success(value=ClientResult.from_entity(client))


class ListClientsHandler:
    """Handler for ListClients query."""

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    async def handle(self, query: ListClients) -> Result[ClientListResult, DomainError]:
        """Handle ListClients query."""
        clients = await self._client_repo.list_clients(
            status=query.status,
            search=query.search,
            limit=query.limit,
            offset=query.offset,
        )
        total = await self._client_repo.count_clients(
            status=query.status, search=query.search
        )
        return Success(
            value=ClientListResult(
                clients=[ClientResult.from_entity(c) for c in clients],
                total_count=total,
                limit=query.limit,
                offset=query.offset,
            )
        )
