"""Client repository protocol."""

from typing import Protocol

from clientgallery.domain.entities.client import Client
from clientgallery.domain.enums.client_status import ClientStatus


class ClientRepository(Protocol):
    """Protocol for client persistence operations."""

    async def find_by_id(self, client_id: int) -> Client | None:
        """Find client by ID.

        Returns:
            Client entity if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Client | None:
        """Find client by normalized email address."""
        ...

    async def find_by_access_key(self, access_key: str) -> Client | None:
        """Find client by access key."""
        ...

    async def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether an email is used by a client other than ``exclude_id``."""
        ...

    async def list_clients(
        self,
        *,
        status: ClientStatus | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Client]:
        """List clients ordered by name.

        Args:
            status: Only clients in this status.
            search: Case-insensitive substring of name, email or company.
            limit: Page size.
            offset: Rows to skip.
        """
        ...

    async def count_clients(
        self,
        *,
        status: ClientStatus | None = None,
        search: str | None = None,
    ) -> int:
        """Count clients matching the same filters as list_clients."""
        ...

    async def save(self, client: Client) -> Client:
        """Insert or update a client, assigning its ID on insert.

        Raises:
            DuplicateRecordError: If email or access key is already used.
        """
        ...

    async def delete(self, client_id: int) -> bool:
        """Delete a client row. Returns True if a row was deleted."""
        ...
