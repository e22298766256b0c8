"""Client DTOs (Data Transfer Objects).

The access key is only exposed by ``CreatedClient``, returned once when
the key is issued or regenerated. Other results never carry it.
"""

from dataclasses import dataclass
from datetime import datetime

from clientgallery.domain.entities.client import Client


@dataclass
class ClientResult:
    """Single client result DTO (no access key)."""

    id: int
    name: str
    email: str
    company: str | None
    phone: str | None
    website: str | None
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResult":
        """Map a persisted Client entity to its DTO."""
        assert client.id is not None, "client must be saved before mapping"
        return cls(
            id=client.id,
            name=client.name,
            email=client.email.value,
            company=client.company,
            phone=client.phone,
            website=client.website,
            status=client.status.value,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


@dataclass
class CreatedClient:
    """A client plus its access key (CreateClient, RegenerateAccessKey).

    Attributes:
        client: Created client.
        access_key: Key to hand to the client; not retrievable later.
    """

    client: ClientResult
    access_key: str


@dataclass
class ClientListResult:
    """Page of clients with total count."""

    clients: list[ClientResult]
    total_count: int
    limit: int
    offset: int
