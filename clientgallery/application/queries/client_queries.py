"""Client queries (CQRS read operations)."""

from dataclasses import dataclass

from clientgallery.core.validation import (
    require_page,
    require_positive_id,
    require_text,
)
from clientgallery.domain.enums.client_status import ClientStatus


@dataclass(frozen=True, kw_only=True)
class GetClient:
    """Fetch one client by ID."""

    client_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.client_id, "client_id")


@dataclass(frozen=True, kw_only=True)
class ListClients:
    """List clients ordered by name.

    Attributes:
        status: Only clients in this status.
        search: Case-insensitive substring of name, email or company.
        limit: Page size.
        offset: Rows to skip.
    """

    status: ClientStatus | None = None
    search: str | None = None
    limit: int = 20
    offset: int = 0

    def __post_init__(self) -> None:
        if self.status is not None:
            object.__setattr__(self, "status", ClientStatus(self.status))
        if self.search is not None:
            object.__setattr__(self, "search", self.search.strip() or None)
        require_page(self.limit, self.offset)


@dataclass(frozen=True, kw_only=True)
class GetClientByAccessKey:
    """Resolve the client that owns an access key (client sign-in)."""

    access_key: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "access_key",
            require_text(self.access_key, "access_key", max_length=64).lower(),
        )
