"""Client commands (CQRS write operations)."""

from dataclasses import dataclass

from clientgallery.core.validation import require_positive_id, require_text
from clientgallery.domain.enums.client_status import ClientStatus
from clientgallery.domain.value_objects.email import Email


@dataclass(frozen=True, kw_only=True)
class CreateClient:
    """Register a new client.

    The email is validated and stored in normalized form. The client starts
    in PENDING_VERIFICATION with a freshly generated access key.

    Raises:
        ValueError: Blank name or malformed email.

    Example:
        >>> command = CreateClient(name="Anna Berg", email="anna@example.com")
        >>> result = await command_bus.execute(command)
    """

    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    website: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, "name"))
        object.__setattr__(self, "email", Email(self.email).value)


@dataclass(frozen=True, kw_only=True)
class UpdateClient:
    """Edit a client's contact details. None leaves a field unchanged."""

    client_id: int
    name: str | None = None
    email: str | None = None
    company: str | None = None
    phone: str | None = None
    website: str | None = None

    def __post_init__(self) -> None:
        require_positive_id(self.client_id, "client_id")
        if self.name is not None:
            object.__setattr__(self, "name", require_text(self.name, "name"))
        if self.email is not None:
            object.__setattr__(self, "email", Email(self.email).value)


@dataclass(frozen=True, kw_only=True)
class ChangeClientStatus:
    """Activate, deactivate or block a client.

    Attributes:
        client_id: Client to change.
        status: Target status (enum or its string value).
    """

    client_id: int
    status: ClientStatus

    def __post_init__(self) -> None:
        require_positive_id(self.client_id, "client_id")
        object.__setattr__(self, "status", ClientStatus(self.status))


@dataclass(frozen=True, kw_only=True)
class DeleteClient:
    """Delete a client. Refused while the client still owns galleries."""

    client_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.client_id, "client_id")


@dataclass(frozen=True, kw_only=True)
class RegenerateAccessKey:
    """Issue a new access key for a client. The old key stops working."""

    client_id: int

    def __post_init__(self) -> None:
        require_positive_id(self.client_id, "client_id")
