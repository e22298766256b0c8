"""Client domain entity.

The customer a photographer prepares galleries for. A client signs in to
its galleries with a generated access key instead of a password.

Usage:
    from clientgallery.domain.entities import Client
    from clientgallery.domain.value_objects import Email

    client = Client.create(name="Anna Berg", email=Email("anna@example.com"))
    client.activate()
"""

import re
import secrets
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from clientgallery.core.result import Failure, Result, Success
from clientgallery.domain.enums.client_status import ClientStatus
from clientgallery.domain.errors.client_error import ClientError
from clientgallery.domain.value_objects.email import Email

MAX_NAME_LENGTH = 255
ACCESS_KEY_BYTES = 32

_ACCESS_KEY_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def generate_access_key() -> str:
    """Generate a random 64-character hex access key."""
    return secrets.token_hex(ACCESS_KEY_BYTES)


@dataclass
class Client:
    """Gallery client.

    Attributes:
        name: Contact name.
        email: Unique contact email.
        access_key: Secret key the client uses to open its galleries.
        id: Database ID, None until first save.
        company: Company name.
        phone: Phone number.
        website: Website URL.
        status: Account status.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    name: str
    email: Email
    access_key: str = field(default_factory=generate_access_key)
    id: int | None = None
    company: str | None = None
    phone: str | None = None
    website: str | None = None
    status: ClientStatus = ClientStatus.PENDING_VERIFICATION
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate client after initialization.

        Raises:
            ValueError: If name or access key is invalid.
        """
        self.name = _clean_name(self.name)
        if not _ACCESS_KEY_PATTERN.match(self.access_key):
            raise ValueError(ClientError.INVALID_ACCESS_KEY)

    @classmethod
    def create(
        cls,
        *,
        name: str,
        email: Email,
        company: str | None = None,
        phone: str | None = None,
        website: str | None = None,
    ) -> "Client":
        """Create a new client awaiting verification, with a fresh access key."""
        return cls(
            name=name,
            email=email,
            company=company,
            phone=phone,
            website=website,
        )

    def is_active(self) -> bool:
        return self.status == ClientStatus.ACTIVE

    def update_contact(
        self,
        *,
        name: str | None = None,
        email: Email | None = None,
        company: str | None = None,
        phone: str | None = None,
        website: str | None = None,
    ) -> None:
        """Replace the given contact fields; None leaves a field unchanged.

        Raises:
            ValueError: If the new name is empty or too long.
        """
        if name is not None:
            self.name = _clean_name(name)
        if email is not None:
            self.email = email
        if company is not None:
            self.company = company
        if phone is not None:
            self.phone = phone
        if website is not None:
            self.website = website
        self._touch()

    def change_status(self, status: ClientStatus) -> Result[None, str]:
        """Move to ``status``.

        Returns:
            Success(None): Status changed.
            Failure(error): Blocked client activated directly, or no change.
        """
        if status == self.status:
            if status == ClientStatus.ACTIVE:
                return Failure(error=ClientError.ALREADY_ACTIVE)
            if status == ClientStatus.BLOCKED:
                return Failure(error=ClientError.ALREADY_BLOCKED)
            return Success(value=None)
        if self.status == ClientStatus.BLOCKED and status == ClientStatus.ACTIVE:
            return Failure(error=ClientError.CLIENT_BLOCKED)

        self.status = status
        self._touch()
        return Success(value=None)

    def activate(self) -> Result[None, str]:
        return self.change_status(ClientStatus.ACTIVE)

    def deactivate(self) -> Result[None, str]:
        return self.change_status(ClientStatus.INACTIVE)

    def block(self) -> Result[None, str]:
        return self.change_status(ClientStatus.BLOCKED)

    def regenerate_access_key(self) -> str:
        """Replace the access key, invalidating the old one."""
        self.access_key = generate_access_key()
        self._touch()
        return self.access_key

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain types. The access key is never included."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email.value,
            "company": self.company,
            "phone": self.phone,
            "website": self.website,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValueError(ClientError.NAME_REQUIRED)
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValueError(ClientError.NAME_TOO_LONG)
    return cleaned
