"""Client account states.

State Machine:
    PENDING_VERIFICATION → ACTIVE ↔ INACTIVE
    Any → BLOCKED

Usage:
    from clientgallery.domain.enums import ClientStatus

    if client.status == ClientStatus.ACTIVE:
        # Client may view its published galleries
"""

from enum import Enum


class ClientStatus(str, Enum):
    """Client account states.

    String Enum:
        Inherits from str for easy serialization and database storage.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    BLOCKED = "blocked"
    PENDING_VERIFICATION = "pending_verification"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status."""
        return value in cls.values()
