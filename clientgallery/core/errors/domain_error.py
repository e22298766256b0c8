"""Base error type carried by Failure results.

DomainError describes an expected, business-level failure: a missing
gallery, a taken slug, an archived gallery that cannot be edited. It is
returned inside ``Failure`` and never raised.

Malformed input is rejected earlier, when commands and value objects are
constructed, by raising ``ValueError`` subclasses.
"""

from dataclasses import dataclass

from clientgallery.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
