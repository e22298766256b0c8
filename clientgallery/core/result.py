"""Result types for railway-oriented programming.

Handlers report expected outcomes (not found, conflict, refused transition)
as values instead of raising. Callers pattern-match on the returned object.

Usage:
    result = await bus.execute(PublishGallery(gallery_id=7))
    match result:
        case Success(value=gallery):
            print(f"Published {gallery.slug}")
        case Failure(error=error):
            print(f"Refused: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
