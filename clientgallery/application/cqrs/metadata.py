"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
"""

import inspect
from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional area a command or query belongs to."""

    GALLERY = "gallery"  # Gallery lifecycle: create, update, publish, archive
    CLIENT = "client"  # Client accounts: register, update, status
    IMAGE = "image"  # Gallery images: add, remove, feature, reorder
    RATING = "rating"  # Client verdicts on images


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateGallery).
        handler_class: The handler class (e.g., CreateGalleryHandler).
        category: Functional category for organization.
        result_dto_class: DTO returned on success, None when the result is None.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateGallery,
        ...     handler_class=CreateGalleryHandler,
        ...     category=CQRSCategory.GALLERY,
        ...     result_dto_class=GalleryResult,
        ...     description="Create a draft gallery with a unique slug",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    result_dto_class: type | None = None
    description: str = ""

    @property
    def has_result_dto(self) -> bool:
        return self.result_dto_class is not None


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., ListGalleries).
        handler_class: The handler class (e.g., ListGalleriesHandler).
        category: Functional category for organization.
        is_paginated: Whether the query takes limit/offset.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    is_paginated: bool = False
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Used by the container to decide what to inject when creating handler
    instances.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__.

    Example:
        >>> get_handler_dependencies(CreateGalleryHandler)
        ['gallery_repo', 'client_repo', 'logger']
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None or init_method is object.__init__:
        return []
    params = list(inspect.signature(init_method).parameters)
    # Skip 'self' parameter
    return params[1:]
