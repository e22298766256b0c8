"""CQRS Registry - Single Source of Truth for Commands and Queries.

Usage:
    from clientgallery.application.cqrs import COMMAND_REGISTRY, QUERY_REGISTRY
"""

from clientgallery.application.cqrs.computed_views import (
    get_all_commands,
    get_all_queries,
    get_command_metadata,
    get_commands_by_category,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)
from clientgallery.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    get_handler_dependencies,
)
from clientgallery.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

__all__ = [
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    "get_all_commands",
    "get_all_queries",
    "get_command_metadata",
    "get_commands_by_category",
    "get_handler_dependencies",
    "get_queries_by_category",
    "get_query_metadata",
    "get_statistics",
    "validate_registry_consistency",
]
