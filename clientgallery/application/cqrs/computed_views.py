"""Views over the CQRS registry.

The registry lists every command and query once; these helpers answer the
questions the container and the compliance tests ask of it: which messages
exist, what belongs to a category, and whether the catalogue is wired
correctly.
"""

import dataclasses
import inspect
from collections import Counter

from clientgallery.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from clientgallery.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY


def get_all_commands() -> list[type]:
    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    return [meta.query_class for meta in QUERY_REGISTRY]


def get_commands_by_category(category: CQRSCategory) -> list[CommandMetadata]:
    """Command entries of one functional area, in registry order."""
    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: CQRSCategory) -> list[QueryMetadata]:
    """Query entries of one functional area, in registry order."""
    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_command_metadata(command_class: type) -> CommandMetadata | None:
    return next(
        (meta for meta in COMMAND_REGISTRY if meta.command_class is command_class),
        None,
    )


def get_query_metadata(query_class: type) -> QueryMetadata | None:
    return next(
        (meta for meta in QUERY_REGISTRY if meta.query_class is query_class),
        None,
    )


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Summarize the registry.

    Returns:
        Totals, plus per-category operation counts (commands and queries
        together) keyed by category value.
    """
    per_category = Counter(meta.category.value for meta in COMMAND_REGISTRY)
    per_category.update(meta.category.value for meta in QUERY_REGISTRY)
    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "operations_by_category": {
            category.value: per_category[category.value] for category in CQRSCategory
        },
        "paginated_queries": sum(1 for meta in QUERY_REGISTRY if meta.is_paginated),
    }


def validate_registry_consistency() -> list[str]:
    """Check the registry for wiring mistakes.

    Checks:
        - no message class is listed twice, or as both command and query
        - every message is a frozen dataclass
        - every handler has an async ``handle``
        - queries flagged as paginated declare ``limit`` and ``offset``

    Returns:
        Problem descriptions; empty when the registry is consistent.
    """
    problems: list[str] = []

    command_classes = get_all_commands()
    query_classes = get_all_queries()
    for kind, classes in (("command", command_classes), ("query", query_classes)):
        counts = Counter(c.__name__ for c in classes)
        duplicates = [name for name, n in counts.items() if n > 1]
        if duplicates:
            problems.append(f"Duplicate {kind} entries: {', '.join(sorted(duplicates))}")
    for message_class in set(command_classes) & set(query_classes):
        problems.append(f"{message_class.__name__} is registered as command and query")

    for message_class in [*command_classes, *query_classes]:
        params = getattr(message_class, "__dataclass_params__", None)
        if params is None or not params.frozen:
            problems.append(f"{message_class.__name__} is not a frozen dataclass")

    for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
        handle = getattr(meta.handler_class, "handle", None)
        if handle is None or not inspect.iscoroutinefunction(handle):
            problems.append(f"{meta.handler_class.__name__}.handle must be async")

    for meta in QUERY_REGISTRY:
        if not meta.is_paginated:
            continue
        fields = {f.name for f in dataclasses.fields(meta.query_class)}
        if not {"limit", "offset"} <= fields:
            problems.append(f"{meta.query_class.__name__} is paginated without limit/offset")

    return problems
