"""Container module - Centralized dependency injection.

- infrastructure: Logger and database factories
- handler_factory: Handler auto-wiring from constructor annotations
- buses: Session-scoped command/query buses built from the CQRS registry
"""

from clientgallery.core.container.buses import build_command_bus, build_query_bus
from clientgallery.core.container.handler_factory import (
    UnresolvedDependencyError,
    create_handler,
)
from clientgallery.core.container.infrastructure import (
    create_database,
    create_logger,
)

__all__ = [
    "UnresolvedDependencyError",
    "build_command_bus",
    "build_query_bus",
    "create_database",
    "create_handler",
    "create_logger",
]
