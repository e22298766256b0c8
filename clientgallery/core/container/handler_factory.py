"""Handler Factory - Auto-wire handler dependencies.

Introspects handler constructors and resolves each parameter from its type
annotation:
- ``*Repository``: SQLAlchemy repository bound to the current session
- ``LoggerProtocol``: the logger passed in
- Explicit overrides by parameter name win over both

Usage:
    from clientgallery.core.container.handler_factory import create_handler

    async with db.get_session() as session:
        handler = create_handler(CreateGalleryHandler, session, logger)
"""

import inspect
from typing import Any, TypeVar, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.infrastructure.persistence.repositories import (
    ClientRepository,
    GalleryRepository,
    ImageRepository,
    RatingRepository,
)

# Type variable for handler classes
T = TypeVar("T")

# Repository types that need session injection
REPOSITORY_TYPES: dict[str, type] = {
    "ClientRepository": ClientRepository,
    "GalleryRepository": GalleryRepository,
    "ImageRepository": ImageRepository,
    "RatingRepository": RatingRepository,
}


class UnresolvedDependencyError(LookupError):
    """Raised when a handler parameter has no known provider."""

    def __init__(self, handler_class: type, param_name: str, type_name: str) -> None:
        self.handler_class = handler_class
        self.param_name = param_name
        super().__init__(
            f"Cannot resolve dependency '{param_name}: {type_name}' "
            f"for {handler_class.__name__}"
        )


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, string forward references and ``X | None`` unions.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.
    """
    args = getattr(annotation, "__args__", None)
    if args:
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, str]:
    """Map each handler ``__init__`` parameter to its annotated type name.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict of parameter name to type name, in signature order.
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None or init_method is object.__init__:
        return {}

    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference: fall back to raw annotations
        hints = {}

    dependencies: dict[str, str] = {}
    for name, param in inspect.signature(init_method).parameters.items():
        if name == "self":
            continue
        annotation = hints.get(name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = name
        dependencies[name] = get_type_name(annotation)
    return dependencies


def create_repositories(session: AsyncSession) -> dict[str, Any]:
    """Instantiate every repository type against one session.

    Returns:
        Dict of repository type name to instance.
    """
    return {name: cls(session=session) for name, cls in REPOSITORY_TYPES.items()}


def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    logger: LoggerProtocol,
    *,
    repositories: dict[str, Any] | None = None,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        session: Database session for repositories.
        logger: Logger injected for ``LoggerProtocol`` parameters.
        repositories: Pre-built repositories to share between handlers.
        **overrides: Explicit dependency overrides by parameter name.

    Returns:
        Handler instance with injected dependencies.

    Raises:
        UnresolvedDependencyError: If a parameter cannot be resolved.
    """
    if repositories is None:
        repositories = create_repositories(session)

    kwargs: dict[str, Any] = {}
    for param_name, type_name in analyze_handler_dependencies(handler_class).items():
        if param_name in overrides:
            kwargs[param_name] = overrides[param_name]
        elif type_name in repositories:
            kwargs[param_name] = repositories[type_name]
        elif type_name == "LoggerProtocol":
            kwargs[param_name] = logger
        else:
            raise UnresolvedDependencyError(handler_class, param_name, type_name)

    return handler_class(**kwargs)
