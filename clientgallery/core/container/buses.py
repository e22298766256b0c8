"""Command and query bus factories.

Buses are session-scoped: build them inside a unit of work and discard
them when the session closes. Every registry entry is wired, so an
unresolvable handler dependency fails here rather than on first dispatch.

Usage:
    async with database.get_session() as session:
        commands = build_command_bus(session, logger)
        result = await commands.execute(CreateClient(name="Anna", email="a@x.io"))
"""

from sqlalchemy.ext.asyncio import AsyncSession

from clientgallery.application.bus import CommandBus, QueryBus
from clientgallery.application.cqrs import COMMAND_REGISTRY, QUERY_REGISTRY
from clientgallery.core.container.handler_factory import (
    create_handler,
    create_repositories,
)
from clientgallery.domain.protocols.logger_protocol import LoggerProtocol


def build_command_bus(session: AsyncSession, logger: LoggerProtocol) -> CommandBus:
    """Build a command bus with a handler for every registered command.

    Args:
        session: Unit-of-work session shared by all handlers.
        logger: Structured logger injected into handlers.

    Returns:
        CommandBus: Fully registered bus.
    """
    repositories = create_repositories(session)
    bus = CommandBus()
    for meta in COMMAND_REGISTRY:
        handler = create_handler(
            meta.handler_class, session, logger, repositories=repositories
        )
        bus.register(meta.command_class, handler)
    return bus


def build_query_bus(session: AsyncSession, logger: LoggerProtocol) -> QueryBus:
    """Build a query bus with a handler for every registered query."""
    repositories = create_repositories(session)
    bus = QueryBus()
    for meta in QUERY_REGISTRY:
        handler = create_handler(
            meta.handler_class, session, logger, repositories=repositories
        )
        bus.register(meta.query_class, handler)
    return bus
