"""Command/query buses.

Usage:
    from clientgallery.application.bus import CommandBus, QueryBus
"""

from clientgallery.application.bus.message_dispatcher import (
    CommandBus,
    DuplicateHandlerError,
    MessageDispatcher,
    MessageHandler,
    QueryBus,
    UnregisteredHandlerError,
)

__all__ = [
    "CommandBus",
    "DuplicateHandlerError",
    "MessageDispatcher",
    "MessageHandler",
    "QueryBus",
    "UnregisteredHandlerError",
]
