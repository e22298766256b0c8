"""Command and query dispatch.

A dispatcher maps a message class to exactly one handler and forwards each
message to it. Two independent dispatchers exist: ``CommandBus`` for
state-changing commands and ``QueryBus`` for reads. They share the same
mechanism and keep separate tables.

Architecture:
    - Dictionary-based registry (message type → single handler)
    - Exact type matching only (no inheritance matching)
    - Pass-through: the handler's return value is returned unchanged
    - Registration happens once, at startup, in the container

Usage:
    >>> bus = CommandBus()
    >>> bus.register(CreateGallery, CreateGalleryHandler(...))
    >>> result = await bus.execute(CreateGallery(name="Wedding", client_id=1))

    Handlers are async, so ``execute`` returns the coroutine produced by
    ``handle`` and the caller awaits it.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol


class MessageHandler(Protocol):
    """Anything with a ``handle(message)`` method."""

    def handle(self, message: Any) -> Any:
        """Process one message and return its result."""
        ...


class UnregisteredHandlerError(LookupError):
    """Raised when a message type has no registered handler.

    Attributes:
        message_type: The message class that could not be dispatched.
    """

    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(f"No handler found for message: {message_type.__name__}")


class DuplicateHandlerError(ValueError):
    """Raised when a second handler is registered for the same message type."""

    def __init__(self, message_type: type) -> None:
        self.message_type = message_type
        super().__init__(
            f"Handler already registered for message: {message_type.__name__}"
        )


class MessageDispatcher:
    """Exact-type message → handler dispatcher.

    Attributes:
        _handlers: Registered handlers keyed by message class.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, MessageHandler] = {}

    def register(self, message_type: type, handler: MessageHandler) -> None:
        """Associate ``handler`` with ``message_type``.

        Args:
            message_type: Command or query class.
            handler: Object whose ``handle`` accepts instances of the class.

        Raises:
            DuplicateHandlerError: If the type already has a handler.
        """
        if message_type in self._handlers:
            raise DuplicateHandlerError(message_type)
        self._handlers[message_type] = handler

    def execute(self, message: Any) -> Any:
        """Forward ``message`` to its handler.

        Args:
            message: Command or query instance.

        Returns:
            Exactly what the handler's ``handle`` returned.

        Raises:
            UnregisteredHandlerError: If no handler exists for ``type(message)``.
        """
        handler = self._handlers.get(type(message))
        if handler is None:
            raise UnregisteredHandlerError(type(message))
        return handler.handle(message)

    def is_registered(self, message_type: type) -> bool:
        return message_type in self._handlers

    @property
    def registered_types(self) -> Mapping[type, MessageHandler]:
        """Read-only view of the handler table."""
        return MappingProxyType(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


class CommandBus(MessageDispatcher):
    """Dispatcher for state-changing commands."""


class QueryBus(MessageDispatcher):
    """Dispatcher for read-only queries."""
