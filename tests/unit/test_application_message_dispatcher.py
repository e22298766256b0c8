"""Unit tests for MessageDispatcher, CommandBus and QueryBus."""

from dataclasses import dataclass

import pytest

from clientgallery.application.bus import (
    CommandBus,
    DuplicateHandlerError,
    MessageDispatcher,
    QueryBus,
    UnregisteredHandlerError,
)
from clientgallery.core.result import Success


@dataclass(frozen=True, kw_only=True)
class Ping:
    payload: str


@dataclass(frozen=True, kw_only=True)
class LoudPing(Ping):
    pass


class EchoHandler:
    def __init__(self) -> None:
        self.received = []

    async def handle(self, message: Ping) -> Success[str]:
        self.received.append(message)
        return Success(value=message.payload)


class SyncHandler:
    def handle(self, message: Ping) -> str:
        return message.payload.upper()


@pytest.mark.unit
class TestMessageDispatcher:
    async def test_execute_forwards_to_registered_handler(self):
        dispatcher = MessageDispatcher()
        handler = EchoHandler()
        dispatcher.register(Ping, handler)
        message = Ping(payload="hello")

        result = await dispatcher.execute(message)

        assert result == Success(value="hello")
        assert handler.received == [message]

    def test_execute_returns_handler_result_unchanged(self):
        dispatcher = MessageDispatcher()
        dispatcher.register(Ping, SyncHandler())

        assert dispatcher.execute(Ping(payload="hi")) == "HI"

    def test_unregistered_message_raises(self):
        dispatcher = MessageDispatcher()

        with pytest.raises(UnregisteredHandlerError) as exc_info:
            dispatcher.execute(Ping(payload="x"))

        assert str(exc_info.value) == "No handler found for message: Ping"
        assert exc_info.value.message_type is Ping

    def test_lookup_is_by_exact_type(self):
        dispatcher = MessageDispatcher()
        dispatcher.register(Ping, SyncHandler())

        with pytest.raises(UnregisteredHandlerError):
            dispatcher.execute(LoudPing(payload="x"))

    def test_duplicate_registration_raises(self):
        dispatcher = MessageDispatcher()
        first = SyncHandler()
        dispatcher.register(Ping, first)

        with pytest.raises(
            DuplicateHandlerError, match="Handler already registered for message: Ping"
        ):
            dispatcher.register(Ping, SyncHandler())

        assert dispatcher.registered_types[Ping] is first

    def test_registration_introspection(self):
        dispatcher = MessageDispatcher()
        assert len(dispatcher) == 0
        assert not dispatcher.is_registered(Ping)

        dispatcher.register(Ping, SyncHandler())

        assert len(dispatcher) == 1
        assert dispatcher.is_registered(Ping)
        with pytest.raises(TypeError):
            dispatcher.registered_types[LoudPing] = SyncHandler()  # type: ignore[index]

    def test_buses_are_independent(self):
        commands = CommandBus()
        queries = QueryBus()
        commands.register(Ping, SyncHandler())

        assert commands.is_registered(Ping)
        assert not queries.is_registered(Ping)
        assert isinstance(commands, MessageDispatcher)
        assert isinstance(queries, MessageDispatcher)
