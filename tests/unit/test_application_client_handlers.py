"""Unit tests for client command handlers."""

from unittest.mock import AsyncMock

import pytest

from clientgallery.application.commands import (
    ChangeClientStatus,
    CreateClient,
    DeleteClient,
    RegenerateAccessKey,
    UpdateClient,
)
from clientgallery.application.commands.handlers import (
    ChangeClientStatusHandler,
    CreateClientHandler,
    DeleteClientHandler,
    RegenerateAccessKeyHandler,
    UpdateClientHandler,
)
from clientgallery.application.dtos import CreatedClient
from clientgallery.core.enums import ErrorCode
from clientgallery.core.result import Failure, Success
from clientgallery.domain.entities.client import Client
from clientgallery.domain.enums import ClientStatus
from clientgallery.domain.errors import ClientError, DuplicateRecordError
from clientgallery.domain.protocols.client_repository import ClientRepository
from clientgallery.domain.protocols.gallery_repository import GalleryRepository
from clientgallery.domain.value_objects.email import Email


def create_test_client(status: ClientStatus = ClientStatus.ACTIVE) -> Client:
    return Client(
        id=3, name="Anna Berg", email=Email("anna@example.com"), status=status
    )


@pytest.fixture
def client_repo():
    repo = AsyncMock(spec=ClientRepository)
    repo.exists_by_email.return_value = False

    async def save(client):
        if client.id is None:
            client.id = 3
        return client

    repo.save.side_effect = save
    return repo


@pytest.mark.unit
class TestCreateClientHandler:
    async def test_creates_pending_client_with_access_key(self, client_repo, mock_logger):
        handler = CreateClientHandler(client_repo, mock_logger)

        result = await handler.handle(
            CreateClient(name="Anna Berg", email="anna@Example.com", company="Berg AB")
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, CreatedClient)
        assert result.value.client.id == 3
        assert result.value.client.email == "anna@example.com"
        assert result.value.client.status == "pending_verification"
        assert len(result.value.access_key) == 64
        client_repo.exists_by_email.assert_awaited_once_with("anna@example.com")

    async def test_access_key_is_not_logged(self, client_repo, mock_logger):
        handler = CreateClientHandler(client_repo, mock_logger)

        result = await handler.handle(CreateClient(name="Anna", email="anna@example.com"))

        logged = str(mock_logger.mock_calls)
        assert result.value.access_key not in logged

    async def test_duplicate_email(self, client_repo, mock_logger):
        client_repo.exists_by_email.return_value = True
        handler = CreateClientHandler(client_repo, mock_logger)

        result = await handler.handle(CreateClient(name="Anna", email="anna@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        client_repo.save.assert_not_awaited()

    async def test_lost_email_race(self, client_repo, mock_logger):
        client_repo.save.side_effect = DuplicateRecordError("Client", "email")
        handler = CreateClientHandler(client_repo, mock_logger)

        result = await handler.handle(CreateClient(name="Anna", email="anna@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS


@pytest.mark.unit
class TestUpdateClientHandler:
    async def test_updates_contact(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = create_test_client()
        handler = UpdateClientHandler(client_repo, mock_logger)

        result = await handler.handle(
            UpdateClient(client_id=3, email="anna@lind.example.com", phone="555-0100")
        )

        assert isinstance(result, Success)
        assert result.value.email == "anna@lind.example.com"
        assert result.value.phone == "555-0100"
        assert result.value.name == "Anna Berg"
        client_repo.exists_by_email.assert_awaited_once_with(
            "anna@lind.example.com", exclude_id=3
        )

    async def test_email_of_other_client(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = create_test_client()
        client_repo.exists_by_email.return_value = True
        handler = UpdateClientHandler(client_repo, mock_logger)

        result = await handler.handle(UpdateClient(client_id=3, email="bo@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS

    async def test_missing_client(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = None
        handler = UpdateClientHandler(client_repo, mock_logger)

        result = await handler.handle(UpdateClient(client_id=3, name="Bo"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CLIENT_NOT_FOUND


@pytest.mark.unit
class TestChangeClientStatusHandler:
    async def test_changes_status(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = create_test_client()
        handler = ChangeClientStatusHandler(client_repo, mock_logger)

        result = await handler.handle(ChangeClientStatus(client_id=3, status="blocked"))

        assert isinstance(result, Success)
        assert result.value.status == "blocked"
        kwargs = mock_logger.info.call_args.kwargs
        assert (kwargs["from_status"], kwargs["to_status"]) == ("active", "blocked")

    async def test_blocked_client_cannot_be_activated(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = create_test_client(ClientStatus.BLOCKED)
        handler = ChangeClientStatusHandler(client_repo, mock_logger)

        result = await handler.handle(
            ChangeClientStatus(client_id=3, status=ClientStatus.ACTIVE)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATUS_TRANSITION
        assert result.error.message == ClientError.CLIENT_BLOCKED
        client_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestRegenerateAccessKeyHandler:
    async def test_issues_new_key(self, client_repo, mock_logger):
        client = create_test_client()
        old_key = client.access_key
        client_repo.find_by_id.return_value = client
        handler = RegenerateAccessKeyHandler(client_repo, mock_logger)

        result = await handler.handle(RegenerateAccessKey(client_id=3))

        assert isinstance(result, Success)
        assert isinstance(result.value, CreatedClient)
        assert result.value.access_key != old_key
        assert result.value.access_key == client.access_key
        assert len(result.value.access_key) == 64
        client_repo.save.assert_awaited_once_with(client)
        assert result.value.access_key not in repr(mock_logger.mock_calls)

    async def test_missing_client(self, client_repo, mock_logger):
        client_repo.find_by_id.return_value = None
        handler = RegenerateAccessKeyHandler(client_repo, mock_logger)

        result = await handler.handle(RegenerateAccessKey(client_id=3))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CLIENT_NOT_FOUND
        client_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestDeleteClientHandler:
    async def test_deletes_client_without_galleries(self, client_repo, mock_logger):
        gallery_repo = AsyncMock(spec=GalleryRepository)
        gallery_repo.count_galleries.return_value = 0
        client_repo.find_by_id.return_value = create_test_client()
        handler = DeleteClientHandler(client_repo, gallery_repo, mock_logger)

        result = await handler.handle(DeleteClient(client_id=3))

        assert result == Success(value=None)
        gallery_repo.count_galleries.assert_awaited_once_with(client_id=3)
        client_repo.delete.assert_awaited_once_with(3)

    async def test_client_with_galleries_refused(self, client_repo, mock_logger):
        gallery_repo = AsyncMock(spec=GalleryRepository)
        gallery_repo.count_galleries.return_value = 2
        client_repo.find_by_id.return_value = create_test_client()
        handler = DeleteClientHandler(client_repo, gallery_repo, mock_logger)

        result = await handler.handle(DeleteClient(client_id=3))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CLIENT_HAS_GALLERIES
        client_repo.delete.assert_not_awaited()
