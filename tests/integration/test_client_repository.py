"""Integration tests for ClientRepository.

Tests cover:
- Save and update, lookups by ID/email/access key
- Email existence check with self-exclusion
- Listing ordered by name with status filter and text search
- Unique email violations surface as DuplicateRecordError
- Delete
"""

import pytest

from clientgallery.domain.enums import ClientStatus
from clientgallery.domain.errors import DuplicateRecordError
from clientgallery.domain.value_objects import Email
from clientgallery.infrastructure.persistence.repositories import ClientRepository


@pytest.mark.integration
class TestClientRepositorySave:
    async def test_insert_and_lookups(self, session, add_client):
        client = await add_client(company="Berg Studio", phone="+49 30 1234")
        repo = ClientRepository(session)

        by_id = await repo.find_by_id(client.id)
        by_email = await repo.find_by_email("anna@example.com")
        by_key = await repo.find_by_access_key(client.access_key)

        assert by_id.email == Email("anna@example.com")
        assert by_id.company == "Berg Studio"
        assert by_id.status is ClientStatus.PENDING_VERIFICATION
        assert by_email.id == by_key.id == client.id

    async def test_update(self, session, add_client):
        client = await add_client()
        repo = ClientRepository(session)
        old_key = client.access_key

        client.update_contact(name="Anna Berg-Lind", website="https://berg.example")
        client.activate()
        new_key = client.regenerate_access_key()
        await repo.save(client)

        found = await repo.find_by_id(client.id)
        assert found.name == "Anna Berg-Lind"
        assert found.status is ClientStatus.ACTIVE
        assert found.access_key == new_key
        assert await repo.find_by_access_key(old_key) is None

    async def test_duplicate_email_raises(self, session, add_client):
        await add_client()

        with pytest.raises(DuplicateRecordError, match="Duplicate Client"):
            await add_client(name="Someone Else")

    async def test_exists_by_email(self, session, add_client):
        client = await add_client()
        repo = ClientRepository(session)

        assert await repo.exists_by_email("anna@example.com")
        assert not await repo.exists_by_email("anna@example.com", exclude_id=client.id)
        assert not await repo.exists_by_email("nobody@example.com")


@pytest.mark.integration
class TestClientRepositoryListing:
    async def test_ordered_by_name(self, session, add_client):
        await add_client(name="Carla Diaz", email="carla@example.com")
        await add_client(name="Anna Berg", email="anna@example.com")
        await add_client(name="Ben Ode", email="ben@example.com")
        repo = ClientRepository(session)

        names = [c.name for c in await repo.list_clients()]
        page = [c.name for c in await repo.list_clients(limit=1, offset=1)]

        assert names == ["Anna Berg", "Ben Ode", "Carla Diaz"]
        assert page == ["Ben Ode"]

    async def test_search_matches_name_email_company(self, session, add_client):
        await add_client(name="Anna Berg", email="anna@example.com")
        await add_client(name="Ben Ode", email="ben@studio.io")
        await add_client(name="Carla Diaz", email="carla@example.com", company="Studio Nord")
        repo = ClientRepository(session)

        matches = await repo.list_clients(search="STUDIO")

        assert [c.name for c in matches] == ["Ben Ode", "Carla Diaz"]
        assert await repo.count_clients(search="studio") == 2
        assert await repo.count_clients(search="berg") == 1

    async def test_status_filter(self, session, add_client):
        active = await add_client()
        active.activate()
        repo = ClientRepository(session)
        await repo.save(active)
        await add_client(name="Ben Ode", email="ben@example.com")

        matches = await repo.list_clients(status=ClientStatus.ACTIVE)

        assert [c.id for c in matches] == [active.id]
        assert await repo.count_clients(status=ClientStatus.PENDING_VERIFICATION) == 1


@pytest.mark.integration
class TestClientRepositoryDelete:
    async def test_delete(self, session, add_client):
        client = await add_client()
        repo = ClientRepository(session)

        assert await repo.delete(client.id) is True
        assert await repo.find_by_id(client.id) is None
        assert await repo.delete(client.id) is False
