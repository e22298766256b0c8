"""Integration tests for the Database session manager (SQLite)."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from clientgallery.domain.entities import Client
from clientgallery.domain.value_objects import Email
from clientgallery.infrastructure.persistence.database import Database
from clientgallery.infrastructure.persistence.models import ClientModel
from clientgallery.infrastructure.persistence.repositories import ClientRepository


async def count_clients(database: Database) -> int:
    async with database.get_session() as session:
        result = await session.execute(select(func.count()).select_from(ClientModel))
        return result.scalar_one()


@pytest.mark.integration
class TestDatabaseSessions:
    async def test_commits_on_success(self, test_database):
        async with test_database.get_session() as session:
            await ClientRepository(session).save(
                Client.create(name="Anna Berg", email=Email("anna@example.com"))
            )

        assert await count_clients(test_database) == 1

    async def test_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                await ClientRepository(session).save(
                    Client.create(name="Anna Berg", email=Email("anna@example.com"))
                )
                raise RuntimeError("handler crashed")

        assert await count_clients(test_database) == 0

    async def test_check_connection(self, test_database):
        assert await test_database.check_connection() is True

    async def test_drop_all(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'drop.db'}")
        await database.create_all()
        await database.drop_all()

        try:
            with pytest.raises(OperationalError):
                await count_clients(database)
        finally:
            await database.close()
