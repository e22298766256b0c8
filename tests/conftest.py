"""Pytest configuration shared by unit and integration tests.

- Integration tests run against a throwaway SQLite file (aiosqlite), one
  fresh schema per test
- Async tests run under pytest-asyncio auto mode (see pyproject.toml)
"""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from clientgallery.domain.protocols.logger_protocol import LoggerProtocol
from clientgallery.infrastructure.persistence.database import Database


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double that records every call."""
    return MagicMock(spec=LoggerProtocol)


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh database with all tables created.

    Yields:
        Database: Manager bound to a temporary SQLite file.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'gallery.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(test_database):
    """Session committed when the test finishes."""
    async with test_database.get_session() as session:
        yield session
