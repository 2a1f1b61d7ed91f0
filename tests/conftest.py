"""
tests.conftest

Shared fixtures: a fresh SQLite file database per test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db.database import Database
from rpel.observability.logging import configure_logging
from rpel.settings import Settings


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    # JSON logs go to stderr; keeps stdout clean for CLI assertions.
    configure_logging(service_name="rpel-test", level="WARNING")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'rpel.db'}",
        db_host=None,
    )


@pytest_asyncio.fixture
async def db(settings: Settings) -> AsyncIterator[Database]:
    database = Database(settings)
    await database.init_schema()
    try:
        yield database
    finally:
        await database.dispose()


@pytest_asyncio.fixture
async def session(db: Database) -> AsyncIterator[AsyncSession]:
    async with db.session() as session:
        yield session
