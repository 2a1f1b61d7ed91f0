"""
tests.test_session

Transaction boundaries and error translation of `Database.session`.
"""

from __future__ import annotations

import pytest
from sqlalchemy import text

from rpel.db.database import Database
from rpel.db.repositories import ScopeRepo
from rpel.errors import NotFoundError, QueryError
from rpel.schemas import Scope


@pytest.mark.asyncio
async def test_commit_is_visible_to_next_session(db: Database) -> None:
    async with db.session() as session:
        scope = await ScopeRepo(session).insert(Scope(name="Energy"))

    async with db.session() as session:
        assert (await ScopeRepo(session).get(scope.id)).name == "Energy"


@pytest.mark.asyncio
async def test_error_in_block_rolls_back(db: Database) -> None:
    with pytest.raises(RuntimeError):
        async with db.session() as session:
            await ScopeRepo(session).insert(Scope(name="Energy"))
            raise RuntimeError("boom")

    async with db.session() as session:
        assert await ScopeRepo(session).list_all() == []


@pytest.mark.asyncio
async def test_driver_errors_become_query_errors(db: Database) -> None:
    with pytest.raises(QueryError) as excinfo:
        async with db.session() as session:
            await session.execute(text("SELECT * FROM no_such_table"))
    assert excinfo.value.__cause__ is not None


@pytest.mark.asyncio
async def test_not_found_is_not_wrapped(db: Database) -> None:
    with pytest.raises(NotFoundError):
        async with db.session() as session:
            await ScopeRepo(session).get(1)


@pytest.mark.asyncio
async def test_init_schema_is_idempotent(db: Database) -> None:
    await db.init_schema()
    async with db.session() as session:
        assert await ScopeRepo(session).list_all() == []
