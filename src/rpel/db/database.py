"""
rpel.db.database

Composition root for library users.

Responsibilities:
- Own the async engine (connection pool) and session factory.
- Hand out transactional sessions for repositories.
- Dispose the pool on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from rpel.db.init_db import init_db
from rpel.db.session import create_engine, create_sessionmaker, session_scope
from rpel.observability.logging import get_logger
from rpel.settings import Settings, get_settings

log = get_logger(__name__)


class Database:
    """
    Usage::

        db = Database(get_settings())
        async with db.session() as session:
            company = await CompanyRepo(session).get(company_id)
        await db.dispose()
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._engine = create_engine(self._settings)
        self._sessionmaker = create_sessionmaker(self._engine)
        log.info(
            "engine_created",
            backend=self._engine.url.get_backend_name(),
            env=self._settings.env,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with session_scope(self._sessionmaker) as session:
            yield session

    async def init_schema(self) -> None:
        await init_db(self._engine)

    async def dispose(self) -> None:
        # Closes pooled connections; the object must not be used afterwards.
        await self._engine.dispose()
        log.info("engine_disposed")

    async def __aenter__(self) -> Database:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.dispose()
