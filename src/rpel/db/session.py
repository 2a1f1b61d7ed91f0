"""
rpel.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine (and its connection pool) from settings.
- Create the async sessionmaker with safe defaults.
- Provide a transactional session scope that commits, rolls back and
  translates driver errors into `QueryError`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rpel.errors import QueryError
from rpel.observability.logging import get_logger
from rpel.settings import Settings

log = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    url = make_url(settings.sqlalchemy_url())
    options: dict[str, Any] = {"echo": settings.echo_sql}
    # SQLite picks its own pool class; sizing only applies to server backends.
    # pool_size is a hard cap unless max_overflow is raised.
    is_sqlite = url.get_backend_name() == "sqlite"
    if not is_sqlite:
        options["pool_size"] = settings.pool_size
        options["max_overflow"] = settings.max_overflow
        options["pool_pre_ping"] = True
    engine = create_async_engine(url, **options)
    if is_sqlite:
        # SQLite ignores REFERENCES clauses unless switched on per connection.
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    One unit of work: commit when the block exits cleanly, roll back otherwise.
    """

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as exc:
            await session.rollback()
            log.warning("transaction_rolled_back", error=str(exc))
            raise QueryError(f"error executing DB query: {exc}") from exc
        except Exception:
            await session.rollback()
            raise


# --- Module Notes -----------------------------------------------------------
# Repositories never commit; the caller decides the transaction boundary by
# choosing how many repository calls share one `session_scope`.
