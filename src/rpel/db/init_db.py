"""
rpel.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from rpel.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from rpel.db.base import Base
from rpel.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Existing tables are left untouched.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("schema_created", tables=len(Base.metadata.tables))

