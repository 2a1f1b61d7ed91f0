"""
rpel.db.repositories.emails

Repository for the `emails` child table.

Responsibilities:
- Replace all emails of a company or contact (delete, then reinsert).
- Fetch emails of many owners at once for listings.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Literal

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db import models
from rpel.db.repositories.base import group_distinct, local_now
from rpel.observability.logging import get_logger

log = get_logger(__name__)

Owner = Literal["company", "contact"]

_OWNER_COLUMNS = {
    "company": models.Email.company_id,
    "contact": models.Email.contact_id,
}


class EmailRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def replace(self, owner: Owner, owner_id: int, emails: Iterable[str]) -> None:
        await self.delete_for(owner, owner_id)
        now = local_now()
        column = _OWNER_COLUMNS[owner].key
        rows = [
            {column: owner_id, "email": email, "created_at": now, "updated_at": now}
            for email in emails
        ]
        if rows:
            await self._session.execute(insert(models.Email), rows)
        log.debug("emails_replaced", owner=owner, owner_id=owner_id, count=len(rows))

    async def delete_for(self, owner: Owner, owner_id: int) -> int:
        stmt = delete(models.Email).where(_OWNER_COLUMNS[owner] == owner_id)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def list_for(self, owner: Owner, owner_ids: Sequence[int]) -> dict[int, list[str]]:
        if not owner_ids:
            return {}
        column = _OWNER_COLUMNS[owner]
        stmt = select(column, models.Email.email).where(column.in_(owner_ids))
        rows = (await self._session.execute(stmt)).all()
        return group_distinct((row[0], row[1]) for row in rows)
