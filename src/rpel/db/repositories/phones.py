"""
rpel.db.repositories.phones

Repository for the `phones` child table.

Phones and faxes share the table and are told apart by the `fax` flag; every
operation here works on one flag at a time, so replacing the phones of a company
leaves its faxes alone.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db import models
from rpel.db.repositories.base import group_distinct, local_now
from rpel.db.repositories.emails import Owner
from rpel.observability.logging import get_logger

log = get_logger(__name__)

_OWNER_COLUMNS = {
    "company": models.Phone.company_id,
    "contact": models.Phone.contact_id,
}


class PhoneRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def replace(
        self, owner: Owner, owner_id: int, phones: Iterable[int], *, fax: bool
    ) -> None:
        await self.delete_for(owner, owner_id, fax=fax)
        now = local_now()
        column = _OWNER_COLUMNS[owner].key
        rows = [
            {column: owner_id, "phone": phone, "fax": fax, "created_at": now, "updated_at": now}
            for phone in phones
        ]
        if rows:
            await self._session.execute(insert(models.Phone), rows)
        log.debug("phones_replaced", owner=owner, owner_id=owner_id, fax=fax, count=len(rows))

    async def delete_for(self, owner: Owner, owner_id: int, *, fax: bool) -> int:
        stmt = delete(models.Phone).where(
            _OWNER_COLUMNS[owner] == owner_id,
            models.Phone.fax == fax,
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def list_for(
        self, owner: Owner, owner_ids: Sequence[int], *, fax: bool
    ) -> dict[int, list[int]]:
        if not owner_ids:
            return {}
        column = _OWNER_COLUMNS[owner]
        stmt = select(column, models.Phone.phone).where(
            column.in_(owner_ids),
            models.Phone.fax == fax,
        )
        rows = (await self._session.execute(stmt)).all()
        return group_distinct((row[0], row[1]) for row in rows)
