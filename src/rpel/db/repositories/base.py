"""
rpel.db.repositories.base

Shared CRUD machinery for table-backed repositories.

Responsibilities:
- Map a full record onto one table (`get`/`insert`/`update`/`delete`).
- List a table ordered by name into its flattened list record.
- Helpers for building records from rows and grouping child values.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db.base import Base
from rpel.errors import NotFoundError
from rpel.schemas import Record, StampedRecord

R = TypeVar("R", bound=StampedRecord)
L = TypeVar("L", bound=Record)
T = TypeVar("T", bound=Record)

_BOOKKEEPING = frozenset({"id", "created_at", "updated_at"})


def local_now() -> datetime:
    # Naive local wall-clock time, matching what existing rows hold.
    return datetime.now()


def month_before(day: date) -> date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last))


def to_record(cls: type[T], row: Row[Any] | Mapping[str, Any], **extra: Any) -> T:
    mapping = row._mapping if isinstance(row, Row) else row
    return cls.model_validate({**mapping, **extra})


def group_distinct(pairs: Iterable[tuple[int, Any]]) -> dict[int, list[Any]]:
    """
    Fold `(owner_id, value)` pairs into sorted distinct values per owner; NULL values are dropped.
    """

    grouped: dict[int, set[Any]] = defaultdict(set)
    for owner_id, value in pairs:
        if value is not None:
            grouped[owner_id].add(value)
    return {owner_id: sorted(values) for owner_id, values in grouped.items()}


class CrudRepo(Generic[R, L]):
    model: ClassVar[type[Base]]
    record: ClassVar[type[StampedRecord]]
    list_record: ClassVar[type[Record]]
    entity: ClassVar[str]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @classmethod
    def _writable(cls) -> list[str]:
        # Columns present on both the table and the record, minus id/timestamps.
        return [
            col.key
            for col in cls.model.__table__.columns
            if col.key in cls.record.model_fields and col.key not in _BOOKKEEPING
        ]

    def _values(self, record: StampedRecord) -> dict[str, Any]:
        return {name: getattr(record, name) for name in self._writable()}

    def _row_stmt(self, id: int):
        table = self.model.__table__
        columns = [col for col in table.columns if col.key in self.record.model_fields]
        return select(*columns).where(table.c.id == id)

    async def _fetch_row(self, id: int) -> Row[Any]:
        row = (await self._session.execute(self._row_stmt(id))).one_or_none()
        if row is None:
            raise NotFoundError(self.entity, id)
        return row

    async def get(self, id: int) -> R:
        return to_record(self.record, await self._fetch_row(id))  # type: ignore[return-value]

    async def insert(self, record: R) -> R:
        now = local_now()
        stmt = (
            insert(self.model)
            .values(**self._values(record), created_at=now, updated_at=now)
            .returning(self.model.id)
        )
        new_id = (await self._session.execute(stmt)).scalar_one()
        return record.model_copy(update={"id": new_id, "created_at": now, "updated_at": now})

    async def update(self, record: R) -> int:
        stmt = (
            update(self.model)
            .where(self.model.id == record.id)
            .values(**self._values(record), updated_at=local_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, id: int) -> int:
        stmt = delete(self.model).where(self.model.id == id).execution_options(synchronize_session=False)
        result = await self._session.execute(stmt)
        return result.rowcount

    async def list_all(self) -> list[L]:
        columns = [getattr(self.model, name) for name in self.list_record.model_fields]
        stmt = select(*columns).order_by(self.model.name.asc())
        rows = (await self._session.execute(stmt)).all()
        return [to_record(self.list_record, row) for row in rows]  # type: ignore[misc]


# --- Module Notes -----------------------------------------------------------
# Subclasses only declare `model`/`record`/`list_record`/`entity`; tables with
# joins or child rows override the operations that need them.
