"""
rpel.db.repositories.select

Id/name pairs for populating dropdowns.

Responsibilities:
- List `SelectItem`s ordered by name for each reference table.
- Split posts into regular and GO posts.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db import models
from rpel.db.repositories.base import to_record
from rpel.schemas import SelectItem


class SelectRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _names(self, model, *criteria) -> list[SelectItem]:
        stmt = select(model.id, model.name).where(*criteria).order_by(model.name.asc())
        rows = (await self._session.execute(stmt)).all()
        return [to_record(SelectItem, row) for row in rows]

    async def companies(self) -> list[SelectItem]:
        return await self._names(models.Company)

    async def contacts(self) -> list[SelectItem]:
        return await self._names(models.Contact)

    async def departments(self) -> list[SelectItem]:
        return await self._names(models.Department)

    async def kinds(self) -> list[SelectItem]:
        return await self._names(models.Kind)

    async def posts(self, *, go: bool) -> list[SelectItem]:
        return await self._names(models.Post, models.Post.go == go)

    async def ranks(self) -> list[SelectItem]:
        return await self._names(models.Rank)

    async def scopes(self) -> list[SelectItem]:
        return await self._names(models.Scope)

    async def siren_types(self) -> list[SelectItem]:
        return await self._names(models.SirenType)
