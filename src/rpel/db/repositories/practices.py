"""
rpel.db.repositories.practices

Repository for `Practice` entities (drills held at a company).

Responsibilities:
- CRUD on `practices`.
- Listings joined with company and kind names, overall and per company.
- Recent/upcoming practices for dashboards (`list_near`).
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from rpel.db import models
from rpel.db.repositories.base import CrudRepo, month_before, to_record
from rpel.schemas import Practice, PracticeList, PracticeShort


class PracticeRepo(CrudRepo[Practice, PracticeList]):
    model = models.Practice
    record = Practice
    list_record = PracticeList
    entity = "practice"

    def _list_stmt(self):
        p = models.Practice
        return (
            select(
                p.id,
                p.company_id,
                models.Company.name.label("company_name"),
                p.kind_id,
                models.Kind.name.label("kind_name"),
                models.Kind.short_name.label("kind_short_name"),
                p.date_of_practice,
                p.topic,
            )
            .outerjoin(models.Company, models.Company.id == p.company_id)
            .outerjoin(models.Kind, models.Kind.id == p.kind_id)
            .order_by(p.date_of_practice.desc())
        )

    async def list_all(self) -> list[PracticeList]:
        rows = (await self._session.execute(self._list_stmt())).all()
        return [to_record(PracticeList, row) for row in rows]

    async def list_by_company(self, company_id: int) -> list[PracticeList]:
        stmt = self._list_stmt().where(models.Practice.company_id == company_id)
        rows = (await self._session.execute(stmt)).all()
        return [to_record(PracticeList, row) for row in rows]

    async def list_near(self, *, today: date | None = None, limit: int = 10) -> list[PracticeShort]:
        """
        Practices dated after the same day one month ago, oldest first.
        """

        cutoff = month_before(today or date.today())
        p = models.Practice
        stmt = (
            select(
                p.id,
                p.company_id,
                models.Company.name.label("company_name"),
                p.kind_id,
                models.Kind.short_name.label("kind_short_name"),
                p.date_of_practice,
            )
            .outerjoin(models.Company, models.Company.id == p.company_id)
            .outerjoin(models.Kind, models.Kind.id == p.kind_id)
            .where(p.date_of_practice > cutoff)
            .order_by(p.date_of_practice.asc())
            .limit(limit)
        )
        rows = (await self._session.execute(stmt)).all()
        return [to_record(PracticeShort, row) for row in rows]
