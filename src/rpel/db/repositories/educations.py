"""
rpel.db.repositories.educations

Repository for `Education` entities (training periods of a contact).
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from rpel.db import models
from rpel.db.repositories.base import CrudRepo, month_before, to_record
from rpel.schemas import Education, EducationList, EducationShort


class EducationRepo(CrudRepo[Education, EducationList]):
    model = models.Education
    record = Education
    list_record = EducationList
    entity = "education"

    async def list_all(self) -> list[EducationList]:
        e = models.Education
        stmt = (
            select(
                e.id,
                e.contact_id,
                models.Contact.name.label("contact_name"),
                e.start_date,
                e.end_date,
                e.post_id,
                models.Post.name.label("post_name"),
                e.note,
            )
            .outerjoin(models.Contact, models.Contact.id == e.contact_id)
            .outerjoin(models.Post, models.Post.id == e.post_id)
            .order_by(e.start_date.desc())
        )
        rows = (await self._session.execute(stmt)).all()
        return [to_record(EducationList, row) for row in rows]

    async def list_near(
        self, *, today: date | None = None, limit: int = 10
    ) -> list[EducationShort]:
        # The company is resolved through the contact being trained.
        cutoff = month_before(today or date.today())
        e = models.Education
        stmt = (
            select(
                e.id,
                e.contact_id,
                models.Contact.name.label("contact_name"),
                models.Company.id.label("company_id"),
                models.Company.name.label("company_name"),
                e.start_date,
            )
            .outerjoin(models.Contact, models.Contact.id == e.contact_id)
            .outerjoin(models.Company, models.Company.id == models.Contact.company_id)
            .where(e.start_date > cutoff)
            .order_by(e.start_date.asc())
            .limit(limit)
        )
        rows = (await self._session.execute(stmt)).all()
        return [to_record(EducationShort, row) for row in rows]
