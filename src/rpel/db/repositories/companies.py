"""
rpel.db.repositories.companies

Repository for `Company` entities.

Responsibilities:
- CRUD on `companies`, syncing the company's emails, phones and faxes.
- `get` also attaches the company's practices and contacts.
- Listing with scope name and aggregated contact details/practice dates.
"""

from __future__ import annotations

from sqlalchemy import select

from rpel.db import models
from rpel.db.repositories.base import CrudRepo, group_distinct, to_record
from rpel.db.repositories.contacts import ContactRepo
from rpel.db.repositories.emails import EmailRepo
from rpel.db.repositories.phones import PhoneRepo
from rpel.db.repositories.practices import PracticeRepo
from rpel.observability.logging import get_logger
from rpel.schemas import Company, CompanyList

log = get_logger(__name__)


class CompanyRepo(CrudRepo[Company, CompanyList]):
    model = models.Company
    record = Company
    list_record = CompanyList
    entity = "company"

    async def get(self, id: int) -> Company:
        row = await self._fetch_row(id)
        emails = await EmailRepo(self._session).list_for("company", [id])
        phones = PhoneRepo(self._session)
        plain = await phones.list_for("company", [id], fax=False)
        faxes = await phones.list_for("company", [id], fax=True)
        return to_record(
            Company,
            row,
            emails=emails.get(id, []),
            phones=plain.get(id, []),
            faxes=faxes.get(id, []),
            practices=await PracticeRepo(self._session).list_by_company(id),
            contacts=await ContactRepo(self._session).list_by_company(id),
        )

    async def insert(self, record: Company) -> Company:
        company = await super().insert(record)
        await self._sync_children(company)
        return company

    async def update(self, record: Company) -> int:
        updated = await super().update(record)
        if updated:
            await self._sync_children(record)
        return updated

    async def delete(self, id: int) -> int:
        # Practices and contacts referencing the company make the delete fail
        # on the foreign keys (enforced on SQLite too, see `create_engine`).
        phones = PhoneRepo(self._session)
        await phones.delete_for("company", id, fax=True)
        await phones.delete_for("company", id, fax=False)
        await EmailRepo(self._session).delete_for("company", id)
        deleted = await super().delete(id)
        log.info("company_deleted", company_id=id, rows=deleted)
        return deleted

    async def _sync_children(self, company: Company) -> None:
        if company.emails is not None:
            await EmailRepo(self._session).replace("company", company.id, company.emails)
        phones = PhoneRepo(self._session)
        if company.phones is not None:
            await phones.replace("company", company.id, company.phones, fax=False)
        if company.faxes is not None:
            await phones.replace("company", company.id, company.faxes, fax=True)

    async def list_all(self) -> list[CompanyList]:
        c = models.Company
        stmt = (
            select(
                c.id,
                c.name,
                c.address,
                models.Scope.name.label("scope_name"),
            )
            .outerjoin(models.Scope, models.Scope.id == c.scope_id)
            .order_by(c.name.asc())
        )
        rows = (await self._session.execute(stmt)).all()
        ids = [row.id for row in rows]
        if not ids:
            return []

        emails = await EmailRepo(self._session).list_for("company", ids)
        phones = PhoneRepo(self._session)
        plain = await phones.list_for("company", ids, fax=False)
        faxes = await phones.list_for("company", ids, fax=True)
        dates_stmt = select(models.Practice.company_id, models.Practice.date_of_practice).where(
            models.Practice.company_id.in_(ids)
        )
        practices = group_distinct((await self._session.execute(dates_stmt)).all())

        return [
            to_record(
                CompanyList,
                row,
                emails=emails.get(row.id, []),
                phones=plain.get(row.id, []),
                faxes=faxes.get(row.id, []),
                practices=practices.get(row.id, []),
            )
            for row in rows
        ]
