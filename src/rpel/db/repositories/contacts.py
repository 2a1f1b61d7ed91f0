"""
rpel.db.repositories.contacts

Repository for `Contact` entities.

Responsibilities:
- CRUD on `contacts`, syncing the contact's emails, phones and faxes.
- Listings: all contacts with company/post names, and per-company short rows.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import aliased

from rpel.db import models
from rpel.db.repositories.base import CrudRepo, group_distinct, to_record
from rpel.db.repositories.emails import EmailRepo
from rpel.db.repositories.phones import PhoneRepo
from rpel.observability.logging import get_logger
from rpel.schemas import Contact, ContactList, ContactShort

log = get_logger(__name__)


class ContactRepo(CrudRepo[Contact, ContactList]):
    model = models.Contact
    record = Contact
    list_record = ContactList
    entity = "contact"

    async def get(self, id: int) -> Contact:
        row = await self._fetch_row(id)
        emails = await EmailRepo(self._session).list_for("contact", [id])
        phones = PhoneRepo(self._session)
        plain = await phones.list_for("contact", [id], fax=False)
        faxes = await phones.list_for("contact", [id], fax=True)

        stmt = select(models.Education.contact_id, models.Education.start_date).where(
            models.Education.contact_id == id
        )
        educations = group_distinct((await self._session.execute(stmt)).all())

        return to_record(
            Contact,
            row,
            emails=emails.get(id, []),
            phones=plain.get(id, []),
            faxes=faxes.get(id, []),
            educations=educations.get(id, []),
        )

    async def insert(self, record: Contact) -> Contact:
        contact = await super().insert(record)
        await self._sync_children(contact)
        return contact

    async def update(self, record: Contact) -> int:
        updated = await super().update(record)
        if updated:
            await self._sync_children(record)
        return updated

    async def delete(self, id: int) -> int:
        phones = PhoneRepo(self._session)
        await phones.delete_for("contact", id, fax=True)
        await phones.delete_for("contact", id, fax=False)
        await EmailRepo(self._session).delete_for("contact", id)
        deleted = await super().delete(id)
        log.info("contact_deleted", contact_id=id, rows=deleted)
        return deleted

    async def _sync_children(self, contact: Contact) -> None:
        if contact.emails is not None:
            await EmailRepo(self._session).replace("contact", contact.id, contact.emails)
        phones = PhoneRepo(self._session)
        if contact.phones is not None:
            await phones.replace("contact", contact.id, contact.phones, fax=False)
        if contact.faxes is not None:
            await phones.replace("contact", contact.id, contact.faxes, fax=True)

    async def list_all(self) -> list[ContactList]:
        c = models.Contact
        stmt = (
            select(
                c.id,
                c.name,
                models.Company.id.label("company_id"),
                models.Company.name.label("company_name"),
                models.Post.name.label("post_name"),
            )
            .outerjoin(models.Company, models.Company.id == c.company_id)
            .outerjoin(models.Post, models.Post.id == c.post_id)
            .order_by(c.name.asc())
        )
        rows = (await self._session.execute(stmt)).all()
        ids = [row.id for row in rows]
        phones = PhoneRepo(self._session)
        plain = await phones.list_for("contact", ids, fax=False)
        faxes = await phones.list_for("contact", ids, fax=True)
        return [
            to_record(
                ContactList,
                row,
                phones=plain.get(row.id, []),
                faxes=faxes.get(row.id, []),
            )
            for row in rows
        ]

    async def list_by_company(self, company_id: int) -> list[ContactShort]:
        c = models.Contact
        post = aliased(models.Post)
        post_go = aliased(models.Post)
        stmt = (
            select(
                c.id,
                c.name,
                models.Department.name.label("department_name"),
                post.name.label("post_name"),
                post_go.name.label("post_go_name"),
            )
            .outerjoin(models.Department, models.Department.id == c.department_id)
            .outerjoin(post, (post.id == c.post_id) & post.go.is_(False))
            .outerjoin(post_go, (post_go.id == c.post_go_id) & post_go.go.is_(True))
            .where(c.company_id == company_id)
            .order_by(c.name.asc())
        )
        rows = (await self._session.execute(stmt)).all()
        return [to_record(ContactShort, row) for row in rows]
