"""
tests.test_children

Delete-then-reinsert sync of the emails/phones child tables.
"""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db.repositories import CompanyRepo, ContactRepo, EmailRepo, PhoneRepo
from rpel.schemas import Company, Contact


@pytest.mark.asyncio
async def test_phones_and_faxes_are_replaced_independently(session: AsyncSession) -> None:
    company = await CompanyRepo(session).insert(Company(name="Acme"))
    phones = PhoneRepo(session)
    await phones.replace("company", company.id, [10, 11], fax=False)
    await phones.replace("company", company.id, [90], fax=True)

    await phones.replace("company", company.id, [12], fax=False)

    assert await phones.list_for("company", [company.id], fax=False) == {company.id: [12]}
    assert await phones.list_for("company", [company.id], fax=True) == {company.id: [90]}


@pytest.mark.asyncio
async def test_owners_are_kept_apart(session: AsyncSession) -> None:
    companies = CompanyRepo(session)
    acme = await companies.insert(Company(name="Acme"))
    other = await companies.insert(Company(name="Other"))
    person = await ContactRepo(session).insert(Contact(name="Petrov"))

    emails = EmailRepo(session)
    await emails.replace("company", acme.id, ["c@x.test"])
    await emails.replace("contact", person.id, ["p@x.test"])
    await emails.replace("company", other.id, ["z@x.test", "a@x.test"])

    assert await emails.list_for("company", [acme.id, other.id]) == {
        acme.id: ["c@x.test"],
        other.id: ["a@x.test", "z@x.test"],
    }
    assert await emails.list_for("contact", [person.id]) == {person.id: ["p@x.test"]}

    assert await emails.delete_for("company", other.id) == 2
    assert await emails.list_for("company", [acme.id, other.id]) == {acme.id: ["c@x.test"]}


@pytest.mark.asyncio
async def test_replace_with_empty_list_clears(session: AsyncSession) -> None:
    person = await ContactRepo(session).insert(Contact(name="Petrov"))
    emails = EmailRepo(session)
    await emails.replace("contact", person.id, ["a@x.test"])
    await emails.replace("contact", person.id, [])
    assert await emails.list_for("contact", [person.id]) == {}
    assert await emails.list_for("contact", []) == {}
