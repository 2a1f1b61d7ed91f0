"""
rpel.schemas

Plain records exchanged with the repositories.

Responsibilities:
- Full records (one per table) accepted by insert/update and returned by get.
- Flattened list/short records returned by listing queries.
- Keep bookkeeping timestamps out of serialized output.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


def _iso(value: date | None) -> str | None:
    return value.strftime("%Y-%m-%d") if value is not None else None


class Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class StampedRecord(Record):
    # `id` stays 0 until the row is inserted.
    id: int = 0
    created_at: datetime | None = Field(default=None, exclude=True)
    updated_at: datetime | None = Field(default=None, exclude=True)


class SelectItem(Record):
    id: int
    name: str | None = None


# --- reference tables --------------------------------------------------------


class Scope(StampedRecord):
    name: str | None = None
    note: str | None = None


class ScopeList(Record):
    id: int
    name: str | None = None
    note: str | None = None


class Department(StampedRecord):
    name: str | None = None
    note: str | None = None


class DepartmentList(Record):
    id: int
    name: str | None = None
    note: str | None = None


class Rank(StampedRecord):
    name: str | None = None
    note: str | None = None


class RankList(Record):
    id: int
    name: str | None = None
    note: str | None = None


class Kind(StampedRecord):
    name: str | None = None
    short_name: str | None = None
    note: str | None = None


class KindList(Record):
    id: int
    name: str | None = None
    short_name: str | None = None
    note: str | None = None


class Post(StampedRecord):
    name: str | None = None
    go: bool = False
    note: str | None = None


class PostList(Record):
    id: int
    name: str | None = None
    go: bool = False
    note: str | None = None


class SirenType(StampedRecord):
    name: str | None = None
    radius: int | None = None
    note: str | None = None


class SirenTypeList(Record):
    id: int
    name: str | None = None
    radius: int | None = None
    note: str | None = None


class User(StampedRecord):
    name: str
    key: str
    role: int


class UserList(Record):
    id: int
    name: str
    key: str
    role: int


# --- child tables ------------------------------------------------------------


class Email(StampedRecord):
    company_id: int | None = None
    contact_id: int | None = None
    email: str | None = None


class Phone(StampedRecord):
    company_id: int | None = None
    contact_id: int | None = None
    phone: int | None = None
    fax: bool = False


# --- practices and educations ------------------------------------------------


class Practice(StampedRecord):
    company_id: int | None = None
    kind_id: int | None = None
    topic: str | None = None
    date_of_practice: date | None = None
    note: str | None = None


class PracticeList(Record):
    id: int
    company_id: int | None = None
    company_name: str | None = None
    kind_id: int | None = None
    kind_name: str | None = None
    kind_short_name: str | None = None
    topic: str | None = None
    date_of_practice: date | None = None

    @computed_field
    @property
    def date_str(self) -> str | None:
        return _iso(self.date_of_practice)


class PracticeShort(Record):
    id: int
    company_id: int | None = None
    company_name: str | None = None
    kind_id: int | None = None
    kind_short_name: str | None = None
    date_of_practice: date | None = None


class Education(StampedRecord):
    contact_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    post_id: int | None = None
    note: str | None = None


class EducationList(Record):
    id: int
    contact_id: int | None = None
    contact_name: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    post_id: int | None = None
    post_name: str | None = None
    note: str | None = None

    @computed_field
    @property
    def start_str(self) -> str | None:
        return _iso(self.start_date)

    @computed_field
    @property
    def end_str(self) -> str | None:
        return _iso(self.end_date)


class EducationShort(Record):
    id: int
    contact_id: int | None = None
    contact_name: str | None = None
    company_id: int | None = None
    company_name: str | None = None
    start_date: date | None = None


# --- contacts and companies --------------------------------------------------


class ContactShort(Record):
    id: int
    name: str | None = None
    department_name: str | None = None
    post_name: str | None = None
    post_go_name: str | None = None


class Contact(StampedRecord):
    name: str | None = None
    company_id: int | None = None
    department_id: int | None = None
    post_id: int | None = None
    post_go_id: int | None = None
    rank_id: int | None = None
    birthday: date | None = None
    note: str | None = None
    # None leaves the stored child rows alone; a list (even empty) replaces them.
    emails: list[str] | None = None
    phones: list[int] | None = None
    faxes: list[int] | None = None
    # Read-only: start dates of the contact's educations.
    educations: list[date] | None = None


class ContactList(Record):
    id: int
    name: str | None = None
    company_id: int | None = None
    company_name: str | None = None
    post_name: str | None = None
    phones: list[int] = Field(default_factory=list)
    faxes: list[int] = Field(default_factory=list)


class Company(StampedRecord):
    name: str | None = None
    address: str | None = None
    scope_id: int | None = None
    note: str | None = None
    emails: list[str] | None = None
    phones: list[int] | None = None
    faxes: list[int] | None = None
    # Read-only, filled by `CompanyRepo.get`.
    practices: list[PracticeList] | None = None
    contacts: list[ContactShort] | None = None


class CompanyList(Record):
    id: int
    name: str | None = None
    address: str | None = None
    scope_name: str | None = None
    emails: list[str] = Field(default_factory=list)
    phones: list[int] = Field(default_factory=list)
    faxes: list[int] = Field(default_factory=list)
    practices: list[date] = Field(default_factory=list)


# --- Module Notes -----------------------------------------------------------
# Records are detached from the ORM: repositories build them from row mappings,
# so they can be serialized or passed across task boundaries freely.
