"""
rpel.db.models

Relational schema of the directory.

Responsibilities:
- Map every table the repositories read or write:
  - reference tables: scopes, departments, ranks, kinds, posts, siren_types, users
  - companies and contacts, with their child emails/phones
  - practices (per company) and educations (per contact)
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rpel.db.base import Base


class _Timestamps:
    # Set explicitly by the repositories (local wall-clock time).
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime] = mapped_column(nullable=False)


class Scope(_Timestamps, Base):
    __tablename__ = "scopes"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    note: Mapped[str | None] = mapped_column(Text)


class Department(_Timestamps, Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    note: Mapped[str | None] = mapped_column(Text)


class Rank(_Timestamps, Base):
    __tablename__ = "ranks"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    note: Mapped[str | None] = mapped_column(Text)


class Kind(_Timestamps, Base):
    __tablename__ = "kinds"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    short_name: Mapped[str | None] = mapped_column(Text)
    note: Mapped[str | None] = mapped_column(Text)


class Post(_Timestamps, Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    # GO posts (civil defence duties) are listed separately from regular posts.
    go: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    note: Mapped[str | None] = mapped_column(Text)


class SirenType(_Timestamps, Base):
    __tablename__ = "siren_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    radius: Mapped[int | None] = mapped_column()
    note: Mapped[str | None] = mapped_column(Text)


class User(_Timestamps, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    key: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[int] = mapped_column(nullable=False)


class Company(_Timestamps, Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(Text)
    scope_id: Mapped[int | None] = mapped_column(ForeignKey("scopes.id"), index=True)
    note: Mapped[str | None] = mapped_column(Text)


class Contact(_Timestamps, Base):
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(Text)
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id"), index=True)
    department_id: Mapped[int | None] = mapped_column(ForeignKey("departments.id"))
    post_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"))
    post_go_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"))
    rank_id: Mapped[int | None] = mapped_column(ForeignKey("ranks.id"))
    birthday: Mapped[date | None] = mapped_column(Date)
    note: Mapped[str | None] = mapped_column(Text)


class Email(_Timestamps, Base):
    __tablename__ = "emails"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Exactly one owner column is set per row.
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id"), index=True)
    contact_id: Mapped[int | None] = mapped_column(ForeignKey("contacts.id"), index=True)
    email: Mapped[str | None] = mapped_column(Text)


class Phone(_Timestamps, Base):
    __tablename__ = "phones"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id"))
    contact_id: Mapped[int | None] = mapped_column(ForeignKey("contacts.id"))
    phone: Mapped[int | None] = mapped_column()
    fax: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_phones_company_fax", "company_id", "fax"),
        Index("ix_phones_contact_fax", "contact_id", "fax"),
    )


class Practice(_Timestamps, Base):
    __tablename__ = "practices"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int | None] = mapped_column(ForeignKey("companies.id"), index=True)
    kind_id: Mapped[int | None] = mapped_column(ForeignKey("kinds.id"))
    topic: Mapped[str | None] = mapped_column(Text)
    date_of_practice: Mapped[date | None] = mapped_column(Date, index=True)
    note: Mapped[str | None] = mapped_column(Text)


class Education(_Timestamps, Base):
    __tablename__ = "educations"

    id: Mapped[int] = mapped_column(primary_key=True)
    contact_id: Mapped[int | None] = mapped_column(ForeignKey("contacts.id"), index=True)
    start_date: Mapped[date | None] = mapped_column(Date, index=True)
    end_date: Mapped[date | None] = mapped_column(Date)
    post_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"))
    note: Mapped[str | None] = mapped_column(Text)


# --- Module Notes -----------------------------------------------------------
# No ORM relationships are declared: repositories join explicitly and sync child
# tables themselves, so nothing cascades behind the caller's back.
