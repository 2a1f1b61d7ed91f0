"""
rpel.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for all ORM models.
- Map Python `int` to BIGINT (ids, phone numbers) on every backend but SQLite.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
BigIntId = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    type_annotation_map = {int: BigIntId}


# --- Module Notes -----------------------------------------------------------
# All ORM models should inherit from `Base` so `init_db` sees them in metadata.
