"""
rpel.errors

Exceptions raised by the data-access layer.

Responsibilities:
- Give callers one base class (`RpelError`) to catch.
- Distinguish "row does not exist" from driver/engine failures.
"""

from __future__ import annotations


class RpelError(Exception):
    """Base exception for rpel errors."""


class NotFoundError(RpelError, LookupError):
    """No row with the requested id."""

    def __init__(self, entity: str, id: int) -> None:
        super().__init__(f"{entity} {id} not found")
        self.entity = entity
        self.id = id


class QueryError(RpelError):
    """A statement failed in the driver or the database engine."""
