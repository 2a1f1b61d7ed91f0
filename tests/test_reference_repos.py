"""
tests.test_reference_repos

CRUD behaviour shared by the plain reference tables.
"""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from rpel.db.repositories import (
    DepartmentRepo,
    KindRepo,
    PostRepo,
    RankRepo,
    ScopeRepo,
    SirenTypeRepo,
    UserRepo,
)
from rpel.errors import NotFoundError, RpelError
from rpel.schemas import (
    Department,
    DepartmentList,
    Kind,
    Post,
    Rank,
    Scope,
    SirenType,
    User,
)

CASES = [
    pytest.param(ScopeRepo, Scope(name="Energy", note="power plants"), {"name": "Transport"}, id="scope"),
    pytest.param(DepartmentRepo, Department(name="HR"), {"note": "people"}, id="department"),
    pytest.param(RankRepo, Rank(name="Major"), {"name": "Colonel"}, id="rank"),
    pytest.param(KindRepo, Kind(name="Evacuation", short_name="EV"), {"short_name": "EVAC"}, id="kind"),
    pytest.param(PostRepo, Post(name="Director", go=True), {"go": False}, id="post"),
    pytest.param(SirenTypeRepo, SirenType(name="S-40", radius=500), {"radius": 750}, id="siren_type"),
    pytest.param(UserRepo, User(name="admin", key="k3y", role=1), {"role": 2}, id="user"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize(("repo_cls", "record", "changes"), CASES)
async def test_insert_get_update_delete(session: AsyncSession, repo_cls, record, changes) -> None:
    repo = repo_cls(session)

    inserted = await repo.insert(record)
    assert inserted.id > 0
    assert inserted.created_at is not None
    assert inserted.created_at == inserted.updated_at

    fetched = await repo.get(inserted.id)
    assert fetched.model_dump() == inserted.model_dump()
    assert fetched.created_at == inserted.created_at

    assert await repo.update(fetched.model_copy(update=changes)) == 1
    updated = await repo.get(inserted.id)
    for field, value in changes.items():
        assert getattr(updated, field) == value
    assert updated.created_at == inserted.created_at
    assert updated.updated_at >= inserted.updated_at

    assert await repo.delete(inserted.id) == 1
    with pytest.raises(NotFoundError):
        await repo.get(inserted.id)
    assert await repo.delete(inserted.id) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(("repo_cls", "record", "changes"), CASES)
async def test_update_missing_row_reports_zero(session: AsyncSession, repo_cls, record, changes) -> None:
    missing = record.model_copy(update={"id": 4242, **changes})
    assert await repo_cls(session).update(missing) == 0


@pytest.mark.asyncio
async def test_list_all_is_ordered_by_name(session: AsyncSession) -> None:
    repo = DepartmentRepo(session)
    for name in ("Logistics", "Accounting", "Security"):
        await repo.insert(Department(name=name))

    listed = await repo.list_all()
    assert [d.name for d in listed] == ["Accounting", "Logistics", "Security"]
    assert all(isinstance(d, DepartmentList) for d in listed)
    assert all(d.id > 0 for d in listed)


@pytest.mark.asyncio
async def test_post_listing_keeps_go_flag(session: AsyncSession) -> None:
    repo = PostRepo(session)
    await repo.insert(Post(name="Engineer"))
    await repo.insert(Post(name="Chief of GO", go=True))

    listed = {p.name: p.go for p in await repo.list_all()}
    assert listed == {"Chief of GO": True, "Engineer": False}


@pytest.mark.asyncio
async def test_not_found_carries_entity_and_id(session: AsyncSession) -> None:
    with pytest.raises(RpelError) as excinfo:
        await SirenTypeRepo(session).get(99)
    err = excinfo.value
    assert isinstance(err, LookupError)
    assert err.entity == "siren type"
    assert err.id == 99
    assert str(err) == "siren type 99 not found"


def test_timestamps_are_not_serialized() -> None:
    user = User(name="op", key="x", role=3)
    dumped = user.model_dump()
    assert "created_at" not in dumped
    assert "updated_at" not in dumped
    assert dumped == {"id": 0, "name": "op", "key": "x", "role": 3}
