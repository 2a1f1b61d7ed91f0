from __future__ import annotations

import json

import pytest

from rpel.__main__ import build_parser, run
from rpel.db.database import Database
from rpel.db.repositories import ScopeRepo
from rpel.schemas import Scope
from rpel.settings import Settings


def test_parser_rejects_unknown_entity() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["dump", "widgets"])


@pytest.mark.asyncio
async def test_init_db_then_dump(settings: Settings, capsys) -> None:
    await run(["init-db"], settings=settings)

    async with Database(settings) as db:
        async with db.session() as session:
            await ScopeRepo(session).insert(Scope(name="Energy", note="grid"))
            await ScopeRepo(session).insert(Scope(name="Agriculture"))

    capsys.readouterr()
    await run(["dump", "scopes"], settings=settings)
    lines = capsys.readouterr().out.splitlines()

    assert [json.loads(line) for line in lines] == [
        {"id": 2, "name": "Agriculture", "note": None},
        {"id": 1, "name": "Energy", "note": "grid"},
    ]
