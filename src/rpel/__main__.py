"""
rpel.__main__

Entrypoint for `python -m rpel`.

Responsibilities:
- `init-db`: create missing tables in the configured database.
- `dump <entity>`: print an entity listing as JSON lines.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from rpel.db.database import Database
from rpel.db.repositories import (
    CompanyRepo,
    ContactRepo,
    DepartmentRepo,
    EducationRepo,
    KindRepo,
    PostRepo,
    PracticeRepo,
    RankRepo,
    ScopeRepo,
    SirenTypeRepo,
    UserRepo,
)
from rpel.observability.logging import configure_logging, get_logger
from rpel.settings import Settings, get_settings

log = get_logger(__name__)

REPOSITORIES = {
    "companies": CompanyRepo,
    "contacts": ContactRepo,
    "departments": DepartmentRepo,
    "educations": EducationRepo,
    "kinds": KindRepo,
    "posts": PostRepo,
    "practices": PracticeRepo,
    "ranks": RankRepo,
    "scopes": ScopeRepo,
    "siren_types": SirenTypeRepo,
    "users": UserRepo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rpel")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init-db", help="create missing tables")
    dump = commands.add_parser("dump", help="print an entity listing as JSON lines")
    dump.add_argument("entity", choices=sorted(REPOSITORIES))
    return parser


async def _init_db(db: Database) -> None:
    await db.init_schema()


async def _dump(db: Database, entity: str) -> None:
    async with db.session() as session:
        records = await REPOSITORIES[entity](session).list_all()
    for record in records:
        sys.stdout.write(record.model_dump_json() + "\n")
    log.info("dumped", entity=entity, count=len(records))


async def run(argv: list[str] | None = None, *, settings: Settings | None = None) -> None:
    args = build_parser().parse_args(argv)
    async with Database(settings or get_settings()) as db:
        if args.command == "init-db":
            await _init_db(db)
        else:
            await _dump(db, args.entity)


def main() -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)
    asyncio.run(run())


if __name__ == "__main__":
    main()
