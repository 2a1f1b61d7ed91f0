from __future__ import annotations

import pytest
from sqlalchemy import event

from rpel.db.session import _enable_sqlite_foreign_keys, create_engine
from rpel.settings import Settings


def test_defaults_to_local_sqlite(monkeypatch) -> None:
    for name in ("DB_HOST", "RPEL_DB_HOST", "RPEL_DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.sqlalchemy_url() == "sqlite+aiosqlite:///./rpel.db"
    assert settings.pool_size == 16


def test_postgres_url_is_assembled_from_parts() -> None:
    settings = Settings(
        _env_file=None,
        db_host="db.internal",
        db_port=6432,
        db_name="rpel",
        db_user="app",
        db_password="s3cret",
    )
    url = settings.sqlalchemy_url()
    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.internal"
    assert url.port == 6432
    assert url.database == "rpel"
    assert url.username == "app"
    assert url.password == "s3cret"


def test_bare_db_variables_are_read(monkeypatch) -> None:
    monkeypatch.setenv("DB_HOST", "pg")
    monkeypatch.setenv("DB_NAME", "directory")
    monkeypatch.setenv("DB_PORT", "5433")
    settings = Settings(_env_file=None)
    url = settings.sqlalchemy_url()
    assert url.host == "pg"
    assert url.database == "directory"
    assert url.port == 5433


def test_password_hidden_from_repr() -> None:
    settings = Settings(_env_file=None, db_password="hunter2")
    assert "hunter2" not in repr(settings)


@pytest.mark.asyncio
async def test_server_pool_is_capped_at_pool_size() -> None:
    settings = Settings(_env_file=None, db_host="pg", db_name="rpel")
    engine = create_engine(settings)
    try:
        pool = engine.sync_engine.pool
        assert pool.size() == 16
        assert pool._max_overflow == 0
    finally:
        await engine.dispose()


def test_sqlite_engine_enforces_foreign_keys(settings: Settings) -> None:
    engine = create_engine(settings)
    assert event.contains(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
