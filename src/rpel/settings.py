"""
rpel.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the engine, pool and logging.
- Accept either a full SQLAlchemy URL or discrete PostgreSQL parts (`DB_HOST`, ...).
- Hide the database password from repr/logging.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RPEL_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "rpel"
    log_level: str = "INFO"

    # Used as-is unless `db_host` is set.
    database_url: str = "sqlite+aiosqlite:///./rpel.db"

    db_host: str | None = Field(default=None, validation_alias=AliasChoices("RPEL_DB_HOST", "DB_HOST"))
    db_port: int = Field(default=5432, validation_alias=AliasChoices("RPEL_DB_PORT", "DB_PORT"))
    db_name: str | None = Field(default=None, validation_alias=AliasChoices("RPEL_DB_NAME", "DB_NAME"))
    db_user: str | None = Field(default=None, validation_alias=AliasChoices("RPEL_DB_USER", "DB_USER"))
    db_password: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("RPEL_DB_PASSWORD", "DB_PASSWORD"),
    )

    pool_size: int = 16
    max_overflow: int = 0
    echo_sql: bool = False

    def sqlalchemy_url(self) -> str | URL:
        if self.db_host is None:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The bare DB_* variables are accepted so existing deployment .env files keep working.
