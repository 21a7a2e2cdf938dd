"""Settings — everything tunable per deployment, read from the environment.

Invariants:
    - Values come from environment variables or .env, never from code paths
    - get_settings() is cached: one Settings instance per process
    - bcrypt cost is bounded; a misconfigured cost fails at startup, not per request

Design Decisions:
    - Defaults target the docker-compose PostgreSQL service so a bare checkout starts
    - CORS origins accept a comma-separated string as well as a JSON list
"""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Deployment settings (case-insensitive env names)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    database_url: str = "postgresql+asyncpg://scholarlog:scholarlog@db:5432/scholarlog"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # Credentials
    bcrypt_rounds: int = Field(10, ge=4, le=16)

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 5000
    debug: bool = False
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v):
        """Managed Postgres hands out postgresql:// URLs; the engine needs asyncpg."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v[len("postgresql://"):]
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
