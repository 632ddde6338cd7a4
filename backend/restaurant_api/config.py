"""
NYB Restaurant Backend — Application Configuration
====================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the store factory and Alembic.
When:  Loaded once at module import time; validated before the app starts.

Database credentials follow the deployment convention of the original
server: DB_USER / DB_PASS are supplied separately and composed into a
connection URL unless DATABASE_URL is given outright.
"""

from typing import List, Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments override
    the database credentials and CORS_ORIGINS.
    """

    # ── Document Store ────────────────────────────────────────────────────
    # "sql" persists documents through SQLAlchemy; "memory" keeps them in
    # process and loses them on restart.
    store_backend: Literal["sql", "memory"] = Field(default="sql")

    # What: Full async SQLAlchemy URL, e.g. postgresql+asyncpg://u:p@host/db
    # When unset, the URL is composed from the db_* parts below.
    database_url: Optional[str] = Field(default=None)

    db_user: str = Field(default="")
    db_pass: str = Field(default="")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_name: str = Field(default="nyb_restaurant")

    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # What: Create the menu/orders tables on startup if they are missing.
    # Collections in a document store spring into existence on first write;
    # this keeps local runs working without an Alembic upgrade.
    db_create_tables: bool = Field(default=True)

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL for the SQL document store."""
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.db_user or None,
            password=self.db_pass or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins (the Vite dev server by default)
    cors_origins: str = Field(default="http://localhost:5173")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "backend_port"),
    )

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
