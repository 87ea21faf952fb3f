"""
Application configuration.

Loads settings from environment variables and .env file.
Every setting lives here, read once from the environment.
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
DEFAULT_DB_MAX_CONNECTIONS = 10
DEFAULT_DB_TIMEOUT_MS = 30_000


@dataclass(frozen=True)
class AppConfig:
    """Runtime identity of the application."""

    port: int
    environment: str
    api_version: str


@dataclass(frozen=True)
class DatabaseConfig:
    """Storage connection settings. ``timeout`` is in milliseconds."""

    url: str
    max_connections: int
    timeout: int


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        port: Port the HTTP server listens on.
        environment: Deployment environment name (development, production...).
        api_version: Public API version string.
        api_prefix: Path prefix shared by every route.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_json: Emit structured JSON log lines instead of plain text.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Storage location. The users store is in memory.
        db_max_connections: Connection pool size for a real database.
        db_timeout: Database timeout in milliseconds.

    Numeric values that cannot be parsed fall back to their default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = "Starter API"
    port: int = DEFAULT_PORT
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = True
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    database_url: str = "in-memory"
    db_max_connections: int = DEFAULT_DB_MAX_CONNECTIONS
    db_timeout: int = DEFAULT_DB_TIMEOUT_MS

    @field_validator("port", "db_max_connections", "db_timeout", mode="before")
    @classmethod
    def _int_or_default(cls, value: object, info) -> object:
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return cls.model_fields[info.field_name].default

    def get_app_config(self) -> AppConfig:
        return AppConfig(
            port=self.port,
            environment=self.environment,
            api_version=self.api_version,
        )

    def get_database_config(self) -> DatabaseConfig:
        return DatabaseConfig(
            url=self.database_url,
            max_connections=self.db_max_connections,
            timeout=self.db_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


settings = get_settings()
