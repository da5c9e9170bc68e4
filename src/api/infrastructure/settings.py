"""Application settings using pydantic-settings.

Settings are loaded from environment variables with defaults pointing at
the public Neo4j movies demo database. Production deployments should set
all connection values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URI = "neo4j+s://demo.neo4jlabs.com"
DEFAULT_USER = "movies"
DEFAULT_PASSWORD = "movies"
DEFAULT_DATABASE = "movies"


class Neo4jSettings(BaseSettings):
    """Neo4j connection settings.

    Environment variables:
        NEO4J_URI: Bolt/neo4j URI (default: neo4j+s://demo.neo4jlabs.com)
        NEO4J_USER: Database user (default: movies)
        NEO4J_PASSWORD: Database password (default: movies)
        NEO4J_DATABASE: Database name (default: movies)
        NEO4J_MAX_CONNECTION_POOL_SIZE: Driver pool size (default: 100)
        NEO4J_QUERY_TIMEOUT_SECONDS: Per-query timeout (default: unset)

    An empty value is treated the same as an unset one.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEO4J_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    uri: str = Field(default=DEFAULT_URI, description="Neo4j connection URI")
    user: str = Field(default=DEFAULT_USER, description="Database user")
    password: SecretStr = Field(
        default=SecretStr(DEFAULT_PASSWORD),
        description="Database password",
    )
    database: str = Field(default=DEFAULT_DATABASE, description="Database name")
    max_connection_pool_size: int = Field(
        default=100,
        description="Maximum connections held by the driver pool",
        ge=1,
        le=500,
    )
    query_timeout_seconds: float | None = Field(
        default=None,
        description="Server-side timeout applied to every query",
        gt=0,
    )

    @property
    def auth(self) -> tuple[str, str]:
        """Basic auth tuple for the driver."""
        return (self.user, self.password.get_secret_value())


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    app_name: str = Field(default="Movies Graph API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8080, description="Bind port", ge=1, le=65535)
    log_level: str = Field(default="info", description="Minimum log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.lower()
        if level not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_neo4j_settings() -> Neo4jSettings:
    """Get cached Neo4j settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Neo4jSettings()
