"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Apply the default rate limit to every route.
        rate_limit_default: Default rate limit, in slowapi notation.
        database_url: Full SQLAlchemy URL. Overrides the postgres_* parts.
        create_schema: Create missing tables on startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Catalog API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    create_schema: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "catalog"

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Built from the postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
