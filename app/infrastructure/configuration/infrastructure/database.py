"""Database infrastructure settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class DatabaseSettings(InfrastructureSettings):
    """PostgreSQL connection and pool configuration.

    Environment Variables:
        DATABASE_URL: Full DSN, overrides the individual POSTGRES_* values
        POSTGRES_HOST: Database host (default: localhost)
        POSTGRES_PORT: Database port (default: 5432)
        POSTGRES_DB: Database name (default: indian_culture)
        POSTGRES_USER: Database user (default: postgres)
        POSTGRES_PASSWORD: Database password (default: postgres)
        DB_POOL_MIN_SIZE: Minimum pooled connections (default: 1)
        DB_POOL_MAX_SIZE: Maximum pooled connections (default: 20)
        DB_COMMAND_TIMEOUT_SECONDS: Per-query timeout (default: 30s)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        dsn = settings.database.dsn
        ```
    """

    DATABASE_URL: Optional[str] = Field(default=None, alias="DATABASE_URL")
    POSTGRES_HOST: str = Field(default="localhost", alias="POSTGRES_HOST")
    POSTGRES_PORT: int = Field(default=5432, alias="POSTGRES_PORT")
    POSTGRES_DB: str = Field(default="indian_culture", alias="POSTGRES_DB")
    POSTGRES_USER: str = Field(default="postgres", alias="POSTGRES_USER")
    POSTGRES_PASSWORD: str = Field(default="postgres", alias="POSTGRES_PASSWORD")
    DB_POOL_MIN_SIZE: int = Field(default=1, alias="DB_POOL_MIN_SIZE", ge=0)
    DB_POOL_MAX_SIZE: int = Field(default=20, alias="DB_POOL_MAX_SIZE", ge=1)
    DB_COMMAND_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        alias="DB_COMMAND_TIMEOUT_SECONDS",
        gt=0,
    )

    @property
    def dsn(self) -> str:
        """Connection string for asyncpg.

        Returns:
            DATABASE_URL when set, otherwise a DSN built from POSTGRES_* values.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )
