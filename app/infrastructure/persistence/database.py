"""PostgreSQL access through an asyncpg connection pool."""

from typing import TYPE_CHECKING, Any, List, Optional

import asyncpg

from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration.infrastructure import DatabaseSettings

logger = get_module_logger()


class StoreError(Exception):
    """A query could not be executed (connectivity, timeout, SQL error).

    The original driver exception is always chained as ``__cause__``.
    """


class Database:
    """Thin wrapper over an asyncpg pool.

    Only parameterized queries are issued; values never get interpolated into
    SQL text. Pool sizing and the per-command timeout come from
    DatabaseSettings. There is no retry here: a failed query raises
    StoreError and the caller decides.

    Usage:
        database = Database(settings.database)
        await database.connect()
        rows = await database.fetch("SELECT code FROM languages WHERE code = $1", "hi")
        await database.close()
    """

    def __init__(self, settings: "DatabaseSettings"):
        self._dsn = settings.dsn
        self._pool_min = settings.DB_POOL_MIN_SIZE
        self._pool_max = settings.DB_POOL_MAX_SIZE
        self._command_timeout = settings.DB_COMMAND_TIMEOUT_SECONDS
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return
        try:
            self._pool = await asyncpg.create_pool(
                self._dsn,
                min_size=self._pool_min,
                max_size=self._pool_max,
                command_timeout=self._command_timeout,
            )
        except (asyncpg.PostgresError, OSError) as e:
            logger.error("database_connection_failed", error=str(e))
            raise StoreError(f"Could not connect to database: {e}") from e
        logger.info(
            "database_pool_created",
            pool_min=self._pool_min,
            pool_max=self._pool_max,
        )

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("database_pool_closed")

    async def fetch(self, query: str, *args: Any) -> List[asyncpg.Record]:
        """Run a query and return all rows.

        Raises:
            StoreError: If the pool is not connected or the query fails.
        """
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                return await conn.fetch(query, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError) as e:
            logger.error("database_query_failed", error=str(e), error_type=type(e).__name__)
            raise StoreError(f"Query failed: {e}") from e

    async def fetchrow(self, query: str, *args: Any) -> Optional[asyncpg.Record]:
        """Run a query and return the first row, or None."""
        rows = await self.fetch(query, *args)
        return rows[0] if rows else None

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise StoreError("Database is not connected")
        return self._pool
