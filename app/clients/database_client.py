import asyncio
import logging

import asyncpg

from app.config import Settings, connect_url

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """Raised when the connection pool cannot be created at startup."""


class DatabaseClient:
    """
    Runs parameterized queries on a shared asyncpg connection pool.

    The pool is handed in by the caller and is the only thing this class
    touches; every query borrows one connection and gives it back before
    returning, whatever the outcome.
    """

    DEFAULT_QUERY_TIMEOUT = 5.0  # seconds, covers acquire + execution

    def __init__(self, pool: asyncpg.Pool, query_timeout: float = DEFAULT_QUERY_TIMEOUT):
        self._pool = pool
        self._query_timeout = query_timeout

    @classmethod
    async def connect(cls, settings: Settings) -> "DatabaseClient":
        """Creates the connection pool described by `settings`."""
        try:
            pool = await asyncpg.create_pool(
                dsn=connect_url(settings),
                min_size=1,
                max_size=settings.db_max_connections,
            )
        except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError, ValueError) as e:
            raise DatabaseConnectionError(f"Unable to create connection pool: {e}") from e

        logger.info(
            f"Connection pool ready for {settings.db_host}:{settings.db_port}/{settings.db_database} "
            f"(max_size={settings.db_max_connections})"
        )
        return cls(pool, query_timeout=settings.db_query_timeout)

    async def query(self, query_string: str, *args) -> bytes | None:
        """
        Executes `query_string` with bound `args` and returns the first column of
        the first row as bytes.

        Returns None when the query yields no rows or the column is NULL. Any
        other row is ignored. Errors from the pool or the server propagate
        unchanged. A column that is not JSON text raises TypeError.
        """
        value = await asyncio.wait_for(
            self._fetch_first_value(query_string, args),
            timeout=self._query_timeout,
        )
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"Expected a JSON text column, got {type(value).__name__}")

    async def _fetch_first_value(self, query_string: str, args: tuple):
        async with self._pool.acquire() as conn:
            return await conn.fetchval(query_string, *args)

    async def close(self):
        """Closes the pool (call on app shutdown)."""
        await self._pool.close()
        logger.info("Connection pool closed")
