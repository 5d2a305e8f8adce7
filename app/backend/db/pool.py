# app/backend/db/pool.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from ..config.config import Config, settings
from ..services.errors import ConfigurationError

logger = logging.getLogger(__name__)


class PostgresPool:
    """
    Process-wide PostgreSQL connection pool, created lazily on first use.

    Every caller borrows one connection through `acquire()` for a single query
    or transaction; the connection goes back to the pool whether the query
    succeeds or fails.
    """
    def __init__(
        self,
        dsn: Optional[str],
        min_size: int = 0,
        max_size: int = 5,
        idle_timeout: float = 30,
        connect_timeout: float = 10,
        command_timeout: Optional[float] = 30,
        ssl: Optional[str] = None,
    ):
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._idle_timeout = idle_timeout
        self._connect_timeout = connect_timeout
        self._command_timeout = command_timeout
        self._ssl = ssl
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, config: Config = settings) -> "PostgresPool":
        return cls(
            dsn=config.DATABASE_URL,
            min_size=config.DB_POOL_MIN_SIZE,
            max_size=config.DB_POOL_MAX_SIZE,
            idle_timeout=config.DB_POOL_IDLE_TIMEOUT_SECONDS,
            connect_timeout=config.DB_CONNECT_TIMEOUT_SECONDS,
            command_timeout=config.DB_COMMAND_TIMEOUT_SECONDS,
            ssl=config.DB_SSL,
        )

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def get(self) -> asyncpg.Pool:
        """Returns the pool, creating it on the first call."""
        if self._pool is not None:
            return self._pool
        async with self._lock:
            if self._pool is None:
                if not self._dsn:
                    raise ConfigurationError("Environment variable DATABASE_URL is not set.")
                self._pool = await asyncpg.create_pool(
                    dsn=self._dsn,
                    min_size=self._min_size,
                    max_size=self._max_size,
                    max_inactive_connection_lifetime=self._idle_timeout,
                    timeout=self._connect_timeout,
                    command_timeout=self._command_timeout,
                    ssl=self._ssl,
                )
                logger.info(f"PostgreSQL connection pool created (max_size={self._max_size}).")
        return self._pool

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        pool = await self.get()
        async with pool.acquire(timeout=self._connect_timeout) as connection:
            yield connection

    async def close(self):
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("PostgreSQL connection pool closed.")
