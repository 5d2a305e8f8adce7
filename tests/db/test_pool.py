from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.backend.db.pool import PostgresPool
from app.backend.services.errors import ConfigurationError


@pytest.mark.asyncio
async def test_missing_dsn_is_configuration_error():
    pool = PostgresPool(dsn=None)

    with pytest.raises(ConfigurationError):
        await pool.get()


@pytest.mark.asyncio
async def test_pool_is_created_once_and_closed():
    fake_pool = MagicMock()
    fake_pool.close = AsyncMock()

    with patch("app.backend.db.pool.asyncpg.create_pool", new=AsyncMock(return_value=fake_pool)) as create_pool:
        pool = PostgresPool(dsn="postgresql://u:p@localhost/db", max_size=5, idle_timeout=30, connect_timeout=10)
        assert not pool.is_open

        first = await pool.get()
        second = await pool.get()

        assert first is second is fake_pool
        create_pool.assert_awaited_once()
        kwargs = create_pool.call_args.kwargs
        assert kwargs["max_size"] == 5
        assert kwargs["max_inactive_connection_lifetime"] == 30
        assert kwargs["timeout"] == 10

    await pool.close()
    fake_pool.close.assert_awaited_once()
    assert not pool.is_open


@pytest.mark.asyncio
async def test_close_without_open_pool_is_noop():
    pool = PostgresPool(dsn="postgresql://u:p@localhost/db")

    await pool.close()

    assert not pool.is_open
