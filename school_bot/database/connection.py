"""
Пул соединений PostgreSQL
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from school_bot.config import config


# Глобальный пул соединений
_pool: Optional[asyncpg.Pool] = None


def _ssl_mode(dsn: str):
    """Локальная БД — без SSL, удалённая — SSL без проверки сертификата"""
    if "localhost" in dsn or "127.0.0.1" in dsn:
        return False
    return "require"


async def get_pool() -> asyncpg.Pool:
    """Получить пул соединений (создаёт при первом вызове)"""
    global _pool

    if _pool is None:
        _pool = await asyncpg.create_pool(
            config.DATABASE_URL,
            min_size=2,
            max_size=10,
            ssl=_ssl_mode(config.DATABASE_URL)
        )

    return _pool


async def close_pool():
    """Закрыть пул соединений"""
    global _pool

    if _pool:
        await _pool.close()
        _pool = None


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Единица работы: соединение из пула с открытой транзакцией.
    COMMIT при выходе, ROLLBACK при любом исключении.
    """
    pool = await get_pool()
    async with pool.acquire() as conn:
        async with conn.transaction():
            yield conn
