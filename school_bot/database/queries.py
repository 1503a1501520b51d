"""
SQL-запросы к базе данных

Функции принимают необязательный conn — соединение с открытой транзакцией
(см. connection.transaction). Без него запрос выполняется через пул.
"""

from datetime import date
from typing import Iterable, List, Optional, Set

from school_bot.database.connection import get_pool, transaction
from school_bot.database.models import User, AccessCode


async def _executor(conn=None):
    return conn if conn is not None else await get_pool()


# ============================================
# Users
# ============================================

async def get_user(telegram_id: int, conn=None, for_update: bool = False) -> Optional[User]:
    """Получить пользователя по Telegram ID (for_update — заблокировать строку до конца транзакции)"""
    executor = await _executor(conn)
    sql = "SELECT * FROM users WHERE telegram_id = $1"
    if for_update:
        sql += " FOR UPDATE"
    row = await executor.fetchrow(sql, telegram_id)
    if row:
        return User(**dict(row))
    return None


async def reset_progress(telegram_id: int, today: date, conn=None) -> Optional[User]:
    """Начать курс заново: current_lesson = 1"""
    executor = await _executor(conn)
    row = await executor.fetchrow(
        """
        UPDATE users
        SET current_lesson = 1, last_lesson_date = $2
        WHERE telegram_id = $1
        RETURNING *
        """,
        telegram_id, today
    )
    if row:
        return User(**dict(row))
    return None


async def set_progress(telegram_id: int, lesson_number: int, today: date, conn=None):
    """Записать номер текущего урока и дату его выдачи"""
    executor = await _executor(conn)
    await executor.execute(
        "UPDATE users SET current_lesson = $1, last_lesson_date = $2 WHERE telegram_id = $3",
        lesson_number, today, telegram_id
    )


# ============================================
# Access Codes
# ============================================

async def get_access_code(code: str) -> Optional[AccessCode]:
    """Получить код доступа"""
    pool = await get_pool()
    row = await pool.fetchrow(
        "SELECT * FROM access_codes WHERE code = $1",
        code
    )
    if row:
        return AccessCode(**dict(row))
    return None


async def redeem_access_code(code: str, telegram_id: int, today: date) -> Optional[AccessCode]:
    """
    Активировать код и выдать доступ — в одной транзакции.

    Код помечается использованным только если он ещё свободен
    (UPDATE ... WHERE is_used = FALSE), поэтому из нескольких
    одновременных попыток успешна ровно одна. Проигравшие получают None.
    Новый пользователь стартует с урока 1, у существующего меняется только has_access.
    """
    async with transaction() as conn:
        row = await conn.fetchrow(
            """
            UPDATE access_codes
            SET is_used = TRUE, used_by_telegram_id = $2, used_at = NOW()
            WHERE code = $1 AND is_used = FALSE
            RETURNING *
            """,
            code, telegram_id
        )
        if row is None:
            return None

        await conn.execute(
            """
            INSERT INTO users (telegram_id, has_access, current_lesson, last_lesson_date)
            VALUES ($1, TRUE, 1, $2)
            ON CONFLICT (telegram_id)
            DO UPDATE SET has_access = TRUE
            """,
            telegram_id, today
        )

    return AccessCode(**dict(row))


async def create_access_code(code: str) -> bool:
    """Создать новый код доступа. False — такой код уже есть"""
    pool = await get_pool()
    inserted = await pool.fetchval(
        """
        INSERT INTO access_codes (code)
        VALUES ($1)
        ON CONFLICT (code) DO NOTHING
        RETURNING id
        """,
        code
    )
    return inserted is not None


async def create_access_codes(codes: Iterable[str]) -> List[str]:
    """Создать пачку кодов, вернуть реально вставленные"""
    created = []
    for code in codes:
        if await create_access_code(code):
            created.append(code)
    return created


async def get_existing_codes() -> Set[str]:
    """Все коды в базе (для генерации без повторов)"""
    pool = await get_pool()
    rows = await pool.fetch("SELECT code FROM access_codes")
    return {row["code"] for row in rows}


async def get_unused_codes(limit: int = 10) -> List[str]:
    """Первые N свободных кодов"""
    pool = await get_pool()
    rows = await pool.fetch(
        "SELECT code FROM access_codes WHERE is_used = FALSE ORDER BY code LIMIT $1",
        limit
    )
    return [row["code"] for row in rows]


async def get_code_stats() -> dict:
    """Статистика кодов: всего / свободно / использовано"""
    pool = await get_pool()
    row = await pool.fetchrow(
        """
        SELECT
            COUNT(*) AS total,
            COUNT(*) FILTER (WHERE is_used = FALSE) AS unused,
            COUNT(*) FILTER (WHERE is_used = TRUE) AS used
        FROM access_codes
        """
    )
    return dict(row)
