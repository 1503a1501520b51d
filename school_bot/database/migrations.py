"""
Автоматические миграции базы данных (таблицы users и access_codes)
"""

import logging
from pathlib import Path

from school_bot.database.connection import get_pool

logger = logging.getLogger(__name__)

# SQL-миграции лежат внутри пакета (ставятся вместе с ним как package-data)
MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


async def run_migrations(migrations_dir: Path = MIGRATIONS_DIR) -> int:
    """
    Выполнить все SQL-миграции из school_bot/migrations/ по порядку имён.
    Скрипты идемпотентны (IF NOT EXISTS), поэтому выполняются при каждом старте.
    Возвращает количество выполненных файлов.
    """
    pool = await get_pool()

    if not migrations_dir.exists():
        logger.warning(f"Папка миграций не найдена: {migrations_dir}")
        return 0

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("Миграции не найдены")
        return 0

    async with pool.acquire() as conn:
        for sql_file in sql_files:
            logger.info(f"Выполняю миграцию: {sql_file.name}")
            try:
                await conn.execute(sql_file.read_text(encoding="utf-8"))
            except Exception as e:
                logger.error(f"✗ Ошибка в {sql_file.name}: {e}")
                raise
            logger.info(f"✓ Миграция {sql_file.name} выполнена")

    return len(sql_files)
