#!/usr/bin/env python3
"""
Массовое создание одноразовых кодов доступа

Использование:
    python scripts/create_codes.py              # 30 кодов
    python scripts/create_codes.py -n 50 --out ./codes
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Добавляем корневую директорию в PYTHONPATH
ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from school_bot.config import config  # noqa: E402
from school_bot.database import queries as db  # noqa: E402
from school_bot.database.connection import get_pool, close_pool  # noqa: E402
from school_bot.database.migrations import run_migrations  # noqa: E402
from school_bot.services.codes import create_codes  # noqa: E402


def manager_text(codes: list[str]) -> str:
    """Файл для менеджера: нумерованный список и инструкция для учеников"""
    numbered = "\n".join(f"{index}. {code}" for index, code in enumerate(codes, start=1))
    return (
        f"Коды доступа для учеников:\n\n{numbered}\n\n"
        f"Инструкция для учеников:\n"
        f"1. Откройте бота в Telegram\n"
        f"2. Отправьте команду: /activate КОД\n"
        f"3. После активации напишите: /start"
    )


async def main(count: int, out_dir: Path):
    if not config.DATABASE_URL:
        print("❌ DATABASE_URL не установлена")
        sys.exit(1)

    try:
        print("🔗 Подключение к базе данных...")
        await get_pool()
        await run_migrations()
        print("✅ Подключено, таблица access_codes готова\n")

        print(f"📝 Создание {count} уникальных кодов доступа...\n")
        codes = await create_codes(count)
        for code in codes:
            print(f"   ✅ {code}")

        stats = await db.get_code_stats()
        print("\n📊 Статистика кодов:")
        print(f"   Всего: {stats['total']}")
        print(f"   Не использовано: {stats['unused']}")
        print(f"   Использовано: {stats['used']}")

        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / "access_codes.txt").write_text("\n".join(codes), encoding="utf-8")
        (out_dir / "access_codes_for_manager.txt").write_text(manager_text(codes), encoding="utf-8")
        print(f"\n💾 Коды сохранены: {out_dir / 'access_codes.txt'}")
        print(f"📄 Файл для менеджера: {out_dir / 'access_codes_for_manager.txt'}")
    except Exception as e:
        print(f"❌ Ошибка: {e}")
        sys.exit(1)
    finally:
        await close_pool()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Создание кодов доступа")
    parser.add_argument("-n", "--count", type=int, default=30, help="количество кодов")
    parser.add_argument("--out", type=Path, default=ROOT_DIR, help="папка для файлов с кодами")
    args = parser.parse_args()
    asyncio.run(main(args.count, args.out))
