"""
Прохождение курса: выдача уроков по кнопке «Продолжить»

Состояние пользователя — номер текущего урока current_lesson:
1..N — урок выдан, N+1 — курс завершён.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from school_bot.config import config
from school_bot.content import Lesson, TOTAL_LESSONS, get_lesson
from school_bot.database import queries as db
from school_bot.errors import AccessDenied, NoSuchUser, TooSoon
from school_bot.utils import today

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """Результат start/advance: выданный урок или завершение курса"""
    lesson_number: int
    lesson: Optional[Lesson]

    @property
    def completed(self) -> bool:
        return self.lesson is None


@dataclass(frozen=True)
class Progress:
    """Прогресс для /status"""
    current_lesson: int
    total: int
    percent: int
    last_lesson_date: Optional[date]


def next_lesson_number(current_lesson: int) -> int:
    """Урок 1 уже показан в /start, поэтому после него сразу второй"""
    if current_lesson == 1:
        return 2
    return current_lesson + 1


def progress_percent(current_lesson: int, total: int = TOTAL_LESSONS) -> int:
    """round(100 * current / total), половины вверх"""
    return (200 * current_lesson + total) // (2 * total)


async def start(telegram_id: int) -> Step:
    """
    Начать курс с первого урока.

    Повторный /start всегда возвращает к уроку 1, независимо от прогресса.
    """
    user = await db.get_user(telegram_id)
    if user is None or not user.has_access:
        raise AccessDenied()

    current_date = today()
    await db.reset_progress(telegram_id, current_date)
    logger.info(f"/start: {telegram_id} -> урок 1 ({current_date})")

    return Step(lesson_number=1, lesson=get_lesson(1))


async def advance(telegram_id: int) -> Step:
    """
    Выдать следующий урок.

    Чтение и запись идут в одной транзакции с блокировкой строки
    пользователя, так что повторные нажатия выполняются по очереди.

    Raises:
        NoSuchUser: пользователя нет в базе
        AccessDenied: нет доступа
        TooSoon: урок сегодня уже выдан (только при DAILY_CADENCE)
    """
    current_date = today()

    async with db.transaction() as conn:
        user = await db.get_user(telegram_id, conn=conn, for_update=True)
        if user is None:
            raise NoSuchUser()
        if not user.has_access:
            raise AccessDenied()

        if user.current_lesson > TOTAL_LESSONS:
            return Step(lesson_number=user.current_lesson, lesson=None)

        if config.DAILY_CADENCE and user.last_lesson_date == current_date:
            logger.info(f"Урок для {telegram_id} сегодня уже выдан")
            raise TooSoon()

        if user.current_lesson == TOTAL_LESSONS:
            await db.set_progress(telegram_id, TOTAL_LESSONS + 1, current_date, conn=conn)
            logger.info(f"Курс завершён: {telegram_id}")
            return Step(lesson_number=TOTAL_LESSONS + 1, lesson=None)

        number = next_lesson_number(user.current_lesson)
        await db.set_progress(telegram_id, number, current_date, conn=conn)

    logger.info(f"Урок обновлён: {telegram_id} -> {number} ({current_date})")
    return Step(lesson_number=number, lesson=get_lesson(number))


async def status(telegram_id: int) -> Progress:
    """Прогресс пользователя, без изменений в базе"""
    user = await db.get_user(telegram_id)
    if user is None:
        raise NoSuchUser()

    return Progress(
        current_lesson=user.current_lesson,
        total=TOTAL_LESSONS,
        percent=progress_percent(user.current_lesson),
        last_lesson_date=user.last_lesson_date,
    )
