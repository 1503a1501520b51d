"""
Вспомогательные функции
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from school_bot.config import config


def today() -> date:
    """Сегодняшняя дата в часовом поясе бота"""
    return datetime.now(ZoneInfo(config.TIMEZONE)).date()
