"""
Модели данных (dataclasses)
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class User:
    """Пользователь бота"""
    id: int
    telegram_id: int
    has_access: bool
    current_lesson: int
    last_lesson_date: Optional[date]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        if self.current_lesson < 1:
            raise ValueError(f"current_lesson должен быть >= 1, получено {self.current_lesson}")


@dataclass
class AccessCode:
    """Код доступа"""
    id: int
    code: str
    is_used: bool
    used_by_telegram_id: Optional[int]
    used_at: Optional[datetime]
    created_at: datetime

    def __post_init__(self):
        if self.is_used and (self.used_by_telegram_id is None or self.used_at is None):
            raise ValueError(f"Использованный код {self.code} без used_by/used_at")
