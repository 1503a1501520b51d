"""
Конфигурация бота — загрузка переменных окружения
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Загружаем .env из корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Конфигурация приложения"""

    # --- Telegram ---
    BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")
    ADMIN_IDS: list[int] = [
        int(id_.strip())
        for id_ in os.getenv("ADMIN_IDS", "").split(",")
        if id_.strip()
    ]

    # --- Webhook ---
    WEBHOOK_URL: str = os.getenv("WEBHOOK_URL", "").rstrip("/")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # --- Database ---
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # --- Settings ---
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")
    DAILY_CADENCE: bool = _flag(os.getenv("DAILY_CADENCE", "false"))
    CODE_PREFIX: str = os.getenv("CODE_PREFIX", "PON")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    @classmethod
    def validate(cls) -> list[str]:
        """Проверка обязательных переменных"""
        errors = []

        if not cls.BOT_TOKEN:
            errors.append("BOT_TOKEN не задан")
        if not cls.DATABASE_URL:
            errors.append("DATABASE_URL не задан")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"LOG_LEVEL: неизвестный уровень {cls.LOG_LEVEL!r}")

        return errors

    @property
    def log_level(self) -> str:
        """Уровень логирования; неизвестное значение заменяется на INFO"""
        if isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            return self.LOG_LEVEL
        return "INFO"

    @property
    def webhook_path(self) -> str:
        return f"/webhook/{self.BOT_TOKEN}"


# Синглтон конфигурации
config = Config()
