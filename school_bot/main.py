"""
Главная точка входа бота
"""

import logging

import uvicorn
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    ContextTypes,
    filters
)

from school_bot.config import config
from school_bot.database.connection import get_pool, close_pool
from school_bot.database.migrations import run_migrations
from school_bot.keyboards import CONTINUE_BUTTON
from school_bot.web import create_web_app

# Хендлеры
from school_bot.handlers.access import activate_handler
from school_bot.handlers.lessons import (
    start_handler,
    continue_handler,
    status_handler
)
from school_bot.handlers.admin import (
    codes_handler,
    add_code_handler,
    gen_codes_handler
)


# Настройка логирования
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=config.log_level
)
# httpx логирует каждый запрос к Bot API вместе с токеном в URL
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

ERROR_TEXT = "❌ Произошла ошибка. Попробуйте позже."


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Необработанные ошибки (в том числе недоступность БД): лог + общий ответ"""
    logger.error("Ошибка при обработке апдейта", exc_info=context.error)

    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text(ERROR_TEXT)


def register_handlers(app: Application):
    """Регистрация всех хендлеров"""

    # Команды пользователей
    app.add_handler(CommandHandler("activate", activate_handler))
    app.add_handler(CommandHandler("start", start_handler))
    app.add_handler(CommandHandler("status", status_handler))

    # Админ-команды
    app.add_handler(CommandHandler("codes", codes_handler))
    app.add_handler(CommandHandler("add_code", add_code_handler))
    app.add_handler(CommandHandler("gen_codes", gen_codes_handler))

    # Кнопка «Продолжить»
    app.add_handler(MessageHandler(filters.Text([CONTINUE_BUTTON]), continue_handler))

    app.add_error_handler(error_handler)


async def post_init(app: Application):
    """Инициализация после запуска"""
    await get_pool()
    await run_migrations()
    logger.info("База данных подключена, миграции выполнены")


async def post_shutdown(app: Application):
    """Очистка при завершении"""
    await close_pool()
    logger.info("Соединение с БД закрыто")


def build_application(webhook: bool = False) -> Application:
    """
    Создание приложения.
    В режиме webhook апдейты приходят через FastAPI (см. web.py), updater не нужен,
    а БД поднимается в lifespan веб-сервера.
    """
    builder = (
        Application.builder()
        .token(config.BOT_TOKEN)
        .concurrent_updates(True)
    )
    if webhook:
        builder = builder.updater(None)
    else:
        builder = builder.post_init(post_init).post_shutdown(post_shutdown)

    app = builder.build()
    register_handlers(app)
    return app


def main():
    """Запуск бота"""

    # Проверка конфигурации
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Ошибка конфигурации: {error}")
        return

    if config.WEBHOOK_URL:
        app = build_application(webhook=True)
        logger.info(f"Бот запущен (webhook), порт {config.PORT}")
        uvicorn.run(create_web_app(app), host=config.HOST, port=config.PORT)
    else:
        app = build_application()
        logger.warning("WEBHOOK_URL не задан, бот работает через polling")
        app.run_polling(allowed_updates=["message"])


if __name__ == "__main__":
    main()
