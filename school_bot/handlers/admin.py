"""
Админ-команды: управление кодами доступа
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from school_bot.config import config
from school_bot.database import queries as db
from school_bot.services.access import normalize_code
from school_bot.services.codes import create_codes

logger = logging.getLogger(__name__)

DEFAULT_GENERATE_COUNT = 10
MAX_GENERATE_COUNT = 100


def admin_only(func):
    """Декоратор: только для админов"""
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
        user_id = update.effective_user.id
        if user_id not in config.ADMIN_IDS:
            await update.message.reply_text("Нет доступа")
            return
        return await func(update, context)
    return wrapper


@admin_only
async def codes_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Статистика кодов и свободные коды"""
    stats = await db.get_code_stats()
    unused = await db.get_unused_codes(limit=10)

    text = (
        f"📊 Коды доступа\n\n"
        f"Всего: {stats['total']}\n"
        f"Свободно: {stats['unused']}\n"
        f"Использовано: {stats['used']}"
    )
    if unused:
        text += "\n\nСвободные коды:\n" + "\n".join(unused)

    await update.message.reply_text(text)


@admin_only
async def add_code_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Добавить код доступа"""
    if not context.args:
        await update.message.reply_text("Использование: /add_code <код>")
        return

    code = normalize_code(context.args[0])

    if not await db.create_access_code(code):
        await update.message.reply_text(f"Код уже существует: {code}")
        return

    logger.info(f"Добавлен код доступа: {code}")
    await update.message.reply_text(f"Код добавлен: {code}")


@admin_only
async def gen_codes_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Сгенерировать N кодов доступа"""
    count = DEFAULT_GENERATE_COUNT
    if context.args:
        try:
            count = int(context.args[0])
        except ValueError:
            count = 0

    if not 1 <= count <= MAX_GENERATE_COUNT:
        await update.message.reply_text(
            f"Использование: /gen_codes <1..{MAX_GENERATE_COUNT}>"
        )
        return

    codes = await create_codes(count)
    await update.message.reply_text(
        f"Создано кодов: {len(codes)}\n\n" + "\n".join(codes)
    )
