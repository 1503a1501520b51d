"""
Обработчик /activate — активация по коду доступа
"""

from telegram import Update
from telegram.ext import ContextTypes

from school_bot.errors import CodeMissing, CodeNotFound, CodeAlreadyUsed
from school_bot.keyboards import start_keyboard
from school_bot.services import access


async def activate_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка команды /activate <код>"""
    tg_id = update.effective_user.id
    raw_code = context.args[0] if context.args else None

    try:
        await access.redeem(tg_id, raw_code)
    except CodeMissing:
        await update.message.reply_text(
            "❌ Пожалуйста, укажите код доступа.\n\nИспользование: /activate ВАШ_КОД"
        )
        return
    except CodeNotFound:
        await update.message.reply_text(
            "❌ Код доступа не найден. Проверьте правильность ввода."
        )
        return
    except CodeAlreadyUsed:
        await update.message.reply_text("❌ Этот код уже был использован.")
        return

    await update.message.reply_text(
        "✅ Код доступа активирован! Теперь вы можете использовать бота.\n\n"
        "Напишите /start для начала обучения.",
        reply_markup=start_keyboard()
    )
