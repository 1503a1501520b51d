"""
Обработчики уроков: /start, кнопка «Продолжить», /status
"""

from telegram import Update
from telegram.ext import ContextTypes

from school_bot.content import render_lesson
from school_bot.errors import AccessDenied, NoSuchUser, TooSoon
from school_bot.keyboards import continue_keyboard
from school_bot.services import progression

ACTIVATE_HINT = (
    "Используйте команду: /activate ВАШ_КОД\n\n"
    "Если у вас нет кода, обратитесь к администратору."
)
BOT_LOCKED_TEXT = "🔒 Для доступа к боту необходимо активировать код доступа.\n\n" + ACTIVATE_HINT
LESSONS_LOCKED_TEXT = "🔒 Для доступа к урокам необходимо активировать код доступа.\n\n" + ACTIVATE_HINT
START_FIRST_TEXT = "❌ Сначала напишите /start"
COURSE_COMPLETE_TEXT = "🎓 Курс завершен.\nСпасибо за прохождение обучения."
TOO_SOON_TEXT = "⏳ Следующий урок будет доступен завтра."


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка команды /start — всегда с первого урока"""
    user = update.effective_user
    name = user.username or user.first_name

    try:
        step = await progression.start(user.id)
    except AccessDenied:
        await update.message.reply_text(BOT_LOCKED_TEXT)
        return

    await update.message.reply_text(
        f"Добро пожаловать, {name}! 👋\n\n{render_lesson(step.lesson)}",
        reply_markup=continue_keyboard()
    )


async def continue_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка кнопки «Продолжить ▶️»"""
    tg_id = update.effective_user.id

    try:
        step = await progression.advance(tg_id)
    except NoSuchUser:
        await update.message.reply_text(START_FIRST_TEXT)
        return
    except AccessDenied:
        await update.message.reply_text(LESSONS_LOCKED_TEXT)
        return
    except TooSoon:
        await update.message.reply_text(TOO_SOON_TEXT)
        return

    if step.completed:
        await update.message.reply_text(COURSE_COMPLETE_TEXT)
        return

    await update.message.reply_text(
        render_lesson(step.lesson),
        reply_markup=continue_keyboard()
    )


async def status_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка команды /status — прогресс по курсу"""
    tg_id = update.effective_user.id

    try:
        progress = await progression.status(tg_id)
    except NoSuchUser:
        await update.message.reply_text(START_FIRST_TEXT)
        return

    last_date = (
        progress.last_lesson_date.isoformat()
        if progress.last_lesson_date
        else "еще не пройден"
    )

    await update.message.reply_text(
        f"📊 Ваш прогресс:\n\n"
        f"Урок: {progress.current_lesson} из {progress.total}\n"
        f"Прогресс: {progress.percent}%\n"
        f"Последний урок: {last_date}"
    )
