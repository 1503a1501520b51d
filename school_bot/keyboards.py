"""
Клавиатуры бота
"""

from telegram import ReplyKeyboardMarkup

CONTINUE_BUTTON = "Продолжить ▶️"


def start_keyboard() -> ReplyKeyboardMarkup:
    """После активации кода — кнопка /start"""
    return ReplyKeyboardMarkup([["/start"]], resize_keyboard=True)


def continue_keyboard() -> ReplyKeyboardMarkup:
    """Под уроком — кнопка «Продолжить»"""
    return ReplyKeyboardMarkup([[CONTINUE_BUTTON]], resize_keyboard=True)
