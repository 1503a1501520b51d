"""
Исключения доменной логики: активация кодов и прохождение уроков
"""


class BotError(Exception):
    """Базовое исключение бота"""


# ============================================
# Коды доступа
# ============================================

class CodeMissing(BotError):
    """Код не передан в команде /activate"""


class CodeNotFound(BotError):
    """Кода нет в базе"""


class CodeAlreadyUsed(BotError):
    """Код уже активирован (в том числе проигранная гонка)"""


# ============================================
# Прогресс
# ============================================

class AccessDenied(BotError):
    """У пользователя нет доступа к урокам"""


class NoSuchUser(BotError):
    """Пользователь ещё не заведён в базе"""


class TooSoon(BotError):
    """Урок сегодня уже выдан (правило «один урок в день»)"""
