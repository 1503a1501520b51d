"""
Доступ к курсу: активация одноразовых кодов
"""

import logging
from typing import Optional

from school_bot.database import queries as db
from school_bot.database.models import AccessCode
from school_bot.errors import CodeMissing, CodeNotFound, CodeAlreadyUsed
from school_bot.utils import today

logger = logging.getLogger(__name__)


def normalize_code(raw_code: Optional[str]) -> str:
    """Коды хранятся в верхнем регистре без пробелов по краям"""
    if raw_code is None:
        return ""
    return raw_code.strip().upper()


async def redeem(telegram_id: int, raw_code: Optional[str]) -> AccessCode:
    """
    Активировать код для пользователя.

    Raises:
        CodeMissing: код не передан
        CodeNotFound: кода нет в базе
        CodeAlreadyUsed: код уже использован, в том числе если
            параллельная активация успела раньше
    """
    code = normalize_code(raw_code)
    if not code:
        raise CodeMissing()

    access_code = await db.get_access_code(code)
    if access_code is None:
        logger.info(f"Код не найден: {code} (tg_id={telegram_id})")
        raise CodeNotFound(code)
    if access_code.is_used:
        logger.info(f"Повторная активация кода {code} (tg_id={telegram_id})")
        raise CodeAlreadyUsed(code)

    redeemed = await db.redeem_access_code(code, telegram_id, today())
    if redeemed is None:
        logger.warning(f"Код {code} активирован параллельно, tg_id={telegram_id} опоздал")
        raise CodeAlreadyUsed(code)

    logger.info(f"Активация кода: {telegram_id} -> {code}")
    return redeemed


async def check_access(telegram_id: int) -> bool:
    """Есть ли у пользователя доступ. Нет записи — нет доступа"""
    user = await db.get_user(telegram_id)
    return user is not None and user.has_access
