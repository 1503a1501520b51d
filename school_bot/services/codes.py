"""
Генерация одноразовых кодов доступа
"""

import logging
import secrets
from typing import Iterable, List, Optional

from school_bot.config import config
from school_bot.database import queries as db

logger = logging.getLogger(__name__)

# Без 0, O, I, 1 — чтобы не путать при вводе
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 8


def generate_code(prefix: Optional[str] = None) -> str:
    """Случайный код вида PON-XXXXXXXX"""
    prefix = (prefix or config.CODE_PREFIX).upper()
    body = "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))
    return f"{prefix}-{body}"


def generate_codes(count: int, existing: Iterable[str] = (), prefix: Optional[str] = None) -> List[str]:
    """count новых кодов, не совпадающих с existing и между собой"""
    taken = set(existing)
    codes = []
    while len(codes) < count:
        code = generate_code(prefix)
        if code not in taken:
            taken.add(code)
            codes.append(code)
    return codes


async def create_codes(count: int, prefix: Optional[str] = None) -> List[str]:
    """Сгенерировать и сохранить коды, вернуть вставленные"""
    existing = await db.get_existing_codes()
    codes = generate_codes(count, existing, prefix)
    created = await db.create_access_codes(codes)
    logger.info(f"Создано кодов доступа: {len(created)} из {count}")
    return created
