"""
Уроки курса и их форматирование

Контент статичный: читается из lessons.json один раз при импорте
и дальше только читается.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

LESSONS_FILE = Path(__file__).resolve().parent / "lessons.json"

LESSON_FOOTER = 'После выполнения вернитесь завтра и нажмите "Продолжить".'


@dataclass(frozen=True)
class Material:
    """Ссылка на материал урока"""
    title: str
    url: str


@dataclass(frozen=True)
class Lesson:
    """Урок курса"""
    title: str
    text: str
    materials: Tuple[Material, ...]
    homework_text: str
    homework_url: str
    additional_text: Optional[str] = None


def load_lessons(path: Path = LESSONS_FILE) -> Tuple[Lesson, ...]:
    """Загрузить уроки из JSON"""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return tuple(
        Lesson(
            title=item["title"],
            text=item["text"],
            materials=tuple(Material(**m) for m in item.get("materials", [])),
            homework_text=item.get("homework_text", ""),
            homework_url=item.get("homework_url", ""),
            additional_text=item.get("additional_text"),
        )
        for item in raw
    )


LESSONS: Tuple[Lesson, ...] = load_lessons()
TOTAL_LESSONS = len(LESSONS)


def get_lesson(number: int) -> Lesson:
    """Урок по порядковому номеру (с 1)"""
    if not 1 <= number <= TOTAL_LESSONS:
        raise IndexError(f"Нет урока с номером {number} (всего {TOTAL_LESSONS})")
    return LESSONS[number - 1]


def render_lesson(lesson: Lesson) -> str:
    """Текст сообщения с уроком"""
    message = f"📘 {lesson.title}\n\n{lesson.text}\n\n"

    if lesson.materials:
        message += "📄 Материалы:\n"
        for index, material in enumerate(lesson.materials, start=1):
            message += f"{index}. {material.title}\n{material.url}\n\n"

    if lesson.homework_text:
        message += f"{lesson.homework_text}\n\n"
    if lesson.homework_url:
        message += f"📝 Ссылка на тест:\n{lesson.homework_url}\n\n"

    if lesson.additional_text:
        message += f"{lesson.additional_text}\n\n"

    message += LESSON_FOOTER
    return message
