"""
services/lesson_service.py
--------------------------
Business logic for lessons: argument validation and turning store
results into the reply text sent back to the chat.
"""

from exceptions import ValidationError
from models.lesson import DoneStatus
from repositories.base import LessonRepository
from utils.logger import get_logger

logger = get_logger(__name__)

NO_LESSONS_TEXT = "Нет предстоящих уроков."

# Largest value both SQLite INTEGER and BSON int64 can hold.
MAX_COUNT = 2**63 - 1


class LessonService:
    """
    Handles all business logic for lessons.

    The repository is passed in so the same service runs on SQLite,
    MongoDB or the in-memory store.
    """

    def __init__(self, repo: LessonRepository):
        self.repo = repo

    def list_lessons(self) -> str:
        """Return the list of lessons that still have occurrences left."""
        lessons = self.repo.list_active()
        if not lessons:
            return NO_LESSONS_TEXT
        lines = "\n".join(str(lesson) for lesson in lessons)
        return f"Оставшиеся уроки:\n{lines}"

    def add_lesson(self, title: str, count: int) -> str:
        """
        Create a lesson or reset its counter to `count`.

        Raises:
            ValidationError: If count is not positive or does not fit in a
                64-bit integer column. Nothing is stored.
            StoreError: If the database write fails.
        """
        if count <= 0:
            logger.info(f"Rejected lesson '{title}' with count {count}")
            raise ValidationError("Количество должно быть больше 0.")
        if count > MAX_COUNT:
            logger.info(f"Rejected lesson '{title}' with oversized count")
            raise ValidationError(f"Количество должно быть не больше {MAX_COUNT}.")

        lesson = self.repo.upsert(title, count)
        return f'Урок "{lesson.title}" добавлен/обновлён. Осталось: {lesson.counter}'

    def mark_done(self, title: str) -> str:
        """Count one lesson as attended."""
        outcome = self.repo.decrement_or_delete(title)

        if outcome.status is DoneStatus.NOT_FOUND:
            return f'Урок "{title}" не найден.'
        if outcome.status is DoneStatus.COMPLETED:
            return f'Урок "{title}" завершён!'
        return f'Урок "{title}" обновлён. Осталось: {outcome.counter}'
