"""
repositories/memory_lesson_repo.py
----------------------------------
In-process lesson store. Nothing survives a restart; used with
DB_BACKEND=memory and in tests.
"""

import itertools
from typing import Optional

from models.lesson import Lesson
from repositories.base import LessonRepository


class MemoryLessonRepository(LessonRepository):
    """Dict-backed repository keyed by lesson id."""

    def __init__(self):
        self._lessons: dict[int, Lesson] = {}
        self._ids = itertools.count(1)

    def list_active(self) -> list[Lesson]:
        return [
            Lesson(id=lesson.id, title=lesson.title, counter=lesson.counter)
            for lesson in self._lessons.values()
            if lesson.counter > 0
        ]

    def upsert(self, title: str, counter: int) -> Lesson:
        existing = self.find_by_title(title)
        lesson_id = existing.id if existing else next(self._ids)
        self._lessons[lesson_id] = Lesson(id=lesson_id, title=title, counter=counter)
        return Lesson(id=lesson_id, title=title, counter=counter)

    def find_by_title(self, title: str) -> Optional[Lesson]:
        for lesson in self._lessons.values():
            if lesson.title == title:
                return Lesson(id=lesson.id, title=lesson.title, counter=lesson.counter)
        return None

    def delete(self, lesson: Lesson) -> None:
        self._lessons.pop(lesson.id, None)

    def set_counter(self, lesson: Lesson, counter: int) -> None:
        if lesson.id in self._lessons:
            self._lessons[lesson.id].counter = counter

    def count(self) -> int:
        """Number of stored records, including any zero counters."""
        return len(self._lessons)
