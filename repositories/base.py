"""
repositories/base.py
--------------------
Interface shared by every lesson storage backend.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.lesson import DoneOutcome, DoneStatus, Lesson
from utils.logger import get_logger

logger = get_logger(__name__)


class LessonRepository(ABC):
    """
    Lesson Store. Lessons are addressed by title everywhere; the id is
    only used internally to target a row/document once it has been found.
    """

    @abstractmethod
    def list_active(self) -> list[Lesson]:
        """All lessons with counter > 0, in no particular order."""

    @abstractmethod
    def upsert(self, title: str, counter: int) -> Lesson:
        """Create the lesson or overwrite the counter of the existing one."""

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[Lesson]:
        """Exact-match lookup; None when absent."""

    @abstractmethod
    def delete(self, lesson: Lesson) -> None:
        """Remove a previously fetched lesson."""

    @abstractmethod
    def set_counter(self, lesson: Lesson, counter: int) -> None:
        """Persist a new counter for a previously fetched lesson."""

    def decrement_or_delete(self, title: str) -> DoneOutcome:
        """
        Take one occurrence off a lesson, removing it once none remain.

        This is a plain read-then-write: two concurrent calls for the same
        title may both read the same counter and lose one decrement.

        Raises:
            StoreError: If any of the underlying queries fails.
        """
        lesson = self.find_by_title(title)
        if lesson is None:
            return DoneOutcome(DoneStatus.NOT_FOUND, title)

        new_counter = lesson.counter - 1
        if new_counter <= 0:
            self.delete(lesson)
            logger.info(f"Lesson '{title}' completed and removed.")
            return DoneOutcome(DoneStatus.COMPLETED, title)

        self.set_counter(lesson, new_counter)
        return DoneOutcome(DoneStatus.UPDATED, title, new_counter)

    def close(self) -> None:
        """Release backend resources. No-op by default."""
