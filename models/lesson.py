"""
models/lesson.py
----------------
Domain model for lessons and the result of marking one as done.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass
class Lesson:
    """
    A titled countdown of remaining lesson occurrences.

    Attributes:
        title: Natural key; commands reference lessons by title.
        counter: Remaining occurrences. Zero means completed and the
            record must not stay in the store.
        id: Store-assigned identifier (integer for SQLite, ObjectId
            string for MongoDB). None until persisted.
    """
    title: str
    counter: int
    id: Optional[Union[int, str]] = None

    def is_completed(self) -> bool:
        """Returns True once no occurrences remain."""
        return self.counter <= 0

    def __str__(self) -> str:
        return f"- {self.title} (осталось: {self.counter})"


class DoneStatus(Enum):
    NOT_FOUND = "not_found"
    COMPLETED = "completed"
    UPDATED = "updated"


@dataclass
class DoneOutcome:
    """Result of decrementing a lesson; `counter` is set only for UPDATED."""
    status: DoneStatus
    title: str
    counter: Optional[int] = None
