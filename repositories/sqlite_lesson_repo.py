"""
repositories/sqlite_lesson_repo.py
----------------------------------
Data access layer for lessons stored in SQLite.
All SQL queries related to the `lessons` table live here.
"""

import sqlite3
from typing import Optional

from db.connection import close_connection
from exceptions import StoreError
from models.lesson import Lesson
from repositories.base import LessonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class SqliteLessonRepository(LessonRepository):
    """Repository for CRUD operations on the lessons table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @staticmethod
    def _row_to_lesson(row: sqlite3.Row) -> Lesson:
        return Lesson(id=row["id"], title=row["title"], counter=row["counter"])

    # ── READ ──────────────────────────────────────────────

    def list_active(self) -> list[Lesson]:
        sql = "SELECT id, title, counter FROM lessons WHERE counter > 0;"
        try:
            rows = self.conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list lessons: {e}")
            raise StoreError("list", e) from e
        return [self._row_to_lesson(r) for r in rows]

    def find_by_title(self, title: str) -> Optional[Lesson]:
        sql = "SELECT id, title, counter FROM lessons WHERE title = ?;"
        try:
            row = self.conn.execute(sql, (title,)).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to find lesson '{title}': {e}")
            raise StoreError("find", e) from e
        return self._row_to_lesson(row) if row else None

    # ── WRITE ─────────────────────────────────────────────

    def upsert(self, title: str, counter: int) -> Lesson:
        """
        Insert a lesson or overwrite the counter of the one with this title.

        The schema has no UNIQUE(title), so the lookup and the write are
        two statements inside one transaction.

        Returns:
            The stored lesson with its id.
        """
        try:
            row = self.conn.execute(
                "SELECT id FROM lessons WHERE title = ?;", (title,)
            ).fetchone()
            if row:
                lesson_id = row["id"]
                self.conn.execute(
                    "UPDATE lessons SET counter = ? WHERE id = ?;", (counter, lesson_id)
                )
            else:
                cur = self.conn.execute(
                    "INSERT INTO lessons (title, counter) VALUES (?, ?);", (title, counter)
                )
                lesson_id = cur.lastrowid
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            logger.error(f"Failed to upsert lesson '{title}': {e}")
            raise StoreError("upsert", e) from e

        logger.info(f"Upserted lesson '{title}' #{lesson_id} with counter {counter}")
        return Lesson(id=lesson_id, title=title, counter=counter)

    def delete(self, lesson: Lesson) -> None:
        try:
            self.conn.execute("DELETE FROM lessons WHERE id = ?;", (lesson.id,))
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            logger.error(f"Failed to delete lesson #{lesson.id}: {e}")
            raise StoreError("delete", e) from e

    def set_counter(self, lesson: Lesson, counter: int) -> None:
        try:
            self.conn.execute(
                "UPDATE lessons SET counter = ? WHERE id = ?;", (counter, lesson.id)
            )
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            logger.error(f"Failed to update lesson #{lesson.id}: {e}")
            raise StoreError("update", e) from e

    def close(self) -> None:
        close_connection()
