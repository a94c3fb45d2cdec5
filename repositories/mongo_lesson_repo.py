"""
repositories/mongo_lesson_repo.py
---------------------------------
Data access layer for lessons stored as MongoDB documents.
"""

from typing import Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from db.mongo import close_client
from exceptions import StoreError
from models.lesson import Lesson
from repositories.base import LessonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class MongoLessonRepository(LessonRepository):
    """
    Repository for the `lessons` collection.

    Documents look like ``{"_id": ObjectId, "title": str, "counter": int}``.
    No unique index is declared on title; the title is only ever used as
    the filter of an upsert.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    @staticmethod
    def _doc_to_lesson(doc: dict) -> Lesson:
        return Lesson(id=str(doc["_id"]), title=doc["title"], counter=int(doc["counter"]))

    def list_active(self) -> list[Lesson]:
        try:
            docs = list(self.collection.find({"counter": {"$gt": 0}}))
        except PyMongoError as e:
            logger.error(f"Failed to list lessons: {e}")
            raise StoreError("list", e) from e
        return [self._doc_to_lesson(d) for d in docs]

    def upsert(self, title: str, counter: int) -> Lesson:
        try:
            doc = self.collection.find_one_and_update(
                {"title": title},
                {"$set": {"counter": counter}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Failed to upsert lesson '{title}': {e}")
            raise StoreError("upsert", e) from e

        lesson = self._doc_to_lesson(doc)
        logger.info(f"Upserted lesson '{title}' #{lesson.id} with counter {counter}")
        return lesson

    def find_by_title(self, title: str) -> Optional[Lesson]:
        try:
            doc = self.collection.find_one({"title": title})
        except PyMongoError as e:
            logger.error(f"Failed to find lesson '{title}': {e}")
            raise StoreError("find", e) from e
        return self._doc_to_lesson(doc) if doc else None

    def delete(self, lesson: Lesson) -> None:
        try:
            self.collection.delete_one({"_id": self._object_id(lesson)})
        except PyMongoError as e:
            logger.error(f"Failed to delete lesson #{lesson.id}: {e}")
            raise StoreError("delete", e) from e

    def set_counter(self, lesson: Lesson, counter: int) -> None:
        try:
            self.collection.update_one(
                {"_id": self._object_id(lesson)}, {"$set": {"counter": counter}}
            )
        except PyMongoError as e:
            logger.error(f"Failed to update lesson #{lesson.id}: {e}")
            raise StoreError("update", e) from e

    def close(self) -> None:
        close_client()

    @staticmethod
    def _object_id(lesson: Lesson) -> ObjectId | str:
        return ObjectId(lesson.id) if ObjectId.is_valid(lesson.id) else lesson.id
