"""
repositories/factory.py
-----------------------
Builds the lesson repository for the configured backend, opening the
database handle and preparing the schema on the way.
"""

from config import DB_BACKEND, MONGO_DB_NAME, MONGO_TIMEOUT_MS, MONGO_URI, SQLITE_PATH
from repositories.base import LessonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _build_sqlite() -> LessonRepository:
    from db.connection import init_connection
    from db.init_db import create_tables
    from repositories.sqlite_lesson_repo import SqliteLessonRepository

    conn = init_connection(SQLITE_PATH)
    create_tables()
    return SqliteLessonRepository(conn)


def _build_mongo() -> LessonRepository:
    from db.mongo import get_collection, init_client
    from repositories.mongo_lesson_repo import MongoLessonRepository

    init_client(MONGO_URI, MONGO_DB_NAME, MONGO_TIMEOUT_MS)
    return MongoLessonRepository(get_collection("lessons"))


def _build_memory() -> LessonRepository:
    from repositories.memory_lesson_repo import MemoryLessonRepository

    return MemoryLessonRepository()


_BUILDERS = {
    "sqlite": _build_sqlite,
    "mongo": _build_mongo,
    "memory": _build_memory,
}


def build_repository(backend: str = DB_BACKEND) -> LessonRepository:
    """
    Create the repository for a backend name.

    Drivers are imported lazily so the SQLite backend runs without pymongo.

    Raises:
        ValueError: If the backend name is unknown.
        StoreConnectionError: If MongoDB does not answer the startup ping.
    """
    builder = _BUILDERS.get(backend)
    if builder is None:
        raise ValueError(f"Unknown storage backend: {backend}")
    logger.info(f"Using '{backend}' lesson storage backend.")
    return builder()
