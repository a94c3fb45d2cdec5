"""
pytest configuration and fixtures shared by all tests
"""

import os
import sys
from unittest.mock import AsyncMock, Mock

import pytest

# Make the top-level modules importable without installing the project
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from db.connection import close_connection, init_connection  # noqa: E402
from db.init_db import create_tables  # noqa: E402
from handlers.lesson_handler import SERVICE_KEY  # noqa: E402
from repositories.memory_lesson_repo import MemoryLessonRepository  # noqa: E402
from repositories.sqlite_lesson_repo import SqliteLessonRepository  # noqa: E402
from services.lesson_service import LessonService  # noqa: E402


@pytest.fixture
def memory_repo():
    return MemoryLessonRepository()


@pytest.fixture
def sqlite_repo(tmp_path):
    conn = init_connection(str(tmp_path / "lessons.db"))
    create_tables()
    yield SqliteLessonRepository(conn)
    close_connection()


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, memory_repo, sqlite_repo):
    """Every backend that runs without an external server."""
    if request.param == "memory":
        return memory_repo
    return sqlite_repo


@pytest.fixture
def service(memory_repo):
    return LessonService(memory_repo)


@pytest.fixture
def make_update():
    """Build a mock Telegram update carrying the given message text."""
    def _make(text: str):
        update = Mock()
        update.effective_user = Mock(id=123456789, first_name="Test")
        update.effective_chat = Mock(id=42)
        update.message = Mock()
        update.message.text = text
        update.message.reply_text = AsyncMock()
        return update
    return _make


@pytest.fixture
def bot_context(service):
    context = Mock()
    context.bot_data = {SERVICE_KEY: service}
    return context
