"""
handlers/lesson_handler.py
--------------------------
Handles /lessons, /add_lesson and /done.
Arguments are taken from the raw message text so titles may contain spaces.
"""

import re

from telegram import Update
from telegram.ext import ContextTypes

from exceptions import StoreError, ValidationError
from services.lesson_service import LessonService
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_KEY = "lesson_service"

# Title is non-greedy, so the first number after it is the count.
_ADD_LESSON_RE = re.compile(r"^/add_lesson(?:@\w+)?\s+(.+?)\s+(-?\d+)")
_DONE_RE = re.compile(r"^/done(?:@\w+)?\s+(.+)")

ADD_LESSON_USAGE = "Использование: /add_lesson <название> <количество>"
DONE_USAGE = "Использование: /done <название>"


def parse_add_lesson(text: str) -> tuple[str, int] | None:
    """
    Extract title and count from an /add_lesson message.

    Examples:
        "/add_lesson Piano 3"          -> ("Piano", 3)
        "/add_lesson Music theory 10"  -> ("Music theory", 10)
        "/add_lesson Piano -5"         -> ("Piano", -5)
    """
    match = _ADD_LESSON_RE.match(text or "")
    if not match:
        return None
    title = match.group(1).strip()
    if not title:
        return None
    try:
        count = int(match.group(2))
    except ValueError:
        # more digits than int() accepts from a string
        return None
    return title, count


def parse_done(text: str) -> str | None:
    """Extract the title from a /done message; everything after the command counts."""
    match = _DONE_RE.match(text or "")
    if not match:
        return None
    title = match.group(1).strip()
    return title or None


def _get_service(context: ContextTypes.DEFAULT_TYPE) -> LessonService:
    return context.bot_data[SERVICE_KEY]


async def lessons_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /lessons command - list lessons with occurrences left."""
    service = _get_service(context)
    try:
        msg = service.list_lessons()
    except StoreError as e:
        logger.error(f"/lessons failed: {e.cause!r}")
        msg = e.to_user_message()
    await update.message.reply_text(msg)


async def add_lesson_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /add_lesson command - create a lesson or overwrite its counter.

    Usage:
        /add_lesson Piano 3
    """
    parsed = parse_add_lesson(update.message.text)
    if parsed is None:
        await update.message.reply_text(ADD_LESSON_USAGE)
        return

    title, count = parsed
    service = _get_service(context)
    try:
        msg = service.add_lesson(title, count)
    except ValidationError as e:
        msg = e.to_user_message()
    except StoreError as e:
        logger.error(f"/add_lesson '{title}' failed: {e.cause!r}")
        msg = e.to_user_message()
    await update.message.reply_text(msg)


async def done_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /done command - take one occurrence off a lesson.

    Usage:
        /done Piano
    """
    title = parse_done(update.message.text)
    if title is None:
        await update.message.reply_text(DONE_USAGE)
        return

    service = _get_service(context)
    try:
        msg = service.mark_done(title)
    except StoreError as e:
        logger.error(f"/done '{title}' failed during {e.operation}: {e.cause!r}")
        msg = e.to_user_message()
    await update.message.reply_text(msg)
