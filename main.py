"""
main.py
-------
Entry point for the LessonBot Telegram bot.

Responsibilities:
    - Validate configuration and open the lesson store.
    - Configure and start the Telegram bot with all handlers.
"""

import sys

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import DB_BACKEND, LOG_LEVEL, TELEGRAM_BOT_TOKEN, validate_config
from exceptions import ConfigError, StoreConnectionError
from handlers.error_handler import error_handler
from handlers.lesson_handler import (
    SERVICE_KEY,
    add_lesson_command,
    done_command,
    lessons_command,
)
from handlers.start_handler import help_command, start_command
from repositories.base import LessonRepository
from repositories.factory import build_repository
from services.lesson_service import LessonService
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Приветствие"),
        BotCommand("help", "Список команд"),
        BotCommand("lessons", "Оставшиеся уроки"),
        BotCommand("add_lesson", "Добавить урок: /add_lesson <название> <количество>"),
        BotCommand("done", "Отметить урок: /done <название>"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str, repo: LessonRepository) -> Application:
    """Create the Telegram application with the lesson service and all handlers."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()
    app.bot_data[SERVICE_KEY] = LessonService(repo)

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("lessons", lessons_command))
    app.add_handler(CommandHandler("add_lesson", add_lesson_command))
    app.add_handler(CommandHandler("done", done_command))
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""
    configure_logging(LOG_LEVEL)

    # ── 1. Configuration ──────────────────────────────────
    try:
        validate_config()
    except ConfigError as e:
        logger.critical(f"Configuration error: {e}")
        sys.exit(1)

    # ── 2. Lesson store ───────────────────────────────────
    logger.info("Initializing lesson store...")
    try:
        repo = build_repository(DB_BACKEND)
    except StoreConnectionError as e:
        logger.critical(f"Cannot start without the database: {e}")
        sys.exit(1)

    # ── 3. Telegram application ───────────────────────────
    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN, repo)

    # ── 4. Start polling ──────────────────────────────────
    logger.info("🚀 LessonBot is running! Press Ctrl+C to stop.")
    try:
        app.run_polling(allowed_updates=["message"])
    finally:
        # ── 5. Cleanup on shutdown ────────────────────────
        repo.close()
        logger.info("LessonBot stopped.")


if __name__ == "__main__":
    main()
