"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = "Привет! Я бот для учёта уроков."

HELP_TEXT = (
    "Доступные команды:\n"
    "/start - приветствие\n"
    "/help - список команд\n"
    "/lessons - оставшиеся уроки\n"
    "/add_lesson <название> <количество> - добавить урок или изменить количество\n"
    "/done <название> - отметить проведённый урок"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome message."""
    user = update.effective_user
    if user:
        logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(WELCOME_TEXT)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT)
