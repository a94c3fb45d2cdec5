"""
handlers/error_handler.py
-------------------------
Application-wide error handler. Anything that escapes a command handler,
including failures to deliver the reply, ends up here and is only logged.
"""

from telegram import Update
from telegram.error import NetworkError, TelegramError
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the error. Replies are never retried."""
    error = context.error
    chat_id = None
    if isinstance(update, Update) and update.effective_chat:
        chat_id = update.effective_chat.id

    if isinstance(error, NetworkError):
        logger.warning(f"Network error while talking to Telegram (chat {chat_id}): {error}")
    elif isinstance(error, TelegramError):
        logger.error(f"Telegram rejected the request (chat {chat_id}): {error}")
    else:
        logger.error(f"Unhandled error (chat {chat_id}): {error}", exc_info=error)
