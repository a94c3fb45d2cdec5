"""
exceptions.py
-------------
Custom exception classes for LessonBot.
Every error a handler can turn into a chat reply derives from LessonBotError.
"""


class LessonBotError(Exception):
    """Base exception for all LessonBot errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def to_user_message(self) -> str:
        """Return the text shown to the user in the chat."""
        return self.message


# ── Startup ───────────────────────────────────────────────

class ConfigError(LessonBotError):
    """Raised when a required setting is missing. Fatal at startup."""


class StoreConnectionError(LessonBotError):
    """Raised when the database cannot be reached at startup."""


# ── Per-command ───────────────────────────────────────────

class ValidationError(LessonBotError):
    """Raised when command arguments are rejected before touching the store."""


# Generic replies keyed by the store operation that failed.
_STORE_ERROR_MESSAGES = {
    "list": "Произошла ошибка при получении данных.",
    "upsert": "Ошибка при добавлении урока.",
    "find": "Ошибка при поиске урока.",
    "delete": "Ошибка при удалении.",
    "update": "Ошибка при обновлении.",
}


class StoreError(LessonBotError):
    """
    Wraps any database driver failure.

    Attributes:
        operation: Store operation that failed ('list', 'upsert', 'find',
            'delete' or 'update').
        cause: The original driver exception.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")

    def to_user_message(self) -> str:
        return _STORE_ERROR_MESSAGES.get(self.operation, "Произошла ошибка базы данных.")
