"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

from exceptions import ConfigError

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Storage backend ───────────────────────────────────────
SUPPORTED_BACKENDS: tuple[str, ...] = ("sqlite", "mongo", "memory")
DB_BACKEND: str = os.getenv("DB_BACKEND", "sqlite").strip().lower()

# ── SQLite ────────────────────────────────────────────────
SQLITE_PATH: str = os.getenv("SQLITE_PATH", "./lessons.db")

# ── MongoDB ───────────────────────────────────────────────
MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "lesson_bot")
MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_config(token: str | None = None, backend: str | None = None) -> None:
    """
    Check the settings the bot cannot start without.

    Raises:
        ConfigError: If the token is missing or the backend is unknown.
    """
    token = TELEGRAM_BOT_TOKEN if token is None else token
    backend = DB_BACKEND if backend is None else backend

    if not token:
        raise ConfigError("TELEGRAM_BOT_TOKEN не задан в .env")
    if backend not in SUPPORTED_BACKENDS:
        raise ConfigError(
            f"Unknown DB_BACKEND '{backend}', expected one of {', '.join(SUPPORTED_BACKENDS)}"
        )
