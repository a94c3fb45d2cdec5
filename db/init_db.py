"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

# title is deliberately not UNIQUE: uniqueness is kept by always upserting by title.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS lessons (
    id      INTEGER PRIMARY KEY,
    title   TEXT NOT NULL,
    counter INTEGER NOT NULL
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    conn.executescript(SCHEMA_SQL)
    conn.commit()
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_connection
    init_connection()
    create_tables()
    print("✅ Database schema created successfully.")
