"""
db/mongo.py
-----------
Manages the MongoDB client for the document-store backend.
"""

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from config import MONGO_DB_NAME, MONGO_TIMEOUT_MS, MONGO_URI
from exceptions import StoreConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)

_client: MongoClient | None = None
_db_name: str = MONGO_DB_NAME


def init_client(
    uri: str = MONGO_URI,
    db_name: str = MONGO_DB_NAME,
    timeout_ms: int = MONGO_TIMEOUT_MS,
) -> MongoClient:
    """
    Connect to MongoDB and verify the server answers.

    MongoClient connects lazily, so a ping is issued to fail fast
    when the server is unreachable.

    Raises:
        StoreConnectionError: If the ping fails.
    """
    global _client, _db_name
    if _client is not None:
        return _client
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise StoreConnectionError(f"MongoDB is unreachable: {e}") from e
    _client = client
    _db_name = db_name
    logger.info(f"Connected to MongoDB database '{db_name}'.")
    return _client


def get_collection(name: str = "lessons") -> Collection:
    """
    Get a collection from the configured database.

    Raises:
        RuntimeError: If the client has not been initialized.
    """
    if _client is None:
        raise RuntimeError("MongoDB client not initialized. Call init_client() first.")
    return _client[_db_name][name]


def close_client() -> None:
    """Close the MongoDB client."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed.")
