# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client is created lazily; Motor only connects on the first operation.

    Args:
        settings: Settings to connect with. Defaults to the process settings.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings or get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"Created MongoDB client for database '{settings.mongo_database_name}'")
    return _mongo_database


def get_detection_collection(settings: Optional[Settings] = None) -> AsyncIOMotorCollection:
    """
    Get detections collection from MongoDB

    Returns:
        MongoDB collection for detections
    """
    settings = settings or get_settings()
    return get_database(settings)[settings.mongo_collection_name]


def close_database() -> None:
    """Close the shared MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None
