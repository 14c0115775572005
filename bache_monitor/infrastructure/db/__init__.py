from .mongo_connection import close_database, get_database, get_detection_collection
from .mongo_detection_repository import MongoDetectionRepository
from .memory_detection_repository import InMemoryDetectionRepository

__all__ = [
    "close_database",
    "get_database",
    "get_detection_collection",
    "MongoDetectionRepository",
    "InMemoryDetectionRepository",
]
