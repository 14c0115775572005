from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import get_database, get_detection_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the detections collection in the container.

        With STORAGE_BACKEND=memory nothing is registered and no MongoDB
        client is created.
        """
        settings: Settings = container.get(Settings)
        if settings.storage_backend == "memory":
            return

        container.register_singleton("database", get_database(settings))
        container.register_singleton("detection_collection", get_detection_collection(settings))
