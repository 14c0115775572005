import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.detection_repository import DetectionRepository
from ...infrastructure.db.memory_detection_repository import InMemoryDetectionRepository
from ...infrastructure.db.mongo_detection_repository import MongoDetectionRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)

        if settings.storage_backend == "memory":
            logger.info("Using in-memory detection store")
            repository: DetectionRepository = InMemoryDetectionRepository()
        else:
            repository = MongoDetectionRepository(
                detection_collection=container.get("detection_collection"),
                noise_cm=settings.sensor_noise_cm,
            )

        container.register_singleton(DetectionRepository, repository)
