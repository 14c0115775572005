# Standard library imports
from typing import List, Sequence

# Local application imports
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.models.detection import Detection


class InMemoryDetectionRepository(DetectionRepository):
    """
    Process-local implementation of DetectionRepository.

    Keeps every detection for the lifetime of the process, newest first.
    Useful for demos without MongoDB and as a fake store in tests.
    """

    def __init__(self) -> None:
        self._items: List[Detection] = []

    async def insert_many(self, detections: Sequence[Detection]) -> int:
        if not detections:
            return 0
        # Later entries in a batch are newer
        self._items = list(reversed(detections)) + self._items
        return len(detections)

    async def list_recent(self, limit: int) -> List[Detection]:
        return list(self._items[: max(1, int(limit))])
