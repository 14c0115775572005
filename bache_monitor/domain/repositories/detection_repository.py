from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models.detection import Detection


class DetectionRepository(ABC):
    """Repository interface - defines contract for detection data access"""

    @abstractmethod
    async def insert_many(self, detections: Sequence[Detection]) -> int:
        """Store canonical detections in one best-effort batch and return how many were written"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Detection]:
        """Return up to `limit` detections, newest first"""
        pass
