# Standard library imports
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.models.detection import (
    DEFAULT_LOCATION,
    DEFAULT_SOURCE,
    DEFAULT_VEHICLE,
    Detection,
    Severity,
)
from ...domain.constants import DetectionFields
from ...domain.exceptions import DetectionStoreError
from ...domain.services.normalizer import format_raw_frame
from ...domain.services.severity import classify
from ...utils.datetime_utils import parse_iso, to_iso, utc_now
from .mongo_connection import get_detection_collection


class MongoDetectionRepository(DetectionRepository):
    """MongoDB implementation of DetectionRepository"""

    def __init__(
        self,
        detection_collection: Optional[AsyncIOMotorCollection] = None,
        noise_cm: float = 3.0,
    ) -> None:
        self.detection_collection = (
            detection_collection if detection_collection is not None else get_detection_collection()
        )
        # Only used to back-fill severity on legacy documents stored without one
        self.noise_cm = noise_cm

    async def insert_many(self, detections: Sequence[Detection]) -> int:
        if not detections:
            return 0

        docs = [self._detection_to_document(item) for item in detections]
        try:
            result = await self.detection_collection.insert_many(docs)
        except PyMongoError as e:
            raise DetectionStoreError(f"Error storing detections: {str(e)}")
        return len(result.inserted_ids)

    async def list_recent(self, limit: int) -> List[Detection]:
        try:
            cursor = (
                self.detection_collection.find({})
                .sort(DetectionFields.CREATED_AT, -1)
                .limit(max(1, int(limit)))
            )
            items: List[Detection] = []
            async for doc in cursor:
                items.append(self._document_to_detection(doc))
            return items
        except PyMongoError as e:
            raise DetectionStoreError(f"Error reading detections: {str(e)}")

    def _detection_to_document(self, detection: Detection) -> Dict[str, Any]:
        return {
            DetectionFields.ID: detection.id,
            DetectionFields.DEPTH: detection.depth,
            DetectionFields.SEVERITY: detection.severity.value,
            DetectionFields.TIMESTAMP: detection.timestamp,
            DetectionFields.LOCATION: detection.location,
            DetectionFields.RAW: detection.raw,
            DetectionFields.VEHICLE: detection.vehicle,
            DetectionFields.SOURCE: detection.source,
            # Sort key; falls back to insertion time when the timestamp is not ISO 8601
            DetectionFields.CREATED_AT: parse_iso(detection.timestamp) or utc_now(),
        }

    def _document_to_detection(self, doc: Dict[str, Any]) -> Detection:
        depth = float(doc.get(DetectionFields.DEPTH) or 0.0)
        created_at: Optional[datetime] = doc.get(DetectionFields.CREATED_AT)

        timestamp = doc.get(DetectionFields.TIMESTAMP)
        if not timestamp:
            timestamp = to_iso(created_at) if created_at else to_iso(utc_now())

        return Detection(
            id=str(doc.get(DetectionFields.ID) or doc.get(DetectionFields.MONGO_ID)),
            depth=depth,
            severity=Severity.parse(doc.get(DetectionFields.SEVERITY)) or classify(depth, self.noise_cm),
            timestamp=timestamp,
            location=doc.get(DetectionFields.LOCATION) or DEFAULT_LOCATION,
            raw=doc.get(DetectionFields.RAW) or format_raw_frame(depth),
            vehicle=doc.get(DetectionFields.VEHICLE) or DEFAULT_VEHICLE,
            source=doc.get(DetectionFields.SOURCE) or DEFAULT_SOURCE,
        )
