# Standard library imports
import logging
from typing import Any, List, Mapping, Union

# Local application imports
from ....domain.repositories.detection_repository import DetectionRepository
from ....domain.exceptions import InvalidBatchError
from ....domain.services.normalizer import normalize_batch
from ...dto.detection_dto import SubmitResponse

logger = logging.getLogger(__name__)


class SubmitDetectionsUseCase:
    """Use case for storing one reading or a batch of readings"""

    def __init__(self, detection_repository: DetectionRepository, noise_cm: float) -> None:
        self.detection_repository = detection_repository
        self.noise_cm = noise_cm

    async def execute(self, payload: Union[Mapping[str, Any], List[Any]]) -> SubmitResponse:
        """
        Normalize and store the readings in a request body.

        Args:
            payload: A single reading object or an array of readings

        Returns:
            SubmitResponse with the number of stored detections

        Raises:
            InvalidBatchError: If no entry has a finite numeric depth
            DetectionStoreError: If the store rejects the write
        """
        items = list(payload) if isinstance(payload, list) else [payload]
        normalized = normalize_batch(items, noise_cm=self.noise_cm)

        if not normalized:
            logger.warning(f"Rejected batch of {len(items)} reading(s): no valid depth")
            raise InvalidBatchError(received=len(items))

        stored = await self.detection_repository.insert_many(normalized)
        logger.info(
            f"Stored {stored} detection(s) "
            f"({len(items) - len(normalized)} dropped, latest severity={normalized[-1].severity.value})"
        )
        return SubmitResponse(ok=True, stored=stored)
