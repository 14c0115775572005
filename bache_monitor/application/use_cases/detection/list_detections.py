from ....domain.repositories.detection_repository import DetectionRepository
from ....application.dto.detection_dto import DetectionResponse, FeedResponse


class ListDetectionsUseCase:
    def __init__(self, detection_repository: DetectionRepository, max_buffer: int = 200) -> None:
        self._detection_repository = detection_repository
        self._max_buffer = max_buffer

    async def execute(self) -> FeedResponse:
        items = await self._detection_repository.list_recent(limit=self._max_buffer)
        return FeedResponse(
            detections=[DetectionResponse.from_domain(item) for item in items],
            last_update=items[0].timestamp if items else None,
        )
