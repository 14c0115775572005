# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.detection_repository import DetectionRepository
from ....domain.models.sample_detections import SAMPLE_DETECTIONS
from ...dto.detection_dto import (
    DashboardResponse,
    DetectionResponse,
    FiltersResponse,
    SummaryStatsResponse,
)
from ...services.detection_view import DetectionFilters, build_dashboard, render_sparkline


class SummarizeDetectionsUseCase:
    """
    Dashboard statistics over the stored feed.

    Falls back to the demo readings while the store is empty, like the
    dashboard does before the first real reading arrives.
    """

    def __init__(
        self,
        detection_repository: DetectionRepository,
        max_buffer: int = 200,
        trend_window: int = 12,
    ) -> None:
        self._detection_repository = detection_repository
        self._max_buffer = max_buffer
        self._trend_window = trend_window

    async def execute(self, filters: Optional[DetectionFilters] = None) -> DashboardResponse:
        items = await self._detection_repository.list_recent(limit=self._max_buffer)
        fallback = not items
        dataset = SAMPLE_DETECTIONS if fallback else items

        view = build_dashboard(dataset, filters, window=self._trend_window)
        summary = view.summary

        return DashboardResponse(
            filters=FiltersResponse(**view.filters.to_params()),
            summary=SummaryStatsResponse(
                count=summary.count,
                severity_counts={level.value: count for level, count in summary.severity_counts.items()},
                average_depth=summary.average_depth,
                max_depth=summary.max_depth,
                latest=DetectionResponse.from_domain(summary.latest) if summary.latest else None,
                trend=list(summary.trend),
                sparkline=render_sparkline(summary.trend),
            ),
            detections=[DetectionResponse.from_domain(item) for item in view.detections],
            fallback=fallback,
        )
