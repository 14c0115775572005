from .detection_dto import (
    DashboardResponse,
    DetectionResponse,
    ErrorResponse,
    FeedResponse,
    FiltersResponse,
    SubmitResponse,
    SummaryStatsResponse,
)

__all__ = [
    "DashboardResponse",
    "DetectionResponse",
    "ErrorResponse",
    "FeedResponse",
    "FiltersResponse",
    "SubmitResponse",
    "SummaryStatsResponse",
]
