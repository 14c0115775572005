from .detection_view import (
    ALL,
    DashboardView,
    DetectionFilters,
    DetectionSummary,
    average_depth,
    build_dashboard,
    filter_detections,
    max_depth,
    render_sparkline,
    severity_count,
    summarize,
    trend_values,
)
from .feed_poller import FeedPoller, FeedState, FeedStatus

__all__ = [
    "ALL",
    "DashboardView",
    "DetectionFilters",
    "DetectionSummary",
    "average_depth",
    "build_dashboard",
    "filter_detections",
    "max_depth",
    "render_sparkline",
    "severity_count",
    "summarize",
    "trend_values",
    "FeedPoller",
    "FeedState",
    "FeedStatus",
]
