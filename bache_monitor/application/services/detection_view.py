"""
Filter and aggregation view-model for detection collections.

Pure derivations over an in-memory collection: nothing here mutates its
input, and every call returns new objects. Collections are assumed to be
sorted newest first, which is how the feed returns them.
"""
# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

# Local application imports
from ...domain.models.detection import Detection, Severity
from ...utils.datetime_utils import parse_iso

ALL = "all"
DEFAULT_TREND_WINDOW = 12

# Inclusive end-of-day for date-only upper bounds
_END_OF_DAY = timedelta(days=1) - timedelta(milliseconds=1)


@dataclass(frozen=True)
class DetectionFilters:
    """Filter criteria; the defaults let every record through."""

    severity: str = ALL
    source: str = ALL
    search: str = ""
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def from_params(
        cls,
        severity: Optional[str] = None,
        source: Optional[str] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> "DetectionFilters":
        """
        Build filters from query-string style values.

        Raises:
            ValueError: If a severity is not a known level or a date cannot be parsed
        """
        severity = severity or ALL
        if severity != ALL and Severity.parse(severity) is None:
            raise ValueError(f"Unknown severity '{severity}'")

        return cls(
            severity=severity,
            source=source or ALL,
            search=(search or "").strip(),
            start=_parse_bound(start_date, "start_date"),
            end=_parse_bound(end_date, "end_date"),
        )

    @property
    def end_inclusive(self) -> Optional[datetime]:
        if self.end is None:
            return None
        return self.end + _END_OF_DAY

    def matches(self, item: Detection) -> bool:
        if self.severity != ALL and item.severity.value != self.severity:
            return False
        if self.source != ALL and item.source != self.source:
            return False
        if self.search and not _matches_search(item, self.search.lower()):
            return False
        if self.start is None and self.end is None:
            return True

        occurred_at = parse_iso(item.timestamp)
        if occurred_at is None:
            return False
        if self.start is not None and occurred_at < self.start:
            return False
        if self.end is not None and occurred_at > self.end_inclusive:
            return False
        return True

    def to_params(self) -> Dict[str, Optional[str]]:
        return {
            "severity": self.severity,
            "source": self.source,
            "search": self.search,
            "start_date": self.start.date().isoformat() if self.start else None,
            "end_date": self.end.date().isoformat() if self.end else None,
        }


@dataclass(frozen=True)
class DetectionSummary:
    """Aggregated statistics over a (filtered) detection collection."""

    count: int
    severity_counts: Dict[Severity, int]
    average_depth: float
    max_depth: float
    latest: Optional[Detection]
    trend: Tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DashboardView:
    filters: DetectionFilters
    detections: Tuple[Detection, ...]
    summary: DetectionSummary


def filter_detections(
    data: Sequence[Detection],
    filters: Optional[DetectionFilters] = None,
) -> List[Detection]:
    """Return the records that satisfy every criterion, in input order."""
    filters = filters or DetectionFilters()
    return [item for item in data if filters.matches(item)]


def severity_count(data: Sequence[Detection], level: Severity) -> int:
    return sum(1 for item in data if item.severity == level)


def average_depth(data: Sequence[Detection]) -> float:
    """Mean depth rounded to one decimal; 0 for an empty collection."""
    if not data:
        return 0
    return round(sum(item.depth for item in data) / len(data), 1)


def max_depth(data: Sequence[Detection]) -> float:
    if not data:
        return 0
    return max(item.depth for item in data)


def trend_values(data: Sequence[Detection], window: int = DEFAULT_TREND_WINDOW) -> List[float]:
    """Depths of the newest `window` records, oldest first."""
    return [item.depth for item in data[:window]][::-1]


def summarize(data: Sequence[Detection], window: int = DEFAULT_TREND_WINDOW) -> DetectionSummary:
    return DetectionSummary(
        count=len(data),
        severity_counts={level: severity_count(data, level) for level in Severity},
        average_depth=average_depth(data),
        max_depth=max_depth(data),
        latest=data[0] if data else None,
        trend=tuple(trend_values(data, window)),
    )


def build_dashboard(
    data: Sequence[Detection],
    filters: Optional[DetectionFilters] = None,
    window: int = DEFAULT_TREND_WINDOW,
) -> DashboardView:
    filters = filters or DetectionFilters()
    filtered = filter_detections(data, filters)
    return DashboardView(
        filters=filters,
        detections=tuple(filtered),
        summary=summarize(filtered, window),
    )


def render_sparkline(values: Sequence[float]) -> str:
    """
    SVG polyline points for a trend line in a 100x24 viewBox.

    Returns an empty string when there is nothing to plot.
    """
    if not values:
        return ""

    top = max(values)
    bottom = min(values)
    span = max(top - bottom, 0.1)
    steps = max(len(values) - 1, 1)

    points = []
    for index, value in enumerate(values):
        x = (index / steps) * 100
        y = 20 - ((value - bottom) / span) * 16
        points.append(f"{x:.2f},{y:.2f}")
    return " ".join(points)


def _matches_search(item: Detection, needle: str) -> bool:
    haystack = (item.id, item.location, item.raw, item.source)
    return any(needle in value.lower() for value in haystack)


def _parse_bound(value: Optional[str], name: str) -> Optional[datetime]:
    if not value:
        return None
    parsed = parse_iso(value)
    if parsed is None:
        raise ValueError(f"Invalid {name} '{value}'")
    return parsed
