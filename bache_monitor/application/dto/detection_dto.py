from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.detection import Detection, Severity


class DetectionResponse(BaseModel):
    """Wire shape of a canonical detection record"""
    id: str
    depth: float
    severity: Severity
    timestamp: str
    location: str
    raw: str
    vehicle: str
    source: str

    @classmethod
    def from_domain(cls, detection: Detection) -> "DetectionResponse":
        return cls(**detection.to_dict())

    def to_domain(self) -> Detection:
        return Detection(
            id=self.id,
            depth=self.depth,
            severity=self.severity,
            timestamp=self.timestamp,
            location=self.location,
            raw=self.raw,
            vehicle=self.vehicle,
            source=self.source,
        )


class FeedResponse(BaseModel):
    """Body of GET /api/detections"""
    model_config = ConfigDict(populate_by_name=True)

    detections: List[DetectionResponse] = Field(default_factory=list)
    last_update: Optional[str] = Field(default=None, alias="lastUpdate")


class SubmitResponse(BaseModel):
    """Body of POST /api/detections"""
    ok: bool
    stored: Optional[int] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    ok: bool = False
    message: str
    detail: Optional[str] = None


class FiltersResponse(BaseModel):
    severity: str = "all"
    source: str = "all"
    search: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class SummaryStatsResponse(BaseModel):
    count: int = 0
    severity_counts: Dict[str, int] = Field(default_factory=dict)
    average_depth: float = 0.0
    max_depth: float = 0.0
    latest: Optional[DetectionResponse] = None
    trend: List[float] = Field(default_factory=list)
    sparkline: str = ""


class DashboardResponse(BaseModel):
    """Body of GET /api/detections/summary"""
    filters: FiltersResponse
    summary: SummaryStatsResponse
    detections: List[DetectionResponse] = Field(default_factory=list)
    fallback: bool = False
