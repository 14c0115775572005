# Standard library imports
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Severity(str, Enum):
    """Ordinal severity of a depth reading. Values are the wire strings."""

    HIGH = "Alta"
    MEDIUM = "Media"
    LOW = "Baja"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @property
    def label(self) -> str:
        """Human-readable label shown on the dashboard."""
        return _SEVERITY_LABEL[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["Severity"]:
        """Return the matching Severity, or None when value is not a known level."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return None


_SEVERITY_RANK = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}
_SEVERITY_LABEL = {Severity.HIGH: "Crítico", Severity.MEDIUM: "Moderado", Severity.LOW: "Leve"}


# Placeholders used when a reading arrives without provenance
DEFAULT_LOCATION = "Trayecto sin etiquetar"
DEFAULT_VEHICLE = "Vehículo demo"
DEFAULT_SOURCE = "HC-05"
RAW_FRAME_PREFIX = "BACHE"


@dataclass(frozen=True)
class DetectionPayload:
    """
    Raw, partially specified reading as received from the bridge or a manual POST.

    Only depth is mandatory. The normalizer is the only path from a payload to
    a canonical Detection.
    """

    depth: float
    id: Optional[str] = None
    severity: Optional[Severity] = None
    timestamp: Optional[str] = None
    location: Optional[str] = None
    raw: Optional[str] = None
    vehicle: Optional[str] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class Detection:
    """
    Canonical detection record.

    Every field is populated and the record is never mutated after creation.
    """

    id: str
    depth: float
    severity: Severity
    timestamp: str
    location: str
    raw: str
    vehicle: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of the record (severity as its string value)."""
        data = asdict(self)
        data["severity"] = self.severity.value
        return data
