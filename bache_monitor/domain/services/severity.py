"""
Severity classification of depth readings.

Thresholds are multiples of the sensor noise tolerance, so recalibrating the
rig only requires changing SENSOR_NOISE_CM.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Dict

# Local application imports
from ..models.detection import Severity


@dataclass(frozen=True)
class SeverityThresholds:
    """Depth breakpoints (cm). A reading at a breakpoint belongs to the higher level."""

    medium: float
    high: float

    @classmethod
    def from_noise(cls, noise_cm: float) -> "SeverityThresholds":
        return cls(medium=noise_cm, high=noise_cm * 2)

    def classify(self, depth: float) -> Severity:
        if depth >= self.high:
            return Severity.HIGH
        if depth >= self.medium:
            return Severity.MEDIUM
        return Severity.LOW

    def legend(self, baseline_distance_cm: float) -> Dict[Severity, str]:
        """Helper text per level, as shown in the dashboard threshold legend."""
        return {
            Severity.HIGH: f">{_fmt(self.high)} cm respecto a {_fmt(baseline_distance_cm)} cm",
            Severity.MEDIUM: f"{_fmt(self.medium)} - {_fmt(self.high)} cm",
            Severity.LOW: f"< {_fmt(self.medium)} cm",
        }


def classify(depth: float, noise_cm: float) -> Severity:
    """
    Map a depth measurement to a severity level.

    Args:
        depth: Finite, non-negative depth in cm (invalid values are rejected upstream)
        noise_cm: Acceptable sensor jitter in cm

    Returns:
        Severity.HIGH when depth >= 2*noise, Severity.MEDIUM when depth >= noise,
        otherwise Severity.LOW
    """
    return SeverityThresholds.from_noise(noise_cm).classify(depth)


def _fmt(value: float) -> str:
    # 3.0 -> "3", 3.5 -> "3.5"
    return f"{value:g}"
