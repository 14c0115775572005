"""Demo readings shown by the dashboard while the feed has no data yet (newest first)."""

# Standard library imports
from typing import Tuple

# Local application imports
from .detection import Detection, Severity


SAMPLE_DETECTIONS: Tuple[Detection, ...] = (
    Detection(
        id="run-001",
        depth=3.9,
        severity=Severity.HIGH,
        timestamp="2024-05-12T15:04:22Z",
        location="Caja de pruebas - carril A",
        raw="BACHE 3.90",
        vehicle="Auto demo",
        source="HC-05",
    ),
    Detection(
        id="run-002",
        depth=2.4,
        severity=Severity.MEDIUM,
        timestamp="2024-05-12T15:03:58Z",
        location="Caja de pruebas - carril B",
        raw="BACHE 2.40",
        vehicle="Auto demo",
        source="HC-05",
    ),
    Detection(
        id="run-003",
        depth=4.6,
        severity=Severity.HIGH,
        timestamp="2024-05-12T15:03:13Z",
        location="Caja de pruebas - carril A",
        raw="BACHE 4.60",
        vehicle="Auto demo",
        source="HC-05",
    ),
    Detection(
        id="run-004",
        depth=1.4,
        severity=Severity.LOW,
        timestamp="2024-05-12T15:02:41Z",
        location="Sección plana (control)",
        raw="BACHE 1.40",
        vehicle="Auto demo",
        source="USB",
    ),
    Detection(
        id="run-005",
        depth=2.1,
        severity=Severity.MEDIUM,
        timestamp="2024-05-12T15:02:05Z",
        location="Caja de pruebas - carril C",
        raw="BACHE 2.10",
        vehicle="Auto demo",
        source="USB",
    ),
)
