from .detection import (
    DEFAULT_LOCATION,
    DEFAULT_SOURCE,
    DEFAULT_VEHICLE,
    RAW_FRAME_PREFIX,
    Detection,
    DetectionPayload,
    Severity,
)

__all__ = [
    "Detection",
    "DetectionPayload",
    "Severity",
    "DEFAULT_LOCATION",
    "DEFAULT_VEHICLE",
    "DEFAULT_SOURCE",
    "RAW_FRAME_PREFIX",
]
