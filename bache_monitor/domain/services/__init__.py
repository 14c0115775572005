from .severity import SeverityThresholds, classify
from .normalizer import (
    format_raw_frame,
    generate_detection_id,
    has_valid_depth,
    normalize_batch,
    normalize_detection,
    payload_from_mapping,
)

__all__ = [
    "SeverityThresholds",
    "classify",
    "format_raw_frame",
    "generate_detection_id",
    "has_valid_depth",
    "normalize_batch",
    "normalize_detection",
    "payload_from_mapping",
]
