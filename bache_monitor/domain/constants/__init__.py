"""Constants for domain model field names"""

from .detection_fields import DetectionFields

__all__ = [
    "DetectionFields",
]
