"""External service clients for communicating with the detection API"""

from .feed_client import DetectionFeedClient

__all__ = [
    "DetectionFeedClient",
]
