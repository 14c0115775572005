"""
Exception hierarchy for the detection domain.

All errors raised by the normalizer, the use cases and the storage layer
inherit from BacheMonitorError and carry a short user-facing message plus
optional details for logging.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BacheMonitorError(Exception):
    """Base exception for all detection pipeline errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class InvalidBatchError(BacheMonitorError, ValueError):
    """Raised when a submitted batch has no entry with a usable depth."""

    def __init__(self, received: int = 0):
        super().__init__(
            "Sin mediciones válidas",
            details={"received": received},
        )


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class DetectionStoreError(BacheMonitorError):
    """Raised when the detection store cannot be read or written."""
    pass


# -----------------------------------------------------------------------------
# Feed
# -----------------------------------------------------------------------------


class FeedError(BacheMonitorError):
    """Raised by the feed client when the detection feed cannot be fetched."""
    pass
