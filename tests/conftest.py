"""
Shared pytest fixtures for the detection backend tests.
"""
import os
from unittest.mock import patch

import pytest

# Keep the app from creating a MongoDB client when tests import it
os.environ.setdefault("STORAGE_BACKEND", "memory")

from bache_monitor.core.config import reset_settings
from bache_monitor.domain.models.detection import Detection, Severity


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_detections_db",
        "STORAGE_BACKEND": "memory",
        "BASELINE_DISTANCE_CM": "8.5",
        "SENSOR_NOISE_CM": "3",
        "FEED_BASE_URL": "http://feed.test",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


def make_detection(
    det_id: str,
    depth: float,
    severity: Severity = Severity.LOW,
    timestamp: str = "2024-05-12T15:00:00Z",
    location: str = "Caja de pruebas - carril A",
    source: str = "HC-05",
) -> Detection:
    return Detection(
        id=det_id,
        depth=depth,
        severity=severity,
        timestamp=timestamp,
        location=location,
        raw=f"BACHE {depth:.2f}",
        vehicle="Auto demo",
        source=source,
    )


@pytest.fixture
def detection_factory():
    return make_detection
