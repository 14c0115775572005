"""
Unit tests for the plain-text dashboard rendering.
"""
from bache_monitor.application.services.detection_view import DetectionFilters
from bache_monitor.application.services.feed_poller import FeedState, FeedStatus
from bache_monitor.domain.models.sample_detections import SAMPLE_DETECTIONS
from bache_monitor.domain.services.severity import SeverityThresholds
from bache_monitor.presentation.terminal_dashboard import (
    block_sparkline,
    dashboard_dataset,
    format_timestamp,
    render_dashboard,
)

THRESHOLDS = SeverityThresholds.from_noise(3)


def test_empty_feed_shows_demo_readings():
    state = FeedState(status=FeedStatus.CONNECTING, detections=())
    assert dashboard_dataset(state) == SAMPLE_DETECTIONS


def test_render_connecting_state():
    text = render_dashboard(FeedState(status=FeedStatus.CONNECTING, detections=()), THRESHOLDS, 8.5)

    assert "Sincronizando" in text
    assert "Sin datos" in text
    assert "Detecciones 5 | Graves 2 | Moderadas 2 | Profundidad prom. 2.9 cm (Máx: 4.6 cm)" in text
    assert "run-003" in text
    assert "Umbrales (distancia normal 8.5 cm, ruido ±3 cm):" in text
    assert ">6 cm respecto a 8.5 cm" in text


def test_render_error_keeps_data_and_shows_message(detection_factory):
    state = FeedState(
        status=FeedStatus.ERROR,
        detections=(detection_factory("live-1", 5.0),),
        last_update="2024-05-12T15:00:00Z",
        error="Status 500",
    )

    text = render_dashboard(state, THRESHOLDS, 8.5)

    assert "Error de enlace" in text
    assert "! Status 500" in text
    assert "live-1" in text
    assert "run-001" not in text


def test_render_with_filters_that_match_nothing():
    state = FeedState(status=FeedStatus.LIVE, detections=SAMPLE_DETECTIONS)

    text = render_dashboard(state, THRESHOLDS, 8.5, filters=DetectionFilters(search="zzz"))

    assert "En vivo" in text
    assert "Detecciones 0" in text
    assert "Sin registro" in text
    assert "Aún no hay suficientes lecturas" in text


def test_format_timestamp():
    assert format_timestamp(None) == "Sin datos"
    assert format_timestamp("ayer") == "ayer"
    formatted = format_timestamp("2024-05-12T15:04:22Z")
    assert len(formatted) == len("12/05/24 15:04:22")
    assert formatted.endswith(":22")


def test_block_sparkline():
    assert block_sparkline([1.0, 2.0, 3.0]) == "▁▅█"
    assert block_sparkline([2.0, 2.0]) == "▁▁"
