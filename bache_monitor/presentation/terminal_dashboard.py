"""
Plain-text rendering of the detection dashboard.

Shows the same panels as the web dashboard: connection state, counters,
latest reading with its trend, the readings table, the raw serial log and
the threshold legend.
"""
# Standard library imports
from typing import List, Optional, Sequence

# Local application imports
from ..application.services.detection_view import (
    DetectionFilters,
    build_dashboard,
)
from ..application.services.feed_poller import FeedState, FeedStatus
from ..domain.models.detection import Detection, Severity
from ..domain.models.sample_detections import SAMPLE_DETECTIONS
from ..domain.services.severity import SeverityThresholds
from ..utils.datetime_utils import parse_iso

STATUS_LABELS = {
    FeedStatus.CONNECTING: "Sincronizando",
    FeedStatus.LIVE: "En vivo",
    FeedStatus.ERROR: "Error de enlace",
}

_BLOCKS = "▁▂▃▄▅▆▇█"


def format_timestamp(value: Optional[str]) -> str:
    """dd/mm/yy HH:MM:SS in local time; unparseable values are shown as-is."""
    parsed = parse_iso(value)
    if parsed is None:
        return value or "Sin datos"
    return parsed.astimezone().strftime("%d/%m/%y %H:%M:%S")


def block_sparkline(values: Sequence[float]) -> str:
    if not values:
        return "Aún no hay suficientes lecturas para graficar."
    top = max(values)
    bottom = min(values)
    span = max(top - bottom, 0.1)
    scale = len(_BLOCKS) - 1
    return "".join(_BLOCKS[round((value - bottom) / span * scale)] for value in values)


def dashboard_dataset(state: FeedState) -> Sequence[Detection]:
    """The feed's detections, or the demo readings while the feed is empty."""
    return state.detections or SAMPLE_DETECTIONS


def render_dashboard(
    state: FeedState,
    thresholds: SeverityThresholds,
    baseline_distance_cm: float,
    filters: Optional[DetectionFilters] = None,
    window: int = 12,
) -> str:
    view = build_dashboard(dashboard_dataset(state), filters, window=window)
    summary = view.summary
    lines: List[str] = []

    header = f"Dashboard de detección · {STATUS_LABELS[state.status]}"
    header += f" · Última actualización: {format_timestamp(state.last_update) if state.last_update else 'Sin datos'}"
    lines.append(header)
    if state.error:
        lines.append(f"  ! {state.error}")
    lines.append("")

    lines.append(
        f"Detecciones {summary.count} | "
        f"Graves {summary.severity_counts[Severity.HIGH]} | "
        f"Moderadas {summary.severity_counts[Severity.MEDIUM]} | "
        f"Profundidad prom. {summary.average_depth} cm (Máx: {summary.max_depth} cm)"
    )

    if summary.latest is not None:
        lines.append(
            f"Detección más reciente: {summary.latest.depth:.2f} cm "
            f"({format_timestamp(summary.latest.timestamp)})"
        )
    else:
        lines.append("Detección más reciente: Sin registro")
    lines.append(f"Tendencia (últimas {window}): {block_sparkline(summary.trend)}")
    lines.append("")

    lines.append(f"{'ID':<38} {'Severidad':<10} {'Profundidad':>11}  {'Ubicación':<28} {'Hora':<17} Fuente")
    for item in view.detections:
        lines.append(
            f"{item.id:<38} {item.severity.label:<10} {item.depth:>8.2f} cm  "
            f"{item.location[:28]:<28} {format_timestamp(item.timestamp):<17} {item.source}"
        )
    lines.append("")

    lines.append("Log crudo:")
    for item in view.detections:
        lines.append(f"  {item.raw:<20} {format_timestamp(item.timestamp)}")
    lines.append("")

    lines.append(f"Umbrales (distancia normal {baseline_distance_cm:g} cm, ruido ±{thresholds.medium:g} cm):")
    for level, helper in thresholds.legend(baseline_distance_cm).items():
        lines.append(f"  {level.value:<6} {helper}")

    return "\n".join(lines)
