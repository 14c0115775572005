from .terminal_dashboard import (
    STATUS_LABELS,
    block_sparkline,
    dashboard_dataset,
    format_timestamp,
    render_dashboard,
)

__all__ = [
    "STATUS_LABELS",
    "block_sparkline",
    "dashboard_dataset",
    "format_timestamp",
    "render_dashboard",
]
