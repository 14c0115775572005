"""Utility modules for the detection backend."""

from .datetime_utils import ensure_utc, now_iso, parse_iso, to_iso, utc_now

__all__ = [
    "ensure_utc",
    "now_iso",
    "parse_iso",
    "to_iso",
    "utc_now",
]
