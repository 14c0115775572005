"""
Detection normalization.

Turns raw readings (bridge frames, manual POSTs) into canonical Detection
records. This module is the only conversion path from DetectionPayload to
Detection; everything downstream can rely on every field being populated.
"""
# Standard library imports
import logging
import math
import random
import time
import uuid
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

# Local application imports
from ...core.config import get_settings
from ...utils.datetime_utils import now_iso
from ..models.detection import (
    DEFAULT_LOCATION,
    DEFAULT_SOURCE,
    DEFAULT_VEHICLE,
    RAW_FRAME_PREFIX,
    Detection,
    DetectionPayload,
    Severity,
)
from .severity import classify

logger = logging.getLogger(__name__)

_OPTIONAL_TEXT_FIELDS = ("id", "timestamp", "location", "raw", "vehicle", "source")


def generate_detection_id() -> str:
    """
    Generate a collision-resistant identifier for a detection.

    Uses a random UUID; falls back to "run-<epoch ms>-<hex>" when the
    platform has no secure random source.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return f"run-{int(time.time() * 1000)}-{random.getrandbits(52):x}"


def format_raw_frame(depth: float) -> str:
    """Serial frame text for a depth, e.g. 3.9 -> "BACHE 3.90"."""
    return f"{RAW_FRAME_PREFIX} {depth:.2f}"


def has_valid_depth(value: Any) -> bool:
    """True when value is a real (non-bool) number and finite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large for a float are treated as infinite
        return False


def payload_from_mapping(item: Any) -> Optional[DetectionPayload]:
    """
    Build a DetectionPayload from an untrusted JSON mapping.

    Returns None when the entry is not a mapping or its depth is missing,
    non-numeric or non-finite. Unknown severity strings are ignored so the
    severity is derived from depth instead.
    """
    if not isinstance(item, Mapping):
        return None

    depth = item.get("depth")
    if not has_valid_depth(depth):
        return None

    fields = {}
    for name in _OPTIONAL_TEXT_FIELDS:
        value = item.get(name)
        if value is not None:
            fields[name] = str(value)

    return DetectionPayload(
        depth=float(depth),
        severity=Severity.parse(item.get("severity")),
        **fields,
    )


def normalize_detection(
    payload: DetectionPayload,
    noise_cm: Optional[float] = None,
    clock: Callable[[], str] = now_iso,
) -> Detection:
    """
    Fill every missing field of a payload and return the canonical record.

    Args:
        payload: Raw reading with a finite depth (callers pre-filter invalid depth)
        noise_cm: Sensor noise used to derive severity; defaults to the configured value
        clock: Source of the ISO timestamp for readings without one

    Returns:
        Canonical Detection
    """
    if noise_cm is None:
        noise_cm = get_settings().sensor_noise_cm

    depth = round(float(payload.depth), 2)

    return Detection(
        id=payload.id if payload.id is not None else generate_detection_id(),
        depth=depth,
        severity=payload.severity if payload.severity is not None else classify(depth, noise_cm),
        timestamp=payload.timestamp if payload.timestamp is not None else clock(),
        location=payload.location if payload.location is not None else DEFAULT_LOCATION,
        raw=payload.raw if payload.raw is not None else format_raw_frame(depth),
        vehicle=payload.vehicle if payload.vehicle is not None else DEFAULT_VEHICLE,
        source=payload.source if payload.source is not None else DEFAULT_SOURCE,
    )


def normalize_batch(
    items: Union[Mapping[str, Any], Iterable[Any]],
    noise_cm: Optional[float] = None,
) -> List[Detection]:
    """
    Normalize one mapping or a sequence of mappings.

    Each entry is validated on its own: entries without a usable depth are
    dropped silently and the order of the rest is preserved.
    """
    if isinstance(items, Mapping):
        items = [items]

    normalized: List[Detection] = []
    dropped = 0
    for item in items:
        payload = payload_from_mapping(item)
        if payload is None:
            dropped += 1
            continue
        normalized.append(normalize_detection(payload, noise_cm=noise_cm))

    if dropped:
        logger.debug(f"Dropped {dropped} reading(s) without a valid depth")
    return normalized
