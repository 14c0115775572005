"""
Serial bridge between the sensor sketch and the detection API.

The Arduino sketch prints one frame per event ("BACHE 3.4\r\n") over the
HC-05 serial profile (/dev/rfcommX) or USB. Every frame with a finite depth
is posted to POST /api/detections.
"""

# Standard library imports
import asyncio
import logging
import math
import re
from typing import Any, Callable, Dict, Optional

# External package imports
import serial

# Local application imports
from ...application.dto.detection_dto import SubmitResponse
from ...domain.exceptions import FeedError
from ...domain.models.detection import RAW_FRAME_PREFIX
from ..external.feed_client import DetectionFeedClient

logger = logging.getLogger(__name__)


# Decimal notation only, as the sketch prints it ("3.4", "-1.5", ".5", "1e2")
_DEPTH_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_frame(line: str) -> Optional[float]:
    """
    Extract the depth from a serial frame.

    Args:
        line: Raw text line, e.g. "BACHE 3.90"

    Returns:
        The depth in cm, or None when the frame carries no finite number
    """
    text = line.replace(RAW_FRAME_PREFIX, "").strip()
    if not _DEPTH_PATTERN.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


class SerialBridge:
    """
    Reads frames from a serial port and forwards them to the detection API.

    Submission failures are logged and the bridge keeps reading; readings
    are not retried.
    """

    def __init__(
        self,
        feed_client: DetectionFeedClient,
        port: str,
        baudrate: int = 9600,
        location: str = "Ruta demo",
        source: str = "HC-05",
        read_timeout: float = 1.0,
        serial_factory: Callable[..., Any] = serial.Serial,
    ) -> None:
        self.feed_client = feed_client
        self.port = port
        self.baudrate = baudrate
        self.location = location
        self.source = source
        self.read_timeout = read_timeout
        self._serial_factory = serial_factory
        self.forwarded = 0
        self.skipped = 0

    def build_payload(self, line: str) -> Optional[Dict[str, Any]]:
        depth = parse_frame(line)
        if depth is None:
            return None
        return {
            "depth": depth,
            "location": self.location,
            "source": self.source,
            "raw": line.strip(),
        }

    async def handle_line(self, line: str) -> Optional[SubmitResponse]:
        """Forward one frame. Returns the API response, or None if nothing was sent."""
        payload = self.build_payload(line)
        if payload is None:
            self.skipped += 1
            logger.debug(f"Ignoring frame without depth: {line.strip()!r}")
            return None

        try:
            result = await self.feed_client.submit(payload)
        except FeedError as e:
            logger.error(f"Failed to forward frame {payload['raw']!r}: {e.message}")
            return None

        if result.ok:
            self.forwarded += 1
            logger.info(f"Forwarded {payload['raw']} ({payload['depth']} cm)")
        else:
            logger.warning(f"API rejected frame {payload['raw']!r}: {result.message}")
        return result

    async def run(self, stop_event: Optional[asyncio.Event] = None) -> None:
        """
        Read frames until stop_event is set (or forever).

        The blocking readline() runs in a worker thread so the event loop
        stays free for the HTTP requests.
        """
        stop_event = stop_event or asyncio.Event()
        connection = self._serial_factory(self.port, self.baudrate, timeout=self.read_timeout)
        logger.info(f"Listening on {self.port} at {self.baudrate} baud")

        try:
            while not stop_event.is_set():
                data = await asyncio.to_thread(connection.readline)
                if not data:
                    # Read timeout, no frame this round
                    continue
                await self.handle_line(data.decode("utf-8", errors="ignore"))
        finally:
            connection.close()
            logger.info(
                f"Serial bridge stopped: forwarded={self.forwarded}, skipped={self.skipped}"
            )
