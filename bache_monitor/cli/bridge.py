"""
Serial bridge: forwards "BACHE <depth>" frames from the HC-05 / USB port to the API.

Usage:
    bache-bridge                                   # /dev/rfcomm0 at 9600 baud
    bache-bridge --port COM5 --url http://localhost:8000
    bache-bridge --location "Carril A" --source USB

On Ubuntu pair the HC-05 with Blueman (PIN 1234) and use
"Connect to → Serial Port" to get /dev/rfcommX.
"""
import argparse
import asyncio
import logging

from ..core.config import get_settings
from ..infrastructure.bridge.serial_bridge import SerialBridge
from ..infrastructure.external.feed_client import DetectionFeedClient
from ..infrastructure.http_client_factory import close_shared_http_client
from .logging_setup import configure_logging

log = logging.getLogger("bache_monitor.bridge")


async def run_bridge(args: argparse.Namespace) -> None:
    bridge = SerialBridge(
        feed_client=DetectionFeedClient(base_url=args.url),
        port=args.port,
        baudrate=args.baud,
        location=args.location,
        source=args.source,
    )
    try:
        await bridge.run()
    finally:
        await close_shared_http_client()


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Forward serial pothole frames to the detection API")
    parser.add_argument("--port", default=settings.serial_port, help="Serial device (e.g. /dev/rfcomm0, COM5)")
    parser.add_argument("--baud", type=int, default=settings.serial_baudrate, help="Baud rate")
    parser.add_argument("--url", default=settings.feed_base_url, help="Base URL of the detection API")
    parser.add_argument("--location", default=settings.bridge_location, help="Location label for every reading")
    parser.add_argument("--source", default=settings.bridge_source, help="Source tag for every reading")
    parser.add_argument("--log-level", default="", help="Logging level (defaults to LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    try:
        asyncio.run(run_bridge(args))
    except KeyboardInterrupt:
        log.info("Bridge interrupted")


if __name__ == "__main__":
    main()
