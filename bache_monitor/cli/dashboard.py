"""
Terminal dashboard: polls GET /api/detections and redraws on every cycle.

Usage:
    bache-dashboard                                  # poll every POLL_INTERVAL_SECONDS
    bache-dashboard --once                           # one fetch, print, exit
    bache-dashboard --severity Alta --search carril
    bache-dashboard --start-date 2024-05-12 --end-date 2024-05-12
"""
import argparse
import asyncio
import logging
import sys

from ..application.services.detection_view import DetectionFilters
from ..application.services.feed_poller import FeedPoller, FeedState
from ..core.config import get_settings
from ..domain.services.severity import SeverityThresholds
from ..infrastructure.external.feed_client import DetectionFeedClient
from ..infrastructure.http_client_factory import close_shared_http_client
from ..presentation.terminal_dashboard import render_dashboard
from .logging_setup import configure_logging

log = logging.getLogger("bache_monitor.dashboard")

_CLEAR = "\033[2J\033[H"


def _printer(filters: DetectionFilters, clear: bool):
    settings = get_settings()
    thresholds = SeverityThresholds.from_noise(settings.sensor_noise_cm)

    def show(state: FeedState) -> None:
        text = render_dashboard(
            state,
            thresholds,
            settings.baseline_distance_cm,
            filters=filters,
            window=settings.trend_window,
        )
        sys.stdout.write((_CLEAR if clear else "") + text + "\n")
        sys.stdout.flush()

    return show


async def run_dashboard(args: argparse.Namespace, filters: DetectionFilters) -> None:
    client = DetectionFeedClient(base_url=args.url)
    show = _printer(filters, clear=not args.once and sys.stdout.isatty())
    poller = FeedPoller(client.fetch_feed, interval=args.interval, on_update=show)

    try:
        if args.once:
            await poller.poll_once()
            return
        show(poller.snapshot())
        await poller.start()
    except asyncio.CancelledError:
        pass
    finally:
        poller.dispose()
        await close_shared_http_client()


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Live terminal dashboard for pothole detections")
    parser.add_argument("--url", default=settings.feed_base_url, help="Base URL of the detection API")
    parser.add_argument("--interval", type=float, default=settings.poll_interval_seconds, help="Seconds between polls")
    parser.add_argument("--once", action="store_true", help="Fetch once, print and exit")
    parser.add_argument("--severity", default=None, help="Alta, Media, Baja or all")
    parser.add_argument("--source", default=None, help="Only readings from this source")
    parser.add_argument("--search", default=None, help="Text to look for in id, location, raw and source")
    parser.add_argument("--start-date", default=None, help="YYYY-MM-DD, inclusive")
    parser.add_argument("--end-date", default=None, help="YYYY-MM-DD, inclusive (whole day)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    configure_logging(args.log_level)
    try:
        filters = DetectionFilters.from_params(
            severity=args.severity,
            source=args.source,
            search=args.search,
            start_date=args.start_date,
            end_date=args.end_date,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        asyncio.run(run_dashboard(args, filters))
    except KeyboardInterrupt:
        log.info("Dashboard closed")


if __name__ == "__main__":
    main()
