"""
Detection API server.

Usage:
    bache-api                          # 0.0.0.0:8000, MongoDB from MONGO_URI
    STORAGE_BACKEND=memory bache-api   # no MongoDB needed
    bache-api --port 3000 --reload
"""
import argparse
import logging

import uvicorn

from .logging_setup import configure_logging

log = logging.getLogger("bache_monitor.server")


def main() -> None:
    parser = argparse.ArgumentParser(description="Bache Monitor detection API")
    parser.add_argument("--host", default="0.0.0.0", help="Server host")
    parser.add_argument("--port", type=int, default=8000, help="Server port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    parser.add_argument("--log-level", default="", help="Logging level (defaults to LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    log.info(f"Starting detection API on {args.host}:{args.port}")
    uvicorn.run(
        "bache_monitor.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=logging.getLevelName(logging.getLogger().level).lower(),
    )


if __name__ == "__main__":
    main()
