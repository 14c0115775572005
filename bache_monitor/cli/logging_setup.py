import logging

from ..core.config import get_settings


def configure_logging(level: str = "") -> None:
    """Console logging for the command-line tools."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # One line per request at INFO is too chatty for a 1 s poll loop
    logging.getLogger("httpx").setLevel(logging.WARNING)
