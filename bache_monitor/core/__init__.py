from .config import Settings, get_settings, load_environment, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "load_environment",
    "reset_settings",
]
