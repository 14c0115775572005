# Standard library imports
import os
from typing import Final, List, Optional

# External package imports
from dotenv import find_dotenv, load_dotenv


def _env_list(key: str, default: str) -> List[str]:
    raw = os.getenv(key, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    The calibration constants are read once here and then passed explicitly
    to the components that need them.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "ti")
        self.mongo_collection_name: Final[str] = os.getenv("MONGO_COLLECTION", "detections")
        # "mongo" or "memory"
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()
        self.max_buffer: Final[int] = int(os.getenv("MAX_BUFFER", "200"))

        # Sensor Calibration
        self.baseline_distance_cm: Final[float] = float(os.getenv("BASELINE_DISTANCE_CM", "8.5"))
        self.sensor_noise_cm: Final[float] = float(os.getenv("SENSOR_NOISE_CM", "3"))

        # Feed / Dashboard Configuration
        self.feed_base_url: Final[str] = os.getenv("FEED_BASE_URL", "http://localhost:8000")
        self.poll_interval_seconds: Final[float] = float(os.getenv("POLL_INTERVAL_SECONDS", "1.0"))
        self.trend_window: Final[int] = int(os.getenv("TREND_WINDOW", "12"))

        # Serial Bridge Configuration
        self.serial_port: Final[str] = os.getenv("SERIAL_PORT", "/dev/rfcomm0")
        self.serial_baudrate: Final[int] = int(os.getenv("SERIAL_BAUDRATE", "9600"))
        self.bridge_location: Final[str] = os.getenv("BRIDGE_LOCATION", "Ruta demo")
        self.bridge_source: Final[str] = os.getenv("BRIDGE_SOURCE", "HC-05")

        # HTTP Configuration
        self.cors_origins: Final[List[str]] = _env_list(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173",
        )
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def load_environment(env_file: Optional[str] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Variables already set in the environment take precedence over the file.

    Args:
        env_file: Path to the .env file. Defaults to the nearest .env found
            from the current working directory upwards.

    Returns:
        True if a file was found and loaded
    """
    path = env_file or find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(path)


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    The .env file is loaded before the first build so every entry point
    (API, bridge, dashboard) sees the same configuration.

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_environment()
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
