# Standard library imports
from contextlib import asynccontextmanager
import logging

# External package imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.routes import detection_router
from .core.config import get_settings
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (settings → database → repositories → use cases)
    on startup and releases the MongoDB and HTTP clients on shutdown.
    """
    settings = get_settings()
    try:
        get_container()
        logger.info(
            f"Detection backend ready: storage={settings.storage_backend}, "
            f"baseline={settings.baseline_distance_cm} cm, noise=±{settings.sensor_noise_cm} cm"
        )
    except Exception as e:
        # Requests will report the storage error; don't fail startup
        logger.error(f"Failed to initialize dependencies: {e}", exc_info=True)

    yield

    try:
        await close_shared_http_client()
        close_database()
    except Exception as e:
        logger.error(f"Error releasing clients: {e}", exc_info=True)
    reset_container()

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Settings (environment plus .env, loaded on first use)
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    application = FastAPI(
        title="Bache Monitor API",
        version="1.0.0",
        description="Pothole depth detections from an ultrasonic sensor bridge",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(detection_router, prefix="/api")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
