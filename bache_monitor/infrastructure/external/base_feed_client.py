# Standard library imports
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client


class BaseFeedClient:
    """
    Base class for clients of the detection API.

    Provides common initialization for base_url, timeout and the HTTP client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base feed client.

        Args:
            base_url: Base URL of the detection API. If None, reads from env.
            timeout: Request timeout in seconds.
            client: HTTP client to use. Defaults to the shared pooled client.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.feed_base_url).rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = get_shared_http_client()
        return self._client

    @property
    def detections_url(self) -> str:
        return f"{self.base_url}/api/detections"
