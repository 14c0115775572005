# Standard library imports
import logging
from typing import Any, Dict, List, Union

# External package imports
import httpx
from pydantic import ValidationError

# Local application imports
from .base_feed_client import BaseFeedClient
from ...application.dto.detection_dto import FeedResponse, SubmitResponse
from ...domain.exceptions import FeedError

logger = logging.getLogger(__name__)


class DetectionFeedClient(BaseFeedClient):
    """
    HTTP client for the detection feed.

    fetch_feed() is what the feed poller calls every cycle; submit() is what
    the serial bridge calls for every frame.
    """

    async def fetch_feed(self) -> FeedResponse:
        """
        Fetch the latest detections, bypassing any HTTP cache.

        Returns:
            FeedResponse parsed from the server body

        Raises:
            FeedError: On network failure, non-2xx status or an unparseable body
        """
        try:
            response = await self.client.get(
                self.detections_url,
                headers={"Cache-Control": "no-store"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise FeedError(str(e) or e.__class__.__name__)

        if not response.is_success:
            raise FeedError(f"Status {response.status_code}", details={"body": response.text[:200]})

        try:
            return FeedResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FeedError(f"Respuesta inválida: {e}")

    async def submit(self, payload: Union[Dict[str, Any], List[Dict[str, Any]]]) -> SubmitResponse:
        """
        Submit one reading or a batch.

        Returns:
            SubmitResponse from the server. A 400 (no valid readings) is
            returned as ok=False rather than raised.

        Raises:
            FeedError: On network failure, any other non-2xx status or an
                unparseable body
        """
        try:
            response = await self.client.post(self.detections_url, json=payload, timeout=self.timeout)
        except httpx.TimeoutException:
            raise FeedError(f"Timeout while submitting to {self.detections_url}")
        except httpx.HTTPError as e:
            raise FeedError(str(e) or e.__class__.__name__)

        if response.status_code == 400:
            body = self._json_body(response)
            message = body.get("message") if isinstance(body, dict) else None
            return SubmitResponse(ok=False, message=message)

        if not response.is_success:
            raise FeedError(
                f"HTTP error submitting detections: {response.status_code} - {response.text}"
            )

        try:
            result = SubmitResponse.model_validate(self._json_body(response))
        except ValidationError as e:
            raise FeedError(f"Respuesta inválida: {e}")
        logger.debug(f"Submitted detections to {self.detections_url}: stored={result.stored}")
        return result

    @staticmethod
    def _json_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise FeedError(f"Respuesta inválida: {e}", details={"body": response.text[:200]})
