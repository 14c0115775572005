"""Detection Controller

Feed endpoints consumed by the dashboard and the serial bridge.
"""

# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.detection_dto import (
    DashboardResponse,
    ErrorResponse,
    FeedResponse,
    SubmitResponse,
)
from ...application.services.detection_view import DetectionFilters
from ...application.use_cases.detection.list_detections import ListDetectionsUseCase
from ...application.use_cases.detection.submit_detections import SubmitDetectionsUseCase
from ...application.use_cases.detection.summarize_detections import SummarizeDetectionsUseCase
from ...di.container import get_container
from ...domain.exceptions import InvalidBatchError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["detections"])


def _error(status_code: int, message: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(message=message, detail=detail).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.get(
    "/detections",
    response_model=FeedResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_detections():
    """
    Latest detections, newest first, plus the timestamp of the newest one.

    Returns:
        FeedResponse with `detections` and `lastUpdate` (null when empty)
    """
    container = get_container()
    list_detections_use_case = container.get(ListDetectionsUseCase)

    try:
        return await list_detections_use_case.execute()
    except Exception as e:
        logger.error(f"Error reading detections: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "No se pudo leer MongoDB", str(e))


@router.post(
    "/detections",
    response_model=SubmitResponse,
    response_model_exclude_none=True,
    responses={400: {"model": SubmitResponse}, 500: {"model": ErrorResponse}},
)
async def submit_detections(request: Request):
    """
    Store one reading or an array of readings.

    Entries without a finite numeric depth are dropped. If nothing is left
    the request is rejected with 400 and nothing is stored.

    Expected payload structure:
    {
        "depth": 3.9,
        "location": "Ruta demo",
        "source": "HC-05",
        "raw": "BACHE 3.90"
    }
    """
    container = get_container()
    submit_detections_use_case = container.get(SubmitDetectionsUseCase)

    try:
        payload = await request.json()
        return await submit_detections_use_case.execute(payload)
    except InvalidBatchError as e:
        body = SubmitResponse(ok=False, message=e.message).model_dump(exclude_none=True)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)
    except Exception as e:
        logger.error(f"Error processing detection payload: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error procesando el payload", str(e))


@router.get(
    "/detections/summary",
    response_model=DashboardResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarize_detections(
    severity: Optional[str] = Query(default=None, description="Alta, Media, Baja or all"),
    source: Optional[str] = Query(default=None, description="Exact source tag or all"),
    search: Optional[str] = Query(default=None, description="Case-insensitive text over id, location, raw and source"),
    start_date: Optional[str] = Query(default=None, description="Inclusive lower bound (YYYY-MM-DD)"),
    end_date: Optional[str] = Query(default=None, description="Inclusive upper bound, whole day (YYYY-MM-DD)"),
):
    """
    Filtered detections and the dashboard statistics computed over them.
    """
    try:
        filters = DetectionFilters.from_params(
            severity=severity,
            source=source,
            search=search,
            start_date=start_date,
            end_date=end_date,
        )
    except ValueError as e:
        return _error(status.HTTP_400_BAD_REQUEST, "Filtros inválidos", str(e))

    container = get_container()
    summarize_use_case = container.get(SummarizeDetectionsUseCase)

    try:
        return await summarize_use_case.execute(filters)
    except Exception as e:
        logger.error(f"Error summarizing detections: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "No se pudo leer MongoDB", str(e))
