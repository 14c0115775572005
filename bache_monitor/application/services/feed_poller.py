"""
Client-side refresh loop for the detection feed.

The poller fetches the full feed on a fixed tick and replaces its local
collection with every successful response. Overlapping cycles follow
"supersede, don't queue": starting a cycle cancels the previous in-flight
fetch, and only the most recently issued request may change state.
"""
# Standard library imports
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Iterable, Optional, Tuple

# Local application imports
from ...domain.models.detection import Detection
from ...utils.datetime_utils import now_iso
from ..dto.detection_dto import FeedResponse

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0
SUPERSEDED_MESSAGE = "Solicitud reemplazada por una consulta más reciente"


class FeedStatus(str, Enum):
    CONNECTING = "connecting"
    LIVE = "live"
    ERROR = "error"


@dataclass(frozen=True)
class FeedState:
    """Immutable snapshot of what the poller currently shows."""

    status: FeedStatus
    detections: Tuple[Detection, ...]
    last_update: Optional[str] = None
    error: Optional[str] = None


FetchFeed = Callable[[], Awaitable[FeedResponse]]
StateListener = Callable[[FeedState], None]


class FeedPoller:
    """
    Fixed-interval poll loop with at most one outstanding request.

    State machine: connecting -> live <-> error, with no terminal state.
    Failures keep the previous detections and record the error text; there
    is no backoff, the next tick simply tries again. dispose() is synchronous
    and no state change or listener call happens after it.
    """

    def __init__(
        self,
        fetch: FetchFeed,
        interval: float = DEFAULT_POLL_INTERVAL,
        on_update: Optional[StateListener] = None,
        initial: Iterable[Detection] = (),
        clock: Callable[[], str] = now_iso,
    ) -> None:
        self._fetch = fetch
        self.interval = interval
        self._on_update = on_update
        self._clock = clock

        self._state = FeedState(status=FeedStatus.CONNECTING, detections=tuple(initial))
        self._issued = 0
        self._inflight: Optional[asyncio.Task] = None
        self._timer: Optional[asyncio.Task] = None
        self._disposed = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def snapshot(self) -> FeedState:
        return self._state

    def start(self) -> asyncio.Task:
        """
        Start polling on the running event loop.

        The first cycle runs immediately, then one per interval tick.

        Returns:
            The timer task (completes only when cancelled by dispose())
        """
        if self._disposed:
            raise RuntimeError("FeedPoller has been disposed")
        if self.running:
            return self._timer
        self._timer = asyncio.get_running_loop().create_task(self._tick_forever())
        return self._timer

    async def poll_once(self) -> FeedState:
        """Issue one cycle and wait for it to settle (success, failure or supersede)."""
        task = self._begin_cycle()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        return self._state

    def dispose(self) -> None:
        """Abort the pending request, stop the timer and freeze state."""
        if self._disposed:
            return
        self._disposed = True
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._inflight = None
        logger.debug("Feed poller disposed")

    async def __aenter__(self) -> "FeedPoller":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _tick_forever(self) -> None:
        while not self._disposed:
            self._begin_cycle()
            await asyncio.sleep(self.interval)

    def _begin_cycle(self) -> Optional[asyncio.Task]:
        if self._disposed:
            return None

        previous = self._inflight
        if previous is not None and not previous.done():
            previous.cancel()
            self._apply_error(SUPERSEDED_MESSAGE)

        self._issued += 1
        self._inflight = asyncio.get_running_loop().create_task(self._cycle(self._issued))
        return self._inflight

    async def _cycle(self, request_id: int) -> None:
        try:
            response = await self._fetch()
        except asyncio.CancelledError:
            # Superseded or disposed; state was already handled by the canceller
            raise
        except Exception as e:
            if self._is_current(request_id):
                logger.debug(f"Feed poll failed: {e}")
                self._apply_error(str(e) or e.__class__.__name__)
            return

        if not self._is_current(request_id):
            logger.debug(f"Discarding stale feed response #{request_id}")
            return

        self._set_state(
            FeedState(
                status=FeedStatus.LIVE,
                detections=tuple(item.to_domain() for item in response.detections),
                last_update=response.last_update or self._clock(),
                error=None,
            )
        )

    def _is_current(self, request_id: int) -> bool:
        return not self._disposed and request_id == self._issued

    def _apply_error(self, message: str) -> None:
        self._set_state(
            FeedState(
                status=FeedStatus.ERROR,
                detections=self._state.detections,
                last_update=self._state.last_update,
                error=message,
            )
        )

    def _set_state(self, state: FeedState) -> None:
        if self._disposed:
            return
        self._state = state
        if self._on_update is None:
            return
        try:
            self._on_update(state)
        except Exception as e:
            logger.error(f"Feed state listener failed: {e}", exc_info=True)
