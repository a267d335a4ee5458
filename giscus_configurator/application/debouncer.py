import asyncio
import logging
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DEBOUNCE_DELAY = 0.5  # Seconds of quiet before a value counts as settled


class Debouncer(Generic[T]):
    """
    Coalesces a stream of updates into one settled value per pause.

    Each update cancels the pending emission and schedules a new one on the
    running event loop. Every scheduled callback carries a token; a callback
    whose token is no longer the latest one does nothing.
    """

    def __init__(self, callback: Callable[[T], None], delay: float = DEFAULT_DEBOUNCE_DELAY):
        self._callback = callback
        self.delay = delay
        self._token = 0
        self._handle: Optional[asyncio.TimerHandle] = None
        self._quiet = asyncio.Event()
        self._quiet.set()
        self._closed = False
        self.settled: Optional[T] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def update(self, value: T) -> None:
        if self._closed:
            return

        self._token += 1
        token = self._token
        if self._handle is not None:
            self._handle.cancel()

        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, token, value)
        self._quiet.clear()

    def _fire(self, token: int, value: T) -> None:
        if self._closed or token != self._token:
            return

        self._handle = None
        self.settled = value
        self._quiet.set()
        logger.debug(f"Value settled after {self.delay}s: {value!r}")
        self._callback(value)

    def cancel(self) -> None:
        """Discards the pending emission, if any."""
        self._token += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._quiet.set()

    def close(self) -> None:
        """Cancels and stops accepting updates; nothing is emitted afterwards."""
        self._closed = True
        self.cancel()

    async def wait_settled(self) -> None:
        await self._quiet.wait()
