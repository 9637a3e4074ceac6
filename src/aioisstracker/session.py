"""Module to track a satellite by polling its position."""

import asyncio
import contextlib
import datetime
import logging
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Self

from .api import AbstractPositionSource
from .const import HISTORY_LIMIT, POLL_INTERVAL
from .exceptions import IssTrackerError
from .history import PositionHistory
from .model import Coordinates, Position

_LOGGER = logging.getLogger(__name__)


def _log_error(err: IssTrackerError) -> None:
    """Report a failed fetch to the log."""
    _LOGGER.error("Failed to fetch position: %s", err)


class TrackerSession:
    """Tracker which samples the position of one object periodically.

    The `TrackerSession` is the primary API service for this library. It owns
    the polling task and the position history, and offers the current position
    and a drawable path to the presentation layer.
    """

    __slots__ = (
        "_fetch_tasks",
        "_generation",
        "_history",
        "_sleep",
        "data_update_cbs",
        "error_callback",
        "last_update",
        "loop",
        "poll_interval",
        "source",
        "timer_task",
    )

    def __init__(
        self,
        source: AbstractPositionSource,
        *,
        poll_interval: float = POLL_INTERVAL,
        history_limit: int = HISTORY_LIMIT,
        error_callback: Callable[[IssTrackerError], None] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Create a session.

        :param class source: The AbstractPositionSource to fetch positions from.
        :param float poll_interval: Seconds between two fetches.
        :param int history_limit: Previous positions kept besides the newest.
        :param func error_callback: Receives every failed fetch, logs by default.
        :param func sleep: Coroutine function used to wait between fetches.
        """
        if poll_interval <= 0:
            msg = f"Poll interval must be positive: {poll_interval}"
            raise ValueError(msg)
        self.source = source
        self.poll_interval = poll_interval
        self._history = PositionHistory(history_limit)
        self.error_callback = error_callback or _log_error
        self.data_update_cbs: list[Callable[[Position], None]] = []
        self.last_update: datetime.datetime | None = None
        self.loop: asyncio.AbstractEventLoop | None = None
        self.timer_task: asyncio.Task[None] | None = None
        self._fetch_tasks: set[asyncio.Task[None]] = set()
        self._generation = 0
        self._sleep = sleep

    async def __aenter__(self) -> Self:
        """Start tracking."""
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Stop tracking."""
        await self.stop()

    @property
    def running(self) -> bool:
        """Return True while the polling task is active."""
        return self.timer_task is not None and not self.timer_task.done()

    @property
    def history(self) -> tuple[Position, ...]:
        """Return a snapshot of the stored positions, oldest first."""
        return self._history.snapshot()

    @property
    def history_capacity(self) -> int:
        """Return the maximum number of stored positions."""
        return self._history.capacity

    def register_data_callback(self, callback: Callable[[Position], None]) -> None:
        """Register a callback, called with every new position."""
        if callback not in self.data_update_cbs:
            self.data_update_cbs.append(callback)

    def unregister_data_callback(self, callback: Callable[[Position], None]) -> None:
        """Unregister a data update callback.

        :param func callback: Takes one function, which should be unregistered.
        """
        if callback in self.data_update_cbs:
            self.data_update_cbs.remove(callback)

    def _schedule_data_callbacks(self, position: Position) -> None:
        """Schedule the data callbacks."""
        if self.loop is None:
            return
        for cb in self.data_update_cbs:
            self.loop.call_soon_threadsafe(cb, position)

    async def start(self) -> None:
        """Start tracking.

        The first position is fetched right away, the following ones every
        `poll_interval` seconds until `stop` is called. Calling it while
        running does nothing.
        """
        if self.running:
            _LOGGER.debug("Tracker already running")
            return
        self.loop = asyncio.get_running_loop()
        self._generation += 1
        self.timer_task = self.loop.create_task(self._timer_task(self._generation))
        _LOGGER.debug("Tracker started, poll interval: %ss", self.poll_interval)

    async def stop(self) -> None:
        """Stop tracking.

        Fetches already in flight are not cancelled, but their results
        are discarded.
        """
        if self.timer_task is None:
            return
        self._generation += 1
        timer_task, self.timer_task = self.timer_task, None
        if not timer_task.done():
            timer_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await asyncio.gather(timer_task)
        _LOGGER.debug("Tracker stopped, history length: %s", len(self._history))

    async def _timer_task(self, generation: int) -> None:
        """Fetch a position every poll interval."""
        while True:
            self._schedule_fetch(generation)
            await self._sleep(self.poll_interval)

    def _schedule_fetch(self, generation: int) -> None:
        """Fetch a position in its own task, a slow request can't delay the timer."""
        task = asyncio.create_task(self._async_fetch(generation))
        self._fetch_tasks.add(task)
        task.add_done_callback(self._fetch_done)

    def _fetch_done(self, task: asyncio.Task[None]) -> None:
        """Forget a finished fetch task and log what it raised."""
        self._fetch_tasks.discard(task)
        if task.cancelled():
            return
        if (err := task.exception()) is not None:
            _LOGGER.error("Fetch task failed: %s", err, exc_info=err)

    async def _async_fetch(self, generation: int) -> None:
        """Fetch one position and add it to the history."""
        try:
            position = await self.source.fetch_current_position()
        except IssTrackerError as err:
            self.error_callback(err)
            return
        except Exception:
            _LOGGER.exception("Unexpected error while fetching position")
            return
        if generation != self._generation:
            _LOGGER.debug("Discarding position received after stop: %s", position)
            return
        self._history.append(position)
        self.last_update = datetime.datetime.now(tz=datetime.UTC)
        self._schedule_data_callbacks(position)

    def current_position(self) -> Position | None:
        """Return the latest position, None before the first successful fetch."""
        return self._history.latest

    def current_path(self) -> list[Coordinates]:
        """Return the path to draw, see `PositionHistory.current_path`."""
        return self._history.current_path()

    def path_segments(self) -> list[list[Coordinates]]:
        """Return the path split into runs at antimeridian crossings."""
        return self._history.path_segments()
