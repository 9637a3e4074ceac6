"""Bounded history of the tracked positions."""

import logging
import threading
from collections import deque
from collections.abc import Iterator

from .const import HISTORY_LIMIT
from .model import Coordinates, Position
from .utils import clean_path, split_path

_LOGGER = logging.getLogger(__name__)


class PositionHistory:
    """Ordered trail of the most recent positions, oldest first.

    Before a new position is added the trail is trimmed to the `limit` most
    recent positions, so it holds at most `limit + 1` entries. Reads and
    writes are serialized by a lock, so a rendering thread can poll the
    path while the event loop appends.
    """

    __slots__ = ("_limit", "_lock", "_positions")

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        """Create an empty history.

        :param int limit: Number of previous positions kept besides the newest.
        """
        if limit < 0:
            msg = f"History limit must not be negative: {limit}"
            raise ValueError(msg)
        self._limit = limit
        self._lock = threading.Lock()
        self._positions: deque[Position] = deque(maxlen=limit + 1)

    @property
    def limit(self) -> int:
        """Return the number of previous positions kept besides the newest."""
        return self._limit

    @property
    def capacity(self) -> int:
        """Return the maximum number of stored positions."""
        return self._limit + 1

    @property
    def latest(self) -> Position | None:
        """Return the newest position or None if the history is empty."""
        with self._lock:
            return self._positions[-1] if self._positions else None

    def append(self, position: Position) -> None:
        """Add the newest position, evicting the oldest one when full."""
        with self._lock:
            self._positions.append(position)
            _LOGGER.debug(
                "Appended %s, history length: %s", position, len(self._positions)
            )

    def clear(self) -> None:
        """Remove all positions."""
        with self._lock:
            self._positions.clear()

    def snapshot(self) -> tuple[Position, ...]:
        """Return an immutable copy of the stored positions."""
        with self._lock:
            return tuple(self._positions)

    def current_path(self) -> list[Coordinates]:
        """Return the path to draw, without segments wrapping around the map."""
        return clean_path(self.snapshot())

    def path_segments(self) -> list[list[Coordinates]]:
        """Return the history as continuous runs between antimeridian crossings."""
        return split_path(self.snapshot())

    def __len__(self) -> int:
        """Return the number of stored positions."""
        with self._lock:
            return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        """Iterate over a snapshot, oldest first."""
        return iter(self.snapshot())
