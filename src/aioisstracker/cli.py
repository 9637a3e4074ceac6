"""The CLI for aioisstracker."""

import argparse
import asyncio
import logging
import signal

from aiohttp import ClientSession

from .api import SatellitePositionSource
from .const import HISTORY_LIMIT, ISS_SATELLITE_ID, POLL_INTERVAL, Units
from .logging_config import setup_logging
from .model import Position
from .session import TrackerSession

_LOGGER = logging.getLogger(__name__)


def log_path(tracker: TrackerSession) -> None:
    """Log the current path and its segments."""
    _LOGGER.info("path;%s", tracker.current_path())
    for number, segment in enumerate(tracker.path_segments(), start=1):
        _LOGGER.info("segment %s;%s points;%s", number, len(segment), segment)


async def run_tracker(
    satellite_id: int, interval: float, history_limit: int, units: Units
) -> None:
    """Track the satellite until SIGINT or SIGTERM."""
    stop_event = asyncio.Event()
    async with ClientSession() as websession:
        tracker = TrackerSession(
            SatellitePositionSource(websession, satellite_id, units=units),
            poll_interval=interval,
            history_limit=history_limit,
        )

        def on_position(position: Position) -> None:
            _LOGGER.info(
                "position;%.4f;%.4f;history;%s",
                position.latitude,
                position.longitude,
                len(tracker.history),
            )

        tracker.register_data_callback(on_position)

        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGUSR1, log_path, tracker)
        loop.add_signal_handler(signal.SIGINT, stop_event.set)
        loop.add_signal_handler(signal.SIGTERM, stop_event.set)

        async with tracker:
            await stop_event.wait()
        log_path(tracker)


def main() -> None:
    """Tracker for satellite positions.

    The tracker polls the wheretheiss.at API and logs every position.

    The tracker listens to the following signals:
    SIGUSR1: Log the current path and its segments
    SIGINT, SIGTERM: Stop tracking
    """
    parser = argparse.ArgumentParser(
        description=main.__doc__, formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-s",
        "--satellite-id",
        type=int,
        default=ISS_SATELLITE_ID,
        help="NORAD catalog id of the satellite",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=POLL_INTERVAL,
        help="Seconds between two position requests",
    )
    parser.add_argument(
        "-n",
        "--history",
        type=int,
        default=HISTORY_LIMIT,
        help="Number of previous positions to keep",
    )
    parser.add_argument(
        "-u",
        "--units",
        type=Units,
        choices=list(Units),
        default=Units.KILOMETERS,
        help="Units of altitude and velocity",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Debug logging")

    args = parser.parse_args()

    setup_logging(args.debug)
    asyncio.run(run_tracker(args.satellite_id, args.interval, args.history, args.units))
