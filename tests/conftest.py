"""Test helpers for the satellite position tracker."""

from collections.abc import AsyncGenerator, Callable, Generator
from unittest.mock import AsyncMock, Mock, create_autospec

import aiohttp
import pytest
from aioresponses import aioresponses

from aioisstracker.api import AbstractPositionSource, SatellitePositionSource
from aioisstracker.model import Position
from aioisstracker.session import TrackerSession
from tests import load_fixture_json

from .clock import FakeClock


def moving_position_factory() -> Callable[[], Position]:
    """Return a function which moves one degree north and east per call."""
    calls = 0

    def side_effect() -> Position:
        nonlocal calls
        calls += 1
        return Position(latitude=float(calls), longitude=float(calls))

    return side_effect


@pytest.fixture(name="iss_data")
def mock_iss_data() -> dict:
    """Return the satellite payload of the ISS."""
    return load_fixture_json("iss.json")


@pytest.fixture(name="not_found_data")
def mock_not_found_data() -> dict:
    """Return the error payload for an unknown satellite."""
    return load_fixture_json("satellite_not_found.json")


@pytest.fixture(name="clock")
def mock_clock() -> FakeClock:
    """Return a clock which only moves when advanced."""
    return FakeClock()


@pytest.fixture(name="position_source")
def mock_position_source() -> AsyncMock:
    """Mock a position source returning a new position per call."""
    source = create_autospec(AbstractPositionSource, instance=True)
    source.fetch_current_position = AsyncMock(side_effect=moving_position_factory())
    return source


@pytest.fixture(name="error_callback")
def mock_error_callback() -> Mock:
    """Return a mock for the error channel of the tracker."""
    return Mock()


@pytest.fixture(name="tracker")
async def mock_tracker(
    position_source: AsyncMock, clock: FakeClock
) -> AsyncGenerator[TrackerSession, None]:
    """Return a tracker on the fake clock, stopped after the test."""
    tracker = TrackerSession(position_source, sleep=clock.sleep)
    yield tracker
    await tracker.stop()


@pytest.fixture(name="aio_source")
async def mock_aio_source() -> AsyncGenerator[SatellitePositionSource, None]:
    """Return a satellite source with a real aiohttp session."""
    async with aiohttp.ClientSession() as session:
        yield SatellitePositionSource(session)


@pytest.fixture(name="responses")
def aioresponses_fixture() -> Generator[aioresponses, None, None]:
    """Return aioresponses fixture."""
    with aioresponses() as mocked_responses:
        yield mocked_responses
