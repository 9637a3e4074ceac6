"""Tests for asynchronous Python client for aioisstracker.

Run tests with `pytest`.
"""

from pathlib import Path
from typing import Any

import orjson

from aioisstracker.const import API_BASE_URL, ISS_SATELLITE_ID

ISS_URL = f"{API_BASE_URL}/satellites/{ISS_SATELLITE_ID}"


def load_fixture(filename: str) -> str:
    """Load a fixture."""
    path = Path(__file__).parent / "fixtures" / filename
    return path.read_text(encoding="utf-8")


def load_fixture_json(filename: str) -> dict[str, Any]:
    """Load a fixture and parse it as json."""
    return orjson.loads(load_fixture(filename))
