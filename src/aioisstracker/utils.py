"""Utils for the satellite position tracker."""

from collections.abc import Sequence
from itertools import pairwise

from .const import ANTIMERIDIAN_JUMP
from .model import Coordinates, Position


def crosses_antimeridian(previous: Position, current: Position) -> bool:
    """Return True if the step between two positions wraps around the map.

    Longitudes are compared as plain degrees. A jump of half the globe or more
    between two samples is treated as a crossing of the ±180° meridian.
    """
    return abs(current.longitude - previous.longitude) >= ANTIMERIDIAN_JUMP


def clean_path(positions: Sequence[Position]) -> list[Coordinates]:
    """Convert positions to a path which doesn't sweep across the map.

    A position is dropped when the step to its successor crosses the
    antimeridian. The last position is always kept, so the path ends at the
    current position.
    """
    if not positions:
        return []
    path = [
        previous.coordinates
        for previous, current in pairwise(positions)
        if not crosses_antimeridian(previous, current)
    ]
    path.append(positions[-1].coordinates)
    return path


def split_path(positions: Sequence[Position]) -> list[list[Coordinates]]:
    """Split positions into continuous runs at every antimeridian crossing."""
    if not positions:
        return []
    segments: list[list[Coordinates]] = [[positions[0].coordinates]]
    for previous, current in pairwise(positions):
        if crosses_antimeridian(previous, current):
            segments.append([])
        segments[-1].append(current.coordinates)
    return segments
