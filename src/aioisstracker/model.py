"""Models for the satellite position tracker."""

import math
from dataclasses import dataclass, field
from datetime import UTC, datetime

from mashumaro import DataClassDictMixin, field_options

from .const import LATITUDE_RANGE, LONGITUDE_RANGE

Coordinates = tuple[float, float]


def validate_coordinate(
    name: str, value: object, valid_range: tuple[float, float]
) -> float:
    """Return the value as float, if it's a finite number inside the range."""
    # bool is a subclass of int, but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{name} is not a number: {value!r}"
        raise ValueError(msg)
    if not math.isfinite(value):
        msg = f"{name} is not finite: {value!r}"
        raise ValueError(msg)
    low, high = valid_range
    if not low <= value <= high:
        msg = f"{name} {value} is outside of [{low}, {high}]"
        raise ValueError(msg)
    return float(value)


def deserialize_latitude(value: object) -> float:
    """Validate a raw latitude before mashumaro converts it."""
    return validate_coordinate("latitude", value, LATITUDE_RANGE)


def deserialize_longitude(value: object) -> float:
    """Validate a raw longitude before mashumaro converts it."""
    return validate_coordinate("longitude", value, LONGITUDE_RANGE)


def convert_timestamp_to_aware_datetime(timestamp: float | None) -> datetime | None:
    """Convert a unix timestamp in seconds to an aware UTC datetime."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=UTC)


@dataclass(frozen=True)
class Position(DataClassDictMixin):
    """A single reading of the tracked object.

    Latitude is in [-90, 90] and longitude in [-180, 180] degrees.
    Instances are immutable, a new reading is a new Position.
    """

    latitude: float = field(metadata=field_options(deserialize=deserialize_latitude))
    longitude: float = field(
        metadata=field_options(deserialize=deserialize_longitude)
    )

    def __post_init__(self) -> None:
        """Validate the coordinates."""
        object.__setattr__(
            self,
            "latitude",
            validate_coordinate("latitude", self.latitude, LATITUDE_RANGE),
        )
        object.__setattr__(
            self,
            "longitude",
            validate_coordinate("longitude", self.longitude, LONGITUDE_RANGE),
        )

    @property
    def coordinates(self) -> Coordinates:
        """Return the position as (latitude, longitude) pair."""
        return (self.latitude, self.longitude)


@dataclass
class SatelliteData(DataClassDictMixin):
    """Satellite data as returned by the satellites endpoint.

    Only latitude and longitude are required. All other values are
    informational and depend on the requested units.
    """

    latitude: float = field(metadata=field_options(deserialize=deserialize_latitude))
    longitude: float = field(
        metadata=field_options(deserialize=deserialize_longitude)
    )
    name: str | None = None
    id: int | None = None
    altitude: float | None = None
    velocity: float | None = None
    visibility: str | None = None
    footprint: float | None = None
    timestamp: datetime | None = field(
        default=None,
        metadata=field_options(deserialize=convert_timestamp_to_aware_datetime),
    )
    daynum: float | None = None
    solar_lat: float | None = None
    solar_lon: float | None = None
    units: str | None = None

    @property
    def position(self) -> Position:
        """Return the validated position of the satellite."""
        return Position(latitude=self.latitude, longitude=self.longitude)
