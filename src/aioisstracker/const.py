"""The constants for aioisstracker."""

from enum import StrEnum

API_BASE_URL = "https://api.wheretheiss.at/v1"
ISS_SATELLITE_ID = 25544
POLL_INTERVAL = 5.0
REQUEST_TIMEOUT = 10
HISTORY_LIMIT = 50
ANTIMERIDIAN_JUMP = 180.0

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class Units(StrEnum):
    """Units for altitude, velocity and footprint."""

    KILOMETERS = "kilometers"
    """Kilometers and kilometers per hour."""

    MILES = "miles"
    """Miles and miles per hour."""
