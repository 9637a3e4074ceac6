"""Library for exceptions of the satellite position tracker."""


class IssTrackerError(Exception):
    """Base class for all tracker errors."""


class NetworkError(IssTrackerError):
    """Raised during problems talking to the position API."""


class SatelliteNotFoundError(NetworkError):
    """Raised when the API doesn't know the requested satellite."""


class RateLimitError(NetworkError):
    """Raised when the API rejects the request because of too many requests."""


class MalformedResponseError(IssTrackerError):
    """Raised when the API returns a payload without a usable position."""
