"""Position sources for the tracker."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

import orjson
from aiohttp import (
    ClientError,
    ClientResponse,
    ClientResponseError,
    ClientSession,
    ClientTimeout,
)
from mashumaro.exceptions import MissingField

from .const import API_BASE_URL, ISS_SATELLITE_ID, REQUEST_TIMEOUT, Units
from .exceptions import (
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    SatelliteNotFoundError,
)
from .model import Position, SatelliteData

ERROR = "error"
STATUS = "status"

_LOGGER = logging.getLogger(__name__)


class AbstractPositionSource(ABC):
    """Abstract class to fetch the current position of the tracked object."""

    @abstractmethod
    async def fetch_current_position(self) -> Position:
        """Return the current position.

        :raises NetworkError: The source couldn't be reached.
        :raises MalformedResponseError: The source didn't return a valid position.
        """


class SatellitePositionSource(AbstractPositionSource):
    """Fetch satellite positions from the wheretheiss.at REST API."""

    def __init__(
        self,
        websession: ClientSession,
        satellite_id: int = ISS_SATELLITE_ID,
        host: str | None = None,
        units: Units = Units.KILOMETERS,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the source.

        :param class websession: The aiohttp ClientSession used for all requests.
        :param int satellite_id: NORAD catalog id, default is the ISS.
        :param str host: Base URL of the API.
        :param Units units: Units for altitude, velocity and footprint.
        :param float timeout: Total timeout of a single request in seconds.
        """
        self._websession = websession
        self._host = host if host is not None else API_BASE_URL
        self._timeout = ClientTimeout(total=timeout)
        self.satellite_id = satellite_id
        self.units = units

    @property
    def endpoint(self) -> str:
        """Return the endpoint of the satellite."""
        return f"satellites/{self.satellite_id}"

    async def request(
        self, method: str, url: str, **kwargs: Mapping[str, Any] | None
    ) -> ClientResponse:
        """Make a request."""
        if not (url.startswith("http://") or url.startswith("https://")):
            url = f"{self._host}/{url}"
        _LOGGER.debug("request[%s]=%s %s", method, url, kwargs.get("params"))
        return await self._websession.request(
            method,
            url,
            **kwargs,
            headers={"Accept": "application/json"},
            timeout=self._timeout,
        )

    async def get(self, url: str, **kwargs: Mapping[str, Any]) -> ClientResponse:
        """Make a get request."""
        try:
            resp = await self.request("get", url, **kwargs)
        except ClientError as err:
            raise NetworkError(f"Error connecting to API: {err}") from err
        except TimeoutError as err:
            raise NetworkError(f"Timeout connecting to API: {url}") from err
        return await SatellitePositionSource._raise_for_status(resp)

    async def get_json(self, url: str, **kwargs: Mapping[str, Any]) -> dict[str, Any]:
        """Make a get request and return json response."""
        resp = await self.get(url, **kwargs)
        try:
            body = await resp.read()
        except ClientError as err:
            raise NetworkError(f"Error reading response: {err}") from err
        except TimeoutError as err:
            raise NetworkError(f"Timeout reading response: {url}") from err
        try:
            result = orjson.loads(body)
        except orjson.JSONDecodeError as err:
            raise MalformedResponseError("Server returned malformed response") from err
        if not isinstance(result, dict):
            raise MalformedResponseError(
                f"Server returned malformed response: {result}"
            )
        _LOGGER.debug("response=%s", result)
        return result

    async def _fetch_payload(self) -> dict[str, Any]:
        """Return the raw payload of the satellite endpoint."""
        return await self.get_json(self.endpoint, params={"units": self.units.value})

    async def fetch_satellite_data(self) -> SatelliteData:
        """Return all data the API provides about the satellite.

        Every field is validated, an invalid informational value fails too.
        """
        result = await self._fetch_payload()
        try:
            return SatelliteData.from_dict(result)
        except (MissingField, ValueError, TypeError) as err:
            raise MalformedResponseError(f"Invalid satellite data: {err}") from err

    async def fetch_current_position(self) -> Position:
        """Return the current position of the satellite.

        Only latitude and longitude are read, other fields are ignored.
        """
        result = await self._fetch_payload()
        try:
            return Position(
                latitude=result.get("latitude"), longitude=result.get("longitude")
            )
        except ValueError as err:
            raise MalformedResponseError(f"Invalid position: {err}") from err

    @staticmethod
    async def _raise_for_status(resp: ClientResponse) -> ClientResponse:
        """Raise exceptions on failure methods."""
        detail = await SatellitePositionSource._error_detail(resp)
        try:
            resp.raise_for_status()
        except ClientResponseError as err:
            if err.status == HTTPStatus.NOT_FOUND:
                raise SatelliteNotFoundError(
                    f"Satellite not found by API: {err}"
                ) from err
            if err.status == HTTPStatus.TOO_MANY_REQUESTS:
                raise RateLimitError(f"Rate limited by API: {err}") from err
            detail.append(err.message)
            raise NetworkError(": ".join(detail)) from err
        except ClientError as err:
            raise NetworkError(f"Error from API: {err}") from err
        return resp

    @staticmethod
    async def _error_detail(resp: ClientResponse) -> list[str]:
        """Return an error message string from the API response."""
        if resp.status < 400:
            return []
        message = ["Error from API", f"{resp.status}"]
        try:
            result = orjson.loads(await resp.read())
        except (ClientError, TimeoutError, orjson.JSONDecodeError):
            return message
        if not isinstance(result, dict):
            return message
        if ERROR in result:
            message.append(f"{result[ERROR]}")
        if STATUS in result and result[STATUS] != resp.status:
            message.append(f"{result[STATUS]}")
        return message
