"""WalkupScan HTTP client for the printer's embedded web service."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, NamedTuple
from urllib.parse import urljoin, urlsplit

import aiohttp

from .codec import (
    decode_destination,
    decode_destinations,
    decode_event_table,
    encode_registration,
)
from .const import (
    DEBUG,
    DEFAULT_EVENT_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    DESTINATIONS_PATH,
    EVENT_TABLE_PATH,
    LOGGER,
    LONG_POLL_DEADLINE_MARGIN,
)
from .exceptions import (
    RegistrationRejectedError,
    TransportError,
    UnexpectedStatusError,
    WalkupScanConfigurationError,
)
from .models.event import EventTable

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from .models.destination import RegistrationRequest, WalkupScanDestination

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_NOT_MODIFIED = 304


class _Response(NamedTuple):
    status: int
    headers: Mapping[str, str]
    body: bytes


class WalkupScanClient:
    """
    Client for the WalkupScan and event management resources of a printer.

    Every operation is a single HTTP round trip. Failures are never handled
    here: they are raised as TransportError, UnexpectedStatusError or
    DecodeError for the caller to deal with.
    """

    def __init__(
        self,
        printer_address: str | None,
        session: aiohttp.ClientSession,
        logger: Any = LOGGER,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """
        Initialize a WalkupScanClient for one printer.

        Arguments:
            printer_address: Host, host:port or base URL of the printer.
            session: The aiohttp client session.
            logger: The logger to use.
            request_timeout: Deadline in seconds for calls that should answer promptly.

        """
        if not printer_address:
            msg = "Printer address is required but not provided"
            raise WalkupScanConfigurationError(msg)
        if "://" not in printer_address:
            printer_address = f"http://{printer_address}"
        self.base_url: str = printer_address.rstrip("/")
        self.logger = logger
        self._session: aiohttp.ClientSession = session
        self._request_timeout = request_timeout

    def _url(self, path: str) -> str:
        return urljoin(f"{self.base_url}/", path)

    async def _request(  # noqa: PLR0913
        self,
        method: str,
        url: str,
        *,
        accepted: Collection[int] | None = (HTTP_OK,),
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        data: bytes | None = None,
        timeout: float | None = None,
    ) -> _Response:
        """
        Send a request to the printer and read the whole response.

        Raises:
            TransportError: If the printer cannot be reached or the deadline passes.
            UnexpectedStatusError: If `accepted` is given and the status is not in it.

        """
        client_timeout = aiohttp.ClientTimeout(total=timeout or self._request_timeout)
        self.logger.debug(f"printer << {method} {url} params={params} headers={headers}")
        if DEBUG and data:
            self.logger.debug(f"printer << \n{data.decode(errors='replace')}")
        try:
            async with self._session.request(
                method,
                url,
                params=params,
                headers=headers,
                data=data,
                timeout=client_timeout,
            ) as response:
                body = await response.read()
                result = _Response(response.status, response.headers, body)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            msg = f"{method} {url} failed: {e!r}"
            raise TransportError(msg) from e

        self.logger.debug(f"printer >> {result.status} for {method} {url}")
        if DEBUG and result.body:
            self.logger.debug(f"printer >> \n{result.body.decode(errors='replace')}")
        if accepted is not None and result.status not in accepted:
            raise UnexpectedStatusError(result.status, method, url)
        return result

    async def list_destinations(self) -> list[WalkupScanDestination]:
        """
        Retrieve the destinations currently registered on the printer.

        Returns:
            The destinations in the order the printer lists them.

        """
        response = await self._request("GET", self._url(DESTINATIONS_PATH))
        return decode_destinations(response.body)

    async def register_destination(self, request: RegistrationRequest) -> str:
        """
        Ask the printer to create a destination.

        Returns:
            The resource URI the printer assigned, from the Location header.

        Raises:
            RegistrationRejectedError: If the printer does not answer 201 Created
                with a Location.

        """
        response = await self._request(
            "POST",
            self._url(DESTINATIONS_PATH),
            accepted=None,
            headers={"Content-Type": "text/xml"},
            data=encode_registration(request),
        )
        if response.status != HTTP_CREATED:
            raise RegistrationRejectedError(response.status)
        location = response.headers.get("Location")
        if not location:
            raise RegistrationRejectedError(response.status, "no Location header")
        self.logger.info(f"Registered destination {request.name} at {location}")
        return location

    async def remove_destination(self, destination: WalkupScanDestination) -> None:
        """Delete a destination from the printer."""
        path = urlsplit(destination.resource_uri).path
        await self._request("DELETE", self._url(path), accepted=(HTTP_NO_CONTENT,))
        self.logger.info(f"Removed destination {destination.name} ({path})")

    async def fetch_event_table(
        self, etag: str | None = None, timeout: int = 0
    ) -> EventTable:
        """
        Retrieve the printer's event table.

        With an etag the request is conditional: the printer holds it open
        until its events differ from that etag or `timeout` seconds pass.

        Arguments:
            etag: The etag of the last table seen, if any.
            timeout: Seconds the printer may hold the request. 0 sends no
                timeout; True asks for the default hold of 1200 seconds.

        Returns:
            The event table together with the etag the printer sent for it.
            A 304 answer gives an empty table that keeps the current etag.

        """
        if timeout is not True and timeout < 0:
            msg = f"Event table timeout must not be negative, got {timeout}"
            raise WalkupScanConfigurationError(msg)

        params: dict[str, str] | None = None
        deadline: float | None = None
        if timeout:
            hold = DEFAULT_EVENT_TIMEOUT if timeout is True else int(timeout)
            params = {"timeout": str(hold)}
            deadline = hold + LONG_POLL_DEADLINE_MARGIN
        headers = {"If-None-Match": etag} if etag else None

        response = await self._request(
            "GET",
            self._url(EVENT_TABLE_PATH),
            accepted=(HTTP_OK, HTTP_NOT_MODIFIED),
            params=params,
            headers=headers,
            timeout=deadline,
        )
        new_etag = response.headers.get("ETag")
        if response.status == HTTP_NOT_MODIFIED:
            return EventTable(etag=new_etag or etag)
        return decode_event_table(response.body, new_etag)

    async def fetch_destination(self, resource_uri: str) -> WalkupScanDestination:
        """
        Retrieve a single destination by its resource URI.

        Absolute URIs are requested as they are, relative ones on this printer.
        """
        response = await self._request("GET", self._url(resource_uri))
        return decode_destination(response.body)
