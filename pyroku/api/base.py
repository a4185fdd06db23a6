"""HTTP transport layer for the Roku ECP client.

``BaseRokuClient`` owns the device's base address and the aiohttp session, and
provides the ``_request`` coroutine the API mixins build on. It performs
exactly one HTTP round trip per call: no retries, no caching, no locking.
"""

from __future__ import annotations

import asyncio
import ipaddress
import logging
from typing import Any
from urllib.parse import urljoin, urlsplit, urlunsplit

import aiohttp
from aiohttp import ClientSession

from ..exceptions import (
    RokuAddressError,
    RokuConnectionError,
    RokuRequestError,
    RokuResponseError,
    RokuTimeoutError,
)
from .constants import DEFAULT_PORT, DEFAULT_SCHEME

_LOGGER = logging.getLogger(__name__)

QueryParams = list[tuple[str, str]]


def parse_base_url(url: str) -> str:
    """Normalise *url* to a device base address ``scheme://host:port/``.

    Any path, query or fragment is dropped: a discovery LOCATION such as
    ``http://192.168.1.20:8060/dial/dd.xml`` addresses the same device as
    ``http://192.168.1.20:8060/``.

    Raises:
        RokuAddressError: If *url* has no http(s) scheme or host, or a bad port.
    """
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except (ValueError, AttributeError) as err:
        raise RokuAddressError(f"Invalid device address: {url!r}") from err

    if parts.scheme not in ("http", "https"):
        raise RokuAddressError(f"Invalid device address (scheme must be http or https): {url!r}")
    if not parts.hostname:
        raise RokuAddressError(f"Invalid device address (missing host): {url!r}")

    netloc = parts.netloc.rsplit("@", 1)[-1]
    if port is None and netloc.endswith(":"):
        netloc = netloc[:-1]
    return urlunsplit((parts.scheme, netloc, "/", "", ""))


def host_to_base_url(host: str, port: int = DEFAULT_PORT, scheme: str = DEFAULT_SCHEME) -> str:
    """Build a base address from a bare host or IP (IPv6 literals get brackets)."""
    host = host.strip()
    try:
        if isinstance(ipaddress.ip_address(host), ipaddress.IPv6Address):
            host = f"[{host}]"
    except ValueError:
        pass
    return parse_base_url(f"{scheme}://{host}:{port}/")


class BaseRokuClient:
    """Device address plus HTTP plumbing shared by all API mixins."""

    def __init__(
        self,
        url: str,
        session: ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Base address of the device, e.g. ``http://192.168.1.20:8060/``.
            session: Optional shared aiohttp ClientSession. The caller keeps
                ownership and must close it.
            timeout: Optional total request timeout in seconds. ``None`` leaves
                aiohttp's default in place.

        Raises:
            RokuAddressError: If *url* is not a valid device address.
        """
        self._base_url = parse_base_url(url)
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        """Base address every endpoint path is resolved against."""
        return self._base_url

    @property
    def timeout(self) -> float | None:
        """Total request timeout in seconds, or None for aiohttp's default."""
        return self._timeout

    @property
    def host(self) -> str:
        """Host name or IP of the device."""
        return urlsplit(self._base_url).hostname or ""

    @property
    def port(self) -> int:
        parts = urlsplit(self._base_url)
        return parts.port or (443 if parts.scheme == "https" else 80)

    def url_for(self, path: str) -> str:
        """Resolve a relative endpoint *path* against the base address."""
        return urljoin(self._base_url, path)

    def _get_session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def _request(
        self,
        path: str,
        method: str = "GET",
        params: QueryParams | None = None,
        read_body: bool = True,
    ) -> str:
        """Send one request and return the response body.

        Args:
            path: Endpoint path relative to the base address.
            method: HTTP method.
            params: Optional ordered query parameters, encoded by aiohttp.
            read_body: Read and decode the body. Commands pass False and get "".

        Returns:
            Response body text.

        Raises:
            RokuResponseError: Non-2xx status.
            RokuTimeoutError: The request timed out.
            RokuConnectionError: Any other transport failure.
            RokuRequestError: The body is not valid text in its declared charset.
        """
        url = self.url_for(path)
        session = self._get_session()

        request_kwargs: dict[str, Any] = {}
        if params is not None:
            request_kwargs["params"] = params
        if self._timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=self._timeout)

        _LOGGER.debug("%s %s params=%s", method, url, params)
        try:
            async with session.request(method, url, **request_kwargs) as resp:
                if not 200 <= resp.status < 300:
                    raise RokuResponseError(
                        f"HTTP {resp.status} from {self.host}",
                        status=resp.status,
                        endpoint=url,
                    )
                if not read_body:
                    return ""
                try:
                    return await resp.text()
                except UnicodeDecodeError as err:
                    raise RokuRequestError(
                        f"Undecodable response body from {self.host}",
                        endpoint=url,
                        last_error=err,
                        operation_context="decode_body",
                    ) from err
        except asyncio.TimeoutError as err:
            raise RokuTimeoutError(
                f"Request to {self.host} timed out",
                endpoint=url,
                last_error=err,
            ) from err
        except aiohttp.ClientError as err:
            raise RokuConnectionError(
                f"Request to {self.host} failed: {err}",
                endpoint=url,
                last_error=err,
            ) from err

    async def _get(self, path: str) -> str:
        return await self._request(path, "GET")

    async def _post(self, path: str, params: QueryParams | None = None) -> None:
        await self._request(path, "POST", params=params, read_body=False)

    async def close(self) -> None:
        """Close the aiohttp session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def __aenter__(self) -> BaseRokuClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_url!r})"
