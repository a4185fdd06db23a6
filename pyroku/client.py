"""Main Roku client facade.

This module provides the RokuClient class that composes the API mixins into a
single interface for one Roku device.
"""

from __future__ import annotations

import logging

from aiohttp import ClientSession

from .api.base import BaseRokuClient, host_to_base_url
from .api.constants import DEFAULT_PORT
from .api.control import ControlAPI
from .api.query import QueryAPI
from .exceptions import (
    RokuAddressError,
    RokuArgumentError,
    RokuConnectionError,
    RokuError,
    RokuInvalidDataError,
    RokuRequestError,
    RokuResponseError,
    RokuTimeoutError,
)

_LOGGER = logging.getLogger(__name__)


class RokuClient(QueryAPI, ControlAPI, BaseRokuClient):
    """Roku External Control Protocol (ECP) client for a single device.

    Every method is a coroutine that performs one HTTP request. The client
    holds no device state; create as many as needed, and use several
    concurrently without extra coordination.

    Example:
        ```python
        import asyncio
        from pyroku import Key, RokuClient

        async def main():
            async with RokuClient("http://192.168.1.20:8060/") as client:
                info = await client.query_device_info()
                print(info.friendly_device_name)

                apps = await client.query_apps()
                await client.launch(apps.apps[0])
                await client.key_press(Key.HOME)

        asyncio.run(main())
        ```

    Args:
        url: Base address of the device (scheme, host and port; any path is
            dropped).
        session: Optional shared aiohttp ClientSession for connection pooling.
            A shared session is never closed by the client.
        timeout: Optional total request timeout in seconds (default: aiohttp's).

    Attributes:
        base_url: Normalised base address (read-only).
        host: Device hostname or IP address (read-only).
        timeout: Request timeout in seconds or None (read-only).
    """

    def __init__(
        self,
        url: str,
        session: ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(url, session=session, timeout=timeout)
        _LOGGER.debug("Created Roku client for %s", self.base_url)

    @classmethod
    def from_host(
        cls,
        host: str,
        port: int = DEFAULT_PORT,
        session: ClientSession | None = None,
        timeout: float | None = None,
    ) -> RokuClient:
        """Create a client from a bare hostname or IP address.

        Args:
            host: Hostname, IPv4 or IPv6 address.
            port: ECP port (default: 8060).
            session: Optional shared aiohttp ClientSession.
            timeout: Optional total request timeout in seconds.
        """
        return cls(host_to_base_url(host, port), session=session, timeout=timeout)

    async def __aenter__(self) -> RokuClient:
        return self


# Export exceptions for convenience
__all__ = [
    "RokuClient",
    "RokuError",
    "RokuRequestError",
    "RokuResponseError",
    "RokuTimeoutError",
    "RokuConnectionError",
    "RokuAddressError",
    "RokuInvalidDataError",
    "RokuArgumentError",
]
