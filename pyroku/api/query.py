"""Query helpers for the Roku ECP client.

This mixin covers the read-only ``query/*`` endpoints. Each call performs one
GET and decodes the XML body into a model; no state is stored on the client.

It assumes the base client provides the `_get` coroutine.
"""

from __future__ import annotations

from ..models import ActiveApp, AppList, DeviceInfo, MediaPlayer
from .constants import (
    API_ENDPOINT_ACTIVE_APP,
    API_ENDPOINT_APPS,
    API_ENDPOINT_DEVICE_INFO,
    API_ENDPOINT_MEDIA_PLAYER,
)
from .parser import parse_active_app, parse_apps, parse_device_info, parse_media_player


class QueryAPI:
    """Typed wrappers around the ``query/*`` endpoints."""

    async def query_apps(self) -> AppList:
        """Get the installed apps, in the order the device lists them.

        Raises:
            RokuRequestError: If the request fails.
            RokuInvalidDataError: If the body is not an ``<apps>`` document.
        """
        text = await self._get(API_ENDPOINT_APPS)  # type: ignore[attr-defined]
        return parse_apps(text)

    async def query_active_app(self) -> ActiveApp:
        """Get the foreground app and, if one is running, the screensaver.

        Raises:
            RokuRequestError: If the request fails.
            RokuInvalidDataError: If the body is not an ``<active-app>`` document.
        """
        text = await self._get(API_ENDPOINT_ACTIVE_APP)  # type: ignore[attr-defined]
        return parse_active_app(text)

    async def query_media_player(self) -> MediaPlayer:
        """Get the media player state.

        Raises:
            RokuRequestError: If the request fails.
            RokuInvalidDataError: If the body is not a ``<player>`` document.
        """
        text = await self._get(API_ENDPOINT_MEDIA_PLAYER)  # type: ignore[attr-defined]
        return parse_media_player(text)

    async def query_device_info(self) -> DeviceInfo:
        """Get device identity, capabilities and locale.

        Raises:
            RokuRequestError: If the request fails.
            RokuInvalidDataError: If the body is not a complete ``<device-info>`` document.
        """
        text = await self._get(API_ENDPOINT_DEVICE_INFO)  # type: ignore[attr-defined]
        return parse_device_info(text)
