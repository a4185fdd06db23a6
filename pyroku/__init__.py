"""Asyncio client for Roku devices over the External Control Protocol (ECP)."""

from __future__ import annotations

from .client import RokuClient
from .discovery import discover_devices
from .exceptions import (
    RokuAddressError,
    RokuArgumentError,
    RokuConnectionError,
    RokuDiscoveryError,
    RokuError,
    RokuInvalidDataError,
    RokuRequestError,
    RokuResponseError,
    RokuTimeoutError,
)
from .keys import Key, Lit, RemoteKey, key_token
from .models import (
    ActiveApp,
    App,
    AppList,
    Buffering,
    DeviceInfo,
    Format,
    MediaPlayer,
    NewStream,
    Plugin,
    Screensaver,
    StreamSegment,
)
from .search import SearchParameters, SearchType

__version__ = "0.1.0"

__all__ = [
    "RokuClient",
    "discover_devices",
    "Key",
    "Lit",
    "RemoteKey",
    "key_token",
    "SearchParameters",
    "SearchType",
    "ActiveApp",
    "App",
    "AppList",
    "Buffering",
    "DeviceInfo",
    "Format",
    "MediaPlayer",
    "NewStream",
    "Plugin",
    "Screensaver",
    "StreamSegment",
    "RokuError",
    "RokuRequestError",
    "RokuResponseError",
    "RokuTimeoutError",
    "RokuConnectionError",
    "RokuDiscoveryError",
    "RokuAddressError",
    "RokuInvalidDataError",
    "RokuArgumentError",
]
