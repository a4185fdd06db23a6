"""Command helpers for the Roku ECP client.

This mixin handles remote key events, app launch/install, free-form input and
search. Command responses carry no useful body; any 2xx status is success.

It assumes the base client provides the `_post` coroutine.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from ..exceptions import RokuArgumentError
from ..keys import Lit, RemoteKey, key_token
from ..models import App
from ..search import SearchParameters
from .constants import (
    API_ENDPOINT_INPUT,
    API_ENDPOINT_INSTALL,
    API_ENDPOINT_KEYDOWN,
    API_ENDPOINT_KEYPRESS,
    API_ENDPOINT_KEYUP,
    API_ENDPOINT_LAUNCH,
    API_ENDPOINT_SEARCH,
)

_LOGGER = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Quote *value* as a single path segment (``/`` included)."""
    return quote(value, safe="")


def _require_app_id(app: App) -> str:
    if app.id is None:
        raise RokuArgumentError(f"app.id required (app {app.name!r} has no id)")
    return app.id


class ControlAPI:
    """Key events, app launch/install, input and search."""

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    async def key_down(self, key: RemoteKey) -> None:
        """Press and hold *key* until :meth:`key_up`."""
        await self._post(f"{API_ENDPOINT_KEYDOWN}{_segment(key_token(key))}")  # type: ignore[attr-defined]

    async def key_up(self, key: RemoteKey) -> None:
        """Release a key held with :meth:`key_down`."""
        await self._post(f"{API_ENDPOINT_KEYUP}{_segment(key_token(key))}")  # type: ignore[attr-defined]

    async def key_press(self, key: RemoteKey) -> None:
        """Press and release *key*."""
        await self._post(f"{API_ENDPOINT_KEYPRESS}{_segment(key_token(key))}")  # type: ignore[attr-defined]

    async def type_text(self, text: str) -> None:
        """Type *text* as a sequence of literal key presses.

        Characters are sent one request at a time, in order. The first failure
        propagates and the rest of the text is not sent.
        """
        for char in text:
            await self.key_press(Lit(char))

    # ------------------------------------------------------------------
    # Apps
    # ------------------------------------------------------------------

    async def launch(self, app: App) -> None:
        """Launch *app*.

        Raises:
            RokuArgumentError: If ``app.id`` is missing. Nothing is sent.
            RokuRequestError: If the request fails.
        """
        app_id = _require_app_id(app)
        _LOGGER.debug("Launching %s (%s)", app.name, app_id)
        await self._post(f"{API_ENDPOINT_LAUNCH}{_segment(app_id)}")  # type: ignore[attr-defined]

    async def install(self, app: App) -> None:
        """Open the channel store install page for *app*.

        Raises:
            RokuArgumentError: If ``app.id`` is missing. Nothing is sent.
            RokuRequestError: If the request fails.
        """
        app_id = _require_app_id(app)
        _LOGGER.debug("Installing %s (%s)", app.name, app_id)
        await self._post(f"{API_ENDPOINT_INSTALL}{_segment(app_id)}")  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Input / search
    # ------------------------------------------------------------------

    async def send_input(self, pairs: list[tuple[str, str]]) -> None:
        """Send arbitrary key/value pairs to the ``input`` endpoint.

        Pairs are passed through verbatim and in order; only standard query
        encoding is applied by the transport.
        """
        await self._post(API_ENDPOINT_INPUT, params=list(pairs))  # type: ignore[attr-defined]

    async def search(self, params: SearchParameters) -> None:
        """Run a content search on the device.

        Args:
            params: Search keyword and filters.
        """
        await self._post(API_ENDPOINT_SEARCH, params=params.build())  # type: ignore[attr-defined]
