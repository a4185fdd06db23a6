"""Device discovery for Roku devices.

This module sends an SSDP M-SEARCH for the ``roku:ecp`` search target,
collects the LOCATION of every answer within a fixed window, and returns one
RokuClient per answer.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from aiohttp import ClientSession
from async_upnp_client.search import SsdpSearchListener

from .api.base import parse_base_url
from .api.constants import (
    DISCOVERY_MX,
    DISCOVERY_RESEND_INTERVAL,
    DISCOVERY_RETRANSMISSIONS,
    DISCOVERY_TIMEOUT,
    SSDP_SEARCH_TARGET,
)
from .client import RokuClient
from .exceptions import RokuAddressError, RokuDiscoveryError

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "discover_devices",
]


async def _collect_locations() -> list[str | None]:
    """Run one SSDP search window and return LOCATION headers in arrival order.

    Raises:
        RokuDiscoveryError: If the SSDP socket cannot be opened or used.
    """
    locations: list[str | None] = []

    def process_response(headers: Any) -> None:
        search_target = headers.get("st")
        if search_target and search_target != SSDP_SEARCH_TARGET:
            _LOGGER.debug("Ignoring SSDP response for search target %s", search_target)
            return
        location = headers.get("location")
        _LOGGER.debug("SSDP response received, location: %s", location)
        locations.append(location)

    listener = SsdpSearchListener(
        callback=process_response,
        timeout=DISCOVERY_MX,
        search_target=SSDP_SEARCH_TARGET,
    )

    try:
        await listener.async_start()
    except OSError as err:
        raise RokuDiscoveryError("Failed to open SSDP socket", last_error=err) from err

    try:
        listener.async_search()
        for _ in range(DISCOVERY_RETRANSMISSIONS):
            await asyncio.sleep(DISCOVERY_RESEND_INTERVAL)
            listener.async_search()
        await asyncio.sleep(DISCOVERY_TIMEOUT - DISCOVERY_RETRANSMISSIONS * DISCOVERY_RESEND_INTERVAL)
    except OSError as err:
        raise RokuDiscoveryError("Failed to send SSDP search", last_error=err) from err
    finally:
        listener.async_stop()

    return locations


async def discover_devices(
    session: ClientSession | None = None,
    deduplicate: bool = False,
) -> list[RokuClient]:
    """Discover Roku devices on the local network.

    The search window (3 seconds) and retransmission count (2) are fixed.

    Args:
        session: Optional aiohttp ClientSession shared by every returned client.
        deduplicate: Keep only the first client per base address. By default
            every answer yields a client, so a device answering several
            retransmissions appears several times.

    Returns:
        Clients in the order the answers arrived. Empty if nothing answered.

    Raises:
        RokuDiscoveryError: If the SSDP transport fails.
        RokuAddressError: If any answer carries a missing or malformed LOCATION.
            No clients are returned in that case.
    """
    _LOGGER.info("Starting SSDP discovery for %s (window=%ss)...", SSDP_SEARCH_TARGET, DISCOVERY_TIMEOUT)
    locations = await _collect_locations()

    devices: list[RokuClient] = []
    seen_urls: set[str] = set()
    for location in locations:
        if not location:
            raise RokuAddressError("SSDP response has no LOCATION header")
        base_url = parse_base_url(location)
        if deduplicate and base_url in seen_urls:
            _LOGGER.debug("Already seen %s, skipping", base_url)
            continue
        seen_urls.add(base_url)
        devices.append(RokuClient(base_url, session=session))

    _LOGGER.info("SSDP discovery found %d device(s)", len(devices))
    return devices
