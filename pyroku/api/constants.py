"""Roku ECP constants.

This module contains the endpoint paths and discovery tuning values used for
communicating with Roku devices over the External Control Protocol.
"""

from __future__ import annotations

# ECP listens on a fixed port on every Roku device
DEFAULT_PORT = 8060
DEFAULT_SCHEME = "http"

# Query endpoints (GET, XML body)
API_ENDPOINT_APPS = "query/apps"
API_ENDPOINT_ACTIVE_APP = "query/active-app"
API_ENDPOINT_MEDIA_PLAYER = "query/media-player"
API_ENDPOINT_DEVICE_INFO = "query/device-info"

# Command endpoints (POST, body ignored)
API_ENDPOINT_KEYDOWN = "keydown/"
API_ENDPOINT_KEYUP = "keyup/"
API_ENDPOINT_KEYPRESS = "keypress/"
API_ENDPOINT_LAUNCH = "launch/"
API_ENDPOINT_INSTALL = "install/"
API_ENDPOINT_INPUT = "input"
API_ENDPOINT_SEARCH = "search"

# Root element expected for each query document
XML_ROOT_APPS = "apps"
XML_ROOT_ACTIVE_APP = "active-app"
XML_ROOT_MEDIA_PLAYER = "player"
XML_ROOT_DEVICE_INFO = "device-info"

# SSDP discovery. Roku answers the custom "roku:ecp" search target only.
SSDP_SEARCH_TARGET = "roku:ecp"
DISCOVERY_TIMEOUT = 3  # seconds, total listening window
DISCOVERY_MX = 2  # seconds, max answer delay requested from devices
DISCOVERY_RETRANSMISSIONS = 2
# Last resend goes out at RETRANSMISSIONS * INTERVAL; answers to it land within MX of that, inside the window
DISCOVERY_RESEND_INTERVAL = 0.5
