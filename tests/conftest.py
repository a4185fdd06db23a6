"""Pytest configuration and fixtures for pyroku tests.

This module provides fixtures for both unit tests (with mocks) and
integration tests (with real devices).

Configuration is loaded from tests/devices.yaml, with environment
variable overrides supported for CI/CD flexibility.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import yaml
from aiohttp import ClientSession

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# ============================================================================
# Configuration Loading
# ============================================================================

TESTS_DIR = Path(__file__).parent
CONFIG_FILE = TESTS_DIR / "devices.yaml"


def _load_config() -> dict[str, Any]:
    """Load test configuration from devices.yaml."""
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE) as f:
            return yaml.safe_load(f) or {}
    return {}


_CONFIG = _load_config()

# Environment variables override config file
# Example: ROKU_TEST_DEVICE=192.168.1.20 pytest tests/integration/
ROKU_TEST_DEVICE = os.getenv("ROKU_TEST_DEVICE") or _CONFIG.get("default_device")
ROKU_TEST_PORT = int(os.getenv("ROKU_TEST_PORT", str(_CONFIG.get("port", 8060))))

_settings = _CONFIG.get("settings", {})
REQUEST_TIMEOUT = _settings.get("request_timeout", 5.0)


# ============================================================================
# Sample ECP documents
# ============================================================================

APPS_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<apps>
    <app id="31012" type="menu" version="1.9.32">Vudu Movie &amp; TV Store</app>
    <app id="12" subtype="ndka" type="appl" version="4.2.81179053">Netflix</app>
    <app id="2285" subtype="rsga" type="appl" version="6.30.2">Hulu</app>
    <app id="tvinput.hdmi1" type="tvin" version="1.0.0">HDMI 1</app>
</apps>
"""

ACTIVE_APP_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<active-app>
    <app id="12" subtype="ndka" type="appl" version="4.2.81179053">Netflix</app>
    <screensaver id="55545" type="ssvr" version="2.0.1">Default screensaver</screensaver>
</active-app>
"""

ACTIVE_APP_HOME_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<active-app>
    <app>Roku</app>
</active-app>
"""

MEDIA_PLAYER_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<player error="false" state="play">
    <plugin bandwidth="25395203 bps" id="12" name="Netflix"/>
    <format audio="eac3" captions="none" container="mp4" drm="widevine" video="hevc" video_res="3840x2160"/>
    <buffering current="1000" max="1000" target="0"/>
    <new_stream speed="128000 bps"/>
    <position>21125 ms</position>
    <duration>2556000 ms</duration>
    <is_live blocked="false">false</is_live>
    <runtime>2556000 ms</runtime>
    <stream_segment bitrate="15000000" media_sequence="5" segment_type="video" time="20020"/>
</player>
"""

MEDIA_PLAYER_IDLE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<player error="false" state="close"/>
"""

DEVICE_INFO_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<device-info>
    <udn>29380012-f00c-1003-80e4-d83134bf3e5a</udn>
    <serial-number>X004000AAAAA</serial-number>
    <device-id>S00920AAAAAA</device-id>
    <advertising-id>a1b2c3d4-0000-5555-9999-abcdefabcdef</advertising-id>
    <vendor-name>Roku</vendor-name>
    <model-name>Roku Ultra</model-name>
    <model-number>4800X</model-number>
    <model-region>US</model-region>
    <is-tv>false</is-tv>
    <is-stick>false</is-stick>
    <supports-ethernet>true</supports-ethernet>
    <wifi-mac>d8:31:34:bf:3e:5b</wifi-mac>
    <wifi-driver>realtek</wifi-driver>
    <ethernet-mac>d8:31:34:bf:3e:5a</ethernet-mac>
    <network-type>ethernet</network-type>
    <network-name>HomeNet</network-name>
    <user-device-name>Living Room Roku</user-device-name>
    <user-device-location>Living Room</user-device-location>
    <friendly-device-name>Living Room Roku</friendly-device-name>
    <friendly-model-name>Roku Ultra</friendly-model-name>
    <default-device-name>Roku Ultra - X004000AAAAA</default-device-name>
    <software-version>9.2.0</software-version>
    <software-build>4803</software-build>
    <build-number>AEA.00E04209A</build-number>
    <secure-device>true</secure-device>
    <language>en</language>
    <country>US</country>
    <locale>en_US</locale>
    <time-zone-auto>true</time-zone-auto>
    <time-zone>US/Eastern</time-zone>
    <time-zone-name>United States/Eastern</time-zone-name>
    <time-zone-tz>America/New_York</time-zone-tz>
    <time-zone-offset>-300</time-zone-offset>
    <clock-format>12-hour</clock-format>
    <uptime>1157640</uptime>
    <power-mode>PowerOn</power-mode>
    <supports-suspend>false</supports-suspend>
    <supports-find-remote>true</supports-find-remote>
    <find-remote-is-possible>true</find-remote-is-possible>
    <supports-audio-guide>true</supports-audio-guide>
    <supports-rva>true</supports-rva>
    <developer-enabled>false</developer-enabled>
    <keyed-developer-id/>
    <search-enabled>true</search-enabled>
    <search-channels-enabled>true</search-channels-enabled>
    <voice-search-enabled>true</voice-search-enabled>
    <notifications-enabled>true</notifications-enabled>
    <notifications-first-use>false</notifications-first-use>
    <supports-private-listening>true</supports-private-listening>
    <headphones-connected>false</headphones-connected>
    <supports-ecs-textedit>true</supports-ecs-textedit>
    <supports-ecs-microphone>true</supports-ecs-microphone>
    <supports-wake-on-wlan>false</supports-wake-on-wlan>
    <has-play-on-roku>true</has-play-on-roku>
    <has-mobile-screensaver>false</has-mobile-screensaver>
    <support-url>roku.com/support</support-url>
    <grandcentral-version>2.9.42</grandcentral-version>
    <davinci-version>2.8.20</davinci-version>
    <has-wifi-extender>false</has-wifi-extender>
    <has-wifi-5G-support>true</has-wifi-5G-support>
    <can-use-wifi-extender>true</can-use-wifi-extender>
    <trc-version>3.0</trc-version>
</device-info>
"""


# ============================================================================
# Unit Test Fixtures (Mocks)
# ============================================================================


@pytest.fixture
def apps_xml() -> str:
    return APPS_XML


@pytest.fixture
def active_app_xml() -> str:
    return ACTIVE_APP_XML


@pytest.fixture
def active_app_home_xml() -> str:
    return ACTIVE_APP_HOME_XML


@pytest.fixture
def media_player_xml() -> str:
    return MEDIA_PLAYER_XML


@pytest.fixture
def media_player_idle_xml() -> str:
    return MEDIA_PLAYER_IDLE_XML


@pytest.fixture
def device_info_xml() -> str:
    return DEVICE_INFO_XML


@pytest.fixture
def mock_aiohttp_session(request):
    """Mock aiohttp ClientSession for testing.

    This fixture creates a mock session that properly simulates aiohttp's
    ClientSession behavior, including proper cleanup to avoid resource warnings.
    """
    session = MagicMock(spec=ClientSession)
    session.closed = False
    session.close = AsyncMock()

    def cleanup():
        session.closed = True

    request.addfinalizer(cleanup)

    return session


@pytest.fixture
def mock_client(mock_aiohttp_session):
    """Create a RokuClient for testing.

    The `_request` coroutine is replaced so no HTTP call is ever made; tests
    set its return value to the XML body they need.
    """
    from pyroku.client import RokuClient

    client = RokuClient("http://192.168.1.20:8060/", session=mock_aiohttp_session)
    client._request = AsyncMock(return_value="")

    return client


def pytest_configure(config):
    """Configure pytest for integration tests."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires real device)",
    )
    config.addinivalue_line(
        "markers",
        "destructive: marks tests that change device state",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark integration tests."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# ============================================================================
# Integration Test Fixtures (Real Devices)
# ============================================================================


@pytest.fixture(scope="session")
def real_device_available():
    """Check if a real device is available for integration testing."""
    return ROKU_TEST_DEVICE is not None


@pytest.fixture
async def real_device_client(real_device_available):
    """Create a real RokuClient for integration testing.

    This fixture requires ROKU_TEST_DEVICE environment variable to be set.
    Example: ROKU_TEST_DEVICE=192.168.1.20 pytest tests/integration/

    Yields:
        RokuClient instance pointed at the real device.

    Raises:
        pytest.skip: If no real device is configured.
    """
    if not real_device_available:
        pytest.skip("No real device configured. Set ROKU_TEST_DEVICE environment variable.")

    from pyroku.client import RokuClient

    client = RokuClient.from_host(ROKU_TEST_DEVICE, port=ROKU_TEST_PORT, timeout=REQUEST_TIMEOUT)

    yield client

    await client.close()


# ============================================================================
# Helper Functions for Testing
# ============================================================================


def create_mock_response(text: str, status: int = 200) -> MagicMock:
    """Create a mock aiohttp response usable as ``async with session.request(...)``.

    Args:
        text: Body text to return.
        status: HTTP status code.

    Returns:
        Mock async context manager yielding the response.
    """
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "text/xml; charset=utf-8"}
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def mock_http_response():
    """Factory fixture wrapping :func:`create_mock_response`."""
    return create_mock_response
