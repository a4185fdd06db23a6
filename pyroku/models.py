"""Pydantic models for Roku ECP query documents.

Each model mirrors one XML document (or one element of it) returned by the
device. Fields the device may omit are ``None`` when absent; nothing is
defaulted to a zero value. Models are frozen: they are snapshots of device
state, not something callers edit.

The XML is turned into plain dicts by :mod:`pyroku.api.parser` before
validation. In those dicts an element's attributes and leaf children are keys,
and the element's own text content is stored under :data:`TEXT_KEY`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TEXT_KEY = "#text"


def _hyphenate(field_name: str) -> str:
    """Map a python field name to its device-info wire name."""
    return field_name.replace("_", "-")


def _unwrap_text(value: Any) -> Any:
    """Return the text of an element that also carries attributes.

    Newer firmware decorates some scalar elements, e.g.
    ``<is_live blocked="false">true</is_live>``.
    """
    if isinstance(value, dict) and TEXT_KEY in value:
        return value[TEXT_KEY]
    return value


class _RokuModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ----------------------------------------------------------------------
# Apps
# ----------------------------------------------------------------------


class App(_RokuModel):
    """An installed channel, or a pseudo-app such as the home screen.

    The home screen is reported as ``<app>Roku</app>`` with no ``id``; it
    cannot be launched or installed.
    """

    id: str | None = None
    name: str = Field(alias=TEXT_KEY)
    version: str | None = None
    app_type: str | None = Field(None, alias="type")
    subtype: str | None = None


class AppList(_RokuModel):
    """Apps in the order the device listed them."""

    apps: list[App] = Field(default_factory=list, alias="app")


class Screensaver(_RokuModel):
    """Screensaver currently running on top of the active app."""

    id: str
    name: str = Field(alias=TEXT_KEY)
    screensaver_type: str = Field(alias="type")
    version: str
    black: bool | None = None


class ActiveApp(_RokuModel):
    """Foreground app, plus the screensaver if one is showing."""

    app: App
    screensaver: Screensaver | None = None


# ----------------------------------------------------------------------
# Media player
# ----------------------------------------------------------------------


class Buffering(_RokuModel):
    current: int
    max: int
    target: int


class Format(_RokuModel):
    audio: str
    captions: str
    container: str
    drm: str
    video: str
    video_res: str


class NewStream(_RokuModel):
    speed: str


class Plugin(_RokuModel):
    """The channel that owns the player."""

    bandwidth: str
    id: str
    name: str


class StreamSegment(_RokuModel):
    bitrate: int
    media_sequence: int
    segment_type: str
    time: int


class MediaPlayer(_RokuModel):
    """State of the device's media player (``<player>`` document).

    Only ``state`` is always reported; the rest appears while something is
    loaded or playing. Time values are kept as the device formats them
    (e.g. ``"21125 ms"``).
    """

    state: str
    error: bool | None = None
    buffering: Buffering | None = None
    format: Format | None = None
    new_stream: NewStream | None = None
    plugin: Plugin | None = None
    stream_segment: StreamSegment | None = None
    duration: str | None = None
    position: str | None = None
    runtime: str | None = None
    is_live: bool | None = None

    @field_validator("duration", "position", "runtime", "is_live", mode="before")
    @classmethod
    def _text_content(cls, value: Any) -> Any:
        return _unwrap_text(value)


# ----------------------------------------------------------------------
# Device info
# ----------------------------------------------------------------------


class DeviceInfo(_RokuModel):
    """Identity, capabilities and locale of the device (``<device-info>``).

    Wire names are the hyphenated field names. ``has_wifi_5g_support`` is the
    one exception and carries an explicit alias. Elements not listed here are
    ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=_hyphenate,
        protected_namespaces=(),
    )

    advertising_id: str
    build_number: str
    can_use_wifi_extender: bool
    clock_format: str
    country: str
    davinci_version: str
    default_device_name: str
    developer_enabled: bool
    device_id: str
    ethernet_mac: str | None = None
    find_remote_is_possible: bool
    friendly_device_name: str
    friendly_model_name: str
    grandcentral_version: str
    has_mobile_screensaver: bool
    has_play_on_roku: bool
    has_wifi_5g_support: bool = Field(alias="has-wifi-5G-support")
    has_wifi_extender: bool
    headphones_connected: bool
    is_stick: bool
    is_tv: bool
    keyed_developer_id: str
    language: str
    locale: str
    model_name: str
    model_number: str
    model_region: str
    network_name: str
    network_type: str
    notifications_enabled: bool
    notifications_first_use: bool
    power_mode: str
    search_channels_enabled: bool
    search_enabled: bool
    secure_device: bool
    serial_number: str
    software_build: str
    software_version: str
    support_url: str
    supports_audio_guide: bool
    supports_ecs_microphone: bool
    supports_ecs_textedit: bool
    supports_ethernet: bool
    supports_find_remote: bool
    supports_private_listening: bool
    supports_rva: bool
    supports_suspend: bool
    supports_wake_on_wlan: bool
    time_zone: str
    time_zone_auto: bool
    time_zone_name: str
    time_zone_offset: int
    time_zone_tz: str
    udn: str
    uptime: int
    user_device_location: str
    user_device_name: str
    vendor_name: str
    voice_search_enabled: bool
    wifi_driver: str
    wifi_mac: str
