"""Remote-control keys understood by the ECP keypress/keydown/keyup endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import RokuArgumentError

__all__ = ["Key", "Lit", "RemoteKey", "key_token"]


class Key(str, Enum):
    """Named remote keys. The value is the wire token."""

    BACK = "Back"
    BACKSPACE = "Backspace"
    CHANNEL_DOWN = "ChannelDown"
    CHANNEL_UP = "ChannelUp"
    DOWN = "Down"
    ENTER = "Enter"
    FIND_REMOTE = "FindRemote"
    FWD = "Fwd"
    HOME = "Home"
    INFO = "Info"
    INPUT_AV1 = "InputAV1"
    INPUT_HDMI1 = "InputHDMI1"
    INPUT_HDMI2 = "InputHDMI2"
    INPUT_HDMI3 = "InputHDMI3"
    INPUT_HDMI4 = "InputHDMI4"
    INPUT_TUNER = "InputTuner"
    INSTANT_REPLAY = "InstantReplay"
    LEFT = "Left"
    PLAY = "Play"
    POWER_OFF = "PowerOff"
    REV = "Rev"
    RIGHT = "Right"
    SEARCH = "Search"
    SELECT = "Select"
    UP = "Up"
    VOLUME_DOWN = "VolumeDown"
    VOLUME_MUTE = "VolumeMute"
    VOLUME_UP = "VolumeUp"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Lit:
    """A literal character key, used to type text one character at a time."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise RokuArgumentError(f"Lit key takes exactly one character, got {self.char!r}")

    def __str__(self) -> str:
        return f"Lit_{self.char}"


RemoteKey = Union[Key, Lit]


def key_token(key: RemoteKey) -> str:
    """Return the wire token for *key* (``Key.HOME`` -> ``"Home"``, ``Lit("a")`` -> ``"Lit_a"``)."""
    if isinstance(key, Lit):
        return f"Lit_{key.char}"
    try:
        return Key(key).value
    except ValueError as err:
        raise RokuArgumentError(f"Unknown remote key: {key!r}") from err
