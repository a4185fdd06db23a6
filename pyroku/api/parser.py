"""XML response parsing for Roku ECP query endpoints.

ECP answers queries with small XML documents. Parsing happens in two steps:
ElementTree turns the body into elements, :func:`element_to_dict` flattens
them into plain dicts, and the pydantic models in :mod:`pyroku.models` validate
the dicts. Any failure along the way becomes :class:`RokuInvalidDataError`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import RokuInvalidDataError
from ..models import TEXT_KEY, ActiveApp, AppList, DeviceInfo, MediaPlayer
from .constants import (
    XML_ROOT_ACTIVE_APP,
    XML_ROOT_APPS,
    XML_ROOT_DEVICE_INFO,
    XML_ROOT_MEDIA_PLAYER,
)

_LOGGER = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def parse_xml(text: str, expected_root: str) -> ET.Element:
    """Parse *text* and check that its root element is *expected_root*."""
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as err:
        raise RokuInvalidDataError(f"Malformed XML in <{expected_root}> response: {err}") from err

    if root.tag != expected_root:
        raise RokuInvalidDataError(f"Expected <{expected_root}> document, got <{root.tag}>")
    return root


def element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Flatten an element into a dict suitable for model validation.

    - attributes become keys,
    - a child with neither attributes nor children becomes ``tag: text``,
    - any other child becomes ``tag: dict`` (recursively),
    - a tag seen more than once collects its values in a list,
    - the element's own text is stored under ``TEXT_KEY`` when it has no
      children.
    """
    result: dict[str, Any] = dict(element.attrib)

    for child in element:
        if child.attrib or len(child):
            value: Any = element_to_dict(child)
        else:
            value = (child.text or "").strip()

        if child.tag in result:
            existing = result[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[child.tag] = [existing, value]
        else:
            result[child.tag] = value

    if not len(element):
        result[TEXT_KEY] = (element.text or "").strip()

    return result


def _validate(model: type[_ModelT], data: dict[str, Any]) -> _ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as err:
        _LOGGER.debug("Validation of %s failed for %s", model.__name__, data)
        raise RokuInvalidDataError(f"Invalid {model.__name__} document: {err}") from err


def parse_apps(text: str) -> AppList:
    """Decode a ``query/apps`` body."""
    root = parse_xml(text, XML_ROOT_APPS)
    apps = [element_to_dict(child) for child in root.findall("app")]
    return _validate(AppList, {"app": apps})


def parse_active_app(text: str) -> ActiveApp:
    """Decode a ``query/active-app`` body."""
    root = parse_xml(text, XML_ROOT_ACTIVE_APP)
    data: dict[str, Any] = {}
    for tag in ("app", "screensaver"):
        child = root.find(tag)
        if child is not None:
            data[tag] = element_to_dict(child)
    return _validate(ActiveApp, data)


def parse_media_player(text: str) -> MediaPlayer:
    """Decode a ``query/media-player`` body."""
    root = parse_xml(text, XML_ROOT_MEDIA_PLAYER)
    return _validate(MediaPlayer, element_to_dict(root))


def parse_device_info(text: str) -> DeviceInfo:
    """Decode a ``query/device-info`` body."""
    root = parse_xml(text, XML_ROOT_DEVICE_INFO)
    return _validate(DeviceInfo, element_to_dict(root))
