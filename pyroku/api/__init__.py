"""HTTP transport, endpoint mixins and response parsing for the Roku client."""

from __future__ import annotations

from .base import BaseRokuClient
from .control import ControlAPI
from .query import QueryAPI

__all__ = ["BaseRokuClient", "ControlAPI", "QueryAPI"]
