"""Builder for the ECP ``search`` command's query parameters.

The device expects the parameters in a fixed order with protocol-specific
formatting, so all of that lives in :meth:`SearchParameters.build`; the setters
only record values.

Example:
    ```python
    params = (
        SearchParameters("The Mandalorian")
        .search_type(SearchType.TV_SHOW)
        .season(2)
        .provider_id("291097")
        .launch(True)
    )
    await client.search(params)
    ```
"""

from __future__ import annotations

from enum import Enum

from .exceptions import RokuArgumentError

__all__ = ["SearchParameters", "SearchType"]


class SearchType(str, Enum):
    """Content type filter. The value is the wire token."""

    MOVIE = "movie"
    TV_SHOW = "tv-show"
    PERSON = "person"
    CHANNEL = "channel"
    GAME = "game"


def _bool_token(value: bool) -> str:
    return "true" if value else "false"


class SearchParameters:
    """Fluent accumulator for search filters.

    Every setter returns the builder. ``provider`` and ``provider_id`` append
    to their list instead of replacing it.
    """

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        self._launch: bool | None = None
        self._match_any: bool | None = None
        self._providers: list[str] | None = None
        self._provider_ids: list[str] | None = None
        self._search_type: SearchType | None = None
        self._season: int | None = None
        self._show_unavailable: bool | None = None
        self._title: str | None = None
        self._tmsid: str | None = None

    def launch(self, launch: bool) -> SearchParameters:
        """Launch the first matching result automatically."""
        self._launch = launch
        return self

    def match_any(self, match_any: bool) -> SearchParameters:
        self._match_any = match_any
        return self

    def provider(self, provider: str) -> SearchParameters:
        """Add a provider (channel) name to search within."""
        if self._providers is None:
            self._providers = []
        self._providers.append(provider)
        return self

    def provider_id(self, provider_id: str) -> SearchParameters:
        """Add a provider (channel) id to search within."""
        if self._provider_ids is None:
            self._provider_ids = []
        self._provider_ids.append(provider_id)
        return self

    def search_type(self, search_type: SearchType) -> SearchParameters:
        self._search_type = SearchType(search_type)
        return self

    def season(self, season: int) -> SearchParameters:
        if season < 0:
            raise RokuArgumentError(f"season must not be negative, got {season}")
        self._season = season
        return self

    def show_unavailable(self, show_unavailable: bool) -> SearchParameters:
        self._show_unavailable = show_unavailable
        return self

    def title(self, title: str) -> SearchParameters:
        self._title = title
        return self

    def tmsid(self, tmsid: str) -> SearchParameters:
        """Restrict to one Gracenote (TMS) content id."""
        self._tmsid = tmsid
        return self

    def build(self) -> list[tuple[str, str]]:
        """Serialize to ordered ``(key, value)`` pairs.

        ``keyword`` always comes first; the remaining pairs appear only when
        set, always in protocol order.
        """
        params: list[tuple[str, str]] = [("keyword", self.keyword)]

        if self._launch is not None:
            params.append(("launch", _bool_token(self._launch)))
        if self._match_any is not None:
            params.append(("match-any", _bool_token(self._match_any)))
        if self._provider_ids is not None:
            params.append(("provider-id", ",".join(self._provider_ids)))
        if self._providers is not None:
            params.append(("provider", ",".join(self._providers)))
        if self._search_type is not None:
            params.append(("type", self._search_type.value))
        if self._season is not None:
            params.append(("season", str(self._season)))
        if self._show_unavailable is not None:
            params.append(("show-unavailable", _bool_token(self._show_unavailable)))
        if self._title is not None:
            params.append(("title", self._title))
        if self._tmsid is not None:
            params.append(("tmsid", self._tmsid))

        return params

    def __repr__(self) -> str:
        return f"SearchParameters({self.build()!r})"
