"""Shelf sections and pagination cursors for the YouTube Music backend.

A search response is split into shelves ("Top result", "Songs", ...).  Each
becomes a :class:`ShelfSection` keyed by :func:`category_key`.  Pagination is
modelled as data: a section may carry a ``continuation`` cursor (next page of
the same shelf) and/or an ``expansion`` cursor (the shelf's "show all"
search).  Following a cursor is the provider's job; sections never hold
callables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from tracksource.models.candidates import CandidateRecord


class ShelfCategory(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    TOP = "top"
    SONGS = "songs"
    VIDEOS = "videos"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"
    OTHER = "other"


_LABEL_CATEGORIES = {
    "Top result": ShelfCategory.TOP,
    "Songs": ShelfCategory.SONGS,
    "Videos": ShelfCategory.VIDEOS,
    "Albums": ShelfCategory.ALBUMS,
    "Artists": ShelfCategory.ARTISTS,
    "Playlists": ShelfCategory.PLAYLISTS,
}


def category_for(label: str | None) -> ShelfCategory:
    """Map a shelf title to its canonical category."""
    if label is None:
        return ShelfCategory.OTHER
    return _LABEL_CATEGORIES.get(label, ShelfCategory.OTHER)


def category_key(label: str | None) -> str:
    """Return the mapping key for a shelf titled *label*.

    Known titles map to their category value.  Unknown titles keep the label
    for diagnostics (``"other(Episodes)"``); untitled shelves, which is what
    every continuation response contains, map to plain ``"other"``.
    """
    category = category_for(label)
    if category is not ShelfCategory.OTHER:
        return category.value
    return f"other({label})" if label else "other"


def singularize(label: str) -> str:
    """Shelf title to item type: ``"Songs"`` -> ``"Song"``."""
    return label[:-1]


@dataclass(frozen=True)
class ShelfCursor:
    """An unfollowed page of a shelf.

    ``kind`` is ``"continuation"`` (send ``params`` with an empty payload) or
    ``"expand"`` (send ``payload``, the shelf's own search endpoint).
    ``type_override`` is the item type every row of the fetched page is
    parsed as, since continuation rows carry no discriminator column.
    """

    kind: Literal["continuation", "expand"]
    type_override: str | None
    payload: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)


class ShelfSection(BaseModel):
    """One category of a parsed search response."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    category: ShelfCategory
    label: str | None = None
    items: tuple[CandidateRecord, ...] = ()
    continuation: ShelfCursor | None = None
    expansion: ShelfCursor | None = None
    skipped: int = 0    # items dropped because they could not be parsed

    @property
    def can_load_more(self) -> bool:
        return self.continuation is not None

    @property
    def can_expand(self) -> bool:
        return self.expansion is not None


def empty_section(category: ShelfCategory = ShelfCategory.OTHER) -> ShelfSection:
    return ShelfSection(category=category)
