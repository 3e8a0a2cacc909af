"""Abstract base class for plain video search providers.

Used by the YouTube backend, which runs several keyword variations of a
query and ranks the union of the hits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class VideoSearchHit:
    """A single video returned by a search.

    Attributes
    ----------
    video_id:
        Provider identifier, the natural key for deduplication.
    title:
        Video title as displayed.
    author_name:
        Channel / uploader name.
    views:
        View count, ``None`` when the provider did not report it.
    seconds:
        Duration in seconds, ``None`` when unknown (e.g. live streams).
    url:
        Watch page URL.
    filters:
        Keywords of the sub-query that produced this hit.  Set by the
        multi-query orchestrator, empty when returned by a provider.
    """

    video_id: str
    title: str
    author_name: str = ""
    views: int | None = None
    seconds: int | None = None
    url: str | None = None
    filters: tuple[str, ...] = ()

    @property
    def timestamp(self) -> str | None:
        """Duration as ``M:SS`` / ``H:MM:SS``, or ``None`` when unknown."""
        if self.seconds is None:
            return None
        hours, rest = divmod(self.seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"


class IVideoSearchProvider(ABC):
    """Contract for keyword video search."""

    @abstractmethod
    async def search(self, query: str, page_start: int = 1, page_end: int = 1) -> list[VideoSearchHit]:
        """Search for *query* and return hits from pages ``page_start..page_end``.

        Raises
        ------
        tracksource.utils.errors.TransportError
            If the search could not be performed.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier such as ``"yt_dlp"``."""
