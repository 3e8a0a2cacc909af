"""YouTube Music track source.

One search request returns shelves ("Top result", "Songs", "Videos", ...).
The playable rows of the top, songs and videos shelves are deduplicated by
``videoId``, scored on duration agreement and item type, and returned with
lazy feed resolvers attached.

Shelves can be paged further on demand through their cursors:
:meth:`YouTubeMusicSource.load_more`, :meth:`YouTubeMusicSource.expand` and
the :meth:`YouTubeMusicSource.iter_pages` generator.  Nothing is prefetched.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any

from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.interfaces.track_source import ITrackSource, SourceMeta
from tracksource.models.candidates import (
    CandidateType,
    RankedCandidate,
    SongCandidate,
    VideoCandidate,
)
from tracksource.models.query import SearchQuery
from tracksource.models.shelf import ShelfCategory, ShelfCursor, ShelfSection, empty_section
from tracksource.providers.music.youtube_music_client import YouTubeMusicClient
from tracksource.services.feeds import DEFAULT_FEED_OPTIONS, attach_feed_resolvers
from tracksource.services.ranking import rank_candidates
from tracksource.services.scoring import shelf_accuracy
from tracksource.services.shelf_parser import ShelfParser
from tracksource.utils.duration import parse_duration_ms
from tracksource.utils.logging import get_logger

# Shelves whose rows are ranked, in the order they are folded.
_RANKED_SHELVES = (ShelfCategory.TOP, ShelfCategory.SONGS, ShelfCategory.VIDEOS)


class YouTubeMusicSource(ITrackSource):
    """Track source backed by the YouTube Music shelf search."""

    META = SourceMeta(id="yt_music", description="YouTube Music")

    def __init__(
        self,
        client: YouTubeMusicClient,
        feed_provider: IFeedProvider,
        parser: ShelfParser | None = None,
        feed_options: FeedOptions = DEFAULT_FEED_OPTIONS,
    ) -> None:
        self._client = client
        self._feed_provider = feed_provider
        self._parser = parser or ShelfParser(provider_name=self.META.id)
        self._feed_options = feed_options
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Shelf access
    # ------------------------------------------------------------------

    async def search_shelves(
        self,
        payload: Mapping[str, Any],
        params: Mapping[str, Any] | None = None,
        type_override: str | None = None,
    ) -> dict[str, ShelfSection]:
        """Issue one request and parse every shelf in the response."""
        response = await self._client.search(payload, params)
        return self._parser.parse(response, type_override)

    async def follow(self, cursor: ShelfCursor) -> ShelfSection:
        """Fetch the page behind *cursor*.

        Continuation and "show all" responses are untitled, so their rows
        land in the ``other`` bucket; that bucket is the page.
        """
        sections = await self.search_shelves(cursor.payload, cursor.params, cursor.type_override)
        return sections.get(ShelfCategory.OTHER.value) or empty_section()

    async def load_more(self, section: ShelfSection) -> ShelfSection | None:
        """Next page of *section*, or ``None`` when it has no continuation."""
        if section.continuation is None:
            return None
        return await self.follow(section.continuation)

    async def expand(self, section: ShelfSection) -> ShelfSection | None:
        """Full listing of *section*, or ``None`` when it cannot be expanded."""
        if section.expansion is None:
            return None
        return await self.follow(section.expansion)

    async def iter_pages(self, section: ShelfSection) -> AsyncIterator[ShelfSection]:
        """Yield successive continuation pages of *section*.

        Each page is fetched only when the consumer asks for it; stop
        iterating to stop fetching.
        """
        cursor = section.continuation
        while cursor is not None:
            page = await self.follow(cursor)
            yield page
            cursor = page.continuation

    # ------------------------------------------------------------------
    # ITrackSource implementation
    # ------------------------------------------------------------------

    async def search(
        self, artists: list[str], track: str, duration_ms: float
    ) -> list[RankedCandidate]:
        query = SearchQuery.create(artists, track, duration_ms)
        sections = await self.search_shelves({"query": query.text})

        playable: list[SongCandidate | VideoCandidate] = []
        skipped_unplayable = 0
        for category in _RANKED_SHELVES:
            for item in sections.get(category.value, empty_section(category)).items:
                if isinstance(item, (SongCandidate, VideoCandidate)):
                    playable.append(item)
                else:
                    skipped_unplayable += 1

        ranked = rank_candidates(
            playable,
            key=lambda item: item.link.video_id,
            build=lambda item: self._score(item, query),
            accuracy=lambda candidate: candidate.accuracy,
        )

        self._logger.info(
            "ytmusic_search_complete",
            query=query.text,
            shelves=sorted(sections),
            playable=len(playable),
            unplayable=skipped_unplayable,
            ranked=len(ranked),
        )
        return attach_feed_resolvers(ranked, self._feed_provider, self._feed_options)

    def _score(self, item: SongCandidate | VideoCandidate, query: SearchQuery) -> RankedCandidate:
        duration_ms = parse_duration_ms(item.duration)
        return RankedCandidate(
            source=self.META.id,
            video_id=item.link.video_id,
            playlist_id=item.link.playlist_id,
            title=item.title,
            type=item.type,
            artists=item.artists,
            album=item.album if isinstance(item, SongCandidate) else None,
            duration=item.duration,
            duration_ms=duration_ms,
            accuracy=shelf_accuracy(CandidateType(item.type), duration_ms, query.duration_ms),
        )
