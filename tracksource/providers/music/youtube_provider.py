"""YouTube track source.

Runs the multi-query fan-out against a plain video search, then scores the
union of the hits: duration agreement, bumped when a credited artist appears
in the channel name, bumped again for the most viewed hit of the batch.
"""

from __future__ import annotations

from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.interfaces.track_source import ITrackSource, SourceMeta
from tracksource.interfaces.video_search_provider import VideoSearchHit
from tracksource.models.candidates import CandidateType, RankedCandidate
from tracksource.models.query import SearchQuery
from tracksource.services.feeds import DEFAULT_FEED_OPTIONS, attach_feed_resolvers
from tracksource.services.multi_query import MultiQueryOrchestrator
from tracksource.services.ranking import rank_candidates
from tracksource.services.scoring import video_accuracy
from tracksource.utils.logging import get_logger
from tracksource.utils.matching import any_artist_in


class YouTubeSource(ITrackSource):
    """Track source backed by keyword video search."""

    META = SourceMeta(id="youtube", description="YouTube")

    def __init__(
        self,
        orchestrator: MultiQueryOrchestrator,
        feed_provider: IFeedProvider,
        feed_options: FeedOptions = DEFAULT_FEED_OPTIONS,
    ) -> None:
        self._orchestrator = orchestrator
        self._feed_provider = feed_provider
        self._feed_options = feed_options
        self._logger = get_logger(__name__)

    async def search(
        self, artists: list[str], track: str, duration_ms: float
    ) -> list[RankedCandidate]:
        query = SearchQuery.create(artists, track, duration_ms)
        hits = await self._orchestrator.collect(query)
        ranked = self.classify(hits, query)
        self._logger.info(
            "youtube_search_complete",
            query=query.text,
            hits=len(hits),
            ranked=len(ranked),
        )
        return attach_feed_resolvers(ranked, self._feed_provider, self._feed_options)

    @classmethod
    def classify(cls, hits: list[VideoSearchHit], query: SearchQuery) -> list[RankedCandidate]:
        """Deduplicate by video id, score and order *hits*.

        The most-viewed check looks at the whole batch, duplicates included.
        Hits with an unknown view count never receive that bonus.
        """
        known_views = [hit.views for hit in hits if hit.views is not None]
        highest_views = max(known_views) if known_views else None

        def _build(hit: VideoSearchHit) -> RankedCandidate:
            seconds = hit.seconds or 0
            return RankedCandidate(
                source=cls.META.id,
                video_id=hit.video_id,
                title=hit.title,
                type=CandidateType.VIDEO,
                author=hit.author_name,
                views=hit.views,
                url=hit.url,
                duration=hit.timestamp,
                duration_ms=float(seconds * 1000),
                filters=hit.filters,
                accuracy=video_accuracy(
                    seconds,
                    query.duration_ms,
                    artist_in_channel=any_artist_in(hit.author_name, query.artists),
                    has_most_views=hit.views is not None and hit.views == highest_views,
                ),
            )

        return rank_candidates(
            hits,
            key=lambda hit: hit.video_id,
            build=_build,
            accuracy=lambda candidate: candidate.accuracy,
        )
