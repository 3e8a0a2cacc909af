"""Unit tests for YouTubeSource classification and search."""

from __future__ import annotations

import pytest

from tests.conftest import make_hit
from tracksource.models.candidates import CandidateType
from tracksource.models.query import SearchQuery
from tracksource.providers.music.youtube_provider import YouTubeSource
from tracksource.services.multi_query import MultiQueryOrchestrator
from tracksource.utils.errors import ValidationError


@pytest.fixture
def query() -> SearchQuery:
    return SearchQuery.create(["Artist"], "Track", 200000)


class TestClassify:
    def test_duration_only(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", author="Uploader", views=10, seconds=100),
                make_hit("b", "Artist - Track", author="Uploader", views=500, seconds=200)]
        ranked = YouTubeSource.classify(hits, query)

        assert [c.video_id for c in ranked] == ["b", "a"]
        assert ranked[1].accuracy == pytest.approx(50.0)

    def test_artist_in_channel_bonus(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", author="Artist - Topic", views=1, seconds=100),
                make_hit("b", "Artist - Track", author="Other", views=2, seconds=100)]
        ranked = {c.video_id: c for c in YouTubeSource.classify(hits, query)}

        assert ranked["a"].accuracy == pytest.approx(80.0)
        assert ranked["b"].accuracy == pytest.approx(80.0)  # most views

    def test_both_bonuses(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", author="ARTIST VEVO", views=999, seconds=100)]
        assert YouTubeSource.classify(hits, query)[0].accuracy == pytest.approx(92.0)

    def test_any_credited_artist_counts(self) -> None:
        query = SearchQuery.create(["Artist A", "Artist B"], "Track", 200000)
        hits = [make_hit("a", "Artist A & Artist B - Track", author="Artist B", views=None, seconds=100)]
        assert YouTubeSource.classify(hits, query)[0].accuracy == pytest.approx(80.0)

    def test_views_tie_both_get_bonus(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", views=100, seconds=100),
                make_hit("b", "Artist - Track", views=100, seconds=100)]
        assert [c.accuracy for c in YouTubeSource.classify(hits, query)] == pytest.approx([80.0, 80.0])

    def test_unknown_views_never_get_bonus(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", views=None, seconds=100)]
        assert YouTubeSource.classify(hits, query)[0].accuracy == pytest.approx(50.0)

    def test_unknown_seconds_treated_as_zero(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", views=None, seconds=None)]
        candidate = YouTubeSource.classify(hits, query)[0]
        assert candidate.accuracy == pytest.approx(0.0)
        assert candidate.duration is None
        assert candidate.duration_ms == 0

    def test_duplicates_keep_first_and_most_views_counts_all(self, query) -> None:
        hits = [make_hit("a", "Artist - Track", views=10, seconds=100),
                make_hit("b", "Artist - Track", views=20, seconds=200),
                make_hit("a", "Artist - Track", views=999, seconds=200)]
        ranked = YouTubeSource.classify(hits, query)

        assert [c.video_id for c in ranked] == ["b", "a"]
        assert ranked[1].views == 10
        # the duplicate held the batch maximum, so "b" misses the views bonus
        assert ranked[0].accuracy == pytest.approx(100.0)
        assert ranked[1].accuracy == pytest.approx(50.0)

    def test_candidate_fields(self, query) -> None:
        hit = make_hit("a", "Artist - Track", author="Chan", views=5, seconds=225)
        candidate = YouTubeSource.classify([hit], query)[0]

        assert candidate.source == "youtube"
        assert candidate.type is CandidateType.VIDEO
        assert candidate.author == "Chan"
        assert candidate.duration == "3:45"
        assert candidate.duration_ms == 225000
        assert candidate.url == "https://www.youtube.com/watch?v=a"

    def test_empty_batch(self, query) -> None:
        assert YouTubeSource.classify([], query) == []


class TestSearch:
    @pytest.mark.asyncio
    async def test_end_to_end_with_mock_provider(self, mock_search_provider, mock_feed_provider) -> None:
        mock_search_provider.search.return_value = [
            make_hit("x", "Artist - Track (Official Audio)", author="Artist", views=50, seconds=200),
            make_hit("y", "Artist - Track", author="Fan", views=10, seconds=150),
        ]
        source = YouTubeSource(MultiQueryOrchestrator(mock_search_provider), mock_feed_provider)

        results = await source.search(["Artist"], "Track", 200000)

        assert [c.video_id for c in results] == ["x", "y"]
        assert results[0].filters == ("Official Audio",)
        assert all(c.has_feed_resolver for c in results)
        mock_feed_provider.get_feeds.assert_not_awaited()

        await results[1].get_feeds()
        assert mock_feed_provider.get_feeds.await_args.args[0] == "y"

    @pytest.mark.asyncio
    async def test_all_sub_queries_failing_returns_empty(self, mock_search_provider, mock_feed_provider) -> None:
        mock_search_provider.search.side_effect = RuntimeError("offline")
        source = YouTubeSource(MultiQueryOrchestrator(mock_search_provider), mock_feed_provider)
        assert await source.search(["Artist"], "Track", 200000) == []

    @pytest.mark.asyncio
    async def test_validation(self, mock_search_provider, mock_feed_provider) -> None:
        source = YouTubeSource(MultiQueryOrchestrator(mock_search_provider), mock_feed_provider)
        with pytest.raises(ValidationError):
            await source.search("Artist", "Track", 200000)
        with pytest.raises(ValidationError):
            await source.search(["Artist"], "   ", 200000)
        mock_search_provider.search.assert_not_awaited()

    def test_meta(self, mock_search_provider, mock_feed_provider) -> None:
        source = YouTubeSource(MultiQueryOrchestrator(mock_search_provider), mock_feed_provider)
        assert source.get_provider_name() == "youtube"
        assert source.META.description == "YouTube"
