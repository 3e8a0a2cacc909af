"""Wiring for tracksource: builds the HTTP client, providers and sources.

Callers that want both backends ready to use::

    settings = load_settings()
    async with build_http_client(settings) as http_client:
        sources = build_sources(settings, http_client)
        results = await sources["yt_music"].search(["Artist"], "Track", 225000)
"""

from __future__ import annotations

import httpx

from tracksource.config.settings import Settings
from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.interfaces.track_source import ITrackSource
from tracksource.interfaces.video_search_provider import IVideoSearchProvider
from tracksource.models.candidates import RankedCandidate
from tracksource.providers.cache.memory_cache import MemoryCacheProvider
from tracksource.providers.credentials.innertube_key_provider import InnertubeKeyProvider
from tracksource.providers.feeds.ytdlp_feed_provider import YtDlpFeedProvider
from tracksource.providers.music.youtube_music_client import YouTubeMusicClient
from tracksource.providers.music.youtube_music_provider import YouTubeMusicSource
from tracksource.providers.music.youtube_provider import YouTubeSource
from tracksource.providers.search.ytdlp_search_provider import YtDlpSearchProvider
from tracksource.services.multi_query import MultiQueryOrchestrator
from tracksource.utils.errors import ValidationError
from tracksource.utils.logging import get_logger

_logger = get_logger(__name__)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared async client; sends the desktop user agent on every request."""
    return httpx.AsyncClient(
        headers={"user-agent": settings.user_agent},
        timeout=settings.ytmusic_request_timeout,
    )


def build_feed_options(settings: Settings) -> FeedOptions:
    return FeedOptions(
        socket_timeout=settings.feed_socket_timeout,
        retries=settings.feed_retries,
        cache_enabled=settings.feed_cache_enabled,
    )


def build_sources(
    settings: Settings,
    http_client: httpx.AsyncClient,
    feed_provider: IFeedProvider | None = None,
    search_provider: IVideoSearchProvider | None = None,
) -> dict[str, ITrackSource]:
    """Build every track source keyed by its id."""
    feed_provider = feed_provider or YtDlpFeedProvider()
    feed_options = build_feed_options(settings)

    credentials = InnertubeKeyProvider(
        http_client,
        settings,
        cache=MemoryCacheProvider(max_size=1, ttl=settings.credential_ttl),
    )
    ytmusic = YouTubeMusicSource(
        YouTubeMusicClient(http_client, credentials, settings),
        feed_provider,
        feed_options=feed_options,
    )

    orchestrator = MultiQueryOrchestrator(
        search_provider or YtDlpSearchProvider(results_per_page=settings.youtube_results_per_page),
        concurrency=settings.youtube_query_concurrency,
        per_query_limit=settings.youtube_results_per_query,
        page_start=settings.youtube_page_start,
        page_end=settings.youtube_page_end,
    )
    youtube = YouTubeSource(orchestrator, feed_provider, feed_options=feed_options)

    sources: dict[str, ITrackSource] = {source.get_provider_name(): source for source in (ytmusic, youtube)}
    _logger.debug("sources_built", sources=sorted(sources))
    return sources


async def run_search(
    settings: Settings,
    source_id: str,
    artists: list[str],
    track: str,
    duration_ms: float,
) -> list[RankedCandidate]:
    """One-shot search that owns (and closes) its HTTP client."""
    async with build_http_client(settings) as http_client:
        sources = build_sources(settings, http_client)
        source = sources.get(source_id)
        if source is None:
            raise ValidationError(
                f"Unknown source '{source_id}'; expected one of {sorted(sources)}"
            )
        return await source.search(artists, track, duration_ms)
