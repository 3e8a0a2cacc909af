"""Interfaces for every external collaborator of the search core.

    Interface              →  Concrete implementation (tracksource/providers/)
    ─────────────────────────────────────────────────────────────────────
    ICredentialProvider    →  InnertubeKeyProvider
    IVideoSearchProvider   →  YtDlpSearchProvider
    IFeedProvider          →  YtDlpFeedProvider
    ICacheProvider         →  MemoryCacheProvider
    ITrackSource           →  YouTubeMusicSource, YouTubeSource
"""

from tracksource.interfaces.cache_provider import ICacheProvider
from tracksource.interfaces.credential_provider import ICredentialProvider
from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.interfaces.track_source import ITrackSource, SourceMeta
from tracksource.interfaces.video_search_provider import IVideoSearchProvider, VideoSearchHit

__all__ = [
    "FeedOptions",
    "ICacheProvider",
    "ICredentialProvider",
    "IFeedProvider",
    "ITrackSource",
    "IVideoSearchProvider",
    "SourceMeta",
    "VideoSearchHit",
]
