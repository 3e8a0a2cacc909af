"""Feed provider implementations."""

from tracksource.providers.feeds.ytdlp_feed_provider import YtDlpFeedProvider

__all__ = ["YtDlpFeedProvider"]
