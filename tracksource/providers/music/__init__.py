"""Track sources: YouTube Music shelf search and YouTube multi-query search."""

from tracksource.providers.music.youtube_music_client import YouTubeMusicClient
from tracksource.providers.music.youtube_music_provider import YouTubeMusicSource
from tracksource.providers.music.youtube_provider import YouTubeSource

__all__ = ["YouTubeMusicClient", "YouTubeMusicSource", "YouTubeSource"]
