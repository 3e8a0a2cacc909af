"""tracksource -- resolve a track into ranked YouTube / YouTube Music candidates.

Public surface::

    from tracksource import YouTubeMusicSource, YouTubeSource, build_sources

Each source's ``search(artists, track, duration_ms)`` returns
``RankedCandidate`` objects ordered by descending accuracy, each carrying an
unresolved ``get_feeds()``.
"""

from tracksource.main import build_http_client, build_sources, run_search
from tracksource.models.candidates import CandidateType, RankedCandidate
from tracksource.providers.music.youtube_music_provider import YouTubeMusicSource
from tracksource.providers.music.youtube_provider import YouTubeSource

__version__ = "0.1.0"

__all__ = [
    "CandidateType",
    "RankedCandidate",
    "YouTubeMusicSource",
    "YouTubeSource",
    "__version__",
    "build_http_client",
    "build_sources",
    "run_search",
]
