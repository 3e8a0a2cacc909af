"""Utility modules for tracksource.

- **concurrency** -- bounded fan-out returning explicit Success/Failure outcomes.
- **duration** -- ``M:SS`` / ``H:MM:SS`` parsing into milliseconds.
- **errors** -- exception hierarchy rooted at TrackSourceError.
- **logging** -- structlog setup with console/JSON renderers.
- **matching** -- case-insensitive title filters for video search hits.
"""

from tracksource.utils.concurrency import (
    Failure,
    Success,
    failures,
    settle,
    successes,
    throttled_gather,
)
from tracksource.utils.duration import format_duration_ms, parse_duration_ms
from tracksource.utils.errors import (
    CredentialExtractionError,
    FeedResolutionError,
    ShelfParseError,
    TrackSourceError,
    TransportError,
    ValidationError,
)
from tracksource.utils.logging import configure_logging, get_logger
from tracksource.utils.matching import all_artists_in, any_artist_in, is_spatial_remix, title_matches

__all__ = [
    "CredentialExtractionError",
    "Failure",
    "FeedResolutionError",
    "ShelfParseError",
    "Success",
    "TrackSourceError",
    "TransportError",
    "ValidationError",
    "all_artists_in",
    "any_artist_in",
    "configure_logging",
    "failures",
    "format_duration_ms",
    "get_logger",
    "is_spatial_remix",
    "parse_duration_ms",
    "settle",
    "successes",
    "throttled_gather",
    "title_matches",
]
