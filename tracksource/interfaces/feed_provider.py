"""Abstract base class for feed (downloadable stream) providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeedOptions:
    """Options every feed lookup is issued with.

    The defaults are the fixed values the search backends use: a 20 second
    socket timeout, 20 retries and no on-disk cache.
    """

    socket_timeout: int = 20
    retries: int = 20
    cache_enabled: bool = False

    def as_cli_args(self) -> list[str]:
        """Render as command-line switches (for logging and CLI parity)."""
        args = [f"--socket-timeout={self.socket_timeout}", f"--retries={self.retries}"]
        if not self.cache_enabled:
            args.append("--no-cache-dir")
        return args


class IFeedProvider(ABC):
    """Contract for resolving downloadable feeds of a media item."""

    @abstractmethod
    async def get_feeds(self, target: str, options: FeedOptions) -> dict[str, Any]:
        """Fetch feed information for *target* (an id or a watch URL).

        Returns
        -------
        dict
            Provider info document describing the available formats.

        Raises
        ------
        tracksource.utils.errors.FeedResolutionError
            If the lookup fails.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier such as ``"yt_dlp"``."""
