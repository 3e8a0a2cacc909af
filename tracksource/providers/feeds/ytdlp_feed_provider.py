"""Feed resolution through yt-dlp.

``get_feeds`` extracts the info document (formats, thumbnails, metadata) of
a single video without downloading it.  Runs in ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
from typing import Any

from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError

from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.utils.errors import FeedResolutionError
from tracksource.utils.logging import get_logger

_PROVIDER_NAME = "yt_dlp"
_WATCH_URL = "https://www.youtube.com/watch?v={}"


def ydl_params(options: FeedOptions) -> dict[str, Any]:
    """Translate :class:`FeedOptions` into ``YoutubeDL`` parameters."""
    params: dict[str, Any] = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "noplaylist": True,
        "socket_timeout": options.socket_timeout,
        "retries": options.retries,
    }
    if not options.cache_enabled:
        params["cachedir"] = False
    return params


class YtDlpFeedProvider(IFeedProvider):
    """Resolves a video id or watch URL to its yt-dlp info document."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    async def get_feeds(self, target: str, options: FeedOptions) -> dict[str, Any]:
        url = target if target.startswith(("http://", "https://")) else _WATCH_URL.format(target)
        try:
            info = await asyncio.to_thread(self._extract_sync, url, options)
        except DownloadError as exc:
            raise FeedResolutionError(
                message=f"Feed extraction failed for {url}: {exc}",
                status=type(exc).__name__,
                provider_name=_PROVIDER_NAME,
            ) from exc

        self._logger.debug(
            "feed_resolution_complete",
            url=url,
            formats=len(info.get("formats") or []),
        )
        return info

    @staticmethod
    def _extract_sync(url: str, options: FeedOptions) -> dict[str, Any]:
        """Run the blocking extraction (called via to_thread)."""
        with YoutubeDL(ydl_params(options)) as ydl:
            info = ydl.extract_info(url, download=False)
            return ydl.sanitize_info(info)
