"""Keyword video search through yt-dlp's ``ytsearchN:`` extractor.

yt-dlp is synchronous, so every search runs in ``asyncio.to_thread``.
Results are requested flat (no per-video page fetch); the flat entries
already carry id, title, channel, duration and view count.
"""

from __future__ import annotations

import asyncio
from typing import Any

from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError

from tracksource.interfaces.video_search_provider import IVideoSearchProvider, VideoSearchHit
from tracksource.utils.errors import TransportError
from tracksource.utils.logging import get_logger

_PROVIDER_NAME = "yt_dlp"
_WATCH_URL = "https://www.youtube.com/watch?v={}"


class YtDlpSearchProvider(IVideoSearchProvider):
    """YouTube video search emulating result pages.

    ``results_per_page`` hits make up one page; a ``page_start..page_end``
    request searches for ``page_end * results_per_page`` hits and drops the
    pages before ``page_start``.
    """

    def __init__(self, results_per_page: int = 20, socket_timeout: int = 10) -> None:
        self._results_per_page = results_per_page
        self._socket_timeout = socket_timeout
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    async def search(self, query: str, page_start: int = 1, page_end: int = 1) -> list[VideoSearchHit]:
        if page_end < page_start:
            return []
        count = page_end * self._results_per_page
        try:
            entries = await asyncio.to_thread(self._search_sync, query, count)
        except DownloadError as exc:
            raise TransportError(
                message=f"YouTube search failed for '{query}': {exc}",
                status=type(exc).__name__,
                provider_name=_PROVIDER_NAME,
            ) from exc

        offset = (page_start - 1) * self._results_per_page
        hits = [hit for hit in (self._to_hit(e) for e in entries[offset:]) if hit is not None]
        self._logger.debug("ytdlp_search_complete", query=query, result_count=len(hits))
        return hits

    def _search_sync(self, query: str, count: int) -> list[dict[str, Any]]:
        """Run the blocking search (called via to_thread)."""
        opts = {
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
            "extract_flat": "in_playlist",
            "cachedir": False,
            "socket_timeout": self._socket_timeout,
        }
        with YoutubeDL(opts) as ydl:
            info = ydl.extract_info(f"ytsearch{count}:{query}", download=False)
        entries = info.get("entries") if isinstance(info, dict) else None
        return [entry for entry in entries or [] if isinstance(entry, dict)]

    @staticmethod
    def _to_hit(entry: dict[str, Any]) -> VideoSearchHit | None:
        video_id = entry.get("id")
        title = entry.get("title")
        if not video_id or not title:
            return None
        duration = entry.get("duration")
        views = entry.get("view_count")
        return VideoSearchHit(
            video_id=video_id,
            title=title,
            author_name=entry.get("channel") or entry.get("uploader") or "",
            views=int(views) if views is not None else None,
            seconds=int(duration) if duration is not None else None,
            url=entry.get("webpage_url") or _WATCH_URL.format(video_id),
        )
