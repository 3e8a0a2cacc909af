"""Shared pytest fixtures and response builders for the tracksource suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from tracksource.config.settings import Settings
from tracksource.interfaces.credential_provider import ICredentialProvider
from tracksource.interfaces.feed_provider import IFeedProvider
from tracksource.interfaces.video_search_provider import IVideoSearchProvider, VideoSearchHit
from tracksource.providers.music.youtube_music_client import YouTubeMusicClient

# ---------------------------------------------------------------------------
# YouTube Music response builders
# ---------------------------------------------------------------------------


def make_item(
    columns: list[str],
    video_id: str | None = None,
    playlist_id: str | None = None,
    watch_playlist_id: str | None = None,
) -> dict[str, Any]:
    """Build one ``musicResponsiveListItemRenderer`` row.

    Each column string becomes a flex column; a ``" • "`` inside a column is
    split into separate runs to mimic the real payload.
    """
    flex_columns = []
    for column in columns:
        parts = column.split(" • ")
        runs: list[dict[str, str]] = []
        for i, part in enumerate(parts):
            if i:
                runs.append({"text": " • "})
            runs.append({"text": part})
        flex_columns.append(
            {"musicResponsiveListItemFlexColumnRenderer": {"text": {"runs": runs}}}
        )

    double_tap: dict[str, Any] = {}
    if video_id is not None:
        endpoint: dict[str, Any] = {"videoId": video_id}
        if playlist_id is not None:
            endpoint["playlistId"] = playlist_id
        double_tap["watchEndpoint"] = endpoint
    if watch_playlist_id is not None:
        double_tap["watchPlaylistEndpoint"] = {"playlistId": watch_playlist_id}

    renderer: dict[str, Any] = {"flexColumns": flex_columns}
    if double_tap:
        renderer["doubleTapCommand"] = double_tap
    return {"musicResponsiveListItemRenderer": renderer}


def make_song(title: str, video_id: str, duration: str = "3:45", artists: str = "Artist") -> dict[str, Any]:
    return make_item([title, "Song", artists, "Album", duration], video_id=video_id)


def make_video(title: str, video_id: str, duration: str = "3:45", artists: str = "Artist") -> dict[str, Any]:
    return make_item([title, "Video", artists, "1.2M views", duration], video_id=video_id)


def make_shelf(
    title: str | None,
    items: list[dict[str, Any]],
    continuation: str | None = None,
    click_tracking: str | None = "ctp-1",
    bottom_endpoint: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a shelf layer (the value inside ``musicShelfRenderer``)."""
    layer: dict[str, Any] = {"contents": items}
    if title is not None:
        layer["title"] = {"runs": [{"text": title}]}
    if continuation is not None:
        data: dict[str, Any] = {"continuation": continuation}
        if click_tracking is not None:
            data["clickTrackingParams"] = click_tracking
        layer["continuations"] = [{"nextContinuationData": data}]
    if bottom_endpoint is not None:
        layer["bottomEndpoint"] = {"searchEndpoint": bottom_endpoint}
    return layer


def make_search_response(*shelves: dict[str, Any]) -> dict[str, Any]:
    return {
        "contents": {
            "sectionListRenderer": {
                "contents": [{"musicShelfRenderer": shelf} for shelf in shelves]
            }
        }
    }


def make_continuation_response(
    items: list[dict[str, Any]], continuation: str | None = None
) -> dict[str, Any]:
    return {
        "continuationContents": {
            "musicShelfContinuation": make_shelf(None, items, continuation=continuation)
        }
    }


def make_hit(
    video_id: str,
    title: str,
    author: str = "Some Channel",
    views: int | None = 1000,
    seconds: int | None = 225,
) -> VideoSearchHit:
    return VideoSearchHit(
        video_id=video_id,
        title=title,
        author_name=author,
        views=views,
        seconds=seconds,
        url=f"https://www.youtube.com/watch?v={video_id}",
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env, no environment overrides)."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_credentials() -> ICredentialProvider:
    mock = MagicMock(spec=ICredentialProvider)
    mock.get = AsyncMock(return_value="test-api-key")
    return mock


@pytest.fixture
def mock_feed_provider() -> IFeedProvider:
    mock = MagicMock(spec=IFeedProvider)
    mock.get_provider_name.return_value = "mock-feeds"
    mock.get_feeds = AsyncMock(
        side_effect=lambda target, options: {"id": target, "formats": [{"format_id": "251"}]}
    )
    return mock


@pytest.fixture
def mock_ytmusic_client() -> YouTubeMusicClient:
    """A YouTubeMusicClient whose ``search`` is an AsyncMock to be configured per test."""
    mock = MagicMock(spec=YouTubeMusicClient)
    mock.search = AsyncMock()
    return mock


@pytest.fixture
def mock_search_provider() -> IVideoSearchProvider:
    mock = MagicMock(spec=IVideoSearchProvider)
    mock.get_provider_name.return_value = "mock-search"
    mock.search = AsyncMock(return_value=[])
    return mock
