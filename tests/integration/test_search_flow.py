"""End-to-end search through the wired sources with HTTP mocked at the transport."""

from __future__ import annotations

import json

import httpx
import pytest

from tests.conftest import (
    make_continuation_response,
    make_hit,
    make_item,
    make_search_response,
    make_shelf,
    make_song,
    make_video,
)
from tracksource.config.settings import Settings
from tracksource.main import build_sources

_HOME_PAGE = '<html><script>{"INNERTUBE_API_KEY":"AIzaFlowKey"}</script></html>'


class FakeYouTubeMusic:
    """Serves the landing page and answers search / continuation requests."""

    def __init__(self) -> None:
        self.home_hits = 0
        self.searches: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            self.home_hits += 1
            return httpx.Response(200, text=_HOME_PAGE)

        self.searches.append(request)
        if "continuation" in request.url.params:
            return httpx.Response(
                200,
                json=make_continuation_response(
                    [make_item(["Track (Remix)", "Artist", "Remixes", "5:10"], video_id="s3")]
                ),
            )
        return httpx.Response(
            200,
            json=make_search_response(
                make_shelf("Top result", [make_song("Track", "s1", duration="3:45")]),
                make_shelf(
                    "Songs",
                    [make_song("Track", "s1", duration="3:45"), make_song("Track (Live)", "s2", duration="4:30")],
                    continuation="tok-songs",
                    click_tracking="ctp-songs",
                ),
                make_shelf("Videos", [make_video("Track (Official Video)", "v1", duration="3:52")]),
            ),
        )


@pytest.fixture
def fake_site() -> FakeYouTubeMusic:
    return FakeYouTubeMusic()


class TestYouTubeMusicFlow:
    @pytest.mark.asyncio
    async def test_search_then_paginate(
        self, settings: Settings, fake_site, mock_feed_provider, mock_search_provider
    ) -> None:
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_site)) as http_client:
            source = build_sources(
                settings, http_client, feed_provider=mock_feed_provider, search_provider=mock_search_provider
            )["yt_music"]

            results = await source.search(["Artist"], "Track", 225000)
            sections = await source.search_shelves({"query": "Artist Track"})
            page = await source.load_more(sections["songs"])

        assert [c.video_id for c in results] == ["s1", "v1", "s2"]
        assert results[0].accuracy == pytest.approx(100.0)

        # the key is scraped once and reused for every request
        assert fake_site.home_hits == 1
        assert all(r.url.params["key"] == "AIzaFlowKey" for r in fake_site.searches)

        first_body = json.loads(fake_site.searches[0].content)
        assert first_body["query"] == "Artist Track"

        continuation = fake_site.searches[-1]
        assert continuation.url.params["continuation"] == "tok-songs"
        assert continuation.url.params["icit"] == "ctp-songs"
        assert page.items[0].title == "Track (Remix)"
        assert page.items[0].type.value == "Song"

        feeds = await results[0].get_feeds()
        assert feeds["id"] == "s1"


class TestYouTubeFlow:
    @pytest.mark.asyncio
    async def test_search_with_partial_failures(
        self, settings: Settings, mock_feed_provider, mock_search_provider
    ) -> None:
        async def search(text: str, page_start: int = 1, page_end: int = 1):
            if text.endswith("Lyrics"):
                raise RuntimeError("quota")
            return [
                make_hit("a", "Artist - Track", author="Artist", views=1000, seconds=225),
                make_hit("b", "Artist - Track (8D)", author="Artist", views=5000, seconds=225),
                make_hit("c", "Artist - Track (Cover)", author="Someone", views=10, seconds=240),
            ]

        mock_search_provider.search.side_effect = search
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(404))) as http_client:
            source = build_sources(
                settings, http_client, feed_provider=mock_feed_provider, search_provider=mock_search_provider
            )["youtube"]
            results = await source.search(["Artist"], "Track", 225000)

        assert [c.video_id for c in results] == ["a", "c"]
        assert results[0].accuracy == pytest.approx(100.0)
        assert results[0].filters == ("Official Audio",)
        assert mock_search_provider.search.await_count == 4
