"""Unit tests for settings loading, the wiring factories and the CLI."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from tracksource.cli.search import main, parse_duration_arg
from tracksource.config.loader import load_settings
from tracksource.config.settings import Settings
from tracksource.interfaces.track_source import ITrackSource
from tracksource.main import build_feed_options, build_http_client, build_sources
from tracksource.models.candidates import CandidateType, RankedCandidate
from tracksource.providers.music.youtube_music_provider import YouTubeMusicSource
from tracksource.providers.music.youtube_provider import YouTubeSource
from tracksource.utils.errors import TransportError


# ======================================================================
# Settings / loader
# ======================================================================


class TestSettings:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.ytmusic_client_name == "WEB_REMIX"
        assert settings.ytmusic_request_timeout == 10.0
        assert settings.youtube_query_concurrency == 3
        assert settings.youtube_results_per_query == 5
        assert (settings.youtube_page_start, settings.youtube_page_end) == (1, 2)
        assert settings.feed_socket_timeout == 20
        assert settings.feed_retries == 20
        assert settings.feed_cache_enabled is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YOUTUBE_QUERY_CONCURRENCY", "2")
        assert Settings(_env_file=None).youtube_query_concurrency == 2


class TestLoadSettings:
    def test_yaml_sections_are_flattened(self, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(
            "ytmusic:\n  request_timeout: 15\nyoutube:\n  results_per_query: 7\n"
            "feed:\n  cache_enabled: true\nlog_level: DEBUG\n",
            encoding="utf-8",
        )

        settings = load_settings(str(config))

        assert settings.ytmusic_request_timeout == 15
        assert settings.youtube_results_per_query == 7
        assert settings.feed_cache_enabled is True
        assert settings.log_level == "DEBUG"

    def test_environment_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("youtube:\n  query_concurrency: 4\n", encoding="utf-8")
        monkeypatch.setenv("YOUTUBE_QUERY_CONCURRENCY", "2")

        assert load_settings(str(config)).youtube_query_concurrency == 2

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(str(tmp_path / "absent.yaml"))
        assert settings.youtube_results_per_page == 20


# ======================================================================
# Wiring
# ======================================================================


class TestFactories:
    @pytest.mark.asyncio
    async def test_build_sources(self, settings: Settings, mock_feed_provider, mock_search_provider) -> None:
        async with build_http_client(settings) as http_client:
            sources = build_sources(
                settings, http_client, feed_provider=mock_feed_provider, search_provider=mock_search_provider
            )

        assert set(sources) == {"yt_music", "youtube"}
        assert isinstance(sources["yt_music"], YouTubeMusicSource)
        assert isinstance(sources["youtube"], YouTubeSource)
        assert all(isinstance(s, ITrackSource) for s in sources.values())

    @pytest.mark.asyncio
    async def test_http_client_sends_desktop_user_agent(self, settings: Settings) -> None:
        async with build_http_client(settings) as http_client:
            assert isinstance(http_client, httpx.AsyncClient)
            assert "Chrome/80" in http_client.headers["user-agent"]

    def test_feed_options_follow_settings(self) -> None:
        settings = Settings(_env_file=None, feed_retries=3, feed_cache_enabled=True)
        options = build_feed_options(settings)
        assert options.retries == 3
        assert options.cache_enabled is True


# ======================================================================
# CLI
# ======================================================================


def _ranked(video_id: str, accuracy: float) -> RankedCandidate:
    return RankedCandidate(
        source="yt_music",
        video_id=video_id,
        title=f"Track {video_id}",
        type=CandidateType.SONG,
        artists="Artist",
        duration="3:45",
        duration_ms=225000,
        accuracy=accuracy,
    )


class TestParseDurationArg:
    def test_milliseconds(self) -> None:
        assert parse_duration_arg("225000") == 225000.0

    def test_timestamp(self) -> None:
        assert parse_duration_arg("3:45") == 225000.0

    def test_invalid(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_duration_arg("soon")


class TestMain:
    @pytest.fixture(autouse=True)
    def _no_logging_setup(self):
        # keep structlog bound to the session stream rather than a per-test capture
        with patch("tracksource.cli.search.configure_logging"):
            yield

    @pytest.fixture
    def fake_source(self) -> MagicMock:
        source = MagicMock(spec=ITrackSource)
        source.search = AsyncMock(return_value=[_ranked("a", 99.5), _ranked("b", 80.0), _ranked("c", 10.0)])
        return source

    def _argv(self, tmp_path: Path, *extra: str) -> list[str]:
        return ["Track", "--artist", "Artist", "--duration", "3:45", "--config", str(tmp_path / "none.yaml"), *extra]

    def test_json_output(self, tmp_path, fake_source, capsys) -> None:
        with patch("tracksource.cli.search.build_sources", return_value={"yt_music": fake_source}):
            code = main(self._argv(tmp_path, "--json", "--limit", "2"))

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert [c["video_id"] for c in payload["candidates"]] == ["a", "b"]
        fake_source.search.assert_awaited_once_with(["Artist"], "Track", 225000.0)

    def test_table_output(self, tmp_path, fake_source, capsys) -> None:
        with patch("tracksource.cli.search.build_sources", return_value={"yt_music": fake_source}):
            code = main(self._argv(tmp_path))

        out = capsys.readouterr().out
        assert code == 0
        assert "Track a" in out
        assert " 1. " in out

    def test_feeds_of_best_candidate(self, tmp_path, fake_source, capsys) -> None:
        best = MagicMock()
        best.video_id = "a"
        best.get_feeds = AsyncMock(return_value={"title": "Track a", "formats": [{}, {}, {}]})
        fake_source.search.return_value = [best]

        with patch("tracksource.cli.search.build_sources", return_value={"yt_music": fake_source}), patch(
            "tracksource.cli.search._candidate_dict", return_value={"video_id": "a"}
        ):
            code = main(self._argv(tmp_path, "--json", "--feeds"))

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["feeds"] == {"video_id": "a", "title": "Track a", "formats": 3}

    def test_library_error_exit_code(self, tmp_path, fake_source, capsys) -> None:
        fake_source.search.side_effect = TransportError("down", provider_name="yt_music")
        with patch("tracksource.cli.search.build_sources", return_value={"yt_music": fake_source}):
            code = main(self._argv(tmp_path))

        assert code == 1
        assert "[yt_music] down" in capsys.readouterr().err

    def test_artist_is_required(self, tmp_path) -> None:
        with pytest.raises(SystemExit):
            main(["Track", "--duration", "3:45"])
