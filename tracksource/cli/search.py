"""Command-line track lookup.

Usage::

    python -m tracksource.cli "Blinding Lights" --artist "The Weeknd" --duration 3:20
    python -m tracksource.cli "Song 2" --artist Blur --duration 121000 --source youtube --json
    python -m tracksource.cli "Halo" --artist Beyonce --duration 4:21 --feeds

Ranked candidates go to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import math
import sys
from typing import Any

from tracksource.config.loader import load_settings
from tracksource.config.settings import Settings
from tracksource.main import build_http_client, build_sources
from tracksource.models.candidates import RankedCandidate
from tracksource.utils.duration import format_duration_ms, parse_duration_ms
from tracksource.utils.errors import TrackSourceError
from tracksource.utils.logging import configure_logging


def parse_duration_arg(value: str) -> float:
    """Accept either milliseconds (``225000``) or a timestamp (``3:45``)."""
    if ":" not in value and value.isdigit():
        return float(value)
    duration_ms = parse_duration_ms(value)
    if math.isnan(duration_ms):
        raise argparse.ArgumentTypeError(f"invalid duration: {value!r}")
    return duration_ms


def _candidate_dict(candidate: RankedCandidate) -> dict[str, Any]:
    data = candidate.model_dump(mode="json")
    for field in ("accuracy", "duration_ms"):
        if math.isnan(getattr(candidate, field)):
            data[field] = None
    return data


def _format_table(candidates: list[RankedCandidate]) -> str:
    if not candidates:
        return "No candidates found."
    lines = []
    for rank, c in enumerate(candidates, start=1):
        credit = c.artists or c.author or ""
        lines.append(
            f"{rank:>2}. {c.accuracy:7.2f}  {format_duration_ms(c.duration_ms):>8}  "
            f"[{c.type.value}] {c.title}  -- {credit}  ({c.video_id})"
        )
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m tracksource.cli",
        description="Resolve a track into ranked YouTube / YouTube Music candidates.",
    )
    parser.add_argument("track", help="Track title")
    parser.add_argument(
        "--artist",
        "-a",
        action="append",
        dest="artists",
        required=True,
        help="Credited artist (repeat for several)",
    )
    parser.add_argument(
        "--duration",
        "-d",
        required=True,
        type=parse_duration_arg,
        help="Target duration as M:SS, H:MM:SS or milliseconds",
    )
    parser.add_argument(
        "--source",
        "-s",
        default="yt_music",
        choices=["yt_music", "youtube"],
        help="Backend to search (default: yt_music)",
    )
    parser.add_argument("--limit", "-n", type=int, default=10, help="Candidates to show")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    parser.add_argument(
        "--feeds",
        action="store_true",
        help="Resolve feeds of the best candidate and report its formats",
    )
    parser.add_argument("--config", default="config/config.yaml", help="YAML config path")
    return parser


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    async with build_http_client(settings) as http_client:
        source = build_sources(settings, http_client)[args.source]
        candidates = (await source.search(args.artists, args.track, args.duration))[: args.limit]

        feeds: dict[str, Any] | None = None
        if args.feeds and candidates:
            feeds = await candidates[0].get_feeds()

    if args.json:
        payload: dict[str, Any] = {"candidates": [_candidate_dict(c) for c in candidates]}
        if feeds is not None:
            payload["feeds"] = {
                "video_id": candidates[0].video_id,
                "title": feeds.get("title"),
                "formats": len(feeds.get("formats") or []),
            }
        print(json.dumps(payload, indent=2))
    else:
        print(_format_table(candidates))
        if feeds is not None:
            print(f"\nBest match feeds: {len(feeds.get('formats') or [])} formats")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    settings = load_settings(args.config)
    configure_logging(log_level="WARNING" if args.json else settings.log_level)

    try:
        return asyncio.run(_run(args, settings))
    except TrackSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
