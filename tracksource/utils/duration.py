"""Textual duration parsing (``"SS"``, ``"M:SS"``, ``"H:MM:SS"``)."""

from __future__ import annotations

import math


def parse_duration_ms(text: str | None) -> float:
    """Convert a colon-separated duration into milliseconds.

    Segments are folded left to right as ``total * 60 + segment``, so
    ``"3:45"`` is 225000 and ``"1:02:03"`` is 3723000.  No range checks are
    applied to the individual segments.

    Anything that is not made of integer segments (``None``, ``""``,
    ``"live"``, ``"3:"``) yields ``nan`` rather than raising; downstream
    scoring propagates it and the ranker sorts such candidates last.
    """
    if not text:
        return math.nan

    total = 0
    for segment in text.strip().split(":"):
        segment = segment.strip()
        if not (segment.isascii() and segment.isdigit()):
            return math.nan
        total = total * 60 + int(segment)
    return float(total * 1000)


def format_duration_ms(duration_ms: float) -> str:
    """Render milliseconds back as ``M:SS`` / ``H:MM:SS`` for display."""
    if math.isnan(duration_ms):
        return "?:??"
    seconds = int(round(duration_ms / 1000))
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
