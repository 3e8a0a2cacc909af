"""Title filters applied to plain video search hits.

A hit only counts as a candidate for a track when every credited artist and
the track title appear (case-insensitively) in its title, and the title is
not a "spatial" re-upload such as "8D Audio" or "16D".
"""

from __future__ import annotations

import re

# One or more digits immediately followed by "D": "8D", "16d", "360D"
SPATIAL_REMIX = re.compile(r"\d+D", re.IGNORECASE)


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()


def all_artists_in(text: str, artists: list[str] | tuple[str, ...]) -> bool:
    """Return ``True`` when every artist name occurs in *text*."""
    return all(contains_ci(text, artist) for artist in artists)


def any_artist_in(text: str, artists: list[str] | tuple[str, ...]) -> bool:
    """Return ``True`` when at least one artist name occurs in *text*."""
    return any(contains_ci(text, artist) for artist in artists)


def is_spatial_remix(title: str) -> bool:
    return SPATIAL_REMIX.search(title) is not None


def title_matches(title: str, artists: list[str] | tuple[str, ...], track: str) -> bool:
    """Apply the full per-hit filter used by the multi-query search."""
    return (
        all_artists_in(title, artists)
        and contains_ci(title, track)
        and not is_spatial_remix(title)
    )
