"""tracksource domain models.

    - query.py       -- SearchQuery, the validated caller input
    - candidates.py  -- per-type shelf records and RankedCandidate
    - shelf.py       -- ShelfSection, ShelfCursor and category mapping
"""

from __future__ import annotations

from tracksource.models.candidates import (
    AlbumCandidate,
    ArtistCandidate,
    CandidateRecord,
    CandidateType,
    OtherCandidate,
    PlaylistCandidate,
    PlaylistLink,
    RankedCandidate,
    SongCandidate,
    VideoCandidate,
    WatchLink,
    build_candidate,
)
from tracksource.models.query import SearchQuery
from tracksource.models.shelf import (
    ShelfCategory,
    ShelfCursor,
    ShelfSection,
    category_for,
    category_key,
    singularize,
)

__all__ = [
    "AlbumCandidate",
    "ArtistCandidate",
    "CandidateRecord",
    "CandidateType",
    "OtherCandidate",
    "PlaylistCandidate",
    "PlaylistLink",
    "RankedCandidate",
    "SearchQuery",
    "ShelfCategory",
    "ShelfCursor",
    "ShelfSection",
    "SongCandidate",
    "VideoCandidate",
    "WatchLink",
    "build_candidate",
    "category_for",
    "category_key",
    "singularize",
]
