"""Candidate records produced by the two search backends.

Parsed shelf items are a tagged union keyed on ``type``: one frozen model per
shape (Song, Video, Album, Artist, Playlist) plus ``OtherCandidate`` for
discriminators we do not recognise.  ``build_candidate`` is the single place
that turns a positional tag list into one of them.

``RankedCandidate`` is what a public ``search`` returns: a playable record
with its computed ``accuracy`` and a lazily-invoked feed resolver.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from tracksource.utils.errors import FeedResolutionError

if TYPE_CHECKING:
    from tracksource.services.feeds import LazyFeedResolver


class CandidateType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Discriminator values as they appear in the shelf's second column."""

    SONG = "Song"
    VIDEO = "Video"
    ALBUM = "Album"
    ARTIST = "Artist"
    PLAYLIST = "Playlist"
    OTHER = "Other"


# Album-like discriminators; all are parsed as AlbumCandidate.
ALBUM_TYPES = frozenset({"Album", "Single", "EP"})

PLAYABLE_TYPES = frozenset({CandidateType.SONG, CandidateType.VIDEO})


class WatchLink(BaseModel):
    """Link object of a playable item (``watchEndpoint``)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    video_id: str = Field(alias="videoId")
    playlist_id: str | None = Field(default=None, alias="playlistId")


class PlaylistLink(BaseModel):
    """Link object of a non-playable item (``watchPlaylistEndpoint``)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    playlist_id: str | None = Field(default=None, alias="playlistId")


class SongCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.SONG] = CandidateType.SONG
    title: str | None
    artists: str | None = None
    album: str | None = None
    duration: str | None = None
    link: WatchLink


class VideoCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.VIDEO] = CandidateType.VIDEO
    title: str | None
    artists: str | None = None
    views: str | None = None
    duration: str | None = None
    link: WatchLink


class AlbumCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.ALBUM] = CandidateType.ALBUM
    name: str | None
    album_type: str = "Album"   # "Album", "Single" or "EP"
    artists: str | None = None
    year: str | None = None
    link: PlaylistLink


class ArtistCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.ARTIST] = CandidateType.ARTIST
    name: str | None
    subscribers: str | None = None
    link: PlaylistLink


class PlaylistCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.PLAYLIST] = CandidateType.PLAYLIST
    name: str | None
    author: str | None = None
    nb_songs: str | None = None
    link: PlaylistLink


class OtherCandidate(BaseModel):
    """An item whose discriminator is not one we model.

    ``label`` holds the raw discriminator (e.g. ``"Episode"``) and ``tags``
    the remaining flattened columns, kept for diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal[CandidateType.OTHER] = CandidateType.OTHER
    label: str | None
    tags: tuple[str, ...] = ()


CandidateRecord = Union[
    SongCandidate,
    VideoCandidate,
    AlbumCandidate,
    ArtistCandidate,
    PlaylistCandidate,
    OtherCandidate,
]


def _slot(tags: list[str], index: int) -> str | None:
    return tags[index] if index < len(tags) else None


def build_candidate(
    kind: str | None,
    tags: list[str],
    watch: dict[str, Any] | None,
    watch_playlist: dict[str, Any] | None,
) -> CandidateRecord:
    """Construct the record for *kind* from positional *tags*.

    Slots (after the discriminator column has been removed):

    ==========  =======  ========  ========  ========
    kind        0        1         2         3
    ==========  =======  ========  ========  ========
    Song        title    artists   album     duration
    Video       title    artists   views     duration
    Album/EP    name     artists   year
    Artist      name     subs
    Playlist    name     author    songs
    ==========  =======  ========  ========  ========

    Raises ``KeyError`` when the kind's link object is missing, and
    pydantic's ``ValidationError`` when it lacks the identifier.
    """
    if kind == CandidateType.SONG.value:
        return SongCandidate(
            title=_slot(tags, 0),
            artists=_slot(tags, 1),
            album=_slot(tags, 2),
            duration=_slot(tags, 3),
            link=WatchLink.model_validate(_require(watch, "watchEndpoint")),
        )
    if kind == CandidateType.VIDEO.value:
        return VideoCandidate(
            title=_slot(tags, 0),
            artists=_slot(tags, 1),
            views=_slot(tags, 2),
            duration=_slot(tags, 3),
            link=WatchLink.model_validate(_require(watch, "watchEndpoint")),
        )
    if kind in ALBUM_TYPES:
        return AlbumCandidate(
            name=_slot(tags, 0),
            album_type=kind,
            artists=_slot(tags, 1),
            year=_slot(tags, 2),
            link=PlaylistLink.model_validate(_require(watch_playlist, "watchPlaylistEndpoint")),
        )
    if kind == CandidateType.ARTIST.value:
        return ArtistCandidate(
            name=_slot(tags, 0),
            subscribers=_slot(tags, 1),
            link=PlaylistLink.model_validate(_require(watch_playlist, "watchPlaylistEndpoint")),
        )
    if kind == CandidateType.PLAYLIST.value:
        return PlaylistCandidate(
            name=_slot(tags, 0),
            author=_slot(tags, 1),
            nb_songs=_slot(tags, 2),
            link=PlaylistLink.model_validate(_require(watch_playlist, "watchPlaylistEndpoint")),
        )
    return OtherCandidate(label=kind, tags=tuple(tags))


def _require(link: dict[str, Any] | None, name: str) -> dict[str, Any]:
    if link is None:
        raise KeyError(name)
    return link


class RankedCandidate(BaseModel):
    """A playable candidate after deduplication and scoring.

    Backend-specific fields stay ``None`` when the backend does not provide
    them: shelf results fill ``artists``/``album``, plain video results fill
    ``author``/``views``/``url``/``filters``.

    ``accuracy`` is deliberately not clamped; see the scoring module.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    video_id: str
    title: str | None
    type: CandidateType
    duration: str | None = None
    duration_ms: float
    accuracy: float
    playlist_id: str | None = None
    artists: str | None = None
    album: str | None = None
    author: str | None = None
    views: int | None = None
    url: str | None = None
    filters: tuple[str, ...] = ()

    _feed_resolver: Any = PrivateAttr(default=None)

    @property
    def has_feed_resolver(self) -> bool:
        return self._feed_resolver is not None

    def with_feed_resolver(self, resolver: LazyFeedResolver) -> "RankedCandidate":
        """Return a copy of this candidate carrying *resolver*."""
        attached = self.model_copy()
        attached._feed_resolver = resolver
        return attached

    async def get_feeds(self) -> dict[str, Any]:
        """Resolve downloadable feeds for this candidate.

        Each call issues a fresh request; nothing is memoized.
        """
        if self._feed_resolver is None:
            raise FeedResolutionError(
                f"No feed resolver attached to candidate {self.video_id}",
                provider_name=self.source,
            )
        return await self._feed_resolver()
