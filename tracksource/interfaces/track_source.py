"""Abstract base class for track sources (the public search surface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tracksource.models.candidates import RankedCandidate


@dataclass(frozen=True)
class SourceMeta:
    """Static description of a track source.

    Attributes
    ----------
    id:
        Stable identifier, e.g. ``"yt_music"``.
    description:
        Display name.
    is_queryable:
        Whether the source resolves playlist/album URLs (none here do).
    is_searchable:
        Whether ``search`` is supported.
    is_sourceable:
        Whether candidates can be turned into downloadable feeds.
    bitrates:
        Audio bitrates (kbps) downstream encoders may request.
    """

    id: str
    description: str
    is_queryable: bool = False
    is_searchable: bool = True
    is_sourceable: bool = True
    bitrates: tuple[int, ...] = (96, 128, 160, 192, 256, 320)


class ITrackSource(ABC):
    """Contract for resolving a logical track into ranked playable candidates."""

    META: SourceMeta

    @abstractmethod
    async def search(
        self, artists: list[str], track: str, duration_ms: float
    ) -> list[RankedCandidate]:
        """Return candidates ordered by descending accuracy.

        Every returned candidate has an attached, unresolved feed resolver.

        Raises
        ------
        tracksource.utils.errors.ValidationError
            If the input is malformed.
        """

    def get_provider_name(self) -> str:
        return self.META.id

    def is_available(self) -> bool:
        """Both backends are keyless from the caller's point of view."""
        return True
