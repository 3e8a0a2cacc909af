"""The logical track a search resolves: artists, title, target duration."""

from __future__ import annotations

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracksource.utils.errors import ValidationError


class SearchQuery(BaseModel):
    """Immutable description of one track lookup.

    ``artists`` keeps caller order; it is joined with the title to build the
    backend query text.  ``duration_ms`` must be positive because both
    scorers divide by it.
    """

    model_config = ConfigDict(frozen=True)

    artists: tuple[str, ...] = Field(min_length=1)
    track: str = Field(min_length=1)
    duration_ms: float = Field(gt=0)

    @field_validator("artists")
    @classmethod
    def _artists_not_blank(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not artist.strip() for artist in value):
            raise ValueError("artist names must be non-empty strings")
        return value

    @field_validator("track")
    @classmethod
    def _track_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("track title must be a non-empty string")
        return value

    @classmethod
    def create(cls, artists: list[str] | tuple[str, ...], track: str, duration_ms: float) -> "SearchQuery":
        """Validate caller input, raising :class:`ValidationError` on failure."""
        if isinstance(artists, str):
            raise ValidationError("<artists> must be a list of names, not a string")
        try:
            return cls(artists=tuple(artists), track=track, duration_ms=duration_ms)
        except (pydantic.ValidationError, TypeError) as exc:
            raise ValidationError(f"Invalid search query: {exc}") from exc

    @property
    def text(self) -> str:
        """Artists followed by the title, space separated."""
        return " ".join([*self.artists, self.track])
