"""Custom exception hierarchy for tracksource.

All library exceptions inherit from :class:`TrackSourceError`, which carries
an optional ``provider_name`` so callers can tell which backend (e.g.
"yt_music", "youtube", "yt_dlp") produced the failure.

    TrackSourceError  (base -- catch-all for any tracksource error)
    +-- ValidationError            (malformed caller input, never retried)
    +-- TransportError             (wrapped HTTP / network failure)
    |   +-- FeedResolutionError    (feed extraction failed)
    +-- CredentialExtractionError  (API key marker missing from the page)
    +-- ShelfParseError            (one malformed item inside a shelf)
"""

from __future__ import annotations


class TrackSourceError(Exception):
    """Base exception for all tracksource errors.

    ``__str__`` prefixes the provider name in brackets for log scanning,
    e.g. ``[yt_music] Failed to extract INNERTUBE_API_KEY``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ValidationError(TrackSourceError):
    """Raised when caller input does not satisfy the query contract."""

    def __init__(
        self,
        message: str = "Invalid input",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class TransportError(TrackSourceError):
    """Raised when a backend request fails at the transport level.

    Carries whatever the failing exchange exposed: the HTTP ``status_code``,
    a protocol-level ``status`` (the underlying exception class for network
    failures) and the raw response ``body``.
    """

    def __init__(
        self,
        message: str = "Backend request failed",
        status_code: int | None = None,
        status: str | None = None,
        body: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code
        self._status = status
        self._body = body

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def status(self) -> str | None:
        return self._status

    @property
    def body(self) -> str | None:
        return self._body


class FeedResolutionError(TransportError):
    """Raised when feed information for a candidate cannot be produced."""

    def __init__(
        self,
        message: str = "Feed resolution failed",
        status_code: int | None = None,
        status: str | None = None,
        body: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            status=status,
            body=body,
            provider_name=provider_name,
        )


class CredentialExtractionError(TrackSourceError):
    """Raised when the API key marker cannot be found in the fetched page."""

    def __init__(
        self,
        message: str = "Failed to extract `INNERTUBE_API_KEY`",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ShelfParseError(TrackSourceError):
    """Raised when a single shelf item lacks a required structural field.

    The shelf parser catches this per item, so one malformed entry never
    aborts its siblings.
    """

    def __init__(
        self,
        message: str = "Malformed shelf item",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
