"""Lazy feed resolution attached to ranked candidates.

A resolver captures the feed provider, the lookup target and the fixed
options.  Nothing is requested until it is awaited, and every await is an
independent request.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from tracksource.interfaces.feed_provider import FeedOptions, IFeedProvider
from tracksource.models.candidates import RankedCandidate
from tracksource.utils.logging import get_logger

DEFAULT_FEED_OPTIONS = FeedOptions()

_logger = get_logger(__name__)


class LazyFeedResolver:
    """Awaitable-on-call feed lookup for a single target."""

    def __init__(
        self,
        provider: IFeedProvider,
        target: str,
        options: FeedOptions = DEFAULT_FEED_OPTIONS,
    ) -> None:
        self._provider = provider
        self._target = target
        self._options = options

    @property
    def target(self) -> str:
        return self._target

    @property
    def options(self) -> FeedOptions:
        return self._options

    async def __call__(self) -> dict[str, Any]:
        _logger.debug(
            "feed_resolution_started",
            target=self._target,
            provider=self._provider.get_provider_name(),
            options=self._options.as_cli_args(),
        )
        return await self._provider.get_feeds(self._target, self._options)

    def __repr__(self) -> str:
        return f"LazyFeedResolver(target={self._target!r})"


def attach_feed_resolvers(
    candidates: Iterable[RankedCandidate],
    provider: IFeedProvider,
    options: FeedOptions = DEFAULT_FEED_OPTIONS,
    target: Callable[[RankedCandidate], str] = lambda candidate: candidate.video_id,
) -> list[RankedCandidate]:
    """Return copies of *candidates*, each carrying an unresolved resolver."""
    return [
        candidate.with_feed_resolver(LazyFeedResolver(provider, target(candidate), options))
        for candidate in candidates
    ]
