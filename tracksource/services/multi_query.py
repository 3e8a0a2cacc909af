"""Fan-out of keyword variations against a plain video search backend.

Every search runs four sub-queries built from the artists, the title and a
filter keyword set.  They run with at most ``concurrency`` in flight, each
outcome is settled independently, and only successful sub-queries
contribute.  Results are concatenated in the order the sub-queries are
declared, whatever order they finish in.
"""

from __future__ import annotations

import dataclasses

from tracksource.interfaces.video_search_provider import IVideoSearchProvider, VideoSearchHit
from tracksource.models.query import SearchQuery
from tracksource.utils.concurrency import Failure, Outcome, settle, successes
from tracksource.utils.logging import get_logger
from tracksource.utils.matching import title_matches

SUB_QUERY_FILTERS: tuple[tuple[str, ...], ...] = (
    ("Official Audio",),
    ("Audio",),
    ("Lyrics",),
    (),
)


class MultiQueryOrchestrator:
    """Runs the sub-queries for one :class:`SearchQuery` and flattens them.

    Parameters
    ----------
    search_provider:
        Backend the sub-queries are sent to.
    concurrency:
        Maximum sub-queries in flight at once.  Must be at least 1.
    per_query_limit:
        Maximum matching hits kept from each sub-query.
    page_start, page_end:
        Result pages requested from the backend for every sub-query.
    """

    def __init__(
        self,
        search_provider: IVideoSearchProvider,
        concurrency: int = 3,
        per_query_limit: int = 5,
        page_start: int = 1,
        page_end: int = 2,
        filters: tuple[tuple[str, ...], ...] = SUB_QUERY_FILTERS,
    ) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self._provider = search_provider
        self._concurrency = concurrency
        self._per_query_limit = per_query_limit
        self._page_start = page_start
        self._page_end = page_end
        self._filters = filters
        self._logger = get_logger(__name__)

    @property
    def filters(self) -> tuple[tuple[str, ...], ...]:
        return self._filters

    async def run(self, query: SearchQuery) -> list[Outcome[list[VideoSearchHit]]]:
        """Execute every sub-query and return their outcomes in declared order."""
        outcomes = await settle(
            [self._sub_query(query, filters) for filters in self._filters],
            limit=self._concurrency,
        )
        for filters, outcome in zip(self._filters, outcomes):
            if isinstance(outcome, Failure):
                self._logger.warning(
                    "sub_query_failed",
                    provider=self._provider.get_provider_name(),
                    filters=list(filters),
                    error=str(outcome.error),
                )
        return outcomes

    async def collect(self, query: SearchQuery) -> list[VideoSearchHit]:
        """Concatenate the hits of every successful sub-query."""
        outcomes = await self.run(query)
        hits = [hit for batch in successes(outcomes) for hit in batch]
        self._logger.debug(
            "sub_queries_collected",
            succeeded=sum(1 for o in outcomes if o.ok),
            total=len(outcomes),
            hits=len(hits),
        )
        return hits

    async def _sub_query(self, query: SearchQuery, filters: tuple[str, ...]) -> list[VideoSearchHit]:
        text = " ".join([*query.artists, query.track, *filters])
        raw_hits = await self._provider.search(
            text, page_start=self._page_start, page_end=self._page_end
        )

        matched: list[VideoSearchHit] = []
        for hit in raw_hits:
            if len(matched) >= self._per_query_limit:
                break
            if title_matches(hit.title, query.artists, query.track):
                matched.append(dataclasses.replace(hit, filters=filters))
        return matched
