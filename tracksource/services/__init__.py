"""Search core: shelf parsing, scoring, ranking, fan-out and feed attachment."""

from tracksource.services.feeds import DEFAULT_FEED_OPTIONS, LazyFeedResolver, attach_feed_resolvers
from tracksource.services.multi_query import SUB_QUERY_FILTERS, MultiQueryOrchestrator
from tracksource.services.ranking import dedupe, rank_candidates, sort_by_accuracy
from tracksource.services.scoring import bump, duration_delta, shelf_accuracy, video_accuracy
from tracksource.services.shelf_parser import ShelfParser

__all__ = [
    "DEFAULT_FEED_OPTIONS",
    "LazyFeedResolver",
    "MultiQueryOrchestrator",
    "SUB_QUERY_FILTERS",
    "ShelfParser",
    "attach_feed_resolvers",
    "bump",
    "dedupe",
    "duration_delta",
    "rank_candidates",
    "shelf_accuracy",
    "sort_by_accuracy",
    "video_accuracy",
]
