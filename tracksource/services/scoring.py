"""Accuracy heuristics for the two search backends.

Scores live on a 0-100 scale centred on duration agreement, then get
"bumped" toward 100 by a fraction of the remaining gap when an extra signal
agrees (item type, channel name, popularity).

Neither scorer clamps its output.  A candidate whose duration differs from
the target by more than the target itself drives the duration term below
zero, and the result stays negative; a malformed duration yields ``nan``.
"""

from __future__ import annotations

from tracksource.models.candidates import CandidateType

# Share of the gap to 100 closed by the type bonus (shelf results).
TYPE_WEIGHTS: dict[CandidateType, float] = {
    CandidateType.SONG: 80,
    CandidateType.VIDEO: 70,
}
DEFAULT_TYPE_WEIGHT = 10

# Share of the gap closed by each plain-video bonus.
ARTIST_BONUS = 60
VIEWS_BONUS = 60


def bump(score: float, percent: float) -> float:
    """Move *score* toward 100 by *percent* of the remaining gap."""
    return score + (percent / 100) * (100 - score)


def duration_delta(target_ms: float, duration_ms: float) -> float:
    """100 for an exact match, minus the relative deviation in percent."""
    return 100 - (abs(target_ms - duration_ms) / target_ms) * 100


def shelf_accuracy(kind: CandidateType, duration_ms: float, target_ms: float) -> float:
    """Score a YouTube Music shelf item.

    >>> shelf_accuracy(CandidateType.SONG, 225000, 225000)
    100.0
    """
    weight = TYPE_WEIGHTS.get(kind, DEFAULT_TYPE_WEIGHT)
    return bump(duration_delta(target_ms, duration_ms), weight)


def video_accuracy(
    seconds: float,
    target_ms: float,
    artist_in_channel: bool,
    has_most_views: bool,
) -> float:
    """Score a plain YouTube video hit.

    The artist bonus is applied first and the view-count bonus is computed
    on the already bumped value, so both together take 50 to 92 rather
    than to 100.
    """
    score = (target_ms - abs(target_ms - seconds * 1000)) / target_ms * 100
    if artist_in_channel:
        score = bump(score, ARTIST_BONUS)
    if has_most_views:
        score = bump(score, VIEWS_BONUS)
    return score
