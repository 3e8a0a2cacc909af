"""Deduplication and ordering of scored candidates."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

_T = TypeVar("_T")
_R = TypeVar("_R")


def dedupe(items: Iterable[_T], key: Callable[[_T], Hashable]) -> list[_T]:
    """Keep the first item seen for every key, in encounter order."""
    seen: dict[Hashable, _T] = {}
    for item in items:
        k = key(item)
        if k not in seen:
            seen[k] = item
    return list(seen.values())


def sort_by_accuracy(items: Iterable[_R], accuracy: Callable[[_R], float]) -> list[_R]:
    """Sort by descending accuracy.

    ``sorted`` is stable, so equal accuracies keep their input order.
    ``nan`` compares false against everything, so it is mapped to the very
    end instead of being left to corrupt the ordering.
    """

    def _key(item: _R) -> float:
        value = accuracy(item)
        return math.inf if math.isnan(value) else -value

    return sorted(items, key=_key)


def rank_candidates(
    items: Iterable[_T],
    key: Callable[[_T], Hashable],
    build: Callable[[_T], _R],
    accuracy: Callable[[_R], float],
) -> list[_R]:
    """Fold *items* by natural key, score survivors and order them.

    ``build`` turns a raw item into its scored record and only runs for the
    first occurrence of each key; later duplicates are never scored.
    """
    return sort_by_accuracy((build(item) for item in dedupe(items, key)), accuracy)
