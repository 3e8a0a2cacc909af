"""Bounded-concurrency fan-out with per-task outcomes.

Two layers are exposed:

1. **throttled_gather** -- ``asyncio.gather`` with every awaitable wrapped in
   a semaphore acquire/release, so at most ``limit`` run at once.

2. **settle** -- the same fan-out, but each result is wrapped in an explicit
   :class:`Success` or :class:`Failure`.  One task failing never fails the
   batch; callers decide what to do with failures by filtering the outcome
   list (see :func:`successes`).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

_T = TypeVar("_T")


@dataclass(frozen=True)
class Success(Generic[_T]):
    """A task that completed and produced ``value``."""

    value: _T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A task that raised ``error``."""

    error: BaseException

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[_T], Failure]


async def throttled_gather(
    coros: list[Awaitable[_T]],
    limit: int,
    return_exceptions: bool = True,
) -> list[_T | BaseException]:
    """Run awaitables concurrently with at most *limit* in flight.

    Results come back in input order regardless of completion order,
    mirroring ``asyncio.gather``.
    """
    if limit < 1:
        for coro in coros:
            if asyncio.iscoroutine(coro):
                coro.close()
        raise ValueError("limit must be at least 1")

    semaphore = asyncio.Semaphore(limit)

    async def _wrapped(coro: Awaitable[_T]) -> _T:
        async with semaphore:
            return await coro

    return await asyncio.gather(
        *(_wrapped(c) for c in coros), return_exceptions=return_exceptions
    )


async def settle(coros: list[Awaitable[_T]], limit: int) -> list[Outcome[_T]]:
    """Run *coros* with bounded concurrency and capture every outcome.

    Returns
    -------
    list[Outcome]
        One :class:`Success` or :class:`Failure` per input, in input order.
    """
    raw = await throttled_gather(coros, limit=limit, return_exceptions=True)
    return [Failure(r) if isinstance(r, BaseException) else Success(r) for r in raw]


def successes(outcomes: list[Outcome[_T]]) -> list[_T]:
    """Return the values of the successful outcomes, preserving order."""
    return [o.value for o in outcomes if isinstance(o, Success)]


def failures(outcomes: list[Outcome[_T]]) -> list[BaseException]:
    """Return the errors of the failed outcomes, preserving order."""
    return [o.error for o in outcomes if isinstance(o, Failure)]
