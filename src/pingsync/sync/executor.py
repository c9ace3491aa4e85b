"""Bounded-concurrency executor for remote calls."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

PINGDOM_CONCURRENCY = 5

T = TypeVar("T")
R = TypeVar("R")


async def bounded_gather(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
    concurrency: int = PINGDOM_CONCURRENCY,
) -> list[R]:
    """Run func over items with at most `concurrency` calls in flight.

    Once a call fails, work that has not started yet is not started, even if
    it already holds a permit. Calls already in flight are left to finish,
    then the first failure is raised. A cancelled call cancels the batch.

    Args:
        func: Coroutine function applied to each item
        items: Work items
        concurrency: Permit count of the admission gate

    Returns:
        Results in the order of items

    Raises:
        Exception: The first exception raised by func
        asyncio.CancelledError: When a call was cancelled
    """
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")

    semaphore = asyncio.Semaphore(concurrency)
    failure: BaseException | None = None
    skipped = 0

    async def _run(item: T) -> R | None:
        nonlocal failure, skipped
        async with semaphore:
            if failure is not None:
                skipped += 1
                return None
            try:
                return await func(item)
            except Exception as e:
                if failure is None:
                    failure = e
                raise

    outcomes = await asyncio.gather(*(_run(item) for item in items), return_exceptions=True)

    if failure is not None:
        if skipped:
            logger.debug(f"Skipped {skipped} queued operation(s) after failure")
        raise failure

    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome

    return list(outcomes)
