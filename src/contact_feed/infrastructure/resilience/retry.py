# Copyright (c)
# SPDX-License-Identifier: MIT
"""Async retry helper with capped, jittered exponential back-off.

Only the transport uses this; decoding is a pure transform and is never
retried.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from contact_feed.infrastructure.logging.logger import get_json_logger

T = TypeVar("T")

log = get_json_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry budget and back-off shape.

    Attributes:
        total: Retries allowed after the first attempt.
        base: Back-off in seconds before the first retry.
        cap: Upper bound for a single back-off in seconds.
        jitter: Draw the delay uniformly from ``[0, backoff]`` when True.
    """

    total: int
    base: float
    cap: float
    jitter: bool = True

    def backoff_for(self, attempt: int) -> float:
        """Return the delay in seconds before retry number ``attempt`` (0-based)."""
        delay = min(self.cap, self.base * (2**attempt))
        if self.jitter:
            delay = random.uniform(0, delay)  # noqa: S311
        return delay


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    retry_on: Callable[[Exception], bool],
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Call ``fn`` until it succeeds, the error is not retryable, or the budget runs out.

    Args:
        fn: Zero-arg coroutine factory to execute.
        policy: Retry budget and back-off shape.
        retry_on: Predicate returning True for retryable exceptions.
        sleep: Awaitable sleep; injectable for tests.

    Returns:
        The first successful result of ``fn``.

    Raises:
        Exception: The last exception raised by ``fn`` once retries stop.
    """
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:  # noqa: BLE001
            if attempt >= policy.total or not retry_on(exc):
                raise
            delay = policy.backoff_for(attempt)
            log.warning(
                "retry.scheduled",
                extra={
                    "extra": {
                        "attempt": attempt + 1,
                        "delay_s": round(delay, 3),
                        "error": type(exc).__name__,
                    }
                },
            )
        await sleep(delay)
        attempt += 1
