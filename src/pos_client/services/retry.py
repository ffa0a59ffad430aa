"""Bounded retry with linear backoff for fallible operations."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Tuple, Type, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry and how long to wait in between.

    Args:
        retries: Extra attempts after the first one.
        delay: Backoff step in seconds; the wait after attempt n is n * delay.
    """

    retries: int = 2
    delay: float = 0.5

    @property
    def attempts(self) -> int:
        return max(self.retries, 0) + 1

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given (1-based) failed attempt."""
        return self.delay * attempt


def call_with_retry(
    operation: Callable[[], T],
    policy: RetryPolicy,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
    description: str = "operation",
) -> T:
    """
    Run operation until it succeeds or policy.attempts is exhausted.

    Only exceptions listed in retry_on trigger a retry; anything else
    propagates immediately. The last exception is re-raised once all
    attempts have failed.
    """
    for attempt in range(1, policy.attempts + 1):
        try:
            return operation()
        except retry_on as exc:
            if attempt == policy.attempts:
                raise
            wait = policy.delay_for(attempt)
            logger.warning(
                "%s failed (attempt %d/%d): %s; retrying in %.1fs",
                description, attempt, policy.attempts, exc, wait,
            )
            sleep(wait)
    raise AssertionError("unreachable")  # attempts is always >= 1
