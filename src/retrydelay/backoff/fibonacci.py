r"""Fibonacci delay generator."""

from __future__ import annotations

__all__ = ["Fibonacci", "fibonacci_from_millis"]

import logging

from retrydelay.backoff.base import BaseDelay
from retrydelay.core.config import MAX_MILLIS
from retrydelay.core.validation import validate_millis
from retrydelay.duration import Duration

logger: logging.Logger = logging.getLogger(__name__)


class Fibonacci(BaseDelay):
    """Fibonacci delay generator.

    Each delay is the sum of the two previous ones. Both initial terms
    are the seed, so the sequence for a seed ``s`` is
    ``s, s, 2s, 3s, 5s, 8s, 13s, ...`` milliseconds, i.e. the classic
    Fibonacci recurrence ``F(n) = F(n-1) + F(n-2)`` scaled by ``s``.

    It grows more slowly than exponential backoff. Depending on the
    problem at hand, it can lead to better throughput under contention.
    See "A Performance Comparison of Different Backoff Algorithms under
    Different Rebroadcast Probabilities for MANETs" (UKPEW 2009,
    http://www.comp.leeds.ac.uk/ukpew09/papers/12.pdf).

    Delays saturate at ``MAX_MILLIS`` milliseconds instead of
    overflowing.

    Args:
        millis: The seed delay in milliseconds. Must be >= 0.

    Example:
        ```pycon
        >>> from retrydelay import fibonacci_from_millis
        >>> delays = fibonacci_from_millis(10)
        >>> [d.as_millis() for d in delays.take(6)]
        [10, 10, 20, 30, 50, 80]

        ```
    """

    def __init__(self, millis: int) -> None:
        validate_millis("millis", millis)
        self.curr = millis
        self.next = millis

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(curr={self.curr}, next={self.next})"

    def __next__(self) -> Duration:
        duration = Duration.from_millis(self.curr)
        next_next = self.curr + self.next
        if next_next > MAX_MILLIS:
            if self.next < MAX_MILLIS:
                logger.debug(f"Fibonacci delay saturated at {MAX_MILLIS}ms")
            next_next = MAX_MILLIS
        self.curr, self.next = self.next, next_next
        return duration


def fibonacci_from_millis(millis: int) -> Fibonacci:
    """Create a ``Fibonacci`` seeded with the given milliseconds."""
    return Fibonacci(millis)
