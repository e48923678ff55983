r"""Random range delay generator."""

from __future__ import annotations

__all__ = ["Range", "range_from_millis"]

import logging
import random

from retrydelay.backoff.base import BaseDelay
from retrydelay.core.validation import validate_range
from retrydelay.duration import Duration

logger: logging.Logger = logging.getLogger(__name__)


class Range(BaseDelay):
    """Delay generator drawing each delay uniformly from a range.

    Each pull draws an integer number of milliseconds uniformly from
    ``[minimum, maximum)``. When ``minimum == maximum`` the range is
    degenerate and every pull returns ``minimum``.

    Each instance owns its random source. The default source is a fresh
    ``random.Random`` (not cryptographically secure) that is not shared
    with other instances. Every pull mutates that source, so a single
    instance must not be pulled from concurrently without
    synchronization.

    Args:
        minimum: The inclusive lower bound in milliseconds.
        maximum: The exclusive upper bound in milliseconds.
        rng: Optional random source. Pass a seeded ``random.Random`` to
            get a reproducible sequence.

    Raises:
        ValueError: If a bound is negative or if minimum > maximum.

    Example:
        ```pycon
        >>> import random
        >>> from retrydelay import range_from_millis
        >>> delays = range_from_millis(5, 15, rng=random.Random(42))
        >>> all(5 <= d.as_millis() < 15 for d in delays.take(100))
        True
        >>> next(range_from_millis(7, 7))
        Duration(seconds=0, nanos=7000000)

        ```
    """

    def __init__(self, minimum: int, maximum: int, rng: random.Random | None = None) -> None:
        validate_range(minimum, maximum)
        self.minimum = minimum
        self.maximum = maximum
        self._rng = rng if rng is not None else random.Random()  # noqa: S311
        if minimum == maximum:
            logger.debug(f"Range delay is degenerate, every delay is {minimum}ms")

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(minimum={self.minimum}, maximum={self.maximum})"

    def __next__(self) -> Duration:
        if self.minimum == self.maximum:
            return Duration.from_millis(self.minimum)
        return Duration.from_millis(self._rng.randrange(self.minimum, self.maximum))


def range_from_millis(minimum: int, maximum: int, rng: random.Random | None = None) -> Range:
    """Create a ``Range`` between the given millisecond bounds.

    Args:
        minimum: The inclusive lower bound in milliseconds.
        maximum: The exclusive upper bound in milliseconds.
        rng: Optional random source.

    Returns:
        The range delay generator.

    Raises:
        ValueError: If minimum > maximum.
    """
    return Range(minimum, maximum, rng=rng)
