r"""Fixed delay generator."""

from __future__ import annotations

__all__ = ["Fixed", "fixed_from_millis"]

from retrydelay.backoff.base import BaseDelay
from retrydelay.core.validation import validate_millis
from retrydelay.duration import Duration


class Fixed(BaseDelay):
    """Fixed delay generator.

    Returns the same delay for every pull. The generator never mutates,
    so a single instance can be shared between threads.

    This strategy is useful for testing or when you know the exact delay
    that works best for a particular service.

    Args:
        millis: The delay in milliseconds. Must be >= 0.

    Example:
        ```pycon
        >>> from retrydelay import fixed_from_millis
        >>> delays = fixed_from_millis(250)
        >>> next(delays)
        Duration(seconds=0, nanos=250000000)
        >>> next(delays)
        Duration(seconds=0, nanos=250000000)

        ```
    """

    def __init__(self, millis: int) -> None:
        validate_millis("millis", millis)
        self.duration = Duration.from_millis(millis)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration!r})"

    def __next__(self) -> Duration:
        return self.duration


def fixed_from_millis(millis: int) -> Fixed:
    """Create a ``Fixed`` delay of the given milliseconds."""
    return Fixed(millis)
