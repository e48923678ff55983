r"""Delay generator that never waits."""

from __future__ import annotations

__all__ = ["NoDelay", "no_delay"]

from retrydelay.backoff.base import BaseDelay
from retrydelay.duration import Duration


class NoDelay(BaseDelay):
    """Delay generator that always returns a zero duration.

    Useful to retry immediately, for example when attempts are already
    throttled by an external limiter.

    Example:
        ```pycon
        >>> from retrydelay import no_delay
        >>> next(no_delay())
        Duration(seconds=0, nanos=0)

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __next__(self) -> Duration:
        return Duration.ZERO


def no_delay() -> NoDelay:
    return NoDelay()
