r"""Thread-safe wrapper around a delay generator."""

from __future__ import annotations

__all__ = ["SynchronizedDelay"]

import threading
from typing import TYPE_CHECKING

from retrydelay.backoff.base import BaseDelay

if TYPE_CHECKING:
    from retrydelay.duration import Duration


class SynchronizedDelay(BaseDelay):
    """Delay generator that serializes pulls on a wrapped generator.

    ``Exponential``, ``Fibonacci`` and ``Range`` mutate their state on
    every pull. Wrap them in a ``SynchronizedDelay`` when one instance
    is shared by several threads, so every pull observes and advances
    the state atomically.

    Args:
        delay: The generator to wrap.

    Example:
        ```pycon
        >>> from retrydelay import SynchronizedDelay, fibonacci_from_millis
        >>> delays = SynchronizedDelay(fibonacci_from_millis(10))
        >>> [d.as_millis() for d in delays.take(4)]
        [10, 10, 20, 30]

        ```
    """

    def __init__(self, delay: BaseDelay) -> None:
        self.delay = delay
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.delay!r})"

    def __next__(self) -> Duration:
        with self._lock:
            return next(self.delay)
