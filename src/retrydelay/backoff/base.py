r"""Abstract base class for delay generators."""

from __future__ import annotations

__all__ = ["BaseDelay"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retrydelay.duration import Duration


class BaseDelay(ABC):
    """Abstract base class for delay generators.

    A delay generator is an infinite iterator of ``Duration`` values: each
    call to ``next()`` returns how long to wait before the next attempt of
    a retryable operation. It never raises ``StopIteration``, so the
    consuming retry loop decides when to stop pulling.

    Instances are not safe for unsynchronized concurrent pulls unless the
    subclass documents otherwise. See ``SynchronizedDelay``.
    """

    def __iter__(self) -> BaseDelay:
        return self

    @abstractmethod
    def __next__(self) -> Duration:
        """Return the next delay of the sequence.

        Returns:
            The duration to wait before the next attempt.
        """

    def take(self, count: int) -> list[Duration]:
        """Pull the next ``count`` delays.

        Args:
            count: The number of delays to pull. Must be >= 0.

        Returns:
            The pulled delays, in order.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            msg = f"count must be >= 0, got {count}"
            raise ValueError(msg)
        return [next(self) for _ in range(count)]
