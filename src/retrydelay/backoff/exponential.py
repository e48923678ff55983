r"""Exponential delay generator."""

from __future__ import annotations

__all__ = ["Exponential", "exponential_from_millis"]

import logging

from retrydelay.backoff.base import BaseDelay
from retrydelay.core.config import MAX_MILLIS
from retrydelay.core.validation import validate_base
from retrydelay.duration import Duration

logger: logging.Logger = logging.getLogger(__name__)


class Exponential(BaseDelay):
    """Exponential delay generator.

    Each pull returns the current delay and then multiplies it by
    ``base``. The same ``base`` value is the first delay in milliseconds
    AND the growth factor, so the sequence is ``base ** n`` milliseconds
    for the n-th pull. Large bases grow very quickly: ``base=1000`` jumps
    from one second to 1000 seconds on the second pull.

    There is no upper cap on the delays other than overflow protection:
    once the delay would exceed ``MAX_MILLIS`` it saturates there, and
    every later pull returns ``MAX_MILLIS`` milliseconds.

    Args:
        base: The first delay in milliseconds and the multiplier.
            Must be an integer >= 1.

    Raises:
        ValueError: If base is lower than 1.

    Example:
        ```pycon
        >>> from retrydelay import exponential_from_millis
        >>> delays = exponential_from_millis(2)
        >>> [d.as_millis() for d in delays.take(5)]
        [2, 4, 8, 16, 32]

        ```
    """

    def __init__(self, base: int) -> None:
        validate_base(base)
        self.base = base
        self.current = base

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base={self.base}, current={self.current})"

    def __next__(self) -> Duration:
        duration = Duration.from_millis(self.current)
        if self.current < MAX_MILLIS:
            self.current = self.current * self.base
            if self.current > MAX_MILLIS:
                logger.debug(f"Exponential delay saturated at {MAX_MILLIS}ms (base={self.base})")
                self.current = MAX_MILLIS
        return duration


def exponential_from_millis(base: int) -> Exponential:
    """Create an ``Exponential`` using ``base`` milliseconds as the initial
    delay and as the multiplier.

    Args:
        base: The first delay in milliseconds and the multiplier.

    Returns:
        The exponential delay generator.
    """
    return Exponential(base)
