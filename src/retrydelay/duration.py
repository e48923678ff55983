r"""Duration value type used by every delay generator.

A ``Duration`` is an immutable, non-negative span of time stored as whole
seconds plus a sub-second nanosecond component. It keeps nanosecond
precision, which ``datetime.timedelta`` cannot, so that ``jitter`` can
scale both components independently.
"""

from __future__ import annotations

__all__ = ["NANOS_PER_MILLI", "NANOS_PER_SECOND", "Duration"]

import datetime
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1_000


@total_ordering
@dataclass(frozen=True, init=False)
class Duration:
    """Immutable non-negative span of time.

    Nanoseconds beyond one second are carried into ``seconds`` so that
    ``nanos`` always lies in ``[0, 1_000_000_000)``.

    Args:
        seconds: The whole seconds. Must be >= 0.
        nanos: The additional nanoseconds. Must be >= 0.

    Raises:
        ValueError: If either component is negative.

    Example:
        ```pycon
        >>> from retrydelay import Duration
        >>> Duration(1, 500_000_000)
        Duration(seconds=1, nanos=500000000)
        >>> Duration(0, 2_500_000_000)
        Duration(seconds=2, nanos=500000000)
        >>> Duration.from_millis(1500).total_seconds()
        1.5

        ```
    """

    seconds: int
    nanos: int

    ZERO: ClassVar[Duration]

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        if seconds < 0:
            msg = f"seconds must be non-negative, got {seconds}"
            raise ValueError(msg)
        if nanos < 0:
            msg = f"nanos must be non-negative, got {nanos}"
            raise ValueError(msg)
        extra, nanos = divmod(int(nanos), NANOS_PER_SECOND)
        object.__setattr__(self, "seconds", int(seconds) + extra)
        object.__setattr__(self, "nanos", nanos)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        """Create a duration from a number of milliseconds.

        Args:
            millis: The number of milliseconds. Must be >= 0.

        Returns:
            The duration.

        Example:
            ```pycon
            >>> from retrydelay import Duration
            >>> Duration.from_millis(2_250)
            Duration(seconds=2, nanos=250000000)

            ```
        """
        if millis < 0:
            msg = f"millis must be non-negative, got {millis}"
            raise ValueError(msg)
        seconds, millis = divmod(millis, MILLIS_PER_SECOND)
        return cls(seconds, millis * NANOS_PER_MILLI)

    @classmethod
    def from_secs_nanos(cls, seconds: int, nanos: int) -> Duration:
        """Create a duration from separate seconds and nanoseconds."""
        return cls(seconds, nanos)

    @property
    def subsec_nanos(self) -> int:
        """The fractional part of the duration, in nanoseconds."""
        return self.nanos

    def as_millis(self) -> int:
        """Return the whole number of milliseconds, truncating any
        remainder."""
        return self.seconds * MILLIS_PER_SECOND + self.nanos // NANOS_PER_MILLI

    def as_nanos(self) -> int:
        """Return the total number of nanoseconds."""
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def total_seconds(self) -> float:
        """Return the duration in seconds, suitable for ``time.sleep``.

        Example:
            ```pycon
            >>> from retrydelay import Duration
            >>> Duration.from_millis(250).total_seconds()
            0.25

            ```
        """
        return self.seconds + self.nanos / NANOS_PER_SECOND

    def to_timedelta(self) -> datetime.timedelta:
        """Convert to a ``datetime.timedelta``.

        Sub-microsecond precision is lost by the conversion.
        """
        return datetime.timedelta(seconds=self.seconds, microseconds=self.nanos // 1_000)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds, self.nanos + other.nanos)

    def __mul__(self, factor: object) -> Duration:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        if factor < 0:
            msg = f"factor must be non-negative, got {factor}"
            raise ValueError(msg)
        return Duration(0, self.as_nanos() * factor)

    __rmul__ = __mul__

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self.seconds, self.nanos) < (other.seconds, other.nanos)

    def __bool__(self) -> bool:
        return self.seconds != 0 or self.nanos != 0


Duration.ZERO = Duration()
