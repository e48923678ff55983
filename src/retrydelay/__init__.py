r"""retrydelay - Delay sequences for retryable operations.

This package computes how long to wait between successive attempts of a
retryable operation (network calls, lock acquisition, distributed
coordination, ...). It does not retry, sleep or schedule anything: each
delay generator is an infinite iterator of ``Duration`` values that the
caller's retry loop pulls from, and ``jitter`` randomizes a single delay.

Key Features:
    - Exponential, Fibonacci, fixed, zero and random range delays
    - Full random jitter to avoid thundering herds
    - Nanosecond precision ``Duration`` value type
    - Injectable random sources for reproducible sequences
    - Runtime policy selection with ``create_delay`` and ``DelayConfig``

Example:
    ```pycon
    >>> import time
    >>> from retrydelay import fibonacci_from_millis, jitter
    >>> delays = fibonacci_from_millis(10)
    >>> for attempt, delay in zip(range(3), delays):
    ...     time.sleep(jitter(delay).total_seconds())  # doctest: +SKIP
    ...
    >>> [d.as_millis() for d in fibonacci_from_millis(10).take(6)]
    [10, 10, 20, 30, 50, 80]

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseDelay",
    "DelayConfig",
    "Duration",
    "Exponential",
    "Fibonacci",
    "Fixed",
    "NoDelay",
    "Range",
    "SynchronizedDelay",
    "__version__",
    "create_delay",
    "exponential_from_millis",
    "fibonacci_from_millis",
    "fixed_from_millis",
    "jitter",
    "no_delay",
    "range_from_millis",
]

from importlib.metadata import PackageNotFoundError, version

from retrydelay.backoff import (
    BaseDelay,
    Exponential,
    Fibonacci,
    Fixed,
    NoDelay,
    Range,
    SynchronizedDelay,
    create_delay,
    exponential_from_millis,
    fibonacci_from_millis,
    fixed_from_millis,
    no_delay,
    range_from_millis,
)
from retrydelay.core.config import DelayConfig
from retrydelay.duration import Duration
from retrydelay.jitter import jitter

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
