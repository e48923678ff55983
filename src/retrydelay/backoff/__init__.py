r"""Delay generators for retryable operations.

This package provides infinite delay sequences for retry loops,
including exponential, Fibonacci, fixed, zero and random range delay
patterns.
"""

from __future__ import annotations

__all__ = [
    "BaseDelay",
    "Exponential",
    "Fibonacci",
    "Fixed",
    "NoDelay",
    "Range",
    "SynchronizedDelay",
    "create_delay",
    "exponential_from_millis",
    "fibonacci_from_millis",
    "fixed_from_millis",
    "no_delay",
    "range_from_millis",
]

from retrydelay.backoff.base import BaseDelay
from retrydelay.backoff.exponential import Exponential, exponential_from_millis
from retrydelay.backoff.factory import create_delay
from retrydelay.backoff.fibonacci import Fibonacci, fibonacci_from_millis
from retrydelay.backoff.fixed import Fixed, fixed_from_millis
from retrydelay.backoff.no_delay import NoDelay, no_delay
from retrydelay.backoff.range import Range, range_from_millis
from retrydelay.backoff.synchronized import SynchronizedDelay
