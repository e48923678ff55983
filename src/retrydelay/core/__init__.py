r"""Core configuration and validation for delay generators."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MILLIS",
    "DEFAULT_POLICY",
    "DEFAULT_RANGE_MAXIMUM",
    "DEFAULT_RANGE_MINIMUM",
    "MAX_MILLIS",
    "POLICY_NAMES",
    "DelayConfig",
    "validate_base",
    "validate_millis",
    "validate_range",
]

from retrydelay.core.config import (
    DEFAULT_MILLIS,
    DEFAULT_POLICY,
    DEFAULT_RANGE_MAXIMUM,
    DEFAULT_RANGE_MINIMUM,
    MAX_MILLIS,
    POLICY_NAMES,
    DelayConfig,
)
from retrydelay.core.validation import validate_base, validate_millis, validate_range
