r"""Configuration dataclass and defaults for delay generators.

This module provides configuration constants and a dataclass-based
configuration object that selects and parameterizes a delay policy, for
callers that pick their backoff policy at runtime (e.g. from a settings
file).
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MILLIS",
    "DEFAULT_POLICY",
    "DEFAULT_RANGE_MAXIMUM",
    "DEFAULT_RANGE_MINIMUM",
    "MAX_MILLIS",
    "POLICY_NAMES",
    "DelayConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from retrydelay.core.validation import validate_base, validate_millis, validate_range

if TYPE_CHECKING:
    import random

    from retrydelay.backoff.base import BaseDelay


# Largest delay in milliseconds produced by the growing generators
# Exponential and Fibonacci saturate at this value instead of overflowing
MAX_MILLIS = 2**64 - 1

# Default policy when none is configured
DEFAULT_POLICY = "exponential"

# Default delay in milliseconds for exponential, fibonacci and fixed policies
# For exponential it is also the multiplier: 100ms, 10s, 1000s, ...
DEFAULT_MILLIS = 100

# Default bounds in milliseconds for the range policy: [100, 1000)
DEFAULT_RANGE_MINIMUM = 100
DEFAULT_RANGE_MAXIMUM = 1000

POLICY_NAMES = ("exponential", "fibonacci", "fixed", "no_delay", "range")


@dataclass
class DelayConfig:
    """Configuration selecting a delay policy and its parameters.

    Only the parameters relevant to ``policy`` are used when creating the
    generator: ``millis`` for ``"exponential"`` (as ``base``),
    ``"fibonacci"`` and ``"fixed"``, ``minimum`` and ``maximum`` for
    ``"range"``, nothing for ``"no_delay"``. All of them are validated.

    Args:
        policy: The policy name. One of ``POLICY_NAMES``.
        millis: The delay in milliseconds. Must be >= 0, and >= 1 for
            the exponential policy.
        minimum: The inclusive lower bound of the range policy.
        maximum: The exclusive upper bound of the range policy.

    Raises:
        ValueError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from retrydelay.core.config import DelayConfig
        >>> config = DelayConfig(policy="fibonacci", millis=10)
        >>> [d.as_millis() for d in config.create().take(5)]
        [10, 10, 20, 30, 50]
        >>> merged = config.merge(policy="fixed")
        >>> merged.policy
        'fixed'
        >>> config.policy  # Original unchanged
        'fibonacci'

        ```
    """

    policy: str = DEFAULT_POLICY
    millis: int = DEFAULT_MILLIS
    minimum: int = DEFAULT_RANGE_MINIMUM
    maximum: int = DEFAULT_RANGE_MAXIMUM

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        if self.policy not in POLICY_NAMES:
            msg = f"policy must be one of {list(POLICY_NAMES)}, got {self.policy!r}"
            raise ValueError(msg)
        if self.policy == "exponential":
            validate_base(self.millis)
        else:
            validate_millis("millis", self.millis)
        validate_range(self.minimum, self.maximum)

    def merge(self, **overrides: Any) -> DelayConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new DelayConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Example:
            ```pycon
            >>> from retrydelay.core.config import DelayConfig
            >>> DelayConfig(policy="range", minimum=5, maximum=15).to_dict()
            {'policy': 'range', 'millis': 100, 'minimum': 5, 'maximum': 15}

            ```
        """
        return {
            "policy": self.policy,
            "millis": self.millis,
            "minimum": self.minimum,
            "maximum": self.maximum,
        }

    def create(self, rng: random.Random | None = None) -> BaseDelay:
        """Create a new delay generator from this configuration.

        Args:
            rng: Optional random source, only used by the range policy.

        Returns:
            A fresh delay generator. Each call returns an independent
            instance.
        """
        from retrydelay.backoff.factory import create_delay  # noqa: PLC0415

        if self.policy == "exponential":
            return create_delay(self.policy, base=self.millis)
        if self.policy in {"fibonacci", "fixed"}:
            return create_delay(self.policy, millis=self.millis)
        if self.policy == "range":
            return create_delay(self.policy, minimum=self.minimum, maximum=self.maximum, rng=rng)
        return create_delay(self.policy)
