r"""Runtime selection of a delay generator by policy name."""

from __future__ import annotations

__all__ = ["POLICIES", "create_delay"]

import logging
from typing import TYPE_CHECKING, Any

from retrydelay.backoff.exponential import exponential_from_millis
from retrydelay.backoff.fibonacci import fibonacci_from_millis
from retrydelay.backoff.fixed import fixed_from_millis
from retrydelay.backoff.no_delay import no_delay
from retrydelay.backoff.range import range_from_millis

if TYPE_CHECKING:
    from collections.abc import Callable

    from retrydelay.backoff.base import BaseDelay

logger: logging.Logger = logging.getLogger(__name__)

POLICIES: dict[str, Callable[..., BaseDelay]] = {
    "exponential": exponential_from_millis,
    "fibonacci": fibonacci_from_millis,
    "fixed": fixed_from_millis,
    "no_delay": no_delay,
    "range": range_from_millis,
}


def create_delay(policy: str, **kwargs: Any) -> BaseDelay:
    """Create a delay generator from its policy name.

    Args:
        policy: The policy name. One of ``"exponential"``,
            ``"fibonacci"``, ``"fixed"``, ``"no_delay"`` or ``"range"``.
        **kwargs: The arguments of the policy constructor, e.g.
            ``base`` for ``"exponential"``, ``millis`` for
            ``"fibonacci"`` and ``"fixed"``, ``minimum`` and ``maximum``
            for ``"range"``.

    Returns:
        A new delay generator.

    Raises:
        ValueError: If the policy is unknown.

    Example:
        ```pycon
        >>> from retrydelay import create_delay
        >>> delays = create_delay("exponential", base=3)
        >>> [d.as_millis() for d in delays.take(3)]
        [3, 9, 27]

        ```
    """
    factory = POLICIES.get(policy)
    if factory is None:
        msg = f"Unknown delay policy {policy!r}. Valid policies are: {sorted(POLICIES)}"
        raise ValueError(msg)
    delay = factory(**kwargs)
    logger.debug(f"Created {policy} delay: {delay!r}")
    return delay
