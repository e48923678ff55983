r"""Random jitter applied to a single delay.

Jitter decorrelates the retries of many independent callers that failed
at the same moment (thundering herd), by shrinking each delay to a random
fraction of its nominal value. It is applied by the caller on top of the
output of any delay generator.
"""

from __future__ import annotations

__all__ = ["jitter"]

import logging
import math
import random

from retrydelay.duration import Duration

logger: logging.Logger = logging.getLogger(__name__)


def jitter(duration: Duration, rng: random.Random | None = None) -> Duration:
    """Apply full random jitter to a duration.

    One fraction ``j`` is drawn uniformly from ``[0, 1]`` and the whole
    seconds and the sub-second nanoseconds are each scaled by ``j`` and
    rounded up independently:

    - ``seconds = ceil(duration.seconds * j)``
    - ``nanos = ceil(duration.subsec_nanos * j)``

    Because the two components are rounded separately, the result can
    differ from scaling the whole duration as one real number. For
    instance ``1.5s`` jittered with ``j=0.5`` gives ``1.25s`` rather
    than ``0.75s``. The result still lies in ``[0, duration]``.

    Args:
        duration: The nominal delay.
        rng: Optional random source. Defaults to the module-level
            ``random`` functions.

    Returns:
        The jittered delay.

    Example:
        ```pycon
        >>> import random
        >>> from retrydelay import Duration, jitter
        >>> delay = jitter(Duration.from_millis(1000), rng=random.Random(0))
        >>> Duration.ZERO <= delay <= Duration.from_millis(1000)
        True

        ```
    """
    fraction = (rng or random).uniform(0.0, 1.0)  # noqa: S311
    seconds = math.ceil(duration.seconds * fraction)
    nanos = math.ceil(duration.subsec_nanos * fraction)
    jittered = Duration.from_secs_nanos(seconds, nanos)
    logger.debug(f"Jittered delay {duration!r} to {jittered!r} (fraction={fraction:.4f})")
    return jittered
