r"""Parameter validation utilities for delay generators.

This module provides validation functions for delay parameters to ensure
they meet the required constraints before a generator is constructed.
"""

from __future__ import annotations

__all__ = ["validate_base", "validate_millis", "validate_range"]


def validate_millis(name: str, value: int) -> None:
    """Validate a millisecond parameter.

    Args:
        name: The parameter name, used in error messages.
        value: The number of milliseconds. Must be an integer >= 0.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is negative.

    Example:
        ```pycon
        >>> from retrydelay.core.validation import validate_millis
        >>> validate_millis("millis", 100)
        >>> validate_millis("millis", -1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: millis must be >= 0, got -1

        ```
    """
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{name} must be an integer number of milliseconds, got {value!r}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_base(base: int) -> None:
    """Validate the base of an exponential delay.

    Args:
        base: The first delay in milliseconds and the growth multiplier.
            Must be an integer >= 1.

    Raises:
        TypeError: If base is not an integer.
        ValueError: If base is lower than 1.
    """
    validate_millis("base", base)
    if base < 1:
        msg = f"base must be >= 1, got {base}"
        raise ValueError(msg)


def validate_range(minimum: int, maximum: int) -> None:
    """Validate the bounds of a random range delay.

    Args:
        minimum: The inclusive lower bound in milliseconds.
        maximum: The exclusive upper bound in milliseconds.

    Raises:
        TypeError: If a bound is not an integer.
        ValueError: If a bound is negative or if minimum > maximum.

    Example:
        ```pycon
        >>> from retrydelay.core.validation import validate_range
        >>> validate_range(5, 15)
        >>> validate_range(5, 5)
        >>> validate_range(15, 5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: minimum must be <= maximum, got minimum=15 and maximum=5

        ```
    """
    validate_millis("minimum", minimum)
    validate_millis("maximum", maximum)
    if minimum > maximum:
        msg = f"minimum must be <= maximum, got minimum={minimum} and maximum={maximum}"
        raise ValueError(msg)
