from __future__ import annotations

import pytest

from retrydelay.core import validate_base, validate_millis, validate_range

#####################################
#     Tests for validate_millis     #
#####################################


@pytest.mark.parametrize("millis", [0, 1, 100, 2**64 - 1])
def test_validate_millis_accepts_valid_values(millis: int) -> None:
    """Test that validate_millis accepts non-negative integers."""
    validate_millis("millis", millis)


def test_validate_millis_rejects_negative() -> None:
    """Test that validate_millis rejects negative values."""
    with pytest.raises(ValueError, match=r"millis must be >= 0, got -1"):
        validate_millis("millis", -1)


def test_validate_millis_uses_parameter_name() -> None:
    """Test that the error message names the parameter."""
    with pytest.raises(ValueError, match=r"seed must be >= 0, got -5"):
        validate_millis("seed", -5)


@pytest.mark.parametrize("millis", [1.5, "10", None, True])
def test_validate_millis_rejects_non_integer(millis: object) -> None:
    """Test that validate_millis rejects non-integer values."""
    with pytest.raises(TypeError, match=r"millis must be an integer number of milliseconds"):
        validate_millis("millis", millis)  # type: ignore[arg-type]


###################################
#     Tests for validate_base     #
###################################


@pytest.mark.parametrize("base", [1, 2, 1000])
def test_validate_base_accepts_valid_values(base: int) -> None:
    """Test that validate_base accepts integers >= 1."""
    validate_base(base)


def test_validate_base_rejects_zero() -> None:
    """Test that validate_base rejects a zero base."""
    with pytest.raises(ValueError, match=r"base must be >= 1, got 0"):
        validate_base(0)


def test_validate_base_rejects_negative() -> None:
    """Test that validate_base rejects a negative base."""
    with pytest.raises(ValueError, match=r"base must be >= 0, got -2"):
        validate_base(-2)


####################################
#     Tests for validate_range     #
####################################


@pytest.mark.parametrize(("minimum", "maximum"), [(0, 0), (5, 15), (5, 5), (0, 1)])
def test_validate_range_accepts_valid_values(minimum: int, maximum: int) -> None:
    """Test that validate_range accepts minimum <= maximum."""
    validate_range(minimum, maximum)


def test_validate_range_rejects_reversed_bounds() -> None:
    """Test that validate_range rejects minimum > maximum."""
    with pytest.raises(
        ValueError, match=r"minimum must be <= maximum, got minimum=15 and maximum=5"
    ):
        validate_range(15, 5)


def test_validate_range_rejects_negative_minimum() -> None:
    """Test that validate_range rejects a negative minimum."""
    with pytest.raises(ValueError, match=r"minimum must be >= 0, got -1"):
        validate_range(-1, 5)
