r"""Unit tests for Range delay generator."""

from __future__ import annotations

import random
from collections import Counter
from unittest.mock import Mock

import pytest

from retrydelay.backoff.range import Range, range_from_millis
from retrydelay.duration import Duration


def test_range_bounds() -> None:
    """Test that 10,000 pulls all lie in [minimum, maximum)."""
    delay = range_from_millis(5, 15)
    for d in delay.take(10_000):
        assert Duration.from_millis(5) <= d < Duration.from_millis(15)


def test_range_is_approximately_uniform() -> None:
    """Test that the empirical distribution is approximately uniform."""
    delay = range_from_millis(5, 15, rng=random.Random(12345))
    counts = Counter(d.as_millis() for d in delay.take(10_000))
    assert sorted(counts) == list(range(5, 15))
    # Expected 1000 per bucket, standard deviation is 30
    for value, count in counts.items():
        assert 850 <= count <= 1150, f"{value}ms drawn {count} times"


def test_range_uses_injected_rng() -> None:
    """Test that draws come from the injected random source."""
    delay = range_from_millis(0, 1000, rng=random.Random(42))
    expected = random.Random(42)
    assert [d.as_millis() for d in delay.take(20)] == [
        expected.randrange(0, 1000) for _ in range(20)
    ]


def test_range_calls_randrange_with_bounds() -> None:
    """Test that each pull draws one sample with the configured bounds."""
    rng = Mock(spec=random.Random)
    rng.randrange.return_value = 7
    delay = Range(5, 15, rng=rng)
    assert next(delay) == Duration.from_millis(7)
    rng.randrange.assert_called_once_with(5, 15)


def test_range_instances_are_independent() -> None:
    """Test that two default instances do not share a random source."""
    first = range_from_millis(0, 10)
    second = range_from_millis(0, 10)
    assert first._rng is not second._rng


def test_range_degenerate() -> None:
    """Test that minimum == maximum always yields minimum."""
    rng = Mock(spec=random.Random)
    delay = range_from_millis(7, 7, rng=rng)
    assert delay.take(100) == [Duration.from_millis(7)] * 100
    rng.randrange.assert_not_called()


def test_range_attributes() -> None:
    delay = Range(5, 15)
    assert delay.minimum == 5
    assert delay.maximum == 15
    assert repr(delay) == "Range(minimum=5, maximum=15)"


def test_range_reversed_bounds() -> None:
    """Test that minimum > maximum fails at construction."""
    with pytest.raises(ValueError, match=r"minimum must be <= maximum"):
        range_from_millis(15, 5)


def test_range_negative_minimum() -> None:
    """Test that a negative bound fails at construction."""
    with pytest.raises(ValueError, match=r"minimum must be >= 0"):
        range_from_millis(-5, 5)
