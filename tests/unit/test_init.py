r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import retrydelay

if TYPE_CHECKING:
    from unittest.mock import Mock


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(retrydelay.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in retrydelay.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in retrydelay.__all__:
        assert hasattr(retrydelay, name), f"{name} is in __all__ but not defined in module"


@pytest.mark.parametrize(
    "func_name",
    [
        "exponential_from_millis",
        "fibonacci_from_millis",
        "fixed_from_millis",
        "jitter",
        "no_delay",
        "range_from_millis",
        "create_delay",
    ],
)
def test_public_functions_are_callable(func_name: str) -> None:
    """Test that all public functions are callable."""
    assert callable(getattr(retrydelay, func_name)), f"{func_name} is not callable"


def test_retry_loop_usage(mock_sleep: Mock) -> None:
    """Test the intended usage from a caller's retry loop."""
    import time

    attempts = 0
    for _, delay in zip(range(4), retrydelay.fibonacci_from_millis(10)):
        attempts += 1
        time.sleep(delay.total_seconds())
    assert attempts == 4
    assert [c.args[0] for c in mock_sleep.call_args_list] == [0.01, 0.01, 0.02, 0.03]
