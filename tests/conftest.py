from __future__ import annotations

import random
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep so retry loops in tests do not wait."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random source for reproducible draws."""
    return random.Random(2024)
