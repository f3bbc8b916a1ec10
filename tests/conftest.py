"""
Shared fixtures. Headless matplotlib backend for render tests.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from edgearc.core.types import Size


@pytest.fixture
def size_100x50() -> Size:
    return Size(100.0, 50.0)
