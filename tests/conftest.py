"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tilecam.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test.

    This fixture runs automatically before each test to configure settings
    and resets them after the test completes.

    Yields:
        None
    """
    settings.configure(
        CAMERA_SPEED=5.0,
        TILE_WIDTH=32,
        TILE_HEIGHT=32,
        CAMERA_KEYS={
            "up": ["UP"],
            "down": ["DOWN"],
            "left": ["LEFT"],
            "right": ["RIGHT"],
        },
    )
    yield
    # Reset settings after test
    settings._wrapped = None
