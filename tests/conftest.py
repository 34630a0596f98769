"""Pytest configuration for screenshot-beautify tests."""

import pytest
from PIL import Image

from screenshot_beautify.config import CompositionConfig


@pytest.fixture
def small_config():
    """Config with small dimensions so compositions stay fast."""
    return CompositionConfig(
        padding=10,
        corner_radius=4,
        title_bar_height=12,
        shadow_blur=4,
        shadow_offset=(0, 2),
    )


@pytest.fixture
def screenshot(tmpdir):
    """Path of a 40x30 opaque screenshot."""
    path = tmpdir.join("shot.png").strpath
    Image.new("RGB", (40, 30), (10, 200, 30)).save(path)
    return path
