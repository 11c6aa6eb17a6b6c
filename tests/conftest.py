"""Shared fixtures for the test suite."""

import pytest
from PIL import Image


@pytest.fixture
def make_png(tmp_path):
    """Write a solid-color PNG and return its path."""

    def _make(width, height, color=(40, 120, 200, 255), name="bg.png"):
        path = tmp_path / name
        Image.new("RGBA", (width, height), color).save(path, "PNG")
        return str(path)

    return _make
