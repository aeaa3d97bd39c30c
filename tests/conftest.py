"""Pytest configuration and fixtures."""

from collections.abc import Callable

import pytest

from thermalpos.models.image import ImageData

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)

RGBA = tuple[int, int, int, int]


def image_from_rows(rows: list[list[RGBA]]) -> ImageData:
    """Build ImageData from a list of rows of RGBA tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    pixels = bytes(channel for row in rows for pixel in row for channel in pixel)
    return ImageData(width=width, height=height, pixels=pixels)


@pytest.fixture
def solid_image() -> Callable[..., ImageData]:
    """Factory for single-color images."""

    def _make(width: int, height: int, color: RGBA = BLACK) -> ImageData:
        return image_from_rows([[color] * width for _ in range(height)]) if height else ImageData(width, 0, b"")

    return _make


@pytest.fixture
def rows_image() -> Callable[[list[list[RGBA]]], ImageData]:
    """Factory for images given as rows of RGBA tuples."""
    return image_from_rows
