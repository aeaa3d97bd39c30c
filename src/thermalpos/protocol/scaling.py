"""Aspect-preserving dimension scaling for images constrained before rasterization."""

from collections.abc import Mapping
from typing import NamedTuple

from thermalpos.errors import MalformedInput


class Dimensions(NamedTuple):
    """Image dimensions in pixels; values may be fractional after scaling."""

    width: float | None
    height: float | None

    def rounded(self) -> tuple[int, int]:
        """Integer pixel size for a resampler, never smaller than 1x1."""
        if self.width is None or self.height is None:
            raise MalformedInput("Dimensions are malformed")
        return max(1, round(self.width)), max(1, round(self.height))


def _coerce(dims: Dimensions | Mapping[str, float | None]) -> tuple[float, float]:
    if isinstance(dims, Mapping):
        width, height = dims.get("width"), dims.get("height")
    else:
        width, height = dims
    if width is None or height is None:
        raise MalformedInput("Original dimensions are malformed")
    return width, height


def scale_to_width(dims: Dimensions | Mapping[str, float | None], target_width: float | None) -> Dimensions:
    """Scale dimensions to a target width, keeping the aspect ratio.

    Args:
        dims: Original dimensions.
        target_width: Width to scale to.

    Returns:
        Dimensions with the target width and a proportional height.

    Raises:
        MalformedInput: If a dimension or the target is missing.
    """
    width, height = _coerce(dims)
    if target_width is None:
        raise MalformedInput("Missing target width")
    if width == 0:
        raise MalformedInput("Cannot scale an image with zero width")
    return Dimensions(width=target_width, height=height * (target_width / width))


def scale_to_height(dims: Dimensions | Mapping[str, float | None], target_height: float | None) -> Dimensions:
    """Scale dimensions to a target height, keeping the aspect ratio.

    Args:
        dims: Original dimensions.
        target_height: Height to scale to.

    Returns:
        Dimensions with the target height and a proportional width.

    Raises:
        MalformedInput: If a dimension or the target is missing.
    """
    width, height = _coerce(dims)
    if target_height is None:
        raise MalformedInput("Missing target height")
    if height == 0:
        raise MalformedInput("Cannot scale an image with zero height")
    return Dimensions(width=width * (target_height / height), height=target_height)
