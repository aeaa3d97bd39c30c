"""Pillow adapter: decode, constrain and convert images for the encoders."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from PIL import Image

from thermalpos.config import settings as app_settings
from thermalpos.encoders.raster import encode_raster
from thermalpos.errors import MalformedInput, UnsupportedOperation
from thermalpos.models.image import ImageData
from thermalpos.models.settings import RasterSettings
from thermalpos.protocol.scaling import Dimensions, scale_to_height, scale_to_width

logger = logging.getLogger(__name__)

SUPPORTED_FILETYPES = {"png"}


def image_from_pil(image: Image.Image) -> ImageData:
    """Convert a PIL image to flat RGBA data."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    width, height = image.size
    return ImageData(width=width, height=height, pixels=image.tobytes())


def constrain_image(image: Image.Image, max_width: int, max_height: int) -> Image.Image:
    """Shrink an image that exceeds the printable area, keeping its aspect ratio.

    Height is checked first; an image scaled to ``max_height`` is not
    checked against ``max_width`` again.
    """
    dims = Dimensions(*image.size)

    if image.height > max_height:
        target = scale_to_height(dims, max_height)
    elif image.width > max_width:
        target = scale_to_width(dims, max_width)
    else:
        return image

    size = target.rounded()
    logger.debug(f"Resizing image from {image.width}x{image.height} to {size[0]}x{size[1]}")
    return image.resize(size, Image.Resampling.LANCZOS)


def encode_image_file(
    path: Path | str,
    filetype: str = "png",
    settings: RasterSettings | Mapping[str, Any] | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
) -> bytes:
    """Read an image file and encode it as raster bands.

    Args:
        path: Image file to read.
        filetype: "png"; "bmp" is recognised but not supported.
        settings: Raster options.
        max_width: Width limit in dots (defaults to the configured limit).
        max_height: Height limit in dots (defaults to the configured limit).

    Raises:
        UnsupportedOperation: For BMP files.
        MalformedInput: For unknown file types or undecodable files.
    """
    filetype = filetype.lower()
    if filetype == "bmp":
        raise UnsupportedOperation("Printing BMP images is not implemented")
    if filetype not in SUPPORTED_FILETYPES:
        raise MalformedInput(f"Unknown image file type: {filetype}")

    max_width = app_settings.max_image_width if max_width is None else max_width
    max_height = app_settings.max_image_height if max_height is None else max_height

    try:
        with Image.open(path) as img:
            img.load()
            image = constrain_image(img, max_width, max_height)
            data = image_from_pil(image)
    except (OSError, Image.DecompressionBombError) as e:
        raise MalformedInput(f"Failed to read image {path}: {e}") from e

    return encode_raster(data, settings)
