"""Convert RGBA images to ESC * bit-image bands."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from thermalpos.encoders.text import PrintColor, append_print_color
from thermalpos.models.image import ImageData, Pixel, PixelMatrix
from thermalpos.models.settings import RasterSettings
from thermalpos.protocol.buffer import CommandBuffer
from thermalpos.protocol.commands import (
    DEFAULT_RASTER_MODE,
    LINE_FEED,
    RASTER_MODE_BY_DENSITY,
    RASTER_PREFIX,
)
from thermalpos.protocol.numbers import two_byte

logger = logging.getLogger(__name__)

BAND_HEIGHT = 8

# A pixel prints when it is opaque enough and dark enough
ALPHA_THRESHOLD = 126
LUMINANCE_THRESHOLD = 128

# A pure red pixel marks its whole band for the red print head
RED_MIN = 250


def luminance(pixel: Pixel) -> float:
    """Perceptual grayscale value (ITU-R BT.709 coefficients)."""
    return 0.2126 * pixel.r + 0.7152 * pixel.g + 0.0722 * pixel.b


def is_dark(pixel: Pixel) -> bool:
    """Whether a pixel sets a bit in the monochrome output."""
    return pixel.a > ALPHA_THRESHOLD and luminance(pixel) < LUMINANCE_THRESHOLD


def is_red(pixel: Pixel) -> bool:
    return pixel.r >= RED_MIN and pixel.g == 0 and pixel.b == 0


@dataclass
class RasterBand:
    """One 8-row slice of the image: a byte per column plus the red marker."""

    columns: bytes
    has_red: bool


def encode_band(
    matrix: PixelMatrix,
    band_index: int,
    dot_matrix: bool = False,
) -> RasterBand:
    """Pack rows ``band_index*8`` to ``band_index*8 + 7`` column by column.

    The most significant bit of each byte is the top row of the band.

    With ``dot_matrix`` only every other position is eligible to print,
    alternating down each column and shifting by one from column to column
    (and across bands when the width is odd).
    """
    width = matrix.width
    top = band_index * BAND_HEIGHT
    columns = bytearray()
    has_red = False

    for x in range(width):
        byte = 0
        for offset in range(BAND_HEIGHT):
            pixel = matrix.pixel(x, top + offset)
            if is_red(pixel):
                has_red = True
            if dot_matrix and (band_index * width + x + offset) % 2:
                continue
            if is_dark(pixel):
                byte |= 1 << (BAND_HEIGHT - 1 - offset)
        columns.append(byte)

    return RasterBand(columns=bytes(columns), has_red=has_red)


def raster_header(width: int, density: int) -> bytes:
    """ESC * m nL nH for a band ``width`` columns wide."""
    mode = RASTER_MODE_BY_DENSITY.get(density)
    if mode is None:
        logger.warning(f"Unknown raster density {density}, using single density")
        mode = DEFAULT_RASTER_MODE
    return RASTER_PREFIX + bytes([mode]) + bytes(two_byte(width))


def encode_raster(
    image: ImageData,
    settings: RasterSettings | Mapping[str, Any] | None = None,
) -> bytes:
    """Encode an RGBA image as a sequence of bit-image bands.

    Each band of 8 rows becomes an ESC * command followed by a line feed.
    When ``print_red`` is set, bands containing a red pixel are wrapped in
    switch-to-red / switch-to-black commands.

    Args:
        image: Decoded image data.
        settings: RasterSettings or a mapping of its fields.

    Returns:
        Printer commands as bytes; empty for a zero-sized image.

    Raises:
        MalformedInput: If the image data is inconsistent.
        ValueOutOfRange: If the width does not fit in two bytes.
    """
    options = RasterSettings.coerce(settings)
    matrix = PixelMatrix.from_image(image)

    if image.width == 0 or image.height == 0:
        return b""

    header = raster_header(image.width, options.density)
    band_count = (image.height + BAND_HEIGHT - 1) // BAND_HEIGHT
    buffer = CommandBuffer()
    red_bands = 0

    for band_index in range(band_count):
        band = encode_band(matrix, band_index, dot_matrix=options.dot_matrix)
        switch_color = options.print_red and band.has_red

        if switch_color:
            red_bands += 1
            append_print_color(buffer, PrintColor.RED)
        buffer.append(header)
        buffer.append(band.columns)
        buffer.append(LINE_FEED)
        if switch_color:
            append_print_color(buffer, PrintColor.BLACK)

    logger.debug(
        f"Encoded {image.width}x{image.height} image as {band_count} band(s), "
        f"{red_bands} in red, {len(buffer)} bytes"
    )
    return buffer.value()
