"""NV (non-volatile) bit image definitions (FS q / FS p).

Only single-color images are packed. Defining images on the device and
printing stored images are not supported yet.
"""

import logging
from collections.abc import Sequence

from thermalpos.encoders.raster import BAND_HEIGHT, is_dark
from thermalpos.errors import UnsupportedOperation
from thermalpos.models.image import ImageData, PixelMatrix
from thermalpos.protocol.buffer import CommandBuffer
from thermalpos.protocol.numbers import two_byte

logger = logging.getLogger(__name__)


def encode_nv_image(image: ImageData) -> bytes:
    """Pack an image as one NV bit image block: xL xH yL yH d1...dk.

    ``x`` is the width in dots and ``y`` the height in bytes (8-dot units).
    Data is column-major: for each column, every 8-row band of the full
    image height, top band first.

    Raises:
        MalformedInput: If the image data is inconsistent.
        ValueOutOfRange: If a dimension does not fit in two bytes.
    """
    matrix = PixelMatrix.from_image(image)
    height_bytes = (image.height + BAND_HEIGHT - 1) // BAND_HEIGHT

    buffer = CommandBuffer()
    buffer.append(two_byte(image.width))
    buffer.append(two_byte(height_bytes))

    for x in range(image.width):
        column = bytearray()
        for top in range(0, height_bytes * BAND_HEIGHT, BAND_HEIGHT):
            byte = 0
            for offset in range(BAND_HEIGHT):
                if is_dark(matrix.pixel(x, top + offset)):
                    byte |= 1 << (BAND_HEIGHT - 1 - offset)
            column.append(byte)
        buffer.append(column)

    logger.debug(f"Packed {image.width}x{image.height} NV image into {len(buffer)} bytes")
    return buffer.value()


def load_nv_images(images: Sequence[ImageData]) -> bytes:
    """Define NV bit images on the device (FS q).

    Raises:
        UnsupportedOperation: Always; storing images in NV memory is not
            implemented.
    """
    raise UnsupportedOperation(
        f"Defining NV images is not implemented ({len(images)} image(s) requested). "
        "Use encode_nv_image to pack image data."
    )


def print_nv_image(number: int, mode: int) -> bytes:
    """Print a stored NV bit image (FS p).

    Raises:
        UnsupportedOperation: Always; printing NV images is not implemented.
    """
    raise UnsupportedOperation(f"Printing NV image {number} (mode {mode}) is not implemented.")
