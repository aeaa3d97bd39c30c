"""Pixel data handed to the raster and NV image encoders."""

from dataclasses import dataclass
from typing import NamedTuple

from thermalpos.errors import MalformedInput

BYTES_PER_PIXEL = 4  # RGBA


class Pixel(NamedTuple):
    """A single RGBA pixel."""

    r: int
    g: int
    b: int
    a: int


TRANSPARENT = Pixel(0, 0, 0, 0)


@dataclass(frozen=True)
class ImageData:
    """Decoded image as a flat RGBA byte sequence, row-major."""

    width: int
    height: int
    pixels: bytes

    def validate(self) -> None:
        """Validate dimensions against the pixel buffer.

        Raises:
            MalformedInput: If a dimension is missing, negative or the buffer
                length does not match ``width * height * 4``.
        """
        if self.width is None or self.height is None:
            raise MalformedInput("Image dimensions are missing")
        if self.width < 0 or self.height < 0:
            raise MalformedInput(f"Image dimensions must not be negative, got {self.width}x{self.height}")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if self.pixels is None or len(self.pixels) != expected:
            actual = None if self.pixels is None else len(self.pixels)
            raise MalformedInput(f"Expected {expected} bytes of RGBA data for {self.width}x{self.height}, got {actual}")


class PixelMatrix:
    """Row-indexed view of an image that tolerates out-of-range access.

    Banding walks past the last image row when the height is not a multiple
    of 8; those positions read as TRANSPARENT.
    """

    def __init__(self, rows: list[list[Pixel]], width: int) -> None:
        self.rows = rows
        self.width = width

    @property
    def height(self) -> int:
        return len(self.rows)

    @classmethod
    def from_image(cls, image: ImageData) -> "PixelMatrix":
        """Build the matrix once from the flat RGBA source."""
        image.validate()
        data = image.pixels
        rows = []
        for y in range(image.height):
            row_start = image.width * y * BYTES_PER_PIXEL
            rows.append(
                [
                    Pixel(*data[idx : idx + BYTES_PER_PIXEL])
                    for idx in range(row_start, row_start + image.width * BYTES_PER_PIXEL, BYTES_PER_PIXEL)
                ]
            )
        return cls(rows, image.width)

    def pixel(self, x: int, y: int) -> Pixel:
        if 0 <= y < len(self.rows) and 0 <= x < self.width:
            return self.rows[y][x]
        return TRANSPARENT
