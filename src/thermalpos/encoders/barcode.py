"""1-D barcodes, rendered with python-barcode and printed as raster bands."""

import logging
from collections.abc import Mapping
from typing import Any

import barcode
from barcode.errors import BarcodeError
from barcode.writer import ImageWriter

from thermalpos.encoders.raster import encode_raster
from thermalpos.errors import MalformedInput
from thermalpos.imaging import image_from_pil
from thermalpos.models.settings import BarcodeSettings, RasterSettings

logger = logging.getLogger(__name__)

DEFAULT_SYMBOLOGY = "CODE128"

# Protocol type codes (GS k m, both function forms) to symbology names
SYMBOLOGY_BY_TYPE = {
    0: "UPC",
    1: "UPC",
    65: "UPC",
    66: "UPC",
    2: "EAN13",
    67: "EAN13",
    3: "EAN8",
    68: "EAN8",
    4: "CODE39",
    69: "CODE39",
    5: "ITF14",
    70: "ITF14",
    6: "codabar",
    71: "codabar",
    73: "CODE128",
    79: "CODE128",
}

# Symbology names to python-barcode class names
RENDERER_BY_SYMBOLOGY = {
    "UPC": "upca",
    "EAN13": "ean13",
    "EAN8": "ean8",
    "CODE39": "code39",
    "ITF14": "itf",
    "codabar": "codabar",
    "CODE128": "code128",
}

# Bars print at single density without halftone
BARCODE_RASTER = RasterSettings(density=1, dot_matrix=False)


def barcode_symbology(type_code: int) -> str:
    """Map a protocol barcode type code to a symbology name (CODE128 if unknown)."""
    symbology = SYMBOLOGY_BY_TYPE.get(type_code)
    if symbology is None:
        logger.debug(f"Unknown barcode type {type_code}, using {DEFAULT_SYMBOLOGY}")
        return DEFAULT_SYMBOLOGY
    return symbology


def encode_barcode(
    data: str,
    type_code: int,
    settings: BarcodeSettings | Mapping[str, Any] | None = None,
) -> bytes:
    """Render a 1-D barcode and encode it as raster bands.

    Args:
        data: Barcode content.
        type_code: Protocol type code selecting the symbology.
        settings: Rendering options (module size, quiet zone, dpi).

    Raises:
        MalformedInput: If the data is not valid for the symbology.
    """
    options = BarcodeSettings.coerce(settings)
    symbology = barcode_symbology(type_code)
    barcode_class = barcode.get_barcode_class(RENDERER_BY_SYMBOLOGY[symbology])

    try:
        barcode_instance = barcode_class(data, writer=ImageWriter())
        barcode_img = barcode_instance.render(
            writer_options={
                "module_width": options.dots_to_mm(options.module_width_dots),
                "module_height": options.dots_to_mm(options.bar_height_dots),
                "quiet_zone": options.dots_to_mm(options.quiet_zone_dots),
                "write_text": False,
                "font_size": 0,
                "text_distance": 0,
                "dpi": options.dpi,
            }
        )
    except BarcodeError as e:
        raise MalformedInput(f"Invalid {symbology} barcode data {data!r}: {e}") from e

    logger.debug(f"Rendered {symbology} barcode as {barcode_img.width}x{barcode_img.height} image")
    return encode_raster(image_from_pil(barcode_img), BARCODE_RASTER)
