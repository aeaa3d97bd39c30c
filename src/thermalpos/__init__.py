"""thermalpos - command encoding for Bixolon-style thermal receipt printers."""

from thermalpos.encoders.barcode import barcode_symbology, encode_barcode
from thermalpos.encoders.nv_image import encode_nv_image, load_nv_images, print_nv_image
from thermalpos.encoders.raster import encode_raster
from thermalpos.encoders.symbols import encode_maxicode, encode_pdf417, encode_qr
from thermalpos.encoders.text import PrintColor, select_print_color, set_text_size
from thermalpos.errors import (
    EncodingError,
    MalformedInput,
    UnknownConfigurationKey,
    UnsupportedOperation,
    ValueOutOfRange,
)
from thermalpos.imaging import encode_image_file, image_from_pil
from thermalpos.models import ImageData, RasterSettings
from thermalpos.protocol import CommandBuffer, Dimensions, scale_to_height, scale_to_width, two_byte

__version__ = "0.1.0"

__all__ = [
    "CommandBuffer",
    "Dimensions",
    "EncodingError",
    "ImageData",
    "MalformedInput",
    "PrintColor",
    "RasterSettings",
    "UnknownConfigurationKey",
    "UnsupportedOperation",
    "ValueOutOfRange",
    "barcode_symbology",
    "encode_barcode",
    "encode_image_file",
    "encode_maxicode",
    "encode_nv_image",
    "encode_pdf417",
    "encode_qr",
    "encode_raster",
    "image_from_pil",
    "load_nv_images",
    "print_nv_image",
    "scale_to_height",
    "scale_to_width",
    "select_print_color",
    "set_text_size",
    "two_byte",
]
