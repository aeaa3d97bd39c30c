"""Data models for thermalpos."""

from thermalpos.models.image import TRANSPARENT, ImageData, Pixel, PixelMatrix
from thermalpos.models.settings import (
    BarcodeSettings,
    MaxiCodeSettings,
    PDF417Settings,
    QRSettings,
    RasterSettings,
)

__all__ = [
    "BarcodeSettings",
    "ImageData",
    "MaxiCodeSettings",
    "PDF417Settings",
    "Pixel",
    "PixelMatrix",
    "QRSettings",
    "RasterSettings",
    "TRANSPARENT",
]
