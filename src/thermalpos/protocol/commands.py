"""Byte sequences of the printer command protocol.

Command reference: Bixolon SRP-350II / SRP-275III command manuals (ESC/POS).
"""

from enum import IntEnum, StrEnum

ESC = 0x1B
GS = 0x1D
FS = 0x1C

# ESC * m nL nH d1...dk - select bit-image mode (nL/nH appended per band)
RASTER_PREFIX = bytes([ESC, 0x2A])
RASTER_MODE_BY_DENSITY = {
    1: 0x00,  # 8-dot single density
    2: 0x01,  # 8-dot double density
}
DEFAULT_RASTER_MODE = 0x00

# ESC J n - print and feed paper n motion units
LINE_FEED = bytes([ESC, 0x4A, 0x10])

# ESC r n - select print color
SELECT_COLOR = bytes([ESC, 0x72])

# GS ! n - select character size
TEXT_SIZE = bytes([GS, 0x21])
MAX_TEXT_SCALE = 7

# GS ( k - 2-D symbol functions
SYMBOL_PREFIX = bytes([GS, 0x28, 0x6B])
SYMBOL_STORE_DATA = bytes([0x50, 0x30])
# pL/pH of a stored symbol count the payload plus cn, fn and m
SYMBOL_STORE_OVERHEAD = 3


class SymbolType(IntEnum):
    """``cn`` byte of the GS ( k command."""

    PDF417 = 0x30
    QR = 0x31
    MAXICODE = 0x32


# ------------------------------ QR ------------------------------

QR_MODELS = {
    1: bytes([GS, 0x28, 0x6B, 0x04, 0x00, 0x31, 0x41, 0x31, 0x00]),
    2: bytes([GS, 0x28, 0x6B, 0x04, 0x00, 0x31, 0x41, 0x32, 0x00]),
}
QR_DEFAULT_MODEL = 2

# GS ( k 03 00 31 43 n - module size in dots
QR_CELL_SIZES = {str(size): bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x43, size]) for size in range(1, 9)}
QR_DEFAULT_CELL_SIZE = "3"


class QRErrorCorrection(StrEnum):
    """QR code error correction levels."""

    L = "L"  # ~7% correction
    M = "M"  # ~15% correction
    Q = "Q"  # ~25% correction
    H = "H"  # ~30% correction


QR_CORRECTIONS = {
    QRErrorCorrection.L: bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x45, 0x30]),
    QRErrorCorrection.M: bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x45, 0x31]),
    QRErrorCorrection.Q: bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x45, 0x32]),
    QRErrorCorrection.H: bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x45, 0x33]),
}

QR_PRINT = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x31, 0x51, 0x30])

# ------------------------------ PDF417 ------------------------------

# Each of these is followed by a single parameter byte
PDF417_CORRECTION = bytes([GS, 0x28, 0x6B, 0x04, 0x00, 0x30, 0x45, 0x31])
PDF417_ROW_HEIGHT = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x44])
PDF417_WIDTH = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x43])
PDF417_COLUMNS = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x41])

PDF417_OPTION_STANDARD = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x46, 0x00])
PDF417_OPTION_TRUNCATED = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x46, 0x01])

PDF417_PRINT = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x30, 0x51, 0x30])

# ------------------------------ MaxiCode ------------------------------

# 2 - structured carrier message, numeric postal code (US)
# 3 - structured carrier message, alphanumeric postal code (international)
# 4 - unformatted data, standard error correction
# 5 - unformatted data, enhanced error correction
# 6 - programming hardware devices
MAXICODE_MODES = {mode: bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x32, 0x41, 0x30 + mode]) for mode in range(2, 7)}
MAXICODE_DEFAULT_MODE = 4

MAXICODE_PRINT = bytes([GS, 0x28, 0x6B, 0x03, 0x00, 0x32, 0x51, 0x30])
