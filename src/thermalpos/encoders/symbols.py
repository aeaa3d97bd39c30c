"""2-D symbol commands: QR, PDF417 and MaxiCode (GS ( k)."""

import logging
from collections.abc import Mapping
from typing import Any

from thermalpos.errors import UnknownConfigurationKey, ValueOutOfRange
from thermalpos.models.settings import MaxiCodeSettings, PDF417Settings, QRSettings
from thermalpos.protocol.buffer import CommandBuffer
from thermalpos.protocol.commands import (
    MAXICODE_DEFAULT_MODE,
    MAXICODE_MODES,
    MAXICODE_PRINT,
    PDF417_COLUMNS,
    PDF417_CORRECTION,
    PDF417_OPTION_STANDARD,
    PDF417_OPTION_TRUNCATED,
    PDF417_PRINT,
    PDF417_ROW_HEIGHT,
    PDF417_WIDTH,
    QR_CELL_SIZES,
    QR_CORRECTIONS,
    QR_DEFAULT_MODEL,
    QR_MODELS,
    QR_PRINT,
    SYMBOL_PREFIX,
    SYMBOL_STORE_DATA,
    SYMBOL_STORE_OVERHEAD,
    QRErrorCorrection,
    SymbolType,
)
from thermalpos.protocol.numbers import two_byte

logger = logging.getLogger(__name__)

# (name, inclusive range) for each tunable PDF417 parameter
PDF417_RANGES = {
    "correction": (1, 40),
    "row_height": (2, 8),
    "width": (2, 8),
    "columns": (1, 30),
}
PDF417_AUTO_COLUMNS = 0


def _payload_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def store_symbol_data(buffer: CommandBuffer, symbol: SymbolType, payload: bytes) -> None:
    """Append the store-data block: GS ( k pL pH cn 50 30 d1...dk."""
    size = two_byte(len(payload) + SYMBOL_STORE_OVERHEAD)
    buffer.append(SYMBOL_PREFIX + bytes(size) + bytes([symbol]) + SYMBOL_STORE_DATA)
    buffer.append(payload)


# ------------------------------ QR ------------------------------


def _qr_cell_size(key: str) -> bytes:
    try:
        return QR_CELL_SIZES[key]
    except KeyError:
        valid = ", ".join(QR_CELL_SIZES)
        raise UnknownConfigurationKey(f"Unknown QR cell size {key!r} (expected one of {valid})") from None


def _qr_correction(key: str) -> bytes:
    try:
        return QR_CORRECTIONS[QRErrorCorrection(key.upper())]
    except ValueError:
        valid = ", ".join(level.value for level in QRErrorCorrection)
        raise UnknownConfigurationKey(f"Unknown QR error correction {key!r} (expected one of {valid})") from None


def encode_qr(data: str | bytes, settings: QRSettings | Mapping[str, Any] | None = None) -> bytes:
    """Build the commands that store and print a QR code.

    Args:
        data: Symbol content; strings are encoded as UTF-8.
        settings: QRSettings or a mapping with ``model``, ``cellSize``
            and ``correction``.

    Returns:
        Model, cell size, correction, store-data and print commands.

    Raises:
        UnknownConfigurationKey: If the cell size or correction is unknown.
        ValueOutOfRange: If the payload is too long for the length field.
    """
    options = QRSettings.coerce(settings)
    payload = _payload_bytes(data)

    # Resolve every lookup before building anything
    model = QR_MODELS.get(options.model, QR_MODELS[QR_DEFAULT_MODEL])
    cell_size = _qr_cell_size(options.cell_size)
    correction = _qr_correction(options.correction)

    buffer = CommandBuffer()
    buffer.append(model)
    buffer.append(cell_size)
    buffer.append(correction)
    store_symbol_data(buffer, SymbolType.QR, payload)
    buffer.append(QR_PRINT)

    logger.debug(f"Encoded QR code with {len(payload)} byte payload")
    return buffer.value()


# ------------------------------ PDF417 ------------------------------


def _check_pdf417_range(name: str, value: int) -> int:
    low, high = PDF417_RANGES[name]
    if not low <= value <= high:
        raise ValueOutOfRange(f"PDF417 {name} must be between {low} and {high}, got {value}")
    return value


def encode_pdf417(data: str | bytes, settings: PDF417Settings | Mapping[str, Any] | None = None) -> bytes:
    """Build the commands that store and print a PDF417 symbol.

    Sub-commands are always emitted in the order correction, row height,
    module width, columns, option.

    Args:
        data: Symbol content; strings are encoded as UTF-8.
        settings: PDF417Settings or a mapping of its fields.

    Raises:
        ValueOutOfRange: If a parameter is outside its documented range.
    """
    options = PDF417Settings.coerce(settings)
    payload = _payload_bytes(data)

    correction = _check_pdf417_range("correction", options.correction)
    row_height = _check_pdf417_range("row_height", options.row_height)
    width = _check_pdf417_range("width", options.width)
    columns = options.columns
    if columns != PDF417_AUTO_COLUMNS:
        _check_pdf417_range("columns", columns)

    buffer = CommandBuffer()
    buffer.append(PDF417_CORRECTION + bytes([correction]))
    buffer.append(PDF417_ROW_HEIGHT + bytes([row_height]))
    buffer.append(PDF417_WIDTH + bytes([width]))
    buffer.append(PDF417_COLUMNS + bytes([columns]))
    buffer.append(PDF417_OPTION_TRUNCATED if options.truncated else PDF417_OPTION_STANDARD)
    store_symbol_data(buffer, SymbolType.PDF417, payload)
    buffer.append(PDF417_PRINT)

    logger.debug(f"Encoded PDF417 symbol with {len(payload)} byte payload")
    return buffer.value()


# ------------------------------ MaxiCode ------------------------------


def encode_maxicode(data: str | bytes, settings: MaxiCodeSettings | Mapping[str, Any] | None = None) -> bytes:
    """Build the commands that store and print a MaxiCode symbol.

    Args:
        data: Symbol content; strings are encoded as UTF-8.
        settings: MaxiCodeSettings or a mapping with ``mode`` (2-6).
            Unsupported modes fall back to mode 4.
    """
    options = MaxiCodeSettings.coerce(settings)
    payload = _payload_bytes(data)

    mode = MAXICODE_MODES.get(options.mode)
    if mode is None:
        logger.warning(f"Unsupported MaxiCode mode {options.mode}, using mode {MAXICODE_DEFAULT_MODE}")
        mode = MAXICODE_MODES[MAXICODE_DEFAULT_MODE]

    buffer = CommandBuffer()
    buffer.append(mode)
    store_symbol_data(buffer, SymbolType.MAXICODE, payload)
    buffer.append(MAXICODE_PRINT)

    logger.debug(f"Encoded MaxiCode symbol with {len(payload)} byte payload")
    return buffer.value()
