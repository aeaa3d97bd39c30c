"""Print color and character size commands."""

import logging
from enum import IntEnum

from thermalpos.errors import ValueOutOfRange
from thermalpos.protocol.buffer import CommandBuffer
from thermalpos.protocol.commands import MAX_TEXT_SCALE, SELECT_COLOR, TEXT_SIZE

logger = logging.getLogger(__name__)


class PrintColor(IntEnum):
    """Print color modes of ESC r. Each color has a binary and an ASCII form."""

    BLACK = 0x00
    RED = 0x01
    BLACK_ASCII = 0x30
    RED_ASCII = 0x31


def select_print_color(mode: int, buffer: CommandBuffer | None = None) -> bytes:
    """Build the select-print-color command.

    Without a buffer the command is built on its own. With a buffer the
    command is appended to what is already there, so color can be toggled
    between raster bands without losing the bands already built.

    Args:
        mode: 0 or 48 for black, 1 or 49 for red.
        buffer: Existing buffer to append to instead of starting empty.

    Returns:
        The buffer content after appending. An unknown mode appends nothing.
    """
    if buffer is None:
        buffer = CommandBuffer()

    append_print_color(buffer, mode)
    return buffer.value()


def append_print_color(buffer: CommandBuffer, mode: int) -> bool:
    """Append ESC r to a buffer in place. Returns False for an unknown mode."""
    try:
        color = PrintColor(mode)
    except ValueError:
        logger.debug(f"Ignoring unknown print color mode {mode!r}")
        return False

    buffer.append(SELECT_COLOR + bytes([color]))
    return True


def set_text_size(height: int, width: int) -> bytes:
    """Build the character size command (GS !).

    Args:
        height: Vertical magnification 0-7 (high nibble).
        width: Horizontal magnification 0-7 (low nibble).

    Raises:
        ValueOutOfRange: If either value is outside 0-7.
    """
    if not 0 <= height <= MAX_TEXT_SCALE:
        raise ValueOutOfRange(f"Text height must be between 0 and {MAX_TEXT_SCALE}, got {height}")
    if not 0 <= width <= MAX_TEXT_SCALE:
        raise ValueOutOfRange(f"Text width must be between 0 and {MAX_TEXT_SCALE}, got {width}")

    return CommandBuffer(TEXT_SIZE).append([(height << 4) | width]).value()
