"""Wire-level building blocks of the printer command protocol."""

from thermalpos.protocol.buffer import CommandBuffer
from thermalpos.protocol.numbers import TwoByteValue, two_byte
from thermalpos.protocol.scaling import Dimensions, scale_to_height, scale_to_width

__all__ = [
    "CommandBuffer",
    "Dimensions",
    "TwoByteValue",
    "scale_to_height",
    "scale_to_width",
    "two_byte",
]
