"""Two-byte (little-endian 16-bit) numeric fields."""

from typing import NamedTuple

from thermalpos.errors import ValueOutOfRange

MAX_UNSIGNED = 65535
MIN_SIGNED = -32768


class TwoByteValue(NamedTuple):
    """A 16-bit quantity split low byte first.

    Being a tuple of ints, ``bytes(value)`` yields the wire order ``[low, high]``.
    """

    low: int
    high: int

    @property
    def value(self) -> int:
        return self.high * 256 + self.low


def two_byte(number: int) -> TwoByteValue:
    """Split a number into the protocol's low/high byte pair.

    Negative numbers down to -32768 are wrapped into 16 bits before splitting.

    Args:
        number: Value in [-32768, 65535].

    Returns:
        TwoByteValue with ``high * 256 + low`` equal to the (wrapped) number.

    Raises:
        ValueOutOfRange: If the number cannot be represented in two bytes.
    """
    if number > MAX_UNSIGNED:
        raise ValueOutOfRange(f"{number} is too large to be represented by two bytes")
    if number < MIN_SIGNED:
        raise ValueOutOfRange(f"{number} is too small to be represented by two bytes")

    if number < 0:
        number += MAX_UNSIGNED + 1

    high, low = divmod(number, 256)
    return TwoByteValue(low=low, high=high)
