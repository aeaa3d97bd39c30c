"""Append-only byte accumulator used by every encoder."""

from collections.abc import Iterable


class CommandBuffer:
    """Ordered byte sequence that only grows by appending.

    Encoders create one buffer per operation and return ``value()``, so no
    buffer outlives the call that filled it unless a caller passes it on
    explicitly (see ``select_print_color``).
    """

    def __init__(self, initial: bytes | Iterable[int] = b"") -> None:
        self._data = bytearray(initial)

    def append(self, data: bytes | Iterable[int]) -> "CommandBuffer":
        """Concatenate data onto the buffer."""
        self._data += bytes(data)
        return self

    def reset(self) -> None:
        """Discard all accumulated content."""
        self._data.clear()

    def value(self) -> bytes:
        """Return an immutable copy of the current content."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
