# appinfo_vdf/core/cursor.py

"""Bounds-checked, forward-only reader over an in-memory buffer."""

from __future__ import annotations

import struct

from appinfo_vdf.core.errors import EndOfInputError

__all__ = ["ByteCursor"]

_UINT_FORMATS: dict[int, str] = {
    8: "<B",
    32: "<I",
    64: "<Q",
}


class ByteCursor:
    """Reads fixed-width integers and strings from a byte buffer.

    The cursor owns an immutable copy of the data. Every successful read
    advances ``offset`` by exactly the number of bytes consumed; a read that
    cannot be satisfied raises ``EndOfInputError`` and leaves ``offset``
    untouched. There is no way to move backwards.

    Attributes:
        offset (int): Current read position.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes | bytearray | memoryview):
        """Initializes the cursor at offset 0.

        Args:
            data: Buffer to read from. It is copied, so later changes to a
                mutable source do not affect the cursor.
        """
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._offset

    @property
    def bytes_left(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._offset

    def remaining(self) -> bool:
        """Returns True while at least one unread byte exists."""
        return self._offset < len(self._data)

    # ===== READ PRIMITIVES =====

    def read_uint(self, width_bits: int) -> int:
        """Reads a little-endian unsigned integer.

        Args:
            width_bits: Integer width, one of 8, 32 or 64.

        Returns:
            int: The decoded value.

        Raises:
            ValueError: If the width is not supported.
            EndOfInputError: If fewer than ``width_bits // 8`` bytes remain.
        """
        fmt = _UINT_FORMATS.get(width_bits)
        if fmt is None:
            raise ValueError(f"Unsupported integer width: {width_bits}")

        size = width_bits // 8
        self._require(size)
        value = struct.unpack_from(fmt, self._data, self._offset)[0]
        self._offset += size
        return value

    def read_cstring(self) -> str:
        """Reads a null-terminated string.

        The terminating zero byte is consumed but not returned.

        Returns:
            str: The decoded string (UTF-8 with latin-1 fallback).

        Raises:
            EndOfInputError: If the buffer ends before a zero byte.
        """
        end = self._data.find(0, self._offset)
        if end == -1:
            raise EndOfInputError(self._offset, self.bytes_left + 1, self.bytes_left)

        string_bytes = self._data[self._offset:end]
        self._offset = end + 1

        try:
            return string_bytes.decode("utf-8")
        except UnicodeDecodeError:
            return string_bytes.decode("latin-1")

    def read_raw_hex(self, width_bits: int) -> str:
        """Reads raw bytes and renders them as lowercase hex.

        Args:
            width_bits: Field width, a positive multiple of 8.

        Returns:
            str: Two hex digits per byte, in buffer order.

        Raises:
            ValueError: If the width is not a positive multiple of 8.
            EndOfInputError: If the field runs past the end of the buffer.
        """
        if width_bits <= 0 or width_bits % 8:
            raise ValueError(f"Unsupported raw field width: {width_bits}")

        size = width_bits // 8
        self._require(size)
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk.hex()

    def _require(self, size: int) -> None:
        if size > self.bytes_left:
            raise EndOfInputError(self._offset, size, self.bytes_left)

    def __repr__(self) -> str:
        return f"<ByteCursor offset={self._offset} size={len(self._data)}>"
