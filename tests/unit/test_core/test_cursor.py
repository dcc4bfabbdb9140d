"""Tests for ByteCursor."""

from __future__ import annotations

import struct

import pytest

from appinfo_vdf.core.cursor import ByteCursor
from appinfo_vdf.core.errors import EndOfInputError


class TestReadUint:
    """Tests for fixed-width unsigned reads."""

    def test_reads_each_width_little_endian(self) -> None:
        """8, 32 and 64-bit values decode little-endian and advance exactly."""
        data = b"\x7f" + struct.pack("<I", 0xDEADBEEF) + struct.pack("<Q", 2**63 + 5)
        cursor = ByteCursor(data)

        assert cursor.read_uint(8) == 0x7F
        assert cursor.offset == 1
        assert cursor.read_uint(32) == 0xDEADBEEF
        assert cursor.offset == 5
        assert cursor.read_uint(64) == 2**63 + 5
        assert cursor.offset == 13
        assert not cursor.remaining()

    def test_values_are_unsigned(self) -> None:
        """All-ones bytes read as the maximum unsigned value."""
        cursor = ByteCursor(b"\xff\xff\xff\xff")
        assert cursor.read_uint(32) == 0xFFFFFFFF

    def test_short_read_raises_without_advancing(self) -> None:
        """Requesting more bytes than remain fails and leaves the offset alone."""
        cursor = ByteCursor(b"\x01\x02\x03\x04\x05")
        cursor.read_uint(8)

        with pytest.raises(EndOfInputError) as exc_info:
            cursor.read_uint(64)

        assert cursor.offset == 1
        assert exc_info.value.offset == 1
        assert exc_info.value.requested == 8
        assert exc_info.value.available == 4

    def test_read_from_empty_buffer(self) -> None:
        """Reading from an empty buffer is end of input, not zero."""
        with pytest.raises(EndOfInputError):
            ByteCursor(b"").read_uint(8)

    def test_unsupported_width(self) -> None:
        """Only 8, 32 and 64 are valid widths."""
        with pytest.raises(ValueError):
            ByteCursor(b"\x00" * 8).read_uint(16)


class TestReadCString:
    """Tests for null-terminated string reads."""

    def test_consumes_terminator(self) -> None:
        """The zero byte is consumed but not returned."""
        cursor = ByteCursor(b"hello\x00world\x00")

        assert cursor.read_cstring() == "hello"
        assert cursor.offset == 6
        assert cursor.read_cstring() == "world"
        assert cursor.offset == 12

    def test_empty_string(self) -> None:
        """A lone zero byte is the empty string."""
        cursor = ByteCursor(b"\x00")
        assert cursor.read_cstring() == ""
        assert cursor.offset == 1

    def test_missing_terminator(self) -> None:
        """A buffer that ends before the zero byte is end of input."""
        cursor = ByteCursor(b"\x01abc")
        cursor.read_uint(8)

        with pytest.raises(EndOfInputError):
            cursor.read_cstring()
        assert cursor.offset == 1

    def test_utf8(self) -> None:
        """UTF-8 bytes decode to the matching text."""
        cursor = ByteCursor("Café ☕".encode("utf-8") + b"\x00")
        assert cursor.read_cstring() == "Café ☕"

    def test_latin1_fallback(self) -> None:
        """Bytes that are not valid UTF-8 decode as latin-1."""
        cursor = ByteCursor(b"caf\xe9\x00")
        assert cursor.read_cstring() == "café"


class TestReadRawHex:
    """Tests for raw hex rendering."""

    def test_digest_rendering(self) -> None:
        """Two lowercase digits per byte, buffer order, no separators."""
        cursor = ByteCursor(bytes([0x00, 0x1A, 0xFF]) + bytes(17))

        digest = cursor.read_raw_hex(160)

        assert digest.startswith("001aff")
        assert len(digest) == 40
        assert digest == "001aff" + "00" * 17
        assert cursor.offset == 20

    def test_short_field(self) -> None:
        """A truncated field fails without advancing."""
        cursor = ByteCursor(bytes(10))
        with pytest.raises(EndOfInputError):
            cursor.read_raw_hex(160)
        assert cursor.offset == 0

    @pytest.mark.parametrize("width", [0, 12, -8])
    def test_invalid_width(self, width: int) -> None:
        """Widths must be positive multiples of 8."""
        with pytest.raises(ValueError):
            ByteCursor(bytes(4)).read_raw_hex(width)


class TestCursorState:
    """Tests for offset bookkeeping."""

    def test_offset_is_monotonic(self) -> None:
        """Successful reads advance by exactly their widths; failed ones do not move."""
        data = b"\x01" + bytes(4) + b"ab\x00" + bytes(8) + bytes(20)
        cursor = ByteCursor(data)
        offsets = [cursor.offset]

        cursor.read_uint(8)
        offsets.append(cursor.offset)
        cursor.read_uint(32)
        offsets.append(cursor.offset)
        cursor.read_cstring()
        offsets.append(cursor.offset)
        cursor.read_uint(64)
        offsets.append(cursor.offset)
        cursor.read_raw_hex(160)
        offsets.append(cursor.offset)

        assert offsets == [0, 1, 5, 8, 16, 36]
        with pytest.raises(EndOfInputError):
            cursor.read_uint(8)
        assert cursor.offset == 36

    def test_remaining_and_bytes_left(self) -> None:
        """remaining() is True while unread bytes exist."""
        cursor = ByteCursor(b"\x01\x02")
        assert cursor.remaining()
        assert cursor.bytes_left == 2
        cursor.read_uint(8)
        assert cursor.bytes_left == 1
        cursor.read_uint(8)
        assert not cursor.remaining()
        assert cursor.bytes_left == 0

    def test_source_buffer_is_copied(self) -> None:
        """Mutating the caller's bytearray does not affect the cursor."""
        source = bytearray(b"\x05\x00\x00\x00")
        cursor = ByteCursor(source)
        source[0] = 0xFF
        assert cursor.read_uint(32) == 5
