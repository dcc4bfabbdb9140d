# appinfo_vdf/core/constants.py

"""Constants for the binary appinfo.vdf format.

Contains the file signature, the accepted header versions, the binary
KeyValues type markers and the fixed widths of the per-entry header.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "DIGEST_BITS",
    "END_OF_ENTRIES",
    "ENTRY_HEADER_BITS",
    "EUniverse",
    "NodeType",
    "SIGNATURE",
    "SUPPORTED_TAGS",
    "VALID_VERSIONS",
]


# ===== FILE HEADER =====


SIGNATURE: int = 0x07564427
"""Signature of an appinfo.vdf file (``'VD'`` + format revision 0x27 = 123094055)."""


class EUniverse(IntEnum):
    """Steam Universe identifiers.

    The second header word of appinfo.vdf names the Steam environment the
    cache was written for.
    """

    Invalid = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4


VALID_VERSIONS: tuple[int, ...] = (EUniverse.Public,)
"""Accepted values of the second header word."""

END_OF_ENTRIES: int = 0
"""App ID written after the last entry."""


# ===== ENTRY HEADER =====

DIGEST_BITS: int = 160

# Field order matters: this is the on-disk layout.
ENTRY_HEADER_BITS: tuple[tuple[str, int], ...] = (
    ("app_id", 32),
    ("declared_size", 32),
    ("info_state", 32),
    ("last_updated", 32),
    ("access_token", 64),
    ("digest", DIGEST_BITS),
    ("change_number", 32),
)


# ===== BINARY KEYVALUES TYPE MARKERS =====


class NodeType(IntEnum):
    """Type tag preceding every binary KeyValues node."""

    MAP = 0x00
    STRING = 0x01
    INT32 = 0x02
    FLOAT32 = 0x03
    POINTER = 0x04  # Unused
    WIDESTRING = 0x05  # Unused
    COLOR = 0x06  # Unused
    UINT64 = 0x07
    END = 0x08


SUPPORTED_TAGS: frozenset[int] = frozenset({NodeType.MAP, NodeType.STRING, NodeType.INT32, NodeType.END})
"""Tags whose value layout the decoder reads."""
