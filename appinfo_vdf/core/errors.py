# appinfo_vdf/core/errors.py

"""Exception hierarchy raised while decoding appinfo.vdf data."""

from __future__ import annotations

__all__ = [
    "AppInfoError",
    "EndOfInputError",
    "IncompatibleFileError",
    "InvalidSignatureError",
    "InvalidVersionError",
    "NestingTooDeepError",
    "TruncatedEntryError",
    "UnsupportedTagError",
]


class AppInfoError(Exception):
    """Base class for every decode failure."""


class EndOfInputError(AppInfoError):
    """Raised when a read asks for more bytes than remain in the buffer.

    Attributes:
        offset: Cursor position at the time of the read (unchanged by it).
        requested: Number of bytes the read needed.
        available: Number of unread bytes left in the buffer.
    """

    def __init__(self, offset: int, requested: int, available: int):
        """Initializes the exception.

        Args:
            offset: Cursor position at the time of the read.
            requested: Number of bytes the read needed.
            available: Number of unread bytes left in the buffer.
        """
        self.offset = offset
        self.requested = requested
        self.available = available
        super().__init__(f"End of input at offset {offset}: needed {requested} byte(s), {available} available")


class IncompatibleFileError(AppInfoError):
    """Raised when the file header does not describe a supported appinfo.vdf."""


class InvalidSignatureError(IncompatibleFileError):
    """Raised when the first header word is not the appinfo.vdf signature.

    Attributes:
        signature: The value that was read.
    """

    def __init__(self, signature: int):
        self.signature = signature
        super().__init__(f"Invalid appinfo.vdf signature: 0x{signature:08X}")


class InvalidVersionError(IncompatibleFileError):
    """Raised when the second header word is not an accepted version.

    Attributes:
        version: The value that was read.
    """

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Unsupported appinfo.vdf version: {version}")


class TruncatedEntryError(AppInfoError):
    """Raised when the buffer ends in the middle of an entry.

    Attributes:
        index: Zero-based position of the incomplete entry.
        offset: Offset at which the entry started.
    """

    def __init__(self, index: int, offset: int):
        self.index = index
        self.offset = offset
        super().__init__(f"Entry #{index} starting at offset {offset} is truncated")


class UnsupportedTagError(AppInfoError):
    """Raised in strict mode when a node carries a tag without a value reader.

    Attributes:
        tag: The raw tag byte.
        name: The node name that followed the tag.
        offset: Offset of the tag byte.
    """

    def __init__(self, tag: int, name: str, offset: int):
        self.tag = tag
        self.name = name
        self.offset = offset
        super().__init__(f"Unsupported node tag 0x{tag:02x} for key {name!r} at offset {offset}")


class NestingTooDeepError(AppInfoError):
    """Raised when maps nest deeper than the configured limit.

    Attributes:
        depth: The depth that exceeded the limit.
        offset: Cursor position when the limit was hit.
    """

    def __init__(self, depth: int, offset: int):
        self.depth = depth
        self.offset = offset
        super().__init__(f"Map nesting depth {depth} exceeds limit at offset {offset}")
