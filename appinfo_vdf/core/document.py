# appinfo_vdf/core/document.py

"""
Decoder for Steam's binary appinfo.vdf cache.

Layout (all integers little-endian)::

    signature   u32   0x07564427
    version     u32   universe, 1 for the public Steam universe
    entries     ...   repeated until the buffer ends or app ID 0 is read

Every entry is a fixed header (see ``read_entry``) followed by the body of
an unnamed binary KeyValues map.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from appinfo_vdf.core.constants import SIGNATURE, VALID_VERSIONS
from appinfo_vdf.core.cursor import ByteCursor
from appinfo_vdf.core.entry import Entry, read_entry
from appinfo_vdf.core.errors import (
    EndOfInputError,
    InvalidSignatureError,
    InvalidVersionError,
    TruncatedEntryError,
)
from appinfo_vdf.core.options import DEFAULT_OPTIONS, DecodeOptions

__all__ = ["Document", "decode", "load", "load_path", "loads"]

logger = logging.getLogger("appinfo_vdf.document")


@dataclass(frozen=True)
class Document:
    """A fully decoded appinfo.vdf file.

    Attributes:
        signature: File signature (always ``SIGNATURE``).
        version: Second header word (the Steam universe).
        entries: App records in file order.
    """

    signature: int
    version: int
    entries: tuple[Entry, ...]

    @property
    def count(self) -> int:
        """Number of entries."""
        return len(self.entries)

    def get(self, app_id: int) -> Entry | None:
        """Returns the first entry with the given app ID, or None."""
        for entry in self.entries:
            if entry.app_id == app_id:
                return entry
        return None

    def to_dict(self, include_private: bool = False) -> dict[str, Any]:
        """Externalizes the document as plain Python data.

        Args:
            include_private: Forwarded to ``Entry.to_dict``.

        Returns:
            dict: ``signature``, ``version``, ``count`` and ``entries``.
        """
        return {
            "signature": self.signature,
            "version": self.version,
            "count": self.count,
            "entries": [entry.to_dict(include_private) for entry in self.entries],
        }

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __contains__(self, app_id: object) -> bool:
        return any(entry.app_id == app_id for entry in self.entries)

    def __getitem__(self, app_id: int) -> Entry:
        entry = self.get(app_id)
        if entry is None:
            raise KeyError(app_id)
        return entry

    def __repr__(self) -> str:
        return f"<Document version={self.version} with {self.count} entries>"


# ===== DECODING =====


def _read_header(cursor: ByteCursor) -> tuple[int, int]:
    """Reads and validates the two header words.

    Raises:
        InvalidSignatureError: If the signature does not match.
        InvalidVersionError: If the version is not accepted.
        EndOfInputError: If the buffer is shorter than the header.
    """
    signature = cursor.read_uint(32)
    if signature != SIGNATURE:
        raise InvalidSignatureError(signature)

    version = cursor.read_uint(32)
    if version not in VALID_VERSIONS:
        raise InvalidVersionError(version)

    return signature, version


def _read_entries(cursor: ByteCursor, options: DecodeOptions) -> tuple[Entry, ...]:
    entries: list[Entry] = []

    while cursor.remaining():
        start = cursor.offset
        try:
            entry = read_entry(cursor, options)
        except EndOfInputError as exc:
            if options.strict_truncation:
                raise TruncatedEntryError(len(entries), start) from exc
            logger.warning(
                "Dropping truncated entry #%d at offset %d: %s",
                len(entries),
                start,
                exc,
            )
            break

        if entry is None:
            if cursor.remaining():
                logger.debug("Ignoring %d byte(s) after end-of-entries marker", cursor.bytes_left)
            break

        entries.append(entry)

    return tuple(entries)


def decode(data: bytes | bytearray | memoryview, options: DecodeOptions | None = None) -> Document:
    """Decodes an appinfo.vdf buffer.

    Args:
        data: The complete file contents.
        options: Decoder switches. Defaults to ``DEFAULT_OPTIONS``.

    Returns:
        Document: The decoded document.

    Raises:
        InvalidSignatureError: If the signature does not match.
        InvalidVersionError: If the version is not accepted.
        EndOfInputError: If the buffer is shorter than the file header.
        TruncatedEntryError: If the buffer ends inside an entry and
            ``options.strict_truncation`` is set.
        UnsupportedTagError: If ``options.strict_tags`` is set and a node
            tag has no value reader.
        NestingTooDeepError: If maps nest deeper than ``options.max_depth``.
    """
    options = options or DEFAULT_OPTIONS
    cursor = ByteCursor(data)

    signature, version = _read_header(cursor)
    logger.debug("appinfo.vdf header ok: signature=0x%08X version=%d", signature, version)

    entries = _read_entries(cursor, options)
    logger.info("Decoded appinfo.vdf: %d entries from %d bytes", len(entries), cursor.offset)

    return Document(signature=signature, version=version, entries=entries)


# ===== SIMPLE API =====


def loads(data: bytes | bytearray | memoryview, options: DecodeOptions | None = None) -> Document:
    """Decodes appinfo.vdf from bytes."""
    return decode(data, options)


def load(fp: BinaryIO, options: DecodeOptions | None = None) -> Document:
    """Decodes appinfo.vdf from a file object opened in binary mode."""
    return decode(fp.read(), options)


def load_path(path: Path | str, options: DecodeOptions | None = None) -> Document:
    """Reads and decodes an appinfo.vdf file.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        return load(f, options)
