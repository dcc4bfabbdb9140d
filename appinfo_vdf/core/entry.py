# appinfo_vdf/core/entry.py

"""One app record of appinfo.vdf: a fixed header plus a KeyValues tree."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from appinfo_vdf.core.constants import END_OF_ENTRIES, ENTRY_HEADER_BITS
from appinfo_vdf.core.cursor import ByteCursor
from appinfo_vdf.core.node import MapNode, decode_children
from appinfo_vdf.core.options import DEFAULT_OPTIONS, DecodeOptions

__all__ = ["Entry", "read_entry"]

logger = logging.getLogger("appinfo_vdf.entry")


@dataclass(frozen=True)
class Entry:
    """A decoded app record.

    Attributes:
        app_id: Steam AppID.
        declared_size: Size in bytes of the record after this field. Read,
            not used to bound parsing.
        info_state: App info state code.
        last_updated: Unix timestamp of the last update.
        access_token: PICS access token.
        digest: SHA-1 of the text KeyValues, as 40 lowercase hex digits.
        change_number: PICS change number.
        root: Unnamed map holding the record's top-level keys.
    """

    app_id: int
    declared_size: int
    info_state: int
    last_updated: int
    access_token: int
    digest: str
    change_number: int
    root: MapNode

    @property
    def fields(self) -> dict[str, Any]:
        """The KeyValues tree as plain Python data."""
        return self.root.to_python()

    def get(self, path: str | Sequence[str], default: Any = None) -> Any:
        """Looks up a value by key path.

        Args:
            path: Dotted path (``"appinfo.common.name"``) or a sequence of
                keys, for keys that themselves contain dots.
            default: Returned when any segment is missing.

        Returns:
            The value at the path, or ``default``.
        """
        keys = path.split(".") if isinstance(path, str) else path
        current: Any = self.fields
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def to_dict(self, include_private: bool = False) -> dict[str, Any]:
        """Externalizes the entry.

        Header fields come first; KeyValues keys override them on collision.

        Args:
            include_private: Also emit ``declared_size``, ``access_token`` and
                ``digest``.

        Returns:
            dict: The entry as plain Python data.
        """
        result: dict[str, Any] = {
            "app_id": self.app_id,
            "info_state": self.info_state,
            "last_updated": self.last_updated,
            "change_number": self.change_number,
        }
        if include_private:
            result["declared_size"] = self.declared_size
            result["access_token"] = self.access_token
            result["digest"] = self.digest

        result.update(self.fields)
        return result


def read_entry(cursor: ByteCursor, options: DecodeOptions = DEFAULT_OPTIONS) -> Entry | None:
    """Reads one entry.

    Args:
        cursor: Cursor positioned on the entry's app ID.
        options: Decoder switches.

    Returns:
        Entry | None: The entry, or None when the app ID read is the
        end-of-entries marker.

    Raises:
        EndOfInputError: If the buffer ends inside the entry.
    """
    (_, id_bits), *fields = ENTRY_HEADER_BITS
    app_id = cursor.read_uint(id_bits)
    if app_id == END_OF_ENTRIES:
        return None

    header: dict[str, Any] = {}
    sized_from = cursor.offset
    for field, bits in fields:
        header[field] = cursor.read_raw_hex(bits) if field == "digest" else cursor.read_uint(bits)
        if field == "declared_size":
            sized_from = cursor.offset

    root = MapNode("", decode_children(cursor, options))

    logger.debug(
        "App %d: %d top-level key(s), %d of %d declared byte(s) consumed",
        app_id,
        root.count,
        cursor.offset - sized_from,
        header["declared_size"],
    )

    return Entry(app_id=app_id, root=root, **header)
