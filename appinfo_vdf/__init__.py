"""Decoder for Steam's binary appinfo.vdf cache.

Example::

    import appinfo_vdf

    document = appinfo_vdf.load_path("~/.steam/steam/appcache/appinfo.vdf")
    for entry in document:
        print(entry.app_id, entry.get("appinfo.common.name"))
"""

from __future__ import annotations

from appinfo_vdf.core.cursor import ByteCursor
from appinfo_vdf.core.document import Document, decode, load, load_path, loads
from appinfo_vdf.core.entry import Entry
from appinfo_vdf.core.errors import (
    AppInfoError,
    EndOfInputError,
    IncompatibleFileError,
    InvalidSignatureError,
    InvalidVersionError,
    NestingTooDeepError,
    TruncatedEntryError,
    UnsupportedTagError,
)
from appinfo_vdf.core.node import Int32Node, MapNode, Node, StringNode, UnhandledNode
from appinfo_vdf.core.options import MAX_DEPTH_LIMIT, DecodeOptions
from appinfo_vdf.version import __version__

__all__ = [
    "AppInfoError",
    "ByteCursor",
    "DecodeOptions",
    "MAX_DEPTH_LIMIT",
    "Document",
    "EndOfInputError",
    "Entry",
    "IncompatibleFileError",
    "Int32Node",
    "InvalidSignatureError",
    "InvalidVersionError",
    "MapNode",
    "NestingTooDeepError",
    "Node",
    "StringNode",
    "TruncatedEntryError",
    "UnhandledNode",
    "UnsupportedTagError",
    "__version__",
    "decode",
    "load",
    "load_path",
    "loads",
]
