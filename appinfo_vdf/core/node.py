# appinfo_vdf/core/node.py

"""Binary KeyValues nodes.

A node is one ``(tag, name, value)`` unit of the binary KeyValues stream::

    <tag:u8> [<name:cstring> <value>]

A map node's value is a sequence of child nodes closed by a node whose tag is
``NodeType.END``. That closing node carries no name and is never kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias, Union

from appinfo_vdf.core.constants import SUPPORTED_TAGS, NodeType
from appinfo_vdf.core.cursor import ByteCursor
from appinfo_vdf.core.errors import NestingTooDeepError, UnsupportedTagError
from appinfo_vdf.core.options import DEFAULT_OPTIONS, DecodeOptions

__all__ = [
    "Int32Node",
    "MapNode",
    "Node",
    "StringNode",
    "TERMINATOR",
    "TerminatorNode",
    "UnhandledNode",
    "decode_children",
    "decode_node",
]

logger = logging.getLogger("appinfo_vdf.node")


@dataclass(frozen=True)
class TerminatorNode:
    """End-of-siblings marker. Only ever seen inside the decoder."""

    tag: ClassVar[int] = NodeType.END


TERMINATOR = TerminatorNode()


@dataclass(frozen=True)
class MapNode:
    """Named, ordered collection of child nodes."""

    name: str
    children: tuple[Node, ...] = ()

    tag: ClassVar[int] = NodeType.MAP

    @property
    def count(self) -> int:
        """Number of children."""
        return len(self.children)

    def to_python(self) -> dict[str, Any]:
        """Returns the children as a dict keyed by name.

        Insertion order follows the file. When a name repeats, the last
        child wins.
        """
        return {child.name: child.to_python() for child in self.children}


@dataclass(frozen=True)
class StringNode:
    name: str
    value: str

    tag: ClassVar[int] = NodeType.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Int32Node:
    name: str
    value: int

    tag: ClassVar[int] = NodeType.INT32

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class UnhandledNode:
    """Node whose tag has no value reader.

    Only the tag byte and the name were consumed, so the value bytes (if the
    tag has any) are still ahead of the cursor.
    """

    name: str
    raw_tag: int

    @property
    def tag(self) -> int:
        return self.raw_tag

    def to_python(self) -> None:
        return None


Node: TypeAlias = Union[TerminatorNode, MapNode, StringNode, Int32Node, UnhandledNode]


def _to_int32(value: int) -> int:
    """Reinterprets an unsigned 32-bit value as two's-complement."""
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def _tag_label(tag: int) -> str:
    try:
        return f"{NodeType(tag).name} (0x{tag:02x})"
    except ValueError:
        return f"0x{tag:02x}"


def decode_node(cursor: ByteCursor, options: DecodeOptions = DEFAULT_OPTIONS, depth: int = 0) -> Node:
    """Decodes one node starting at the cursor.

    Args:
        cursor: Cursor positioned on a tag byte.
        options: Decoder switches.
        depth: Nesting level of the map that contains this node.

    Returns:
        Node: The decoded node. ``TERMINATOR`` when the tag is
        ``NodeType.END``.

    Raises:
        EndOfInputError: If the buffer ends inside the node.
        UnsupportedTagError: In strict mode, for tags without a value reader.
        NestingTooDeepError: If maps nest deeper than ``options.max_depth``.
    """
    tag_offset = cursor.offset
    tag = cursor.read_uint(8)

    if tag == NodeType.END:
        return TERMINATOR

    name = cursor.read_cstring()

    if tag not in SUPPORTED_TAGS:
        if options.strict_tags:
            raise UnsupportedTagError(tag, name, tag_offset)

        # No value bytes are read; anything the tag carries is left in place.
        logger.warning("Unhandled node tag %s for key %r at offset %d", _tag_label(tag), name, tag_offset)
        return UnhandledNode(name, tag)

    if tag == NodeType.MAP:
        return MapNode(name, decode_children(cursor, options, depth + 1))

    if tag == NodeType.STRING:
        return StringNode(name, cursor.read_cstring())

    return Int32Node(name, _to_int32(cursor.read_uint(32)))


def decode_children(cursor: ByteCursor, options: DecodeOptions = DEFAULT_OPTIONS, depth: int = 1) -> tuple[Node, ...]:
    """Decodes sibling nodes up to and including the closing terminator.

    Args:
        cursor: Cursor positioned on the first child's tag byte.
        options: Decoder switches.
        depth: Nesting level of the map being filled.

    Returns:
        tuple[Node, ...]: The children in file order, terminator excluded.
    """
    if depth > options.max_depth:
        raise NestingTooDeepError(depth, cursor.offset)

    children: list[Node] = []
    while True:
        node = decode_node(cursor, options, depth)
        if isinstance(node, TerminatorNode):
            break
        children.append(node)

    return tuple(children)
