"""Decoder switches shared by the node, entry and document readers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_OPTIONS", "MAX_DEPTH_LIMIT", "DecodeOptions"]

# Each map level costs two interpreter frames while decoding, so the ceiling
# stays well below the default recursion limit of 1000.
MAX_DEPTH_LIMIT = 256


@dataclass(frozen=True)
class DecodeOptions:
    """Behavior switches for a single decode call.

    Args:
        strict_tags: Raise on node tags that have no value reader instead of
            producing an ``UnhandledNode``.
        strict_truncation: Raise when the buffer ends inside an entry instead
            of dropping the partial entry.
        max_depth: Maximum map nesting level, between 1 and
            ``MAX_DEPTH_LIMIT``.
    """

    strict_tags: bool = False
    strict_truncation: bool = True
    max_depth: int = MAX_DEPTH_LIMIT

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_depth > MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be at most {MAX_DEPTH_LIMIT}, got {self.max_depth}")


DEFAULT_OPTIONS = DecodeOptions()
