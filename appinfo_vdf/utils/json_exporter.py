# appinfo_vdf/utils/json_exporter.py

"""JSON export utility for decoded appinfo.vdf documents.

Renders a ``Document`` as structured JSON for inspection, diffing, or
interoperability with other tools.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from appinfo_vdf.core.document import Document

logger = logging.getLogger("appinfo_vdf.json_exporter")

__all__ = ["JSONExporter"]


class JSONExporter:
    """Exports decoded documents as JSON."""

    @staticmethod
    def dumps(document: Document, include_private: bool = False, indent: int | None = 2) -> str:
        """Serializes a document to a JSON string.

        Args:
            document: The decoded document.
            include_private: Also emit size, access token and digest per entry.
            indent: Indentation width, or None for compact output.

        Returns:
            str: The JSON text.
        """
        return json.dumps(document.to_dict(include_private), indent=indent, ensure_ascii=False)

    @staticmethod
    def export(document: Document, output_path: Path, include_private: bool = False) -> None:
        """Writes a document as a JSON file.

        Args:
            document: The decoded document.
            output_path: Path to write the JSON file.
            include_private: Also emit size, access token and digest per entry.

        Raises:
            OSError: If the file cannot be written.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(JSONExporter.dumps(document, include_private))
            fh.write("\n")

        logger.info("Exported %d entries (JSON) to %s", document.count, output_path)
