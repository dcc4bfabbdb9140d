"""Text VDF exporter for human-readable appinfo output.

Renders decoded appinfo.vdf documents as text KeyValues, the format Steam
itself uses when it prints app info.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TYPE_CHECKING

import vdf

if TYPE_CHECKING:
    from appinfo_vdf.core.document import Document

logger = logging.getLogger("appinfo_vdf.vdf_exporter")

__all__ = ["VDFTextExporter"]


def _to_text_values(data: dict[str, Any]) -> dict[str, Any]:
    """Converts values to what text KeyValues can hold (nested dicts of strings)."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = _to_text_values(value)
        elif value is None:
            result[key] = ""
        else:
            result[key] = str(value)
    return result


class VDFTextExporter:
    """Exports decoded documents as text VDF.

    Uses the ``vdf`` library's ``dumps()`` function to produce correctly
    escaped Valve Data Format output. Entries are keyed by app ID under a
    single ``appinfo`` root.
    """

    @staticmethod
    def dumps(document: Document, include_private: bool = False) -> str:
        """Serializes a document to text VDF.

        Args:
            document: The decoded document.
            include_private: Also emit size, access token and digest per entry.

        Returns:
            str: The VDF text.
        """
        vdf_data: dict[str, Any] = {"appinfo": {}}
        for entry in document:
            vdf_data["appinfo"][str(entry.app_id)] = _to_text_values(entry.to_dict(include_private))

        return vdf.dumps(vdf_data, pretty=True)

    @staticmethod
    def export(document: Document, output_path: Path, include_private: bool = False) -> None:
        """Writes a document as a text VDF file.

        Args:
            document: The decoded document.
            output_path: Path to write the VDF text file.
            include_private: Also emit size, access token and digest per entry.

        Raises:
            OSError: If the file cannot be written.
        """
        vdf_text = VDFTextExporter.dumps(document, include_private)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(vdf_text)

        logger.info("Exported %d entries (VDF) to %s", document.count, output_path)
