"""Tests for the text VDF exporter."""

from __future__ import annotations

from pathlib import Path

import vdf

from appinfo_vdf.core.document import decode
from appinfo_vdf.utils.vdf_exporter import VDFTextExporter
from vdf_builders import build_appinfo, build_entry, kv_int32, kv_map, kv_string


class TestVDFTextExporter:
    """Tests for VDFTextExporter.dumps and VDFTextExporter.export."""

    def test_entries_keyed_by_app_id(self, sample_appinfo_bytes) -> None:
        """Entries sit under appinfo/<app_id> with string values."""
        parsed = vdf.loads(VDFTextExporter.dumps(decode(sample_appinfo_bytes)))

        apps = parsed["appinfo"]
        assert list(apps) == ["10", "70"]
        assert apps["70"]["app_id"] == "70"
        assert apps["70"]["change_number"] == "200"
        assert apps["70"]["appinfo"]["common"]["name"] == "Half-Life"
        assert apps["70"]["appinfo"]["appid"] == "70"

    def test_negative_int_and_nested_map(self) -> None:
        """Integers are rendered as decimal text, maps as blocks."""
        document = decode(build_appinfo(build_entry(5, kv_map("extended", kv_int32("delta", -12)))))

        parsed = vdf.loads(VDFTextExporter.dumps(document))

        assert parsed["appinfo"]["5"]["extended"] == {"delta": "-12"}

    def test_unhandled_value_rendered_empty(self) -> None:
        """A valueless node becomes an empty string."""
        document = decode(build_appinfo(build_entry(5, b"\x03ratio\x00")))

        parsed = vdf.loads(VDFTextExporter.dumps(document))

        assert parsed["appinfo"]["5"]["ratio"] == ""

    def test_quotes_survive(self) -> None:
        """Quoted text is escaped by the vdf library and reads back intact."""
        exe = '"C:\\Games\\run.exe" -novid'
        document = decode(build_appinfo(build_entry(5, kv_string("exe", exe))))

        parsed = vdf.loads(VDFTextExporter.dumps(document))

        assert parsed["appinfo"]["5"]["exe"] == exe

    def test_export_creates_file_on_disk(self, tmp_path: Path, sample_appinfo_bytes) -> None:
        """export creates the file and parent directories."""
        nested_path = tmp_path / "sub" / "dir" / "appinfo.txt"

        VDFTextExporter.export(decode(sample_appinfo_bytes), nested_path, include_private=True)

        assert nested_path.exists()
        content = nested_path.read_text(encoding="utf-8")
        assert "Counter-Strike" in content
        assert "digest" in content
