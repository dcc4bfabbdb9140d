#!/usr/bin/env python3
"""appinfo-vdf - command-line entry point.

Usage:
    appinfo-vdf path/to/appinfo.vdf
    appinfo-vdf path/to/appinfo.vdf --format json --output apps.json
    python -m appinfo_vdf path/to/appinfo.vdf --format vdf --lenient
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from appinfo_vdf.config import config
from appinfo_vdf.core.document import Document, load_path
from appinfo_vdf.core.errors import AppInfoError
from appinfo_vdf.core.logging import logger, setup_logging
from appinfo_vdf.utils.json_exporter import JSONExporter
from appinfo_vdf.utils.vdf_exporter import VDFTextExporter
from appinfo_vdf.version import __app_name__, __version__

__all__ = ["main"]

SUMMARY_PREVIEW = 5


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Decode Steam's binary appinfo.vdf into JSON or text VDF",
    )
    parser.add_argument("path", type=Path, help="Path to appinfo.vdf")
    parser.add_argument(
        "--format",
        "-f",
        choices=("summary", "json", "vdf"),
        default="summary",
        help="Output format (default: summary)",
    )
    parser.add_argument("--output", "-o", type=Path, metavar="FILE", help="Write output to FILE instead of stdout")
    parser.add_argument(
        "--include-private",
        action="store_true",
        help="Include declared size, access token and digest for each entry",
    )
    parser.add_argument(
        "--strict-tags",
        action="store_true",
        default=None,
        help="Fail on node tags the decoder cannot read",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop a truncated trailing entry instead of failing",
    )
    parser.add_argument("--max-depth", type=int, metavar="N", help="Maximum map nesting depth")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_summary(document: Document, preview: int = SUMMARY_PREVIEW) -> str:
    """Builds a short human-readable description of a document.

    Args:
        document: The decoded document.
        preview: How many entries to list by name.

    Returns:
        str: Multi-line summary text.
    """
    lines = [
        f"Signature: 0x{document.signature:08X}",
        f"Version: {document.version}",
        f"Apps: {document.count}",
    ]
    for entry in document.entries[:preview]:
        name = entry.get("appinfo.common.name", f"App {entry.app_id}")
        lines.append(f"  {entry.app_id}: {name}")
    if document.count > preview:
        lines.append(f"  ... and {document.count - preview} more")
    return "\n".join(lines)


def _render(document: Document, fmt: str, include_private: bool) -> str:
    if fmt == "json":
        return JSONExporter.dumps(document, include_private) + "\n"
    if fmt == "vdf":
        return VDFTextExporter.dumps(document, include_private)
    return format_summary(document) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Runs the command-line tool.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)

    try:
        setup_logging(logging.DEBUG if args.verbose else config.log_level, config.LOG_FILE)
    except OSError as e:
        logger.error("Cannot open log file %s: %s", config.LOG_FILE, e)
        return 1

    try:
        options = config.decode_options(
            strict_tags=args.strict_tags,
            strict_truncation=False if args.lenient else None,
            max_depth=args.max_depth,
        )
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return 2

    try:
        document = load_path(args.path, options)
        output = _render(document, args.format, args.include_private)

        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output, encoding="utf-8")
            logger.info("Wrote %s output to %s", args.format, args.output)
        else:
            sys.stdout.write(output)
    except AppInfoError as e:
        logger.error("Failed to decode %s: %s", args.path, e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
