#!/usr/bin/env python3
"""
Convert Markdown course descriptions to PDF.

Usage:
    md2cd path/to/course
    md2cd path/to/courses --recursive
    md2cd path/to/course --dry-run
    md2cd path/to/courses -r --log convert.jsonl
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from . import assets, config
from .assembler import EmptyDocumentError, generate_html
from .files import (
    build_output_path,
    ensure_pdf_directory,
    find_course_files,
    read_course_document,
    validate_source_path,
)
from .front_matter import MetadataError

logger = logging.getLogger(__name__)


def write_event(event: Dict, log_path: Optional[Path]) -> None:
    """Append one JSON line to the conversion log."""
    if not log_path:
        return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as writer:
        writer.write(json.dumps(event, ensure_ascii=False) + "\n")


def convert_course(source_dir: Path, args: argparse.Namespace) -> bool:
    """Convert the course description in ``source_dir``.

    Returns:
        True on success (or a completed dry run), False if the conversion failed
    """
    event = {
        "timestamp": datetime.now().isoformat(),
        "file": str(source_dir),
    }

    try:
        validate_source_path(source_dir)
        document = read_course_document(source_dir)
        metadata = document.metadata
        event["file"] = str(document.path)
        event["course_id"] = metadata.get_course_id()
        event["course_title"] = metadata.get_course_title()

        output_path = build_output_path(source_dir, metadata)
        html = generate_html(document.body, metadata, required=config.REQUIRED_FIELDS)

        if args.dry_run:
            print(f"🧪 Will generate PDF for {metadata.get_course_id()}-{metadata.get_course_title()}")
            event["status"] = "dry-run"
            write_event(event, args.log)
            return True

        ensure_pdf_directory(source_dir)

        from .pdf import generate_pdf

        print(f"⚙️  Generating PDF {output_path}")
        generate_pdf(html, output_path)

        if args.html:
            html_path = output_path.with_suffix(".html")
            html_path.write_text(html, encoding="utf-8")
            print(f"  🔍 HTML → {html_path}")

        print(f"  ✓ {output_path.name}")
        event["output_pdf"] = str(output_path)
        event["status"] = "success"
        write_event(event, args.log)
        return True

    except MetadataError as exc:
        print(f"  ✗ Metadata error in {event['file']}: {exc}")
        error = exc
    except (EmptyDocumentError, FileNotFoundError, NotADirectoryError) as exc:
        print(f"  ✗ {exc}")
        error = exc
    except Exception as exc:
        print(f"  ✗ Error: {exc}")
        if args.verbose:
            logger.exception("Conversion failed")
        error = exc

    event["status"] = "error"
    event["error"] = str(error)
    write_event(event, args.log)
    return False


def convert_all(root: Path, args: argparse.Namespace) -> int:
    """Convert every course description below ``root``.

    Returns:
        Number of failed conversions
    """
    files: List[Path] = find_course_files(root)

    if not files:
        print("No matching Markdown files found.")
        return 0

    if args.dry_run:
        print(f"🧪 Dry run: Found {len(files)} file(s):")
        for path in files:
            print(f"  • {path}")
        return 0

    failed = 0
    for path in files:
        if args.verbose:
            print(f"\n📄 Converting: {path}")
        if not convert_course(path.parent, args):
            failed += 1

    print("\n" + "=" * 70)
    print(f"  Files converted: {len(files) - failed}")
    print(f"  Files failed: {failed}")
    print("=" * 70)
    return failed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2cd",
        description="Convert Markdown course descriptions to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "source_dir",
        nargs="?",
        default=".",
        type=Path,
        help="Path to a course folder or root directory (default: current directory)",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help=f"Recursively convert all '*{config.COURSE_FILE_SUFFIX}' files in the directory",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="List files that would be converted without generating output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed output",
    )
    parser.add_argument(
        "-l",
        "--log",
        type=Path,
        help="Append a JSON line per conversion to this file (relative to source dir)",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Also write the intermediate HTML next to each PDF",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    source_dir = args.source_dir.resolve()
    if args.log and not args.log.is_absolute():
        args.log = source_dir / args.log

    try:
        assets.preload_assets()
    except assets.AssetNotFoundError as exc:
        print(f"✗ {exc}")
        return 2

    if args.recursive:
        failed = convert_all(source_dir, args)
        return 0 if failed == 0 else 1

    return 0 if convert_course(source_dir, args) else 1


if __name__ == "__main__":
    sys.exit(main())
