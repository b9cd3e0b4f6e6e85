"""
Locating and reading course description files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from . import config
from .assembler import EmptyDocumentError
from .front_matter import CourseMetadata, slugify, split_front_matter

logger = logging.getLogger(__name__)


@dataclass
class CourseDocument:
    """A course description file split into body and metadata."""
    path: Path
    body: str
    metadata: CourseMetadata


def validate_source_path(source: Path) -> Path:
    source = Path(source)
    if not source.is_dir():
        raise NotADirectoryError(f"Source path is invalid or does not exist: {source}")
    return source


def find_course_file(directory: Path, suffix: Optional[str] = None) -> Path:
    """Return the course description file in ``directory``.

    Raises:
        FileNotFoundError: If no file ends with the course file suffix
    """
    suffix = suffix or config.COURSE_FILE_SUFFIX
    matches = sorted(
        path for path in Path(directory).iterdir()
        if path.is_file() and path.name.endswith(suffix)
    )
    if not matches:
        raise FileNotFoundError(f"No file ending with '{suffix}' found in: {directory}")
    return matches[0]


def read_course_document(directory: Path, suffix: Optional[str] = None) -> CourseDocument:
    """Read and split the course description file in ``directory``.

    Raises:
        FileNotFoundError: If there is no course description file
        MetadataError: If the front matter is invalid
        EmptyDocumentError: If the body is blank
    """
    path = find_course_file(directory, suffix)
    front_matter, body = split_front_matter(path.read_text(encoding="utf-8"))

    if not body.strip():
        raise EmptyDocumentError(f"Markdown file is empty: {path}")

    logger.debug(f"Read {path} ({len(front_matter)} metadata fields)")
    return CourseDocument(path=path, body=body, metadata=CourseMetadata.from_mapping(front_matter))


def find_course_files(root: Path, suffix: Optional[str] = None) -> List[Path]:
    """Find every course description file below ``root``."""
    suffix = suffix or config.COURSE_FILE_SUFFIX
    return sorted(
        path for path in Path(root).rglob(f"*{suffix}") if path.is_file()
    )


def ensure_pdf_directory(directory: Path) -> Path:
    pdf_dir = Path(directory) / config.PDF_DIR_NAME
    pdf_dir.mkdir(parents=True, exist_ok=True)
    return pdf_dir


def build_output_path(directory: Path, metadata: CourseMetadata) -> Path:
    """Build ``<dir>/pdfs/<id>-<title-slug>-<version>-course-description.pdf``.

    Raises:
        MissingFieldError: If course_id, course_title or product_version is absent
    """
    course_id = metadata.get_course_id(required=True)
    title = metadata.get_course_title(required=True)
    version = metadata.get_product_version(required=True)

    safe_title = f"{course_id}-{slugify(title)}-{version}"
    return Path(directory) / config.PDF_DIR_NAME / f"{safe_title}-course-description.pdf"
