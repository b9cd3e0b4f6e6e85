"""
Section extractor for course description documents.

Locates a named section between two heading markers, detaches it from the
document and leaves a placeholder line where it was.

Rules:
1. Markers match a whole line, trimmed and case-insensitive
2. The section runs from the start marker (inclusive) to the first end
   marker after it (exclusive)
3. A start marker without an end marker means no section: nothing is
   extracted to end-of-document
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

LineMatcher = Callable[[str], bool]
Marker = Union[str, LineMatcher]


@dataclass(frozen=True)
class SectionBoundary:
    """Half-open ``[start, end)`` line range of a section."""
    start: int
    end: int

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(
                f"Section start ({self.start}) must be before end ({self.end})"
            )


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of :func:`extract_section`."""
    extracted: str
    residual: Tuple[str, ...]
    found: bool
    placeholder: Optional[str] = None
    boundary: Optional[SectionBoundary] = None

    @property
    def residual_text(self) -> str:
        return "\n".join(self.residual)


def normalize_document(text: str) -> List[str]:
    """Normalize line endings to ``\\n`` and split into lines."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def heading_matcher(marker: str) -> LineMatcher:
    """Build a predicate matching lines equal to ``marker`` (trimmed, any case)."""
    canonical = marker.strip().lower()

    def _matches(line: str) -> bool:
        return line.strip().lower() == canonical

    return _matches


def _as_matcher(marker: Marker) -> LineMatcher:
    if callable(marker):
        return marker
    return heading_matcher(marker)


def find_section_boundary(
    lines: Sequence[str], start: Marker, end: Marker
) -> Optional[SectionBoundary]:
    """Find the line range of the section opened by ``start``.

    Args:
        lines: Document lines
        start: Start marker heading, or a predicate over a line
        end: End marker heading, or a predicate over a line

    Returns:
        SectionBoundary, or None if either marker is missing

    Example:
        >>> lines = ["Intro", "## Prerequisites", "Needs X", "## Course Outline"]
        >>> find_section_boundary(lines, "## prerequisites", "## course outline")
        SectionBoundary(start=1, end=3)
    """
    is_start = _as_matcher(start)
    is_end = _as_matcher(end)

    start_index = None
    end_index = None

    for index, line in enumerate(lines):
        if start_index is None:
            if is_start(line):
                start_index = index
        elif is_end(line):
            end_index = index
            break

    if start_index is None or end_index is None:
        return None

    return SectionBoundary(start_index, end_index)


def new_placeholder(name: str = "SECTION") -> str:
    """Return a placeholder token that is unique per call."""
    return f"{{{{{name.upper()}-{uuid.uuid4().hex}}}}}"


def extract_section(
    document: Union[str, Sequence[str]],
    start_marker: Marker,
    end_marker: Marker,
    placeholder: Optional[str] = None,
) -> ExtractionResult:
    """Detach a section from a document.

    The input is never modified; the residual is a new tuple of lines in
    which the section's lines are replaced by a single placeholder line.

    Args:
        document: Document text or its lines
        start_marker: Heading that opens the section
        end_marker: Heading of the next sibling section
        placeholder: Token for the removal point (generated if omitted)

    Returns:
        ExtractionResult. When the section is not found, ``extracted`` is
        empty and ``residual`` holds the original lines.

    Example:
        >>> result = extract_section(
        ...     "Intro\\n## Prerequisites\\nNeeds X\\n## Course Outline\\nDay 1",
        ...     "## prerequisites", "## course outline", placeholder="{{P}}")
        >>> result.extracted
        '## Prerequisites\\nNeeds X'
        >>> result.residual_text
        'Intro\\n{{P}}\\n## Course Outline\\nDay 1'
    """
    if isinstance(document, str):
        lines = normalize_document(document)
    else:
        lines = list(document)

    boundary = find_section_boundary(lines, start_marker, end_marker)
    if boundary is None:
        logger.debug(f"Section not found (start={start_marker!r}, end={end_marker!r})")
        return ExtractionResult(extracted="", residual=tuple(lines), found=False)

    token = placeholder or new_placeholder()
    extracted = "\n".join(lines[boundary.start:boundary.end])
    residual = tuple(lines[:boundary.start]) + (token,) + tuple(lines[boundary.end:])

    logger.debug(
        f"Extracted lines {boundary.start}-{boundary.end} "
        f"({boundary.end - boundary.start} lines)"
    )

    return ExtractionResult(
        extracted=extracted,
        residual=residual,
        found=True,
        placeholder=token,
        boundary=boundary,
    )
