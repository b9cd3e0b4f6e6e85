"""
Course description conversion for Markdown course files.

This module provides functionality for:
- Parsing course metadata from front matter
- Detaching the prerequisites section from the document body
- Composing it beside a metadata panel (format, duration, audience)
- Assembling a self-contained HTML document ready to print to PDF

Document format (course-description.md):
    ---
    course_id: 1234
    course_title: Intro to Search
    product_version: 9.2
    format: Instructor-led
    duration: 2 days
    audience:
        - Search users
        - Knowledge managers
    ---
    ## Course Description
    ...
    ## Prerequisites
    ...
    ## Course Outline
    ...

Usage:
    from coursedesc import CourseMetadata, assemble, split_front_matter

    front_matter, body = split_front_matter(text)
    html = assemble(body, CourseMetadata.from_mapping(front_matter))
"""

from .front_matter import (
    CourseMetadata,
    MetadataError,
    MissingFieldError,
    parse_front_matter,
    slugify,
    split_front_matter,
)
from .sections import ExtractionResult, SectionBoundary, extract_section, find_section_boundary
from .assets import AssetNotFoundError
from .panel import PanelIcons, compose_panel
from .assembler import EmptyDocumentError, HeaderAssets, assemble, generate_html

__all__ = [
    "CourseMetadata",
    "MetadataError",
    "MissingFieldError",
    "parse_front_matter",
    "slugify",
    "split_front_matter",
    "ExtractionResult",
    "SectionBoundary",
    "extract_section",
    "find_section_boundary",
    "AssetNotFoundError",
    "PanelIcons",
    "compose_panel",
    "EmptyDocumentError",
    "HeaderAssets",
    "assemble",
    "generate_html",
]

__version__ = "1.0.0"
