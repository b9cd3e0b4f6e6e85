"""
Document assembler.

Builds the final self-contained HTML for a course description:
1. Detach the prerequisites section (up to the course outline heading)
2. Compose it with the metadata panel
3. Render the rest of the document with the panel bound to the
   section's placeholder
4. Wrap with the first page header and the inlined stylesheet
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape
from typing import Iterable, Optional

from . import assets
from .front_matter import CourseMetadata, MetadataError
from .panel import PanelIcons, compose_panel
from .rendering import render_markdown
from .sections import extract_section, new_placeholder, normalize_document

logger = logging.getLogger(__name__)

PREREQUISITES_MARKER = "## Prerequisites"
OUTLINE_MARKER = "## Course Outline"

DEFAULT_CAPTION = "Course Description"


class EmptyDocumentError(ValueError):
    """Exception raised when a document has no body content."""
    pass


@dataclass(frozen=True)
class HeaderAssets:
    """First page header: logo image source and caption."""
    logo_src: str
    caption: str = DEFAULT_CAPTION

    @classmethod
    def default(cls) -> "HeaderAssets":
        return cls(logo_src=assets.data_uri(assets.HEADER_LOGO))


def render_header(header: HeaderAssets) -> str:
    return (
        '<header class="first-page-header">'
        f'<img src="{header.logo_src}" class="header-logo" />'
        f'<p class="header-text">{escape(header.caption)}</p>'
        "</header>"
    )


def assemble(
    markdown_text: str,
    metadata: CourseMetadata,
    stylesheet: Optional[str] = None,
    header: Optional[HeaderAssets] = None,
    icons: Optional[PanelIcons] = None,
    required: Iterable[str] = (),
) -> str:
    """Assemble the final HTML document.

    Args:
        markdown_text: Markdown body (front matter already removed)
        metadata: Course metadata
        stylesheet: CSS to inline (defaults to the packaged stylesheet)
        header: Header logo and caption (defaults to the packaged logo)
        icons: Metadata panel icons (defaults to the packaged icons)
        required: Metadata fields that must be present for the panel

    Returns:
        Complete HTML document

    Raises:
        EmptyDocumentError: If the body is blank
        MetadataError: If no metadata is given
        MissingFieldError: If a required metadata field is absent
        AssetNotFoundError: If a default asset is missing
    """
    if not markdown_text or not markdown_text.strip():
        raise EmptyDocumentError("Markdown content is required to generate HTML.")
    if metadata is None:
        raise MetadataError("Metadata is required to generate HTML.")

    lines = normalize_document(markdown_text)
    result = extract_section(
        lines,
        PREREQUISITES_MARKER,
        OUTLINE_MARKER,
        placeholder=new_placeholder("PREREQUISITES"),
    )

    slots = {}
    if result.found:
        slots[result.placeholder] = compose_panel(result.extracted, metadata, icons, required)
    else:
        logger.debug("No prerequisites section, rendering without metadata panel")

    main_html = render_markdown(result.residual_text, slots)

    style = stylesheet if stylesheet is not None else assets.load_stylesheet()
    header_html = render_header(header or HeaderAssets.default())
    title = metadata.get_course_title() or (header.caption if header else DEFAULT_CAPTION)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{escape(title)}</title>
<style>{style}</style>
</head>
<body>
{header_html}
<main>{main_html}</main>
</body>
</html>
"""


# Name used by the conversion pipeline
generate_html = assemble
