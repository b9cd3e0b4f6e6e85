"""
Panel composer: the prerequisites section beside the course metadata panel.

Layout:
    <div class="two-col">
      <div class="prerequisites">...rendered section...</div>
      <div class="metadata">...format / duration / audience rows...</div>
    </div>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape
from typing import Iterable, List, Optional

from . import assets
from .front_matter import CourseMetadata
from .rendering import render_markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelIcons:
    """Image sources for the metadata rows."""
    format: str
    duration: str
    audience: str

    @classmethod
    def default(cls) -> "PanelIcons":
        return cls(
            format=assets.data_uri(assets.ICON_FORMAT),
            duration=assets.data_uri(assets.ICON_DURATION),
            audience=assets.data_uri(assets.ICON_AUDIENCE),
        )


def _row_key(icon: str, label: str) -> str:
    return (
        '<span class="metadata-key">'
        f'<img src="{icon}" class="metadata-icon" alt="icon" />'
        f"<strong>{label}:</strong>"
        "</span>"
    )


def _value_row(icon: str, label: str, value: str) -> str:
    return (
        '<p class="metadata-line">'
        f"{_row_key(icon, label)}"
        f'<span class="metadata-value">{escape(value)}</span>'
        "</p>"
    )


def _audience_row(icon: str, audience: List[str]) -> str:
    if len(audience) > 1:
        items = "".join(f"<li>{escape(item)}</li>" for item in audience)
        value = f'<ul class="metadata-list">{items}</ul>'
    else:
        value = f"<span>{escape(audience[0])}</span>"
    return (
        '<div class="metadata-line">'
        f"{_row_key(icon, 'Audience')}"
        f'<div class="metadata-value">{value}</div>'
        "</div>"
    )


def render_metadata_panel(
    metadata: CourseMetadata,
    icons: PanelIcons,
    required: Iterable[str] = (),
) -> str:
    """Render the metadata panel.

    One row per present field. An absent field has no row; a field present
    with an empty string gets an empty value. An empty audience list has no
    row.

    Args:
        metadata: Course metadata
        icons: Row icons
        required: Field names that must be present

    Returns:
        HTML for the panel

    Raises:
        MissingFieldError: If a required field is absent
    """
    required = set(required)
    course_format = metadata.get_format(required="format" in required)
    duration = metadata.get_duration(required="duration" in required)
    audience = metadata.get_audience(required="audience" in required)

    rows = []
    if course_format is not None:
        rows.append(_value_row(icons.format, "Format", course_format))
    if duration is not None:
        rows.append(_value_row(icons.duration, "Duration", duration))
    if audience:
        rows.append(_audience_row(icons.audience, audience))

    return f'<div class="metadata">{"".join(rows)}</div>'


def compose_panel(
    extracted_markdown: str,
    metadata: CourseMetadata,
    icons: Optional[PanelIcons] = None,
    required: Iterable[str] = (),
) -> str:
    """Render an extracted section next to the metadata panel.

    Metadata is read first: a missing required field raises before anything
    is rendered.

    Args:
        extracted_markdown: Markdown of the extracted section
        metadata: Course metadata
        icons: Row icons (defaults to the packaged icons)
        required: Field names that must be present

    Returns:
        Two-column HTML fragment, section first and metadata second

    Raises:
        MissingFieldError: If a required field is absent
    """
    panel_html = render_metadata_panel(metadata, icons or PanelIcons.default(), required)
    section_html = render_markdown(extracted_markdown)

    logger.debug(f"Composed panel ({len(section_html)} chars of section markup)")

    return (
        '<div class="two-col">'
        f'<div class="prerequisites">{section_html}</div>'
        f"{panel_html}"
        "</div>"
    )
