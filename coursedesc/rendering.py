"""
Markdown to HTML rendering.

Slots let a caller bind a pre-rendered HTML fragment to a placeholder line
in the Markdown source. The placeholder line is swapped for an entry in the
converter's raw HTML stash before block parsing, so the fragment comes out
as a block element exactly where the line was, and never inside a ``<p>``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import markdown
from markdown.preprocessors import Preprocessor

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

# Runs after whitespace normalization (30), which strips stash markers
SLOT_PRIORITY = 25


class SlotPreprocessor(Preprocessor):
    """Replace the first line equal to each placeholder with its fragment."""

    def __init__(self, md: markdown.Markdown, slots: Dict[str, str]):
        super().__init__(md)
        self.slots = dict(slots)

    def run(self, lines: List[str]) -> List[str]:
        for placeholder, fragment in self.slots.items():
            for index, line in enumerate(lines):
                if line.strip() != placeholder:
                    continue
                stashed = self.md.htmlStash.store(fragment.strip())
                lines = lines[:index] + ["", stashed, ""] + lines[index + 1:]
                break
            else:
                logger.debug(f"Placeholder {placeholder!r} not present, slot skipped")
        return lines


def render_markdown(text: str, slots: Optional[Dict[str, str]] = None) -> str:
    """Render Markdown to HTML.

    Args:
        text: Markdown source
        slots: Optional mapping of placeholder line -> HTML fragment

    Returns:
        Rendered HTML
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")
    if slots:
        md.preprocessors.register(SlotPreprocessor(md, slots), "course_slots", SLOT_PRIORITY)
    return md.convert(text)
