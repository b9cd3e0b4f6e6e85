"""
PDF rendering for assembled course descriptions.

WeasyPrint prints the HTML (page size and margins come from the stylesheet's
``@page`` rule); pypdf then stamps the footer logo onto the last page.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from pypdf import PdfReader, PdfWriter

from . import assets

logger = logging.getLogger(__name__)

# A4 width minus 20mm margins on each side, in points
FOOTER_MAX_WIDTH = 481.9
FOOTER_BOTTOM_OFFSET = 40

FOOTER_STAMP_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<style>
@page {{ size: A4; margin: 0; }}
body {{ margin: 0; }}
.footer-logo {{
  position: absolute;
  bottom: {bottom}pt;
  left: 50%;
  width: {width}pt;
  margin-left: -{half_width}pt;
}}
</style>
</head>
<body><img class="footer-logo" src="{src}" /></body>
</html>
"""


class PdfRenderError(RuntimeError):
    """Exception raised when a PDF cannot be produced."""
    pass


def render_pdf_bytes(html: str) -> bytes:
    """Print an HTML document to PDF bytes with WeasyPrint."""
    try:
        from weasyprint import HTML

        return HTML(string=html).write_pdf()
    except Exception as exc:
        raise PdfRenderError(f"Failed to render PDF: {exc}") from exc


def render_footer_stamp(logo_src: str) -> bytes:
    """Render a single transparent A4 page carrying the footer logo."""
    html = FOOTER_STAMP_TEMPLATE.format(
        bottom=FOOTER_BOTTOM_OFFSET,
        width=FOOTER_MAX_WIDTH,
        half_width=FOOTER_MAX_WIDTH / 2,
        src=logo_src,
    )
    return render_pdf_bytes(html)


def stamp_last_page(pdf_bytes: bytes, stamp_bytes: bytes) -> bytes:
    """Overlay the first page of ``stamp_bytes`` onto the last page of ``pdf_bytes``.

    Raises:
        PdfRenderError: If either document has no pages
    """
    reader = PdfReader(io.BytesIO(pdf_bytes))
    stamp_reader = PdfReader(io.BytesIO(stamp_bytes))
    if not reader.pages:
        raise PdfRenderError("Rendered PDF has no pages")
    if not stamp_reader.pages:
        raise PdfRenderError("Footer stamp has no pages")

    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)
    writer.pages[-1].merge_page(stamp_reader.pages[0])

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def generate_pdf(html: str, output_path: Path, footer_logo: Optional[str] = None) -> Path:
    """Render ``html`` to ``output_path`` with the footer on the last page.

    Args:
        html: Assembled course description HTML
        output_path: Destination PDF file
        footer_logo: Footer image source (defaults to the packaged logo)

    Returns:
        The written path
    """
    output_path = Path(output_path)
    footer_logo = footer_logo or assets.data_uri(assets.FOOTER_LOGO)

    document = render_pdf_bytes(html)
    stamped = stamp_last_page(document, render_footer_stamp(footer_logo))

    output_path.write_bytes(stamped)
    logger.debug(f"Wrote {output_path} ({len(stamped)} bytes)")
    return output_path
