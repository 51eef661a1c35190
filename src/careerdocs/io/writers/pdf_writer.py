"""PDF writer.

Paints :class:`~careerdocs.layout.model.RenderedPage` objects onto a reportlab
canvas.  Layout decisions are final by the time pages reach this module: the
writer only flips the top-down layout coordinates into PDF space, picks fonts
and colours, and adds page decoration (sidebar band, page numbers) taken from
the style record.

Canvases are created with ``invariant=True`` so identical pages produce
byte-identical files.
"""

from __future__ import annotations

import io
import os
from collections.abc import Sequence
from pathlib import Path

from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from careerdocs.layout.metrics import pdf_font_name
from careerdocs.layout.model import DrawOp, PageGeometry, RenderedPage
from careerdocs.layout.styles import StyleConfig

__all__ = ["pdf_bytes", "write_pdf"]

PathLikeStr = os.PathLike[str]

_RULE_WIDTH = 0.6
_PAGE_NUMBER_SIZE = 8.0
# Baseline lift above the bottom of the line box, as a fraction of font size.
_DESCENT = 0.22


def _draw_op(c: canvas.Canvas, op: DrawOp, page_height: float) -> None:
    color = HexColor(op.color)
    if op.kind == "rule":
        y = page_height - op.y
        c.setStrokeColor(color)
        c.setLineWidth(_RULE_WIDTH)
        c.line(op.x, y, op.x + op.width, y)
        return
    c.setFillColor(color)
    c.setFont(pdf_font_name(op.font), op.font.size)
    c.drawString(op.x, page_height - op.y + _DESCENT * op.font.size, op.text)


def _decorate(
    c: canvas.Canvas,
    page: RenderedPage,
    total: int,
    geometry: PageGeometry,
    style: StyleConfig,
) -> None:
    if style.sidebar_width > 0:
        c.setFillColor(HexColor(style.sidebar_color))
        c.rect(0, 0, geometry.margin_left + style.sidebar_width / 2, geometry.height, stroke=0, fill=1)
    if style.page_numbers and total > 1:
        c.setFillColor(HexColor(style.text_color))
        c.setFont(pdf_font_name(style.body_font()), _PAGE_NUMBER_SIZE)
        c.drawRightString(
            geometry.width - geometry.margin_right,
            geometry.margin_bottom / 2,
            f"{page.number} / {total}",
        )


def _paint(
    c: canvas.Canvas,
    pages: Sequence[RenderedPage],
    geometry: PageGeometry,
    style: StyleConfig,
    title: str | None,
) -> None:
    c.setAuthor("careerdocs")
    if title:
        c.setTitle(title)
    total = len(pages)
    for page in pages:
        _decorate(c, page, total, geometry, style)
        for op in page.ops:
            _draw_op(c, op, geometry.height)
        c.showPage()
    c.save()


def pdf_bytes(
    pages: Sequence[RenderedPage],
    geometry: PageGeometry,
    style: StyleConfig,
    *,
    title: str | None = None,
) -> bytes:
    """Return the PDF for ``pages`` as bytes (for downloads and tests)."""

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(geometry.width, geometry.height), invariant=True)
    _paint(c, pages, geometry, style, title)
    return buf.getvalue()


def write_pdf(
    path: str | PathLikeStr,
    pages: Sequence[RenderedPage],
    geometry: PageGeometry,
    style: StyleConfig,
    *,
    title: str | None = None,
) -> None:
    """Write ``pages`` to ``path``; parent directories are created.

    An empty ``pages`` sequence still produces a valid (single blank page)
    PDF, since reportlab always emits at least one page.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    c = canvas.Canvas(str(file_path), pagesize=(geometry.width, geometry.height), invariant=True)
    _paint(c, pages, geometry, style, title)
