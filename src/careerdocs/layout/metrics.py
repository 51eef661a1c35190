"""Stateless text measurement.

Measurement is separated from drawing: a :class:`TextMeasurer` maps
``(text, font)`` to a width without touching any drawing context, so wrapping
and pagination can be computed (and tested) before anything is painted.

Two measurers are provided:

* :class:`ReportLabMeasurer` uses the AFM metrics of the standard PDF fonts
  through :func:`reportlab.pdfbase.pdfmetrics.stringWidth`; it matches what
  the PDF writer will draw.
* :class:`FixedWidthMeasurer` gives every character the same advance, which
  makes layouts in abstract units easy to reason about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .model import FontSpec

__all__ = [
    "TextMeasurer",
    "ReportLabMeasurer",
    "FixedWidthMeasurer",
    "BlockMetrics",
    "pdf_font_name",
    "measure_block",
]

_STANDARD_FONTS: dict[str, tuple[str, str, str, str]] = {
    # family: (regular, bold, italic, bold italic)
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}


def pdf_font_name(font: FontSpec) -> str:
    """Return the reportlab font name for ``font``.

    Standard families resolve to their bold/italic faces.  Any other family is
    returned unchanged so fonts registered with ``pdfmetrics.registerFont``
    can be used by name.
    """

    faces = _STANDARD_FONTS.get(font.family)
    if faces is None:
        return font.family
    return faces[(1 if font.bold else 0) + (2 if font.italic else 0)]


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for width measurement."""

    def width(self, text: str, font: FontSpec) -> float:
        """Return the advance width of ``text`` set in ``font``."""

        ...


class ReportLabMeasurer:
    """Measure with reportlab's font metrics."""

    def width(self, text: str, font: FontSpec) -> float:
        from reportlab.pdfbase.pdfmetrics import stringWidth

        return float(stringWidth(text, pdf_font_name(font), font.size))


@dataclass(slots=True, frozen=True)
class FixedWidthMeasurer:
    """Every character advances ``char_width`` units regardless of font."""

    char_width: float = 1.0

    def width(self, text: str, font: FontSpec) -> float:
        return len(text) * self.char_width


@dataclass(slots=True, frozen=True)
class BlockMetrics:
    """Line count and total height of a wrapped block."""

    lines: int
    height: float


def measure_block(
    text: str,
    font: FontSpec,
    width: float,
    line_height: float,
    measurer: TextMeasurer,
) -> BlockMetrics:
    """Return how many lines ``text`` wraps to and how tall they stand."""

    from .wrap import wrap_text

    count = sum(1 for _ in wrap_text(text, width, font, measurer))
    return BlockMetrics(lines=count, height=count * line_height)
