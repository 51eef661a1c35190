"""Data model for the paginated document renderer.

A :class:`Document` is an ordered sequence of :class:`Section` objects.  Each
section carries one of three body types:

* :class:`TextBlock` - a paragraph string where ``\\n`` forces a line break and
  an empty line is a blank separator,
* :class:`EntryList` - headed entries (experience, education) with bullets,
* :class:`PlainList` - short items such as skills.

Rendering produces :class:`RenderedPage` objects holding :class:`DrawOp`
values.  Coordinates are measured from the top-left corner of the page and
``DrawOp.y`` is the baseline of the line box, so ``y`` grows downwards.  All
types are frozen; the engine never mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

__all__ = [
    "FontSpec",
    "DrawOp",
    "RenderedPage",
    "TextBlock",
    "Entry",
    "EntryList",
    "PlainList",
    "Body",
    "Section",
    "Document",
    "PageGeometry",
    "body_is_empty",
]


# ---------------------------------------------------------------------------
# Output primitives
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class FontSpec:
    """Font attributes of a draw operation."""

    family: str
    size: float
    bold: bool = False
    italic: bool = False


@dataclass(slots=True, frozen=True)
class DrawOp:
    """A single positioned draw operation.

    ``kind == "text"`` draws ``text`` with its left edge at ``x``.  ``kind ==
    "rule"`` draws a horizontal line of ``width`` starting at ``x``; ``text``
    is empty for rules.
    """

    text: str
    x: float
    y: float
    font: FontSpec
    color: str = "#000000"
    kind: Literal["text", "rule"] = "text"
    width: float = 0.0


@dataclass(slots=True, frozen=True)
class RenderedPage:
    """An output page: 1-indexed number plus its draw operations in order."""

    number: int
    ops: tuple[DrawOp, ...]

    @property
    def texts(self) -> list[str]:
        """Return the text of every text operation on the page."""

        return [op.text for op in self.ops if op.kind == "text"]


# ---------------------------------------------------------------------------
# Input document
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class TextBlock:
    text: str = ""

    @property
    def paragraphs(self) -> list[str]:
        return self.text.split("\n")


@dataclass(slots=True, frozen=True)
class Entry:
    """One experience or education item.

    ``heading`` and ``date`` share the first line (date right-aligned),
    ``subheading`` and ``location`` the second.  Empty parts are skipped.
    """

    heading: str = ""
    date: str = ""
    subheading: str = ""
    location: str = ""
    bullets: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        parts = (self.heading, self.date, self.subheading, self.location, *self.bullets)
        return not any(p.strip() for p in parts)


@dataclass(slots=True, frozen=True)
class EntryList:
    entries: tuple[Entry, ...] = ()


@dataclass(slots=True, frozen=True)
class PlainList:
    items: tuple[str, ...] = ()


Body = Union[TextBlock, EntryList, PlainList]


@dataclass(slots=True, frozen=True)
class Section:
    body: Body
    title: str | None = None


@dataclass(slots=True, frozen=True)
class Document:
    """Ordered sections with an optional header block.

    ``title`` (typically the candidate's name) and ``subtitle`` (contact line)
    are drawn at the top of the first page before any section.
    """

    sections: tuple[Section, ...] = ()
    title: str | None = None
    subtitle: str | None = None


def body_is_empty(body: Body) -> bool:
    """Return ``True`` when ``body`` would produce no draw operations."""

    if isinstance(body, TextBlock):
        return not body.text.strip()
    if isinstance(body, EntryList):
        return all(e.is_empty() for e in body.entries)
    return not any(item.strip() for item in body.items)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page size, margins and base line height in points (or any unit).

    Use :meth:`uniform` for equal margins on every side.
    """

    width: float
    height: float
    margin_top: float
    margin_right: float
    margin_bottom: float
    margin_left: float
    line_height: float = 14.0

    @classmethod
    def uniform(
        cls, width: float, height: float, margin: float, line_height: float = 14.0
    ) -> "PageGeometry":
        return cls(width, height, margin, margin, margin, margin, line_height)

    @classmethod
    def named(
        cls, size: str, margin: float = 54.0, line_height: float = 14.0
    ) -> "PageGeometry":
        """Build a geometry from a reportlab page size name (``letter``, ``a4``)."""

        from reportlab.lib import pagesizes

        sizes = {"letter": pagesizes.LETTER, "legal": pagesizes.LEGAL, "a4": pagesizes.A4}
        try:
            width, height = sizes[size.lower()]
        except KeyError:
            raise ValueError(f"unknown page size: {size!r}") from None
        return cls.uniform(width, height, margin, line_height)

    @property
    def usable_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def bottom(self) -> float:
        """Lowest ``y`` a draw operation may reach."""

        return self.height - self.margin_bottom

    @property
    def usable_height(self) -> float:
        return self.bottom - self.margin_top
