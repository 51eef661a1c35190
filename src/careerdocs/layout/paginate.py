"""Cursor and page break control.

:class:`PageBreakController` owns the only mutable state of a render pass:
the vertical cursor ``y`` (distance from the page top) and the operations of
the page being filled.  Callers follow the same three-step rhythm for every
atomic unit::

    ctl.ensure_space(h)   # break first if the unit would cross the bottom margin
    ctl.draw(...)         # baseline at ctl.y + h
    ctl.advance(h)

A page that never receives a draw operation is never emitted, and a break is
never taken at the very top of a page, so a unit taller than the whole page
is placed anyway (overflowing) instead of producing blank pages.
"""

from __future__ import annotations

from .model import DrawOp, FontSpec, PageGeometry, RenderedPage

__all__ = ["PageBreakController"]

# Absorbs float drift from repeated additions of fractional line heights.
_EPSILON = 1e-6


class PageBreakController:
    """Track the cursor and collect operations into pages."""

    def __init__(self, geometry: PageGeometry) -> None:
        self.geometry = geometry
        self.y = geometry.margin_top
        self._pages: list[RenderedPage] = []
        self._ops: list[DrawOp] = []

    # -- queries -----------------------------------------------------------

    @property
    def remaining(self) -> float:
        """Vertical room left above the bottom margin."""

        return self.geometry.bottom - self.y

    @property
    def page_number(self) -> int:
        """1-indexed number of the page currently being filled."""

        return len(self._pages) + 1

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.geometry.margin_top + _EPSILON

    def fits(self, height: float) -> bool:
        return self.remaining + _EPSILON >= height

    # -- mutation ----------------------------------------------------------

    def ensure_space(self, height: float) -> bool:
        """Start a new page unless ``height`` fits; return ``True`` on a break."""

        if self.fits(height) or self.at_page_top:
            return False
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        self.y += height

    def new_page(self) -> None:
        if self._ops:
            self._pages.append(RenderedPage(self.page_number, tuple(self._ops)))
            self._ops = []
        self.y = self.geometry.margin_top

    def draw(
        self,
        text: str,
        x: float,
        line_height: float,
        font: FontSpec,
        color: str,
    ) -> DrawOp:
        """Append a text operation whose baseline sits ``line_height`` below ``y``."""

        op = DrawOp(text=text, x=x, y=self.y + line_height, font=font, color=color)
        self._ops.append(op)
        return op

    def rule(self, x: float, width: float, font: FontSpec, color: str) -> DrawOp:
        """Append a horizontal rule at the current ``y``."""

        op = DrawOp(text="", x=x, y=self.y, font=font, color=color, kind="rule", width=width)
        self._ops.append(op)
        return op

    def finish(self) -> tuple[RenderedPage, ...]:
        """Close the current page (if it holds anything) and return all pages."""

        if self._ops:
            self._pages.append(RenderedPage(self.page_number, tuple(self._ops)))
            self._ops = []
        return tuple(self._pages)
