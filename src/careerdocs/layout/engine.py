"""Document renderer.

:func:`render` lays a :class:`Document` out onto pages in a single linear pass:
header first, then every non-empty section in order.  Nothing is re-laid out
once a line has been placed.  The result depends only on the arguments, so
identical inputs always produce identical pages, and separate calls share no
state.
"""

from __future__ import annotations

from careerdocs.utils.logging import get_logger

from .metrics import ReportLabMeasurer, TextMeasurer
from .model import Document, PageGeometry, RenderedPage, body_is_empty
from .paginate import PageBreakController
from .sections import LayoutContext, render_header, render_section
from .styles import StyleConfig, get_style

__all__ = ["render"]

logger = get_logger(__name__)


def render(
    document: Document,
    geometry: PageGeometry,
    style: StyleConfig | None = None,
    measurer: TextMeasurer | None = None,
) -> tuple[RenderedPage, ...]:
    """Render ``document`` into pages.

    Parameters
    ----------
    document:
        The structured document.  Sections whose body is empty are skipped
        entirely (no title, no page break).
    geometry:
        Page size, margins and base line height.
    style:
        Template record; defaults to the ``classic`` preset.
    measurer:
        Width measurement; defaults to :class:`ReportLabMeasurer` so that the
        layout matches the fonts the PDF writer draws with.

    Returns
    -------
    tuple[RenderedPage, ...]
        Pages numbered from 1.  A document without drawable content yields an
        empty tuple.
    """

    ctx = LayoutContext(
        ctl=PageBreakController(geometry),
        geometry=geometry,
        style=style or get_style("classic"),
        measurer=measurer or ReportLabMeasurer(),
    )

    drawn = render_header(ctx, document)
    for index, section in enumerate(document.sections):
        if body_is_empty(section.body):
            logger.debug("skipping empty section %d (%r)", index, section.title)
            continue
        if drawn and not ctx.ctl.at_page_top:
            ctx.ctl.advance(ctx.style.section_gap)
        render_section(ctx, section)
        drawn = True

    pages = ctx.ctl.finish()
    logger.debug(
        "rendered %d section(s) onto %d page(s) with template %r",
        len(document.sections),
        len(pages),
        ctx.style.name,
    )
    return pages
