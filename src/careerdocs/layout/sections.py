"""Turn sections into draw operations.

Each ``render_*`` function consumes one piece of a :class:`Document` and feeds
wrapped lines through a :class:`PageBreakController`.  Every wrapped line is
space-checked on its own, so paragraphs and bullet lists split between lines
and never inside one.  The only lookahead is the soft keep-together check for
an entry's heading, subheading and first bullet line.
"""

from __future__ import annotations

from dataclasses import dataclass

from .metrics import TextMeasurer, measure_block
from .model import Document, Entry, EntryList, FontSpec, PageGeometry, PlainList, Section, TextBlock
from .paginate import PageBreakController
from .styles import StyleConfig
from .wrap import wrap_text

__all__ = [
    "LayoutContext",
    "render_header",
    "render_section",
    "render_title",
    "render_text_block",
    "render_entry_list",
    "render_plain_list",
]

# Minimum horizontal space kept between a left-aligned heading and its
# right-aligned date or location.
_PAIR_PADDING = 6.0


@dataclass(slots=True)
class LayoutContext:
    """Everything a section renderer needs for one render pass."""

    ctl: PageBreakController
    geometry: PageGeometry
    style: StyleConfig
    measurer: TextMeasurer

    @property
    def x0(self) -> float:
        """Left edge of the text column (right of any sidebar band)."""

        return self.geometry.margin_left + self.style.sidebar_width

    @property
    def width(self) -> float:
        return self.geometry.usable_width - self.style.sidebar_width

    @property
    def line_height(self) -> float:
        return self.geometry.line_height

    def scaled(self, size: float) -> float:
        return self.style.scaled_line_height(self.geometry.line_height, size)

    def title_block_height(self) -> float:
        return self.scaled(self.style.heading_size) + self.style.rule_gap + self.style.title_gap


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------


def _emit_lines(
    ctx: LayoutContext,
    text: str,
    *,
    x: float,
    width: float,
    font: FontSpec,
    color: str,
    line_height: float,
) -> int:
    count = 0
    for line in wrap_text(text, width, font, ctx.measurer):
        ctx.ctl.ensure_space(line_height)
        ctx.ctl.draw(line, x, line_height, font, color)
        ctx.ctl.advance(line_height)
        count += 1
    return count


def _pair_left_width(ctx: LayoutContext, right: str, font: FontSpec) -> float:
    """Width left of a right-aligned ``right`` text; the full column when empty."""

    if not right:
        return ctx.width
    return ctx.width - ctx.measurer.width(right, font) - _PAIR_PADDING


def _pair_height(ctx: LayoutContext, left: str, right: str, font: FontSpec) -> float:
    width = _pair_left_width(ctx, right.strip(), font)
    lines = measure_block(left, font, width, ctx.line_height, ctx.measurer).lines
    return max(lines, 1) * ctx.line_height


def _emit_pair(ctx: LayoutContext, left: str, right: str, font: FontSpec, color: str) -> None:
    """Draw ``left`` wrapped at the column start with ``right`` flush right.

    ``right`` shares the baseline of the first line of ``left``.
    """

    lh = ctx.line_height
    right = right.strip()
    right_w = ctx.measurer.width(right, font) if right else 0.0
    right_x = ctx.x0 + ctx.width - right_w
    left_width = _pair_left_width(ctx, right, font)

    lines = list(wrap_text(left, left_width, font, ctx.measurer)) or [""]
    for idx, line in enumerate(lines):
        ctx.ctl.ensure_space(lh)
        if line:
            ctx.ctl.draw(line, ctx.x0, lh, font, color)
        if idx == 0 and right:
            ctx.ctl.draw(right, right_x, lh, font, color)
        ctx.ctl.advance(lh)


def _emit_bullet(ctx: LayoutContext, text: str) -> None:
    style = ctx.style
    font = style.body_font()
    lh = ctx.line_height
    text_x = ctx.x0 + style.bullet_indent
    text_width = ctx.width - style.bullet_indent
    for idx, line in enumerate(wrap_text(text, text_width, font, ctx.measurer)):
        ctx.ctl.ensure_space(lh)
        if idx == 0:
            ctx.ctl.draw(style.bullet_glyph, ctx.x0, lh, font, style.text_color)
        ctx.ctl.draw(line, text_x, lh, font, style.text_color)
        ctx.ctl.advance(lh)


# ---------------------------------------------------------------------------
# Document pieces
# ---------------------------------------------------------------------------


def render_header(ctx: LayoutContext, document: Document) -> bool:
    """Draw the document title and subtitle; return ``True`` if anything was drawn."""

    style = ctx.style
    drawn = False
    if document.title and document.title.strip():
        font = style.title_font()
        lh = ctx.scaled(style.title_size)
        title = document.title.strip()
        x = ctx.x0
        if style.header_align == "center":
            x += max(0.0, (ctx.width - ctx.measurer.width(title, font)) / 2)
        ctx.ctl.ensure_space(lh)
        ctx.ctl.draw(title, x, lh, font, style.heading_color)
        ctx.ctl.advance(lh)
        drawn = True

    if document.subtitle and document.subtitle.strip():
        font = style.body_font()
        lh = ctx.line_height
        for line in wrap_text(document.subtitle, ctx.width, font, ctx.measurer):
            x = ctx.x0
            if style.header_align == "center":
                x += max(0.0, (ctx.width - ctx.measurer.width(line, font)) / 2)
            ctx.ctl.ensure_space(lh)
            ctx.ctl.draw(line, x, lh, font, style.text_color)
            ctx.ctl.advance(lh)
            drawn = True
    return drawn


def render_title(ctx: LayoutContext, title: str) -> None:
    """Draw a section title followed by a rule across the text column."""

    style = ctx.style
    font = style.heading_font()
    lh = ctx.scaled(style.heading_size)
    text = title.strip().upper() if style.uppercase_titles else title.strip()

    ctx.ctl.ensure_space(ctx.title_block_height() + style.keep_title_lines * ctx.line_height)
    ctx.ctl.draw(text, ctx.x0, lh, font, style.heading_color)
    ctx.ctl.advance(lh + style.rule_gap)
    ctx.ctl.rule(ctx.x0, ctx.width, font, style.rule_color)
    ctx.ctl.advance(style.title_gap)


def render_text_block(ctx: LayoutContext, body: TextBlock) -> None:
    style = ctx.style
    lh = ctx.line_height
    for paragraph in body.paragraphs:
        if not paragraph.strip():
            # A blank line that does not fit is dropped rather than forcing a break.
            if ctx.ctl.fits(lh):
                ctx.ctl.advance(lh)
            continue
        _emit_lines(
            ctx,
            paragraph,
            x=ctx.x0,
            width=ctx.width,
            font=style.body_font(),
            color=style.text_color,
            line_height=lh,
        )


def _entry_lead_height(ctx: LayoutContext, entry: Entry, bullets: list[str]) -> float:
    style = ctx.style
    height = 0.0
    if entry.heading.strip() or entry.date.strip():
        height += _pair_height(ctx, entry.heading, entry.date, style.body_font(bold=True))
    if entry.subheading.strip() or entry.location.strip():
        height += _pair_height(ctx, entry.subheading, entry.location, style.body_font(italic=True))
    if bullets:
        height += ctx.line_height
    return height


def render_entry(ctx: LayoutContext, entry: Entry) -> None:
    style = ctx.style
    bullets = [b for b in entry.bullets if b.strip()]

    lead = _entry_lead_height(ctx, entry, bullets)
    if lead <= ctx.geometry.usable_height:
        ctx.ctl.ensure_space(lead)

    if entry.heading.strip() or entry.date.strip():
        _emit_pair(ctx, entry.heading, entry.date, style.body_font(bold=True), style.text_color)
    if entry.subheading.strip() or entry.location.strip():
        _emit_pair(
            ctx, entry.subheading, entry.location, style.body_font(italic=True), style.text_color
        )
    for bullet in bullets:
        _emit_bullet(ctx, bullet)


def render_entry_list(ctx: LayoutContext, body: EntryList) -> None:
    entries = [e for e in body.entries if not e.is_empty()]
    for idx, entry in enumerate(entries):
        if idx:
            ctx.ctl.advance(ctx.style.entry_gap)
        render_entry(ctx, entry)


def render_plain_list(ctx: LayoutContext, body: PlainList) -> None:
    style = ctx.style
    items = [item.strip() for item in body.items if item.strip()]
    if style.plain_list_style == "bullets":
        for item in items:
            _emit_bullet(ctx, item)
        return
    _emit_lines(
        ctx,
        ", ".join(items),
        x=ctx.x0,
        width=ctx.width,
        font=style.body_font(),
        color=style.text_color,
        line_height=ctx.line_height,
    )


def render_section(ctx: LayoutContext, section: Section) -> None:
    """Draw ``section``'s title (if any) and body."""

    if section.title and section.title.strip():
        render_title(ctx, section.title)
    body = section.body
    if isinstance(body, TextBlock):
        render_text_block(ctx, body)
    elif isinstance(body, EntryList):
        render_entry_list(ctx, body)
    else:
        render_plain_list(ctx, body)
