"""Visual templates for the renderer.

A template is a :class:`StyleConfig` value.  The engine has no per-template
branches: fonts, colours, bullets, list style and the optional sidebar band
are all read from the style record.  Three presets ship with the package:

``classic``
    Times, black headings, comma-joined skill lists.
``modern``
    Helvetica, blue headings with a light rule, bulleted skill lists.
``sidebar``
    Helvetica with a coloured band down the left edge; the text column starts
    to the right of the band.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Literal

from careerdocs.utils.errors import TemplateNotFoundError

from .model import FontSpec

__all__ = ["StyleConfig", "TEMPLATES", "get_style", "template_names"]


@dataclass(slots=True, frozen=True)
class StyleConfig:
    """Style record consumed by the layout engine and the PDF writer.

    Sizes are in points.  Line heights for fonts other than the body font are
    the geometry's base line height scaled by ``size / body_size``.
    ``keep_title_lines`` extends the space check of a section title by that
    many body lines; ``0`` lets a title end up alone at the bottom of a page.
    """

    name: str = "classic"
    font_family: str = "Times"
    body_size: float = 10.5
    heading_size: float = 12.5
    title_size: float = 20.0
    text_color: str = "#111111"
    heading_color: str = "#000000"
    rule_color: str = "#000000"
    sidebar_width: float = 0.0
    sidebar_color: str = "#1f4e5f"
    bullet_glyph: str = "•"
    bullet_indent: float = 12.0
    plain_list_style: Literal["comma", "bullets"] = "comma"
    rule_gap: float = 2.0
    title_gap: float = 4.0
    entry_gap: float = 4.0
    section_gap: float = 8.0
    keep_title_lines: int = 0
    uppercase_titles: bool = True
    header_align: Literal["left", "center"] = "center"
    page_numbers: bool = False

    def body_font(self, *, bold: bool = False, italic: bool = False) -> FontSpec:
        return FontSpec(self.font_family, self.body_size, bold, italic)

    def heading_font(self) -> FontSpec:
        return FontSpec(self.font_family, self.heading_size, bold=True)

    def title_font(self) -> FontSpec:
        return FontSpec(self.font_family, self.title_size, bold=True)

    def scaled_line_height(self, base: float, size: float) -> float:
        return base * size / self.body_size

    def with_overrides(self, **overrides: Any) -> "StyleConfig":
        """Return a copy with ``overrides`` applied; unknown keys raise."""

        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"unknown style fields: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)


TEMPLATES: dict[str, StyleConfig] = {
    "classic": StyleConfig(),
    "modern": StyleConfig(
        name="modern",
        font_family="Helvetica",
        body_size=10.0,
        heading_size=12.0,
        title_size=22.0,
        text_color="#1f2937",
        heading_color="#1d4ed8",
        rule_color="#93c5fd",
        bullet_glyph="•",
        plain_list_style="bullets",
        uppercase_titles=False,
        header_align="left",
        page_numbers=True,
    ),
    "sidebar": StyleConfig(
        name="sidebar",
        font_family="Helvetica",
        body_size=10.0,
        heading_size=12.0,
        title_size=20.0,
        text_color="#222222",
        heading_color="#1f4e5f",
        rule_color="#1f4e5f",
        sidebar_width=24.0,
        sidebar_color="#1f4e5f",
        bullet_glyph="-",
        plain_list_style="bullets",
        header_align="left",
    ),
}


def template_names() -> list[str]:
    return sorted(TEMPLATES)


def get_style(name: str, **overrides: Any) -> StyleConfig:
    """Return the preset called ``name`` with optional field ``overrides``."""

    try:
        style = TEMPLATES[name]
    except KeyError:
        raise TemplateNotFoundError(
            f"Unknown template '{name}'; choose one of: {', '.join(template_names())}"
        ) from None
    return style.with_overrides(**overrides) if overrides else style
