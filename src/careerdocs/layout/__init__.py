"""Paginated document layout.

The public entry point is :func:`render`, which turns a :class:`Document` into
:class:`RenderedPage` objects for a given :class:`PageGeometry` and
:class:`StyleConfig`.
"""

from .engine import render
from .metrics import FixedWidthMeasurer, ReportLabMeasurer, TextMeasurer, measure_block
from .model import (
    Document,
    DrawOp,
    Entry,
    EntryList,
    FontSpec,
    PageGeometry,
    PlainList,
    RenderedPage,
    Section,
    TextBlock,
)
from .paginate import PageBreakController
from .styles import TEMPLATES, StyleConfig, get_style, template_names
from .wrap import wrap_text

__all__ = [
    "render",
    "FixedWidthMeasurer",
    "ReportLabMeasurer",
    "TextMeasurer",
    "measure_block",
    "Document",
    "DrawOp",
    "Entry",
    "EntryList",
    "FontSpec",
    "PageGeometry",
    "PlainList",
    "RenderedPage",
    "Section",
    "TextBlock",
    "PageBreakController",
    "TEMPLATES",
    "StyleConfig",
    "get_style",
    "template_names",
    "wrap_text",
]
