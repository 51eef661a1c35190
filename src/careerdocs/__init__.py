"""careerdocs: structured resume, cover letter and interview documents.

The package turns structured career content into paginated pages and exports
them as plain text or PDF.  The layout engine lives in :mod:`careerdocs.layout`
and the command line interface in :mod:`careerdocs.cli`.
"""

from .layout import (
    Document,
    Entry,
    EntryList,
    PageGeometry,
    PlainList,
    RenderedPage,
    Section,
    StyleConfig,
    TextBlock,
    get_style,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Entry",
    "EntryList",
    "PageGeometry",
    "PlainList",
    "RenderedPage",
    "Section",
    "StyleConfig",
    "TextBlock",
    "get_style",
    "render",
    "__version__",
]
