"""Extension based registry for content readers and document writers.

Readers load a generated-content payload (``.json``, ``.yaml``, ``.yml``) and
return the raw mapping.  Writers export a :class:`Document` (``.txt``,
``.pdf``).  Dispatch is by lower-cased file extension.

``UnsupportedFormatError`` is raised when reading or writing a file whose
extension has no registered handler.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from careerdocs.layout.engine import render
from careerdocs.layout.metrics import TextMeasurer
from careerdocs.layout.model import Document, PageGeometry
from careerdocs.layout.styles import StyleConfig, get_style
from careerdocs.utils.errors import UnsupportedFormatError
from careerdocs.utils.logging import get_logger

from .readers.content_reader import read_json, read_yaml
from .writers.pdf_writer import write_pdf
from .writers.txt_writer import document_to_text, write_text

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class WriteOptions:
    """Layout and encoding settings handed to every writer."""

    geometry: PageGeometry
    style: StyleConfig
    measurer: TextMeasurer | None = None
    encoding: str = "utf-8"


ReaderFunc = Callable[[str | os.PathLike[str]], Any]
WriterFunc = Callable[[str | os.PathLike[str], Document, WriteOptions], None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".json"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns the parsed payload.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_write_formats() -> list[str]:
    return sorted(ext.lstrip(".") for ext in _WRITERS)


def read_content(path: str | os.PathLike[str]) -> Any:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path)


def write_document(
    path: str | os.PathLike[str],
    document: Document,
    options: WriteOptions | None = None,
) -> None:
    """Write ``document`` to ``path`` using the registered writer for its extension.

    ``options`` defaults to US letter geometry and the ``classic`` template.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    if options is None:
        options = WriteOptions(geometry=PageGeometry.named("letter"), style=get_style("classic"))
    writer(path, document, options)
    logger.debug("wrote %s", path)


def _txt_writer(path: str | os.PathLike[str], document: Document, options: WriteOptions) -> None:
    write_text(path, document_to_text(document), encoding=options.encoding)


def _pdf_writer(path: str | os.PathLike[str], document: Document, options: WriteOptions) -> None:
    pages = render(document, options.geometry, options.style, options.measurer)
    write_pdf(path, pages, options.geometry, options.style, title=document.title)


register_reader(".json", read_json)
register_reader(".yaml", read_yaml)
register_reader(".yml", read_yaml)
register_writer(".txt", _txt_writer)
register_writer(".pdf", _pdf_writer)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "WriteOptions",
    "register_reader",
    "register_writer",
    "get_extension",
    "supported_write_formats",
    "read_content",
    "write_document",
]
