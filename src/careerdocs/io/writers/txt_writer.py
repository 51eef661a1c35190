"""Plain-text export.

:func:`document_to_text` serializes a :class:`Document` by simple string
concatenation.  It reads the same structured data as the layout engine but
does no measuring or pagination; the result is what the copy-to-clipboard
and ``.txt`` download actions hand to the user.

:func:`write_text` persists Unicode strings to disk without altering newline
sequences.  Directories required to store the file are created automatically.
"""

from __future__ import annotations

import os
from pathlib import Path

from careerdocs.layout.model import (
    Document,
    Entry,
    EntryList,
    PlainList,
    Section,
    TextBlock,
    body_is_empty,
)

__all__ = ["document_to_text", "write_text"]

PathLikeStr = os.PathLike[str]


def _pair(left: str, right: str) -> str:
    left, right = left.strip(), right.strip()
    if left and right:
        return f"{left} | {right}"
    return left or right


def _entry_lines(entry: Entry) -> list[str]:
    lines = [
        line
        for line in (_pair(entry.heading, entry.date), _pair(entry.subheading, entry.location))
        if line
    ]
    lines.extend(f"- {b.strip()}" for b in entry.bullets if b.strip())
    return lines


def _section_text(section: Section) -> str:
    lines: list[str] = []
    if section.title and section.title.strip():
        title = section.title.strip().upper()
        lines.extend([title, "-" * len(title)])

    body = section.body
    if isinstance(body, TextBlock):
        lines.append(body.text.strip("\n"))
    elif isinstance(body, EntryList):
        blocks = ["\n".join(_entry_lines(e)) for e in body.entries if not e.is_empty()]
        lines.append("\n\n".join(blocks))
    elif isinstance(body, PlainList):
        lines.append(", ".join(item.strip() for item in body.items if item.strip()))
    return "\n".join(lines)


def document_to_text(document: Document) -> str:
    """Return ``document`` as plain text.

    The header (title and subtitle) comes first, then each non-empty section.
    Sections are separated by a blank line and the result ends with a newline
    unless it is empty.
    """

    parts: list[str] = []
    header = [s.strip() for s in (document.title, document.subtitle) if s and s.strip()]
    if header:
        parts.append("\n".join(header))
    parts.extend(_section_text(s) for s in document.sections if not body_is_empty(s.body))
    text = "\n\n".join(parts)
    return text + "\n" if text else ""


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        The Unicode string to be written.
    encoding:
        Output encoding.  Defaults to UTF-8 without a byte-order mark.
    newline:
        ``newline`` parameter forwarded to :func:`open`.  The default of ``""``
        ensures newline characters in ``text`` are emitted verbatim.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)
