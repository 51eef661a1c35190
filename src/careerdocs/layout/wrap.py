"""Greedy word wrapping against a measured width.

:func:`wrap_text` returns a :class:`WrappedLines` view instead of a list.  The
view is lazy (nothing is measured until it is iterated), finite, and
restartable: each iteration re-runs the wrap from the start and yields the
same lines.

Lines break only at ASCII whitespace; a no-break space (U+00A0) holds its
neighbours together.  Runs of whitespace collapse to one space, so
``" ".join(lines)`` equals ``" ".join(text.split())`` for ASCII-spaced text.  A
word wider than the limit is placed on a line of its own and allowed to
overflow.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from .metrics import TextMeasurer
from .model import FontSpec

__all__ = ["WrappedLines", "wrap_text"]

_BREAKS = re.compile(r"[ \t\r\n\f\v]+")


class WrappedLines:
    """Restartable iterable over the wrapped lines of ``text``."""

    __slots__ = ("text", "max_width", "font", "measurer")

    def __init__(
        self, text: str, max_width: float, font: FontSpec, measurer: TextMeasurer
    ) -> None:
        self.text = text
        self.max_width = max_width
        self.font = font
        self.measurer = measurer

    def __iter__(self) -> Iterator[str]:
        current = ""
        for word in _BREAKS.split(self.text):
            if not word:
                continue
            if not current:
                current = word
                continue
            trial = f"{current} {word}"
            if self.measurer.width(trial, self.font) <= self.max_width:
                current = trial
            else:
                yield current
                current = word
        if current:
            yield current

    def __repr__(self) -> str:
        return f"WrappedLines({self.text!r}, max_width={self.max_width!r})"


def wrap_text(
    text: str, max_width: float, font: FontSpec, measurer: TextMeasurer
) -> WrappedLines:
    """Wrap ``text`` to ``max_width`` as measured by ``measurer`` in ``font``."""

    return WrappedLines(text, max_width, font, measurer)
