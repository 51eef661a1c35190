"""Helpers for the date line injected into cover letters.

The layout engine never reads the clock.  Callers that want a dated letter
format the date here and pass the resulting string as ordinary text content.
"""

from __future__ import annotations

import calendar
from datetime import date

__all__ = ["DEFAULT_DATE_FORMAT", "format_letter_date"]

DEFAULT_DATE_FORMAT = "%B %d, %Y"


def format_letter_date(d: date | None = None, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format ``d`` (today when omitted) for a letter heading.

    The default format produces ``October 5, 2026`` without the zero padding
    that ``%d`` would add.
    """

    d = d or date.today()
    if fmt == DEFAULT_DATE_FORMAT:
        return f"{calendar.month_name[d.month]} {d.day}, {d.year}"
    return d.strftime(fmt)
