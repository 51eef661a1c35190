from datetime import date

from careerdocs.utils.datefmt import format_letter_date


def test_default_format_has_no_zero_padding() -> None:
    assert format_letter_date(date(2026, 3, 5)) == "March 5, 2026"


def test_custom_format() -> None:
    assert format_letter_date(date(2026, 3, 5), "%Y-%m-%d") == "2026-03-05"


def test_defaults_to_today() -> None:
    assert format_letter_date().endswith(str(date.today().year))
