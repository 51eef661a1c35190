"""Tests for template presets."""

from __future__ import annotations

import pytest

from careerdocs.layout.styles import TEMPLATES, StyleConfig, get_style, template_names
from careerdocs.utils.errors import TemplateNotFoundError


def test_three_presets() -> None:
    assert template_names() == ["classic", "modern", "sidebar"]
    assert all(TEMPLATES[name].name == name for name in TEMPLATES)


def test_presets_differ_only_by_configuration() -> None:
    assert get_style("classic").sidebar_width == 0
    assert get_style("sidebar").sidebar_width > 0
    assert get_style("classic").plain_list_style == "comma"
    assert get_style("modern").plain_list_style == "bullets"


def test_unknown_template() -> None:
    with pytest.raises(TemplateNotFoundError, match="classic, modern, sidebar"):
        get_style("fancy")


def test_overrides_return_a_copy() -> None:
    base = get_style("classic")
    custom = get_style("classic", bullet_glyph="*")
    assert custom.bullet_glyph == "*"
    assert base.bullet_glyph == "•"


def test_unknown_override_field() -> None:
    with pytest.raises(ValueError):
        StyleConfig().with_overrides(colour="red")


def test_scaled_line_height() -> None:
    style = StyleConfig(body_size=10, heading_size=15)
    assert style.scaled_line_height(14, style.heading_size) == 21
