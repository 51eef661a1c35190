"""Typed configuration schema and loader for the careerdocs package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr, field_validator

from careerdocs.layout.model import PageGeometry
from careerdocs.layout.styles import TEMPLATES, StyleConfig, get_style

ENV_TEMPLATE = "CAREERDOCS_TEMPLATE"
ENV_PAGE_SIZE = "CAREERDOCS_PAGE_SIZE"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Page size and spacing in points."""

    size: Literal["letter", "legal", "a4"]
    margin: confloat(gt=0)
    line_height: confloat(gt=0)

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Which export formats to write and how to date letters."""

    formats: list[Literal["pdf", "txt"]]
    date_format: str

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


_HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class StyleOverrides(BaseModel):
    """Optional :class:`StyleConfig` fields applied on top of the template preset.

    Unset fields keep the preset's value.
    """

    name: Optional[str] = None
    font_family: Optional[str] = None
    body_size: Optional[confloat(gt=0)] = None
    heading_size: Optional[confloat(gt=0)] = None
    title_size: Optional[confloat(gt=0)] = None
    text_color: Optional[constr(pattern=_HEX_COLOR)] = None
    heading_color: Optional[constr(pattern=_HEX_COLOR)] = None
    rule_color: Optional[constr(pattern=_HEX_COLOR)] = None
    sidebar_width: Optional[confloat(ge=0)] = None
    sidebar_color: Optional[constr(pattern=_HEX_COLOR)] = None
    bullet_glyph: Optional[constr(min_length=1)] = None
    bullet_indent: Optional[confloat(ge=0)] = None
    plain_list_style: Optional[Literal["comma", "bullets"]] = None
    rule_gap: Optional[confloat(ge=0)] = None
    title_gap: Optional[confloat(ge=0)] = None
    entry_gap: Optional[confloat(ge=0)] = None
    section_gap: Optional[confloat(ge=0)] = None
    keep_title_lines: Optional[conint(ge=0)] = None
    uppercase_titles: Optional[bool] = None
    header_align: Optional[Literal["left", "center"]] = None
    page_numbers: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    template: str
    page: PageSettings
    style: StyleOverrides
    output: OutputSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("template")
    @classmethod
    def _known_template(cls, value: str) -> str:
        if value not in TEMPLATES:
            raise ValueError(f"unknown template {value!r}; choose one of {sorted(TEMPLATES)}")
        return value

    def geometry(self) -> PageGeometry:
        """Return the page geometry described by ``page``."""

        return PageGeometry.named(self.page.size, self.page.margin, self.page.line_height)

    def build_style(self) -> StyleConfig:
        """Return the template preset with ``style`` overrides applied."""

        return get_style(self.template, **self.style.model_dump(exclude_none=True))


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``CAREERDOCS_TEMPLATE`` / ``CAREERDOCS_PAGE_SIZE`` environment variables.
    """

    with (
        importlib_resources.files("careerdocs.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level of a config file must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    env_overrides: dict[str, Any] = {}
    if environ.get(ENV_TEMPLATE):
        env_overrides["template"] = environ[ENV_TEMPLATE]
    if environ.get(ENV_PAGE_SIZE):
        env_overrides["page"] = {"size": environ[ENV_PAGE_SIZE].lower()}
    merged = deep_merge_dicts(merged, env_overrides)

    return ConfigModel.model_validate(merged)


__all__ = [
    "ENV_TEMPLATE",
    "ENV_PAGE_SIZE",
    "ConfigModel",
    "PageSettings",
    "OutputSettings",
    "LoggingSettings",
    "StyleOverrides",
    "deep_merge_dicts",
    "load_config",
]
