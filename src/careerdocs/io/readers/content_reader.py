"""Readers for generated content payloads.

``.json`` files are parsed with :mod:`json` (a Markdown code fence around the
payload is tolerated, since generative services often add one); ``.yaml`` and
``.yml`` files with ``yaml.safe_load``, which is handy for hand-written
content.  Both return the raw mapping; validation happens in
:mod:`careerdocs.content.schema`.  ``FileNotFoundError`` and other I/O errors
propagate to the caller.
"""

from __future__ import annotations

import json
import os
from typing import Any

import yaml

from careerdocs.content.schema import strip_code_fence
from careerdocs.utils.errors import ContentError

__all__ = ["read_json", "read_yaml"]

PathLikeStr = os.PathLike[str]


def _read(path: str | PathLikeStr, encoding: str) -> str:
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def read_json(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Any:
    text = strip_code_fence(_read(path, encoding))
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContentError(f"{path}: not valid JSON: {exc.msg} (line {exc.lineno})") from exc


def read_yaml(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Any:
    try:
        return yaml.safe_load(_read(path, encoding)) or {}
    except yaml.YAMLError as exc:
        raise ContentError(f"{path}: not valid YAML: {exc}") from exc
