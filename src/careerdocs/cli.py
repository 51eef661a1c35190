"""Typer-based command line interface.

``careerdocs render`` reads a generated-content payload (``.json`` or
``.yaml``), builds the resume, cover letter and interview documents present
in it and exports each one as PDF and/or plain text.  ``careerdocs text``
prints one document as plain text, and ``careerdocs templates`` lists the
available visual templates.

Exit codes
----------
0 success
3 I/O error (missing input, unsupported extension, filesystem issues)
4 configuration error
5 content error (payload is not valid JSON/YAML or does not match the schema)
6 rendering or writing failure
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .content import DOCUMENT_KINDS, build_documents, load_content
from .content.schema import GeneratedContent
from .io import WriteOptions, read_content, write_document
from .io.writers.txt_writer import document_to_text
from .layout.styles import TEMPLATES, template_names
from .utils.datefmt import format_letter_date
from .utils.errors import ContentError, TemplateNotFoundError, UnsupportedFormatError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger("cli")

app = typer.Typer(
    name="careerdocs",
    help="Render generated resumes, cover letters and interview answers to PDF and text.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    template: str | None,
    page_size: str | None,
    formats: list[str] | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied."""

    data = cfg.model_dump()
    if template is not None:
        data["template"] = template
    if page_size is not None:
        data["page"]["size"] = page_size.lower()
    if formats:
        data["output"]["formats"] = [f.lower().lstrip(".") for f in formats]
    return ConfigModel.model_validate(data)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _load_cfg(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, OSError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


def _load_payload(in_path: Path) -> GeneratedContent:
    try:
        data = read_content(in_path)
    except (FileNotFoundError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    except ContentError as exc:
        _safe_exit(5, str(exc))
    try:
        return load_content(data)
    except ContentError as exc:
        _safe_exit(5, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the careerdocs command group."""
    pass


@app.command()
def render(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Generated content payload (.json, .yaml)"
    ),
    out_dir: Path = typer.Option(  # noqa: B008
        Path("."), "--out-dir", "-o", help="Directory receiving the exported files"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    template: Optional[str] = typer.Option(  # noqa: B008
        None, "--template", "-t", help="Visual template [classic|modern|sidebar]"
    ),
    page_size: Optional[str] = typer.Option(  # noqa: B008
        None, "--page-size", help="Page size [letter|legal|a4]"
    ),
    formats: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--format", "-f", help="Export format, repeatable [pdf|txt]"
    ),
    date_text: Optional[str] = typer.Option(  # noqa: B008
        None, "--date", help="Date line for the cover letter; defaults to today"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> dict[str, str]:
    """Export every document found in ``in_path`` to ``out_dir``."""

    cfg = _load_cfg(config_path)
    try:
        cfg = _apply_overrides(cfg, template=template, page_size=page_size, formats=formats)
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    if verbose:
        typer.echo(f"Loaded config (template={cfg.template}, page={cfg.page.size})", err=True)

    content = _load_payload(in_path)
    if date_text is None:
        date_text = format_letter_date(fmt=cfg.output.date_format)
    documents = build_documents(content, date_text=date_text)
    if not documents:
        _safe_exit(5, f"{in_path}: no resume, cover letter or interview answers found")
    if verbose:
        typer.echo(f"Built {len(documents)} document(s): {', '.join(documents)}", err=True)

    try:
        options = WriteOptions(geometry=cfg.geometry(), style=cfg.build_style())
    except (TemplateNotFoundError, ValueError) as exc:
        _safe_exit(4, str(exc))

    written: dict[str, str] = {}
    for kind, document in documents.items():
        for fmt in cfg.output.formats:
            out_path = out_dir / f"{kind}.{fmt}"
            try:
                with Timing() as t_write:
                    write_document(out_path, document, options)
            except (UnsupportedFormatError, OSError) as exc:
                _safe_exit(3, str(exc))
            except Exception as exc:  # pragma: no cover - unexpected
                msg = str(exc)
                if verbose:
                    msg = f"{type(exc).__name__}: {msg}"
                _safe_exit(6, msg)
            logger.info("wrote %s (%s)", out_path, kind)
            if verbose:
                typer.echo(f"Wrote {out_path} in {t_write.ms:.1f} ms", err=True)
            written[f"{kind}.{fmt}"] = str(out_path)

    for path in written.values():
        typer.echo(path)
    return written


@app.command()
def text(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Generated content payload (.json, .yaml)"
    ),
    kind: str = typer.Option(  # noqa: B008
        "resume", "--kind", "-k", help="Document to print [resume|cover_letter|interview]"
    ),
    date_text: str = typer.Option(  # noqa: B008
        "", "--date", help="Date line for the cover letter"
    ),
) -> None:
    """Print one document as plain text (ready to paste)."""

    if kind not in DOCUMENT_KINDS:
        _safe_exit(2, f"Unknown kind '{kind}'; choose one of: {', '.join(DOCUMENT_KINDS)}")
    content = _load_payload(in_path)
    documents = build_documents(content, date_text=date_text)
    if kind not in documents:
        _safe_exit(5, f"{in_path}: no {kind.replace('_', ' ')} found")
    typer.echo(document_to_text(documents[kind]), nl=False)


@app.command()
def templates() -> None:
    """List the available visual templates."""

    for name in template_names():
        style = TEMPLATES[name]
        layout = f"sidebar {style.sidebar_width:g}pt" if style.sidebar_width else "single column"
        typer.echo(f"{name}\t{style.font_family}, {layout}, {style.plain_list_style} lists")
