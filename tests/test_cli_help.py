from __future__ import annotations

from typer.testing import CliRunner

from careerdocs.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "render" in result.stdout
    assert "templates" in result.stdout


def test_render_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "--help"])
    assert "--in" in result.stdout
    assert "--out-dir" in result.stdout
    assert "--config" in result.stdout
    assert "--template" in result.stdout
