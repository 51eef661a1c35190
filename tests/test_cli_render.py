from __future__ import annotations

import shutil
from pathlib import Path

from typer.testing import CliRunner

from careerdocs.cli import app

DATA = Path(__file__).parent / "data" / "sample_content.json"


def _payload(tmp_path: Path) -> Path:
    in_path = tmp_path / "content.json"
    shutil.copy(DATA, in_path)
    return in_path


def test_render_writes_every_document(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["render", "--in", str(_payload(tmp_path)), "--out-dir", str(out_dir), "--date", "May 4, 2026"],
    )
    assert result.exit_code == 0, result.output
    for kind in ("resume", "cover_letter", "interview"):
        assert (out_dir / f"{kind}.pdf").read_bytes().startswith(b"%PDF")
        assert (out_dir / f"{kind}.txt").exists()
    letter = (out_dir / "cover_letter.txt").read_text(encoding="utf-8")
    assert letter.startswith("May 4, 2026\n\nDear Hiring Manager,")
    assert str(out_dir / "resume.pdf") in result.stdout


def test_render_single_format_and_template(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "render",
            "--in",
            str(_payload(tmp_path)),
            "--out-dir",
            str(out_dir),
            "--format",
            "txt",
            "--template",
            "sidebar",
            "--page-size",
            "a4",
        ],
    )
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "cover_letter.txt",
        "interview.txt",
        "resume.txt",
    ]


def test_render_yaml_payload_verbose(tmp_path: Path) -> None:
    in_path = tmp_path / "content.yaml"
    in_path.write_text(
        "resume:\n  name: Jane Doe\n  skills: [Python, SQL]\n", encoding="utf-8"
    )
    out_dir = tmp_path / "out"
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", "--in", str(in_path), "--out-dir", str(out_dir), "--verbose"]
    )
    assert result.exit_code == 0, result.output
    assert "Built 1 document(s): resume" in result.stderr
    assert (out_dir / "resume.txt").read_text(encoding="utf-8") == (
        "Jane Doe\n\nSKILLS\n------\nPython, SQL\n"
    )


def test_text_command_prints_resume(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--in", str(_payload(tmp_path))])
    assert result.exit_code == 0
    assert result.stdout.startswith("Jordan Rivera\n")
    assert "Senior Software Engineer | 2021 – Present" in result.stdout


def test_text_command_interview(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--in", str(_payload(tmp_path)), "--kind", "interview"])
    assert result.exit_code == 0
    assert "TELL ME ABOUT A DIFFICULT MIGRATION." in result.stdout


def test_templates_command() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["templates"])
    assert result.exit_code == 0
    names = [line.split("\t")[0] for line in result.stdout.splitlines()]
    assert names == ["classic", "modern", "sidebar"]
