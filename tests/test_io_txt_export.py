"""Tests for plain-text export and the text writer."""

from __future__ import annotations

from pathlib import Path

from careerdocs.io.writers.txt_writer import document_to_text, write_text
from careerdocs.layout.model import Document, Entry, EntryList, PlainList, Section, TextBlock


def test_document_to_text_layout() -> None:
    doc = Document(
        (
            Section(TextBlock("Builds things."), "Summary"),
            Section(
                EntryList(
                    (
                        Entry("Engineer", "2020 – 2023", "Acme", "Remote", ("Did A", " ", "Did B")),
                        Entry(),
                        Entry("Intern", "", "Initech"),
                    )
                ),
                "Experience",
            ),
            Section(PlainList(()), "Certifications"),
            Section(PlainList(("Python", "SQL")), "Skills"),
        ),
        title="Jane Doe",
        subtitle="jane@example.com",
    )
    assert document_to_text(doc) == (
        "Jane Doe\n"
        "jane@example.com\n"
        "\n"
        "SUMMARY\n"
        "-------\n"
        "Builds things.\n"
        "\n"
        "EXPERIENCE\n"
        "----------\n"
        "Engineer | 2020 – 2023\n"
        "Acme | Remote\n"
        "- Did A\n"
        "- Did B\n"
        "\n"
        "Intern\n"
        "Initech\n"
        "\n"
        "SKILLS\n"
        "------\n"
        "Python, SQL\n"
    )


def test_untitled_sections_are_separated_by_blank_lines() -> None:
    doc = Document((Section(TextBlock("Dear Team,")), Section(TextBlock("Body\n\nMore"))))
    assert document_to_text(doc) == "Dear Team,\n\nBody\n\nMore\n"


def test_empty_document_serializes_to_empty_string() -> None:
    assert document_to_text(Document()) == ""


def test_write_text_preserves_newlines(tmp_path: Path) -> None:
    content = "A\nB\r\nC"
    file_path = tmp_path / "sample.txt"
    write_text(file_path, content)
    assert file_path.read_bytes() == content.encode("utf-8")


def test_write_text_creates_parent_dirs(tmp_path: Path) -> None:
    file_path = tmp_path / "nested" / "dir" / "file.txt"
    write_text(file_path, "data")
    assert file_path.read_text(encoding="utf-8") == "data"
