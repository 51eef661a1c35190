"""Tests mapping generated content onto documents."""

from __future__ import annotations

from pathlib import Path

from careerdocs.content import (
    build_cover_letter_document,
    build_documents,
    build_interview_document,
    build_resume_document,
    load_content,
    parse_content_json,
)
from careerdocs.content.schema import CoverLetterContent, InterviewAnswer, ResumeContent
from careerdocs.layout.model import EntryList, PlainList, TextBlock

DATA = Path(__file__).parent / "data" / "sample_content.json"


def _sample() -> ResumeContent:
    content = parse_content_json(DATA.read_text(encoding="utf-8"))
    assert content.resume is not None
    return content.resume


def test_resume_document_sections() -> None:
    doc = build_resume_document(_sample())
    assert doc.title == "Jordan Rivera"
    assert doc.subtitle == "jordan@example.com | 555-0100 | Portland, OR"
    titles = [s.title for s in doc.sections]
    assert titles == ["Summary", "Experience", "Education", "Skills", "Certifications"]
    assert isinstance(doc.sections[0].body, TextBlock)
    experience = doc.sections[1].body
    assert isinstance(experience, EntryList)
    first = experience.entries[0]
    assert first.heading == "Senior Software Engineer"
    assert first.date == "2021 – Present"
    assert first.subheading == "Acme Analytics"
    assert first.location == "Remote"
    assert len(first.bullets) == 2
    skills = doc.sections[3].body
    assert isinstance(skills, PlainList)
    assert skills.items[0] == "Python"


def test_resume_without_name_has_no_header() -> None:
    doc = build_resume_document(ResumeContent())
    assert doc.title is None
    assert doc.subtitle is None


def test_cover_letter_uses_injected_date_and_sender() -> None:
    letter = CoverLetterContent(salutation="Dear Team,", body="Hello.", closing="Best,")
    doc = build_cover_letter_document(letter, date_text="May 1, 2026", sender="Sam Lee")
    bodies = [s.body for s in doc.sections]
    assert all(s.title is None for s in doc.sections)
    assert [b.text for b in bodies if isinstance(b, TextBlock)] == [
        "May 1, 2026",
        "Dear Team,",
        "Hello.",
        "Best,\nSam Lee",
    ]


def test_cover_letter_signature_wins_over_sender() -> None:
    letter = CoverLetterContent(closing="Best,", signature="S. Lee")
    doc = build_cover_letter_document(letter, sender="Sam Lee")
    last = doc.sections[-1].body
    assert isinstance(last, TextBlock)
    assert last.text == "Best,\nS. Lee"


def test_interview_document_has_one_section_per_question() -> None:
    answers = [InterviewAnswer(question="Why us?", answer="Mission."), InterviewAnswer()]
    doc = build_interview_document(answers)
    assert doc.title == "Interview Preparation"
    assert [s.title for s in doc.sections] == ["Why us?", None]


def test_build_documents_skips_absent_parts() -> None:
    docs = build_documents(load_content({"coverLetter": {"body": "x"}}), date_text="today")
    assert list(docs) == ["cover_letter"]


def test_build_documents_from_sample() -> None:
    content = parse_content_json(DATA.read_text(encoding="utf-8"))
    docs = build_documents(content, date_text="June 2, 2026")
    assert list(docs) == ["resume", "cover_letter", "interview"]
    closing = docs["cover_letter"].sections[-1].body
    assert isinstance(closing, TextBlock)
    assert closing.text == "Sincerely,\nJordan Rivera"
