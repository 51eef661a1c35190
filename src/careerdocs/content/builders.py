"""Map generated content onto renderable documents.

Absent optional fields are mapped to empty bodies; the renderer skips empty
sections, so builders do not need to filter them.
"""

from __future__ import annotations

from careerdocs.layout.model import Document, Entry, EntryList, PlainList, Section, TextBlock

from .schema import (
    CoverLetterContent,
    EducationItem,
    ExperienceItem,
    GeneratedContent,
    InterviewAnswer,
    ResumeContent,
)

__all__ = [
    "DOCUMENT_KINDS",
    "build_resume_document",
    "build_cover_letter_document",
    "build_interview_document",
    "build_documents",
]

DOCUMENT_KINDS: tuple[str, ...] = ("resume", "cover_letter", "interview")

CONTACT_SEPARATOR = " | "


def _experience_entry(item: ExperienceItem) -> Entry:
    return Entry(
        heading=item.title,
        date=item.dates,
        subheading=item.company,
        location=item.location,
        bullets=tuple(item.bullets),
    )


def _education_entry(item: EducationItem) -> Entry:
    return Entry(
        heading=item.degree,
        date=item.graduation_date,
        subheading=item.institution,
        location=item.location,
        bullets=tuple(item.details),
    )


def build_resume_document(resume: ResumeContent) -> Document:
    sections = (
        Section(TextBlock(resume.summary), "Summary"),
        Section(EntryList(tuple(_experience_entry(e) for e in resume.experience)), "Experience"),
        Section(EntryList(tuple(_education_entry(e) for e in resume.education)), "Education"),
        Section(PlainList(tuple(resume.skills)), "Skills"),
        Section(PlainList(tuple(resume.certifications)), "Certifications"),
    )
    return Document(
        sections=sections,
        title=resume.name or None,
        subtitle=CONTACT_SEPARATOR.join(c for c in resume.contact if c) or None,
    )


def build_cover_letter_document(
    letter: CoverLetterContent, *, date_text: str = "", sender: str = ""
) -> Document:
    """Build an untitled, letter-shaped document.

    ``date_text`` is placed above the salutation verbatim; the caller decides
    the date and its format.  ``sender`` is used as the signature when the
    letter has none.
    """

    signature = letter.signature or sender
    closing = "\n".join(part for part in (letter.closing, signature) if part)
    sections = (
        Section(TextBlock(date_text)),
        Section(TextBlock(letter.salutation)),
        Section(TextBlock(letter.body)),
        Section(TextBlock(closing)),
    )
    return Document(sections=sections)


def build_interview_document(
    answers: list[InterviewAnswer], *, title: str | None = "Interview Preparation"
) -> Document:
    sections = tuple(
        Section(TextBlock(a.answer), a.question or None) for a in answers
    )
    return Document(sections=sections, title=title if sections else None)


def build_documents(content: GeneratedContent, *, date_text: str = "") -> dict[str, Document]:
    """Return the documents present in ``content`` keyed by kind.

    Keys follow :data:`DOCUMENT_KINDS` order; missing parts are left out.
    """

    docs: dict[str, Document] = {}
    sender = content.resume.name if content.resume else ""
    if content.resume is not None:
        docs["resume"] = build_resume_document(content.resume)
    if content.cover_letter is not None:
        docs["cover_letter"] = build_cover_letter_document(
            content.cover_letter, date_text=date_text, sender=sender
        )
    if content.interview_answers:
        docs["interview"] = build_interview_document(content.interview_answers)
    return docs
