"""Structured content: the generated-payload schema and document builders."""

from .builders import (
    DOCUMENT_KINDS,
    build_cover_letter_document,
    build_documents,
    build_interview_document,
    build_resume_document,
)
from .schema import (
    CoverLetterContent,
    EducationItem,
    ExperienceItem,
    GeneratedContent,
    InterviewAnswer,
    ResumeContent,
    load_content,
    parse_content_json,
)

__all__ = [
    "DOCUMENT_KINDS",
    "build_cover_letter_document",
    "build_documents",
    "build_interview_document",
    "build_resume_document",
    "CoverLetterContent",
    "EducationItem",
    "ExperienceItem",
    "GeneratedContent",
    "InterviewAnswer",
    "ResumeContent",
    "load_content",
    "parse_content_json",
]
