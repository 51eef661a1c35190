"""Typed schema for generated career content.

The generative service answers with JSON holding a resume, a cover letter
and optional interview answers.  These models validate that payload.  Keys
are accepted in the service's camelCase (``coverLetter``, ``startDate``) or in
snake_case.  Unknown keys are ignored and absent optional fields default to
empty values, so partial answers still render.  Wrong shapes (a list where a
string is expected, for instance) fail validation and surface as
:class:`~careerdocs.utils.errors.ContentError`.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from careerdocs.utils.errors import ContentError

__all__ = [
    "ExperienceItem",
    "EducationItem",
    "ResumeContent",
    "CoverLetterContent",
    "InterviewAnswer",
    "GeneratedContent",
    "load_content",
    "parse_content_json",
    "strip_code_fence",
]

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*\n(?P<body>.*?)\n?```\s*$", re.DOTALL)


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


class ExperienceItem(_ContentModel):
    """One position held."""

    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: list[str] = Field(default_factory=list)

    @property
    def dates(self) -> str:
        if self.start_date and self.end_date:
            return f"{self.start_date} – {self.end_date}"
        return self.start_date or self.end_date


class EducationItem(_ContentModel):
    degree: str = ""
    institution: str = ""
    location: str = ""
    graduation_date: str = ""
    details: list[str] = Field(default_factory=list)


class ResumeContent(_ContentModel):
    name: str = ""
    contact: list[str] = Field(default_factory=list)
    summary: str = ""
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)

    @field_validator("skills", "certifications", mode="before")
    @classmethod
    def _split_string(cls, value: Any) -> Any:
        # Services sometimes return a single delimited string instead of a list.
        if isinstance(value, str):
            return [part.strip() for part in re.split(r"[|,\n]", value) if part.strip()]
        return value

    @field_validator("contact", mode="before")
    @classmethod
    def _split_contact(cls, value: Any) -> Any:
        # Commas stay: "Portland, OR" is one contact item.
        if isinstance(value, str):
            return [part.strip() for part in re.split(r"[|\n]", value) if part.strip()]
        return value


class CoverLetterContent(_ContentModel):
    salutation: str = ""
    body: str = ""
    closing: str = ""
    signature: str = ""

    @field_validator("body", mode="before")
    @classmethod
    def _join_paragraphs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return "\n\n".join(str(p).strip() for p in value)
        return value


class InterviewAnswer(_ContentModel):
    question: str = ""
    answer: str = ""


class GeneratedContent(_ContentModel):
    """Top-level payload returned by the structured-content source."""

    resume: ResumeContent | None = None
    cover_letter: CoverLetterContent | None = None
    interview_answers: list[InterviewAnswer] = Field(default_factory=list)


def load_content(data: Mapping[str, Any]) -> GeneratedContent:
    """Validate ``data`` into :class:`GeneratedContent`.

    Raises
    ------
    ContentError
        If ``data`` is not a mapping or fails validation.
    """

    if not isinstance(data, Mapping):
        raise ContentError(f"content must be a JSON object, got {type(data).__name__}")
    try:
        return GeneratedContent.model_validate(dict(data))
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or "<root>"
        raise ContentError(f"invalid content at {where}: {first['msg']}") from exc


def strip_code_fence(text: str) -> str:
    """Return ``text`` without a surrounding Markdown code fence, if any."""

    match = _FENCE_RE.match(text)
    return match.group("body") if match else text


def parse_content_json(text: str) -> GeneratedContent:
    """Parse JSON ``text`` (optionally wrapped in a Markdown code fence)."""

    try:
        data = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as exc:
        raise ContentError(f"content is not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    return load_content(data)
