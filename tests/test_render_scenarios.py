"""End-to-end layout properties of :func:`careerdocs.layout.render`."""

from __future__ import annotations

from pathlib import Path

from careerdocs.content import build_resume_document, load_content
from careerdocs.layout import (
    Document,
    Entry,
    EntryList,
    FixedWidthMeasurer,
    PageGeometry,
    PlainList,
    RenderedPage,
    Section,
    TextBlock,
    get_style,
    render,
    wrap_text,
)

GEOMETRY = PageGeometry.uniform(100, 100, 10, 5)
MEASURER = FixedWidthMeasurer()
STYLE = get_style(
    "classic",
    body_size=10,
    heading_size=10,
    section_gap=0,
    entry_gap=0,
    uppercase_titles=False,
)
DATA = Path(__file__).parent / "data" / "sample_content.json"


def _texts(pages: tuple[RenderedPage, ...]) -> list[str]:
    return [t for p in pages for t in p.texts]


def test_twenty_paragraphs_split_sixteen_and_four() -> None:
    doc = Document((Section(TextBlock("\n".join(f"p{i}" for i in range(20)))),))
    pages = render(doc, GEOMETRY, STYLE, MEASURER)
    assert [len(p.ops) for p in pages] == [16, 4]
    assert pages[0].ops[0].y == 15
    assert pages[0].ops[-1].y == 90
    assert pages[1].texts == ["p16", "p17", "p18", "p19"]
    assert pages[1].ops[0].y == 15


def test_entry_bullets_split_at_line_boundary() -> None:
    bullet = " ".join(["word"] * 300)
    entry = Entry("Engineer", "2020", "Acme", "Remote", (bullet,))
    doc = Document((Section(EntryList((entry,))),))
    pages = render(doc, GEOMETRY, STYLE, MEASURER)

    assert len(pages) == 2
    assert pages[0].texts[:4] == ["Engineer", "2020", "Acme", "Remote"]
    assert "Engineer" not in pages[1].texts
    # Line boundary split: every page-two op is a complete bullet text line.
    bullet_lines = [t for t in _texts(pages) if t.startswith("word")]
    assert " ".join(bullet_lines) == bullet
    assert all(op.x == 10 + STYLE.bullet_indent for op in pages[1].ops)


def test_empty_middle_section_is_never_drawn() -> None:
    doc = Document(
        (
            Section(TextBlock("alpha"), "One"),
            Section(PlainList(()), "Two"),
            Section(TextBlock("gamma"), "Three"),
        )
    )
    pages = render(doc, GEOMETRY, STYLE, MEASURER)
    assert _texts(pages) == ["One", "alpha", "Three", "gamma"]
    rules = [op for p in pages for op in p.ops if op.kind == "rule"]
    assert len(rules) == 2


def test_comma_joined_plain_list_matches_wrapped_string() -> None:
    skills = tuple(f"skill{i}" for i in range(1, 6))
    joined = "skill1, skill2, skill3, skill4, skill5"
    style = STYLE.with_overrides(plain_list_style="comma")
    for geometry in (GEOMETRY, PageGeometry.uniform(40, 100, 10, 5)):
        pages = render(Document((Section(PlainList(skills)),)), geometry, style, MEASURER)
        expected = list(wrap_text(joined, geometry.usable_width, style.body_font(), MEASURER))
        assert _texts(pages) == expected
    assert len(expected) == 3


def test_empty_section_does_not_break_page() -> None:
    full = "\n".join(f"p{i}" for i in range(16))
    doc = Document(
        (
            Section(TextBlock(full)),
            Section(TextBlock("   "), "Empty"),
            Section(EntryList((Entry(),)), "Also empty"),
            Section(EntryList((Entry(heading="  ", bullets=(" ",)),)), "Blank entry"),
        )
    )
    pages = render(doc, GEOMETRY, STYLE, MEASURER)
    assert len(pages) == 1
    assert "Empty" not in _texts(pages)
    assert "Blank entry" not in _texts(pages)


def test_document_without_content_has_no_pages() -> None:
    doc = Document((Section(TextBlock(""), "Summary"), Section(PlainList(("", " ")))))
    assert render(doc, GEOMETRY, STYLE, MEASURER) == ()


def test_render_is_deterministic() -> None:
    resume = load_content(_payload()).resume
    assert resume is not None
    doc = build_resume_document(resume)
    geometry = PageGeometry.named("letter")
    for name in ("classic", "modern", "sidebar"):
        first = render(doc, geometry, get_style(name))
        second = render(doc, geometry, get_style(name))
        assert first == second


def test_no_clipped_lines_and_monotonic_cursor() -> None:
    resume = load_content(_payload()).resume
    assert resume is not None
    # Repeat the experience to force several pages.
    resume = resume.model_copy(update={"experience": resume.experience * 12})
    doc = build_resume_document(resume)
    geometry = PageGeometry.named("a4", margin=40, line_height=13)
    for name in ("classic", "modern", "sidebar"):
        pages = render(doc, geometry, get_style(name))
        assert len(pages) > 1
        assert [p.number for p in pages] == list(range(1, len(pages) + 1))
        for page in pages:
            ys = [op.y for op in page.ops]
            assert ys == sorted(ys)
            assert all(y <= geometry.bottom + 1e-6 for y in ys)
            assert all(y > geometry.margin_top for y in ys)


def _payload() -> dict[str, object]:
    import json

    return json.loads(DATA.read_text(encoding="utf-8"))


def test_whitespace_only_entry_section_draws_nothing() -> None:
    doc = Document((Section(EntryList((Entry(heading="  ", date="\t"),)), "Experience"),))
    assert render(doc, GEOMETRY, STYLE, MEASURER) == ()
