# topmark:header:start
#
#   project      : LitWeave
#   file         : test_sections.py
#   file_relpath : tests/weave/test_sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for section extraction."""

from __future__ import annotations

from litweave.languages import get_language
from litweave.weave.sections import Section, extract_sections, split_lines
from tests.conftest import GO_SAMPLE, mark_pipeline, parametrize


@mark_pipeline
@parametrize(
    ("source", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
        ("a\nb", ["a", "b"]),
    ],
)
def test_split_lines(source: str, expected: list[str]) -> None:
    """A trailing newline terminates the last line instead of starting an empty one."""
    assert split_lines(source) == expected


@mark_pipeline
def test_comment_groups_and_code() -> None:
    """Comment groups pair with the code that follows; blank lines are code."""
    source = (
        "// Test comment\n// more comment\n\nTest code\nMore code\n\n"
        "// Second comment\n  Second code snippet\n\n"
    )
    assert extract_sections(source) == [
        Section(doc="Test comment\nmore comment\n", code="\nTest code\nMore code\n\n"),
        Section(doc="Second comment\n", code="  Second code snippet\n\n"),
    ]


@mark_pipeline
def test_block_comment_only() -> None:
    assert extract_sections("/* Third\nEnd */\n") == [Section(doc="Third\nEnd\n", code="")]


@mark_pipeline
def test_directive_is_dropped() -> None:
    source = "// Doc\n//go:generate foo\nx := 1\n"
    sections = extract_sections(source)
    assert sections == [Section(doc="Doc\n", code="x := 1\n")]
    assert all("go:generate" not in s.doc + s.code for s in sections)


@mark_pipeline
def test_directive_between_comments_does_not_split() -> None:
    source = "// one\n//go:build linux\n// two\n"
    assert extract_sections(source) == [Section(doc="one\ntwo\n", code="")]


@mark_pipeline
def test_intro_only_keeps_leading_comment_block() -> None:
    source = "// Intro\n// more\npackage main\n// later\nfunc f() {}\n"
    assert extract_sections(source, intro_only=True) == [Section(doc="Intro\nmore\n", code="")]


@mark_pipeline
def test_intro_only_stops_at_blank_line() -> None:
    """A blank line is a non-comment line and ends the intro."""
    source = "// Intro\n\n// Not intro\n"
    assert extract_sections(source, intro_only=True) == [Section(doc="Intro\n", code="")]


@mark_pipeline
def test_intro_only_without_leading_comment() -> None:
    assert extract_sections("package main\n// x\n", intro_only=True) == [Section()]


@mark_pipeline
def test_empty_source_yields_one_empty_section() -> None:
    assert extract_sections("") == [Section()]


@mark_pipeline
def test_code_before_first_comment() -> None:
    """Leading code forms a section with an empty doc."""
    assert extract_sections("package main\n// Doc\nx\n") == [
        Section(doc="", code="package main\n"),
        Section(doc="Doc\n", code="x\n"),
    ]


@mark_pipeline
def test_blank_line_splits_comment_groups() -> None:
    """A blank line between two comment groups yields a section with blank code."""
    assert extract_sections("// a\n\n// b\nx\n") == [
        Section(doc="a\n", code="\n"),
        Section(doc="b\n", code="x\n"),
    ]


@mark_pipeline
def test_one_line_block_comment_swallows_following_code() -> None:
    """``/* x */`` on one line opens a block comment that only a later close ends."""
    assert extract_sections("/* x */\ny := 1\nz */\nw\n") == [
        Section(doc="x\ny := 1\nz\n", code="w\n"),
    ]


@mark_pipeline
def test_go_sample() -> None:
    sections = extract_sections(GO_SAMPLE)
    assert [s.doc for s in sections] == [
        "Package hello says hello.\n\nIt is *small*.\n",
        "Greet prints\n   a greeting.\n",
    ]
    assert sections[0].code == 'package hello\n\n\nimport "fmt"\n\n'
    assert sections[1].code.startswith("func Greet(name string) {\n")


@mark_pipeline
def test_python_syntax() -> None:
    source = "#!/usr/bin/env python3\n# Say hi.\nprint('hi')\n"
    sections = extract_sections(source, syntax=get_language("python").syntax)
    assert sections == [Section(doc="Say hi.\n", code="print('hi')\n")]
