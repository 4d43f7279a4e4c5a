# topmark:header:start
#
#   project      : LitWeave
#   file         : strategies_litweave.py
#   file_relpath : tests/strategies_litweave.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies producing Go-like source text."""

from __future__ import annotations

from hypothesis import strategies as st

# Fragments that exercise every classifier rule.
COMMENT_LINES: list[str] = [
    "// doc",
    "//",
    "  // indented doc",
    "/* open",
    "/* one line */",
    "close */",
    "  middle of block",
]
CODE_LINES: list[str] = [
    "package main",
    "",
    "   ",
    "x := 1",
    "\tfmt.Println(x)",
    "}",
    'fmt.Println("/* not a comment")',
]
DIRECTIVE_LINES: list[str] = [
    "//go:generate stringer",
    "//go:build linux",
    "// +build linux",
    "//line main.go:1",
    "//export Greet",
]

s_words = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n\r"),
    max_size=20,
)


def s_plain_line() -> st.SearchStrategy[str]:
    """A line without directives: known fragments or arbitrary single-line text."""
    return st.one_of(st.sampled_from(COMMENT_LINES + CODE_LINES), s_words)


def s_lines() -> st.SearchStrategy[list[str]]:
    """Lists of plain lines."""
    return st.lists(s_plain_line(), max_size=30)


def s_source_with_directives() -> st.SearchStrategy[tuple[list[str], list[str]]]:
    """Pairs of (lines without directives, same lines with directives interleaved)."""

    @st.composite
    def _build(draw: st.DrawFn) -> tuple[list[str], list[str]]:
        plain: list[str] = draw(s_lines())
        mixed: list[str] = []
        for line in plain:
            if draw(st.booleans()):
                mixed.append(draw(st.sampled_from(DIRECTIVE_LINES)))
            mixed.append(line)
        if draw(st.booleans()):
            mixed.append(draw(st.sampled_from(DIRECTIVE_LINES)))
        return plain, mixed

    return _build()


def join_lines(lines: list[str]) -> str:
    """Join lines into a source text where every line is newline-terminated."""
    return "".join(line + "\n" for line in lines)
