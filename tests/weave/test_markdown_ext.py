# topmark:header:start
#
#   project      : LitWeave
#   file         : test_markdown_ext.py
#   file_relpath : tests/weave/test_markdown_ext.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Markdown feature set used for documentation text."""

from __future__ import annotations

import pytest

from litweave.weave.renderer import build_markdown
from tests.conftest import mark_pipeline


def convert(text: str) -> str:
    return build_markdown().convert(text)


@mark_pipeline
def test_strikethrough() -> None:
    assert convert("~~gone~~") == "<p><del>gone</del></p>"


@mark_pipeline
def test_single_tilde_is_text() -> None:
    assert "<del>" not in convert("~not struck~")


@mark_pipeline
def test_bare_url_becomes_link() -> None:
    html: str = convert("see https://example.com/x now")
    assert '<a href="https://example.com/x"' in html
    assert ">https://example.com/x</a>" in html
    assert 'target="_blank"' in html


@mark_pipeline
@pytest.mark.parametrize(
    ("text", "url"),
    [
        ("Go to https://example.com.", "https://example.com"),
        ("ftp://example.org/file, then", "ftp://example.org/file"),
    ],
)
def test_bare_url_trailing_punctuation(text: str, url: str) -> None:
    assert f'href="{url}"' in convert(text)


@mark_pipeline
def test_explicit_links_are_not_doubled() -> None:
    html: str = convert("[docs](https://example.com) and <https://example.org>")
    assert html.count("<a ") == 2
    assert html.count('target="_blank"') == 2


@mark_pipeline
def test_url_in_code_span_is_not_linked() -> None:
    html: str = convert("`https://example.com`")
    assert "<a" not in html
    assert "<code>https://example.com</code>" in html


@mark_pipeline
def test_fragment_links_stay_in_page() -> None:
    html: str = convert("[top](#top)")
    assert 'href="#top"' in html
    assert "target" not in html


@mark_pipeline
def test_backslash_line_break() -> None:
    html: str = convert("one\\\ntwo")
    assert "<br" in html
    assert "\\" not in html


@mark_pipeline
def test_relaxed_header() -> None:
    assert convert("#Title") == '<h1 id="title">Title</h1>'


@mark_pipeline
def test_tables() -> None:
    html: str = convert("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>1</td>" in html


@mark_pipeline
def test_definition_lists() -> None:
    html: str = convert("Term\n: Definition\n")
    assert "<dl>" in html
    assert "<dt>Term</dt>" in html


@mark_pipeline
def test_fenced_code() -> None:
    html: str = convert("```\nx := 1\n```\n")
    assert "<pre><code>x := 1\n</code></pre>" in html


@mark_pipeline
def test_smart_punctuation() -> None:
    html: str = convert('"quoted" -- it\'s')
    assert "&ldquo;quoted&rdquo;" in html
    assert "&ndash;" in html
    assert "&rsquo;" in html
