# topmark:header:start
#
#   project      : LitWeave
#   file         : test_registry.py
#   file_relpath : tests/languages/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the language registry and comment syntax definitions."""

from __future__ import annotations

from pathlib import Path

import pytest

from litweave.errors import UnknownLanguageError
from litweave.languages import (
    CommentSyntax,
    get_language,
    get_language_registry,
    language_for_path,
    resolve_language,
)
from tests.conftest import make_config, parametrize


def test_registry_is_cached_and_complete() -> None:
    registry = get_language_registry()
    assert registry is get_language_registry()
    assert {"go", "c", "python", "shell"} <= set(registry)
    assert next(iter(registry)) == "go"


def test_extensions_are_unique() -> None:
    seen: dict[str, str] = {}
    for lang in get_language_registry().values():
        for ext in lang.extensions:
            assert ext.startswith(".")
            assert ext not in seen, f"{ext} claimed by {seen.get(ext)} and {lang.name}"
            seen[ext] = lang.name


@parametrize(
    ("name", "expected"),
    [("go", "go"), ("GoLang", "go"), (" py ", "python"), ("bash", "shell"), ("c#", "csharp")],
)
def test_get_language(name: str, expected: str) -> None:
    assert get_language(name).name == expected


def test_get_unknown_language() -> None:
    with pytest.raises(UnknownLanguageError, match="cobol"):
        get_language("cobol")


@parametrize(
    ("path", "expected"),
    [("main.go", "go"), ("lib/x.H", "c"), ("a.tar.py", "python"), ("run.sh", "shell")],
)
def test_language_for_path(path: str, expected: str) -> None:
    lang = language_for_path(Path(path))
    assert lang is not None
    assert lang.name == expected


def test_language_for_unknown_path() -> None:
    assert language_for_path(Path("README")) is None
    assert language_for_path(Path("notes.txt")) is None


def test_resolve_language() -> None:
    assert resolve_language(Path("x.py"), make_config()).name == "python"
    assert resolve_language(Path("x.txt"), make_config()).name == "go"
    assert resolve_language(Path("x.txt"), make_config(default_language="ruby")).name == "ruby"
    assert resolve_language(Path("x.py"), make_config(language="rust")).name == "rust"
    with pytest.raises(UnknownLanguageError):
        resolve_language(Path("x.py"), make_config(language="cobol"))


def test_fence_and_lexer_defaults() -> None:
    go = get_language("go")
    assert go.fence_tag == "go"
    assert go.lexer_name == "go"
    shell = get_language("shell")
    assert shell.fence_tag == "sh"
    assert shell.lexer_name == "bash"


def test_comment_syntax_patterns() -> None:
    syntax = CommentSyntax(line_marker="--", block_open="{-", block_close="-}")
    assert syntax.has_block_comments
    assert syntax.line_pattern.search("  -- x")
    assert syntax.block_start_pattern is not None
    assert syntax.block_start_pattern.search("{- x")
    assert syntax.block_end_pattern is not None
    assert syntax.block_end_pattern.search("x -}")
    assert syntax.delimiters_pattern.sub("", "{- x -}") == "x"


def test_comment_syntax_requires_both_block_markers() -> None:
    with pytest.raises(ValueError):
        CommentSyntax(line_marker="#", block_open="<#")
