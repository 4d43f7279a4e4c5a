# topmark:header:start
#
#   project      : LitWeave
#   file         : base.py
#   file_relpath : src/litweave/languages/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language and comment syntax definitions.

A `Language` describes how LitWeave recognizes a source file (by extension)
and how it splits that file into documentation and code: the `CommentSyntax`
names the single-line comment marker, the optional block comment delimiters,
and the directive patterns whose lines are dropped from the output.

The regular expressions derived from a syntax follow one shape for every
language:

* single-line comment: optional indentation, the line marker, one optional
  whitespace character;
* block start: optional indentation, the open marker, one optional whitespace
  character;
* block end: one optional whitespace character, the close marker, trailing
  whitespace, end of line;
* directive: the line marker at column 0 immediately followed by a directive.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommentSyntax:
    """Comment delimiters and directive markers of a language family.

    Attributes:
        line_marker (str): Single-line comment marker (e.g. ``"//"`` or ``"#"``).
        block_open (str | None): Block comment open marker (e.g. ``"/*"``), or None when the
            language has no block comments.
        block_close (str | None): Block comment close marker (e.g. ``"*/"``).
        directive_patterns (tuple[str, ...]): Regular expressions matched at the start of
            a line (column 0); a match marks the line as a tool directive.
    """

    line_marker: str
    block_open: str | None = None
    block_close: str | None = None
    directive_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.block_open is None) != (self.block_close is None):
            raise ValueError("block_open and block_close must be given together")

    @property
    def has_block_comments(self) -> bool:
        """Whether the syntax defines block comment delimiters."""
        return self.block_open is not None

    @functools.cached_property
    def line_pattern(self) -> re.Pattern[str]:
        """Pattern matching a single-line comment prefix."""
        return re.compile(_line_source(self.line_marker))

    @functools.cached_property
    def block_start_pattern(self) -> re.Pattern[str] | None:
        """Pattern matching a block comment opening, or None."""
        if self.block_open is None:
            return None
        return re.compile(_block_start_source(self.block_open))

    @functools.cached_property
    def block_end_pattern(self) -> re.Pattern[str] | None:
        """Pattern matching a block comment closing, or None."""
        if self.block_close is None:
            return None
        return re.compile(_block_end_source(self.block_close))

    @functools.cached_property
    def delimiters_pattern(self) -> re.Pattern[str]:
        """Pattern matching any comment delimiter, used to strip doc lines."""
        sources: list[str] = [_line_source(self.line_marker)]
        if self.block_open is not None and self.block_close is not None:
            sources.append(_block_start_source(self.block_open))
            sources.append(_block_end_source(self.block_close))
        return re.compile("|".join(sources))

    @functools.cached_property
    def directive_pattern(self) -> re.Pattern[str] | None:
        """Pattern matching directive lines, or None when there are none."""
        if not self.directive_patterns:
            return None
        alternatives: str = "|".join(f"(?:{p})" for p in self.directive_patterns)
        return re.compile(f"^{re.escape(self.line_marker)}(?:{alternatives})")


def _line_source(marker: str) -> str:
    return rf"^\s*{re.escape(marker)}\s?"


def _block_start_source(marker: str) -> str:
    return rf"^\s*{re.escape(marker)}\s?"


def _block_end_source(marker: str) -> str:
    return rf"\s?{re.escape(marker)}\s*$"


@dataclass(frozen=True)
class Language:
    """A source language LitWeave can weave.

    Attributes:
        name (str): Internal identifier (e.g. ``"go"``).
        extensions (tuple[str, ...]): Filename extensions including the leading dot.
        description (str): Human-readable description.
        syntax (CommentSyntax): Comment delimiters and directives.
        fence (str): Info string used for Markdown code fences.
        lexer (str): Pygments lexer alias used for syntax highlighting.
        aliases (tuple[str, ...]): Alternative names accepted by ``--language``.
    """

    name: str
    extensions: tuple[str, ...]
    description: str
    syntax: CommentSyntax
    fence: str = ""
    lexer: str = ""
    aliases: tuple[str, ...] = field(default_factory=tuple)

    @property
    def fence_tag(self) -> str:
        """Markdown fence info string (defaults to the language name)."""
        return self.fence or self.name

    @property
    def lexer_name(self) -> str:
        """Pygments lexer alias (defaults to the language name)."""
        return self.lexer or self.name
