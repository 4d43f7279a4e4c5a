# topmark:header:start
#
#   project      : LitWeave
#   file         : renderer.py
#   file_relpath : src/litweave/weave/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-section rendering of documentation text and code.

`DocRenderer` mutates sections in place:

* `DocRenderer.markdown_comments` turns each ``doc`` into HTML with
  Python-Markdown;
* `DocRenderer.highlight_code` (HTML target) turns each ``code`` into
  Pygments markup, or into ``""`` when the code is blank so the template can
  render a full-width row;
* `DocRenderer.markdown_code` (Markdown target) wraps each ``code`` in a
  fenced block.

Every section is highlighted on its own. The lexer is configured to keep
leading and trailing newlines, and the leading indentation of a section is
split off before highlighting and put back afterwards, so the highlighted
text keeps the whitespace of the source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import markdown
from pygments import highlight
from pygments import token as T
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from litweave.config.logging import get_logger
from litweave.config.types import OutputFormat
from litweave.errors import RenderError
from litweave.weave.markdown_ext import weave_extensions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pygments.lexer import Lexer
    from pygments.token import _TokenType

    from litweave.config.logging import WeaveLogger
    from litweave.languages.base import Language
    from litweave.weave.sections import Section

logger: WeaveLogger = get_logger(__name__)

# Token classes understood by the stylesheet.
_TOKEN_CLASSES: Final[dict[_TokenType, str]] = {
    T.Comment: "comment",
    T.Keyword.Type: "ident",
    T.Keyword.Constant: "ident",
    T.Keyword: "keyword",
    T.Literal: "literal",
    T.String: "literal",
    T.Number: "literal",
    T.Operator.Word: "keyword",
    T.Operator: "operator",
    T.Punctuation: "operator",
    T.Name: "ident",
    T.Text: "",
    T.Error: "",
    T.Other: "",
}


def _token_class(ttype: _TokenType) -> str:
    """Map a Pygments token type to one of the stylesheet classes."""
    while ttype:
        if ttype in _TOKEN_CLASSES:
            return _TOKEN_CLASSES[ttype]
        ttype = ttype.parent
    return ""


class WeaveHtmlFormatter(HtmlFormatter):
    """HtmlFormatter emitting ``operator``/``ident``/``literal``/``keyword``/``comment``."""

    def _get_css_class(self, ttype: _TokenType) -> str:
        return _token_class(ttype)

    def _get_css_classes(self, ttype: _TokenType) -> str:
        return _token_class(ttype)


def split_leading_ws(s: str) -> tuple[str, str]:
    """Split ``s`` into its leading run of spaces/tabs and the rest.

    Args:
        s (str): Code text.

    Returns:
        tuple[str, str]: ``(whitespace, rest)`` with ``whitespace + rest == s``.
    """
    rest: str = s.lstrip(" \t")
    return s[: len(s) - len(rest)], rest


def is_blank(code: str) -> bool:
    """Return True if ``code`` holds only whitespace and newlines."""
    return not code.strip()


def build_markdown() -> markdown.Markdown:
    """Return a Markdown converter configured with the documentation extension set."""
    return markdown.Markdown(extensions=weave_extensions(), output_format="html")


class DocRenderer:
    """Render the sections of one document.

    Args:
        language (Language): Source language (fence tag and Pygments lexer).
        md (markdown.Markdown | None): Markdown converter; built on demand if None.
        formatter (HtmlFormatter | None): Pygments formatter; a `WeaveHtmlFormatter`
            without wrapper elements if None.
    """

    def __init__(
        self,
        language: Language,
        *,
        md: markdown.Markdown | None = None,
        formatter: HtmlFormatter | None = None,
    ) -> None:
        self.language: Language = language
        self._md: markdown.Markdown | None = md
        self.formatter: HtmlFormatter = formatter or WeaveHtmlFormatter(nowrap=True)
        self._lexer: Lexer | None = None

    @property
    def md(self) -> markdown.Markdown:
        """The Markdown converter."""
        if self._md is None:
            self._md = build_markdown()
        return self._md

    @property
    def lexer(self) -> Lexer:
        """The Pygments lexer for the source language.

        Raises:
            RenderError: If Pygments has no lexer of that name.
        """
        if self._lexer is None:
            try:
                self._lexer = get_lexer_by_name(
                    self.language.lexer_name, stripnl=False, ensurenl=False
                )
            except ClassNotFound as exc:
                raise RenderError(
                    f"No syntax highlighter for language '{self.language.name}'"
                ) from exc
        return self._lexer

    def render_doc(self, text: str) -> str:
        """Render one documentation text to HTML.

        Args:
            text (str): Markdown text.

        Returns:
            str: HTML.

        Raises:
            RenderError: If Markdown conversion fails.
        """
        try:
            return self.md.reset().convert(text)
        except Exception as exc:
            raise RenderError(f"Markdown rendering failed: {exc}") from exc

    def highlight(self, code: str) -> str:
        """Highlight one code text, keeping its leading indentation.

        Args:
            code (str): Non-blank code text.

        Returns:
            str: HTML markup.

        Raises:
            RenderError: If highlighting fails.
        """
        ws, rest = split_leading_ws(code)
        try:
            return ws + highlight(rest, self.lexer, self.formatter)
        except RenderError:
            raise
        except Exception as exc:
            raise RenderError(f"Syntax highlighting failed: {exc}") from exc

    def markdown_comments(self, sections: Sequence[Section]) -> None:
        """Apply Markdown to each section's documentation."""
        for section in sections:
            section.doc = self.render_doc(section.doc)

    def highlight_code(self, sections: Sequence[Section]) -> None:
        """Apply syntax highlighting to each section's code.

        Blank code becomes ``""`` so the section renders full-width.
        """
        for section in sections:
            if is_blank(section.code):
                section.code = ""
            else:
                section.code = self.highlight(section.code)

    def markdown_code(self, sections: Sequence[Section]) -> None:
        """Put each section's code into a Markdown code fence.

        Empty code and a lone newline stay as they are so empty sections remain empty.
        """
        fence: str = self.language.fence_tag
        for section in sections:
            if section.code not in ("", "\n"):
                section.code = f"\n```{fence}\n{section.code}```\n"

    def render(self, sections: Sequence[Section], output_format: OutputFormat) -> None:
        """Run the steps the target format needs.

        Args:
            sections (Sequence[Section]): Sections to mutate in place.
            output_format (OutputFormat): Target format.
        """
        logger.debug(
            "Rendering %d section(s) as %s (%s)",
            len(sections),
            output_format.value,
            self.language.name,
        )
        if output_format is OutputFormat.MARKDOWN:
            self.markdown_code(sections)
        else:
            self.highlight_code(sections)
            self.markdown_comments(sections)
