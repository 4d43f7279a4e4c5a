# topmark:header:start
#
#   project      : LitWeave
#   file         : sections.py
#   file_relpath : src/litweave/weave/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split a source file into documentation/code sections.

A `Section` pairs a group of comment lines (``doc``) with the code that
follows it (``code``). A new section starts exactly when a comment line is
met while the current section already holds code. A blank line outside a
comment is code, so a single blank line between two comment groups splits
them into two sections; the first one then renders full-width because its
code is blank.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from litweave.config.logging import get_logger
from litweave.languages.builtins import GO_SYNTAX
from litweave.weave.classifier import DirectiveFilter, LineClassifier

if TYPE_CHECKING:
    from litweave.config.logging import WeaveLogger
    from litweave.languages.base import CommentSyntax

logger: WeaveLogger = get_logger(__name__)


@dataclass
class Section:
    """One documentation/code pair.

    Attributes:
        doc (str): Comment text with delimiters stripped, one ``"\\n"`` per source line.
            Replaced by rendered HTML for the HTML target.
        code (str): Raw code lines, one ``"\\n"`` per source line. Replaced by highlighted
            markup (HTML target) or a fenced block (Markdown target).
    """

    doc: str = ""
    code: str = ""


def split_lines(source: str) -> list[str]:
    """Split ``source`` on ``"\\n"``; a trailing newline ends the last line.

    Args:
        source (str): Full source text.

    Returns:
        list[str]: Lines without terminators. Empty for an empty source.
    """
    if not source:
        return []
    lines: list[str] = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    return lines


def extract_sections(
    source: str,
    *,
    syntax: CommentSyntax = GO_SYNTAX,
    intro_only: bool = False,
) -> list[Section]:
    """Split the source into sections of comment group plus following code.

    Args:
        source (str): Full source text.
        syntax (CommentSyntax): Comment syntax of the source language.
        intro_only (bool): Stop at the first non-comment line, keeping only the
            leading comment block.

    Returns:
        list[Section]: Sections in source order; never empty.
    """
    sections: list[Section] = []
    current = Section()
    is_comment = LineClassifier(syntax)
    is_directive = DirectiveFilter(syntax)

    for line in split_lines(source):
        if is_directive(line):
            continue
        if is_comment(line):
            if current.code:
                sections.append(current)
                current = Section()
            current.doc += is_comment.strip_delimiters(line) + "\n"
        elif intro_only:
            break
        else:
            current.code += line + "\n"

    sections.append(current)
    logger.debug("Extracted %d section(s)", len(sections))
    return sections
