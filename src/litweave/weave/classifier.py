# topmark:header:start
#
#   project      : LitWeave
#   file         : classifier.py
#   file_relpath : src/litweave/weave/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification: comment region or code region.

`LineClassifier` is a small state machine fed one line at a time. It answers
whether the line belongs to a comment region and remembers whether a block
comment is currently open. Rules are evaluated in order, first match wins:

1. single-line comment (``// text``): comment, state unchanged;
2. block comment start (``/* text``): comment, state -> ``IN_BLOCK_COMMENT``;
3. block comment end (``text */``): comment, state -> ``CODE``;
4. inside a block comment: comment;
5. anything else: code.

A block comment that is never closed keeps the machine in
``IN_BLOCK_COMMENT`` until the end of the file, so the remainder of the file
is woven as documentation. A one-line ``/* text */`` matches rule 2 first and
therefore also opens a block comment.

`DirectiveFilter` recognizes tool directives disguised as comments (for Go:
``//go:generate``, ``//go:build``, ``// +build``, ...). Directive lines are
removed before classification and never affect the classifier state.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from litweave.config.logging import get_logger

if TYPE_CHECKING:
    import re

    from litweave.config.logging import WeaveLogger
    from litweave.languages.base import CommentSyntax

logger: WeaveLogger = get_logger(__name__)


class ClassifierState(Enum):
    """State of a `LineClassifier`.

    Attributes:
        CODE: Outside any block comment.
        IN_BLOCK_COMMENT: Inside an open block comment.
    """

    CODE = "code"
    IN_BLOCK_COMMENT = "in_block_comment"


class LineClassifier:
    """Decide, line by line, whether a line belongs to a comment region.

    One instance per source file; the state is never shared across files.

    Args:
        syntax (CommentSyntax): Comment delimiters of the source language.
    """

    def __init__(self, syntax: CommentSyntax) -> None:
        self.syntax: CommentSyntax = syntax
        self.state: ClassifierState = ClassifierState.CODE

    def reset(self) -> None:
        """Return to the initial ``CODE`` state."""
        self.state = ClassifierState.CODE

    def classify(self, line: str) -> bool:
        """Classify ``line`` and update the block comment state.

        Args:
            line (str): A single source line without its line terminator.

        Returns:
            bool: True if the line belongs to a comment region.
        """
        if self.syntax.line_pattern.search(line):
            return True

        start: re.Pattern[str] | None = self.syntax.block_start_pattern
        if start is not None and start.search(line):
            self.state = ClassifierState.IN_BLOCK_COMMENT
            return True

        end: re.Pattern[str] | None = self.syntax.block_end_pattern
        if end is not None and end.search(line):
            self.state = ClassifierState.CODE
            return True

        return self.state is ClassifierState.IN_BLOCK_COMMENT

    __call__ = classify

    def strip_delimiters(self, line: str) -> str:
        """Remove every comment delimiter matched on ``line``.

        Args:
            line (str): A line classified as comment.

        Returns:
            str: The line without its line marker, block open or block close marker.
        """
        return self.syntax.delimiters_pattern.sub("", line)


class DirectiveFilter:
    """Recognize directive lines that must not appear in the output.

    Args:
        syntax (CommentSyntax): Comment syntax holding the directive patterns.
    """

    def __init__(self, syntax: CommentSyntax) -> None:
        self.pattern: re.Pattern[str] | None = syntax.directive_pattern

    def is_directive(self, line: str) -> bool:
        """Return True if ``line`` is a directive (anchored at column 0).

        Args:
            line (str): A single source line without its line terminator.

        Returns:
            bool: Whether the line is a directive.
        """
        if self.pattern is None:
            return False
        if self.pattern.match(line):
            logger.trace("Dropping directive line: %r", line)
            return True
        return False

    __call__ = is_directive
