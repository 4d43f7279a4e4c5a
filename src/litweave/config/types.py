# topmark:header:start
#
#   project      : LitWeave
#   file         : types.py
#   file_relpath : src/litweave/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts import-friendly definitions that other modules can depend on
without risk of circular imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class OutputFormat(str, Enum):
    """Target format of a woven document.

    Attributes:
        HTML: Side-by-side HTML rendered through the page template.
        MARKDOWN: Markdown with code in fenced blocks.
    """

    HTML = "html"
    MARKDOWN = "markdown"

    @property
    def extension(self) -> str:
        """File extension (without dot) of documents in this format."""
        return "md" if self is OutputFormat.MARKDOWN else "html"

    @classmethod
    def from_name(cls, key_name: str | None) -> OutputFormat | None:
        """Find the member by its case-insensitive value or name (``"md"`` is accepted).

        Args:
            key_name (str | None): Value such as ``"html"`` or ``"markdown"``, or None.

        Returns:
            OutputFormat | None: The matching member, or None if unset or unmatched.
        """
        if key_name is None:
            return None
        key: str = key_name.strip().lower()
        if key == "md":
            return cls.MARKDOWN
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        return None
