# topmark:header:start
#
#   project      : LitWeave
#   file         : markdown_ext.py
#   file_relpath : src/litweave/weave/markdown_ext.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python-Markdown extensions used for documentation text.

Python-Markdown ships tables, fenced code, definition lists, header ids and
smart punctuation. Relaxed headers (``#Title`` without a space) are accepted
by its core parser. The extensions below add the remaining features:

* ``~~strikethrough~~`` rendered as ``<del>``;
* bare ``http(s)://`` / ``ftp://`` URLs turned into links;
* a backslash at the end of a line forces a ``<br />``;
* links to other documents open in a new browsing context.
"""

from __future__ import annotations

import xml.etree.ElementTree as etree
from typing import TYPE_CHECKING

from markdown.extensions import Extension
from markdown.inlinepatterns import (
    InlineProcessor,
    SimpleTagInlineProcessor,
    SubstituteTagInlineProcessor,
)
from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString

if TYPE_CHECKING:
    import re

    from markdown import Markdown

STRIKETHROUGH_RE = r"(~{2})(?!~)(.+?)~{2}"
BACKSLASH_BREAK_RE = r"\\\n"
BARE_URL_RE = r"""(?<![<(\["'=/\w])((?:https?|ftp)://[^\s<>"]*[^\s<>".,;:!?)\]'])"""


class BareUrlInlineProcessor(InlineProcessor):
    """Turn a bare URL into an ``<a>`` element."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(  # type: ignore[override]
        self, m: re.Match[str], data: str
    ) -> tuple[etree.Element, int, int]:
        url: str = m.group(1)
        el = etree.Element("a")
        el.set("href", url)
        el.text = AtomicString(url)
        return el, m.start(0), m.end(0)


class TargetBlankTreeprocessor(Treeprocessor):
    """Open every non-fragment link in a new browsing context."""

    def run(self, root: etree.Element) -> None:
        for el in root.iter("a"):
            href: str = el.get("href", "")
            if href and not href.startswith("#"):
                el.set("target", "_blank")


class StrikethroughExtension(Extension):
    """``~~text~~`` -> ``<del>text</del>``."""

    def extendMarkdown(self, md: Markdown) -> None:
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "litweave_del", 65
        )


class BareUrlExtension(Extension):
    """Autolink bare URLs."""

    def extendMarkdown(self, md: Markdown) -> None:
        # Below `link` and `autolink` so explicit links win.
        md.inlinePatterns.register(BareUrlInlineProcessor(BARE_URL_RE, md), "litweave_url", 115)


class BackslashBreakExtension(Extension):
    """A trailing backslash ends the line with a hard break."""

    def extendMarkdown(self, md: Markdown) -> None:
        # Above `escape` (180), which would otherwise see the backslash first.
        md.inlinePatterns.register(
            SubstituteTagInlineProcessor(BACKSLASH_BREAK_RE, "br"), "litweave_br", 185
        )


class TargetBlankExtension(Extension):
    """Add ``target="_blank"`` to links."""

    def extendMarkdown(self, md: Markdown) -> None:
        # After the inline treeprocessor (20) has created the links.
        md.treeprocessors.register(TargetBlankTreeprocessor(md), "litweave_target_blank", 8)


def weave_extensions() -> list[Extension | str]:
    """Return the extension set used to render documentation text.

    Returns:
        list[Extension | str]: Built-in extension names and LitWeave extension instances.
    """
    return [
        "tables",
        "fenced_code",
        "def_list",
        "toc",
        "smarty",
        StrikethroughExtension(),
        BareUrlExtension(),
        BackslashBreakExtension(),
        TargetBlankExtension(),
    ]
