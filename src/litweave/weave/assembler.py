# topmark:header:start
#
#   project      : LitWeave
#   file         : assembler.py
#   file_relpath : src/litweave/weave/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble rendered sections into the final document text.

For the HTML target the sections are handed to the Jinja2 page template
together with the page options held by a `Document`. For the Markdown target
the sections are concatenated as they are.

`generate_docs` runs the whole pipeline for one source text: extraction,
rendering and assembly.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import TemplateError

from litweave.config.logging import get_logger
from litweave.constants import CSS_NAME
from litweave.errors import RenderError
from litweave.languages.registry import resolve_language
from litweave.weave.renderer import DocRenderer
from litweave.weave.sections import Section, extract_sections

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jinja2 import Template

    from litweave.config.logging import WeaveLogger
    from litweave.config.model import Config
    from litweave.languages.base import Language
    from litweave.resources import Resources

logger: WeaveLogger = get_logger(__name__)


@dataclass
class Document:
    """Everything the page template needs for one file.

    Attributes:
        filename (str): Page title, normally the base name of the source file.
        sections (list[Section]): Rendered sections.
        css_path (str): Stylesheet href used when the CSS is linked.
        style (str): Stylesheet text used when the CSS is inlined.
        full (bool): Full HTML page (True) or body fragment (False).
        inline_css (bool): Inline the stylesheet instead of linking it.
    """

    filename: str
    sections: list[Section] = field(default_factory=lambda: [])
    css_path: str = CSS_NAME
    style: str = ""
    full: bool = True
    inline_css: bool = False

    def context(self) -> dict[str, Any]:
        """Return the template context for this document."""
        return {
            "filename": self.filename,
            "sections": self.sections,
            "css_path": self.css_path,
            "style": self.style,
            "full": self.full,
            "inline_css": self.inline_css,
        }


def css_href(config: Config) -> str:
    """Return the ``<link>`` href of the stylesheet.

    Args:
        config (Config): Runtime configuration.

    Returns:
        str: ``<csspath>/litweave.css``, or just the file name when ``csspath`` is empty.
    """
    if not config.csspath:
        return CSS_NAME
    return posixpath.join(posixpath.normpath(config.csspath), CSS_NAME)


def render_html(document: Document, template: Template) -> str:
    """Execute the page template for ``document``.

    Raises:
        RenderError: If the template fails.
    """
    try:
        return template.render(document.context())
    except TemplateError as exc:
        raise RenderError(f"Template execution failed for {document.filename}: {exc}") from exc


def join_sections(sections: Sequence[Section]) -> str:
    """Concatenate ``doc + code`` of every section, without separators."""
    return "".join(section.doc + section.code for section in sections)


def generate_docs(
    title: str,
    source: str,
    *,
    config: Config,
    resources: Resources,
    language: Language | None = None,
) -> str:
    """Weave one source text into a document.

    Args:
        title (str): Document title, normally the base name of the source file.
        source (str): Full source text.
        config (Config): Runtime configuration.
        resources (Resources): Loaded template and stylesheet.
        language (Language | None): Source language; resolved from ``title`` and
            ``config`` when None.

    Returns:
        str: The HTML page (or fragment) or the Markdown text.

    Raises:
        RenderError: If Markdown rendering, highlighting or the template fails.
        UnknownLanguageError: If a configured language name is unknown.
    """
    lang: Language = language or resolve_language(Path(title), config)
    sections: list[Section] = extract_sections(
        source,
        syntax=lang.syntax,
        intro_only=config.intro_only,
    )
    DocRenderer(lang).render(sections, config.output_format)

    if config.is_markdown:
        return join_sections(sections)

    if resources.template is None:
        raise RenderError("No page template loaded for HTML output")
    document = Document(
        filename=title,
        sections=sections,
        css_path=css_href(config),
        style=resources.style,
        full=config.full_page,
        inline_css=config.inline_css,
    )
    logger.trace("Assembling %s (full=%s, inline_css=%s)", title, document.full, document.inline_css)
    return render_html(document, resources.template)
