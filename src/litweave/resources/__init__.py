# topmark:header:start
#
#   project      : LitWeave
#   file         : __init__.py
#   file_relpath : src/litweave/resources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Page template and stylesheet.

The bundled ``litweave.html.j2`` and ``litweave.css`` ship as package data. A
resource directory given with ``--resdir`` (or ``resdir`` in the config)
replaces both; it must contain files with the same names.

Resources are loaded once, before the first file is processed, and reused
read-only for every file. Any failure here is a `ResourceError` and aborts the
run before output is written.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from litweave.config.logging import get_logger
from litweave.constants import CSS_NAME, RESOURCE_PACKAGE, TEMPLATE_NAME
from litweave.errors import ResourceError

if TYPE_CHECKING:
    if sys.version_info >= (3, 14):
        from importlib.resources.abc import Traversable
    else:
        from importlib.abc import Traversable

    from litweave.config.logging import WeaveLogger
    from litweave.config.model import Config

logger: WeaveLogger = get_logger(__name__)


@dataclass(frozen=True)
class Resources:
    """Loaded page resources.

    Attributes:
        template (Template | None): Compiled page template; None for the Markdown target.
        style (str): Stylesheet text when it is inlined, ``""`` otherwise.
        css_source (Traversable | None): Stylesheet to copy next to the output; None
            when nothing needs to be copied.
    """

    template: Template | None
    style: str = ""
    css_source: Traversable | None = None


def template_environment() -> Environment:
    """Return the Jinja2 environment used for page templates.

    Section text is already HTML, so autoescaping is off; the template escapes
    plain values (file name, stylesheet href) explicitly.
    """
    return Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def resource_root(config: Config) -> Traversable:
    """Return the directory holding the template and stylesheet.

    Args:
        config (Config): Runtime configuration.

    Returns:
        Traversable: ``config.resdir`` if set, otherwise the bundled resources.
    """
    if config.resdir is not None:
        return config.resdir
    return files(RESOURCE_PACKAGE)


def _read_text(resource: Traversable) -> str:
    try:
        return resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(f"Cannot load resource {resource}: {exc}") from exc


def load_resources(config: Config) -> Resources:
    """Load the template and, depending on the options, the stylesheet.

    * Markdown target: nothing is needed.
    * HTML with ``inline_css``: template and stylesheet text.
    * HTML otherwise: template, plus the stylesheet location for copying.

    Args:
        config (Config): Runtime configuration.

    Returns:
        Resources: The loaded resources.

    Raises:
        ResourceError: If a required resource is missing, unreadable, or the
            template does not compile.
    """
    if config.is_markdown:
        return Resources(template=None)

    root: Traversable = resource_root(config)
    logger.debug("Loading resources from %s", root)

    source: str = _read_text(root.joinpath(TEMPLATE_NAME))
    try:
        template: Template = template_environment().from_string(source)
    except TemplateError as exc:
        raise ResourceError(f"Invalid template {TEMPLATE_NAME}: {exc}") from exc

    css: Traversable = root.joinpath(CSS_NAME)
    if config.inline_css:
        return Resources(template=template, style=_read_text(css))
    if not css.is_file():
        raise ResourceError(f"Stylesheet not found: {css}")
    return Resources(template=template, css_source=css)
