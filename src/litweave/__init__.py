# topmark:header:start
#
#   project      : LitWeave
#   file         : __init__.py
#   file_relpath : src/litweave/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave package.

LitWeave turns commented source files into side-by-side documentation: the
comments, rendered as Markdown, on the left; the syntax-highlighted code on
the right. It exposes a Click CLI (``litweave``) and the small API below.

Examples:
    Weave Go source text into Markdown::

        from litweave import Config, OutputFormat, generate_docs, load_resources

        config = Config(output_format=OutputFormat.MARKDOWN)
        text = generate_docs("main.go", source, config=config, resources=load_resources(config))
"""

from __future__ import annotations

from litweave.config import Config, MutableConfig, OutputFormat
from litweave.constants import LITWEAVE_VERSION
from litweave.files import process_file
from litweave.languages import get_language, language_for_path
from litweave.resources import load_resources
from litweave.weave import Section, extract_sections, generate_docs

__version__: str = LITWEAVE_VERSION

__all__ = [
    "Config",
    "MutableConfig",
    "OutputFormat",
    "Section",
    "__version__",
    "extract_sections",
    "generate_docs",
    "get_language",
    "language_for_path",
    "load_resources",
    "process_file",
]
