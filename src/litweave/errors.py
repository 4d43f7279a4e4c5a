# topmark:header:start
#
#   project      : LitWeave
#   file         : errors.py
#   file_relpath : src/litweave/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the LitWeave core.

Every failure inside the weave pipeline is fatal for the whole run: the core
raises one of these exceptions and never writes a partial document. The CLI
translates them into Click exceptions with standardized exit codes (see
`litweave.cli.errors`).

An unterminated block comment is *not* an error: the line classifier simply
treats the rest of the file as comment text.
"""

from __future__ import annotations


class WeaveError(Exception):
    """Base class for all LitWeave errors."""


class ConfigError(WeaveError):
    """An explicitly requested configuration source is missing or malformed."""


class ResourceError(WeaveError):
    """The HTML template or the stylesheet cannot be located or loaded."""


class RenderError(WeaveError):
    """Template execution, Markdown rendering, or syntax highlighting failed."""


class InputError(WeaveError):
    """A source file cannot be read."""


class SourceEncodingError(InputError):
    """A source file cannot be decoded as text."""


class OutputError(WeaveError):
    """A generated document or the stylesheet cannot be written."""


class UnknownLanguageError(WeaveError):
    """A language name is not present in the language registry."""
