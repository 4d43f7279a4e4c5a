# topmark:header:start
#
#   project      : LitWeave
#   file         : errors.py
#   file_relpath : src/litweave/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LitWeave CLI.

Usage:
    Commands raise these exceptions (or convert core `WeaveError`s with
    `to_cli_error`) to exit with a standardized message and exit code.

Styling:
    Exceptions prefer the project console if one is present on the Click
    context (see `show()`); otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from litweave.cli.exit_codes import ExitCode
from litweave.errors import (
    ConfigError,
    InputError,
    OutputError,
    RenderError,
    ResourceError,
    SourceEncodingError,
    UnknownLanguageError,
    WeaveError,
)


class LitweaveError(click.ClickException):
    """Base class for all LitWeave CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LitweaveUsageError(LitweaveError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LitweaveConfigError(LitweaveError):
    """Error for configuration and resource errors."""

    exit_code = ExitCode.CONFIG_ERROR


class LitweaveFileNotFoundError(LitweaveError):
    """Error when a source file cannot be read."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LitweaveEncodingError(LitweaveError):
    """Error for source files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class LitweaveIOError(LitweaveError):
    """Error for failures writing documents or the stylesheet."""

    exit_code = ExitCode.IO_ERROR


class LitweavePipelineError(LitweaveError):
    """Error for rendering failures (Markdown, highlighting, template)."""

    exit_code = ExitCode.PIPELINE_ERROR


# Most specific first; SourceEncodingError is an InputError.
_ERROR_MAP: tuple[tuple[type[WeaveError], type[LitweaveError]], ...] = (
    (ConfigError, LitweaveConfigError),
    (ResourceError, LitweaveConfigError),
    (UnknownLanguageError, LitweaveUsageError),
    (SourceEncodingError, LitweaveEncodingError),
    (InputError, LitweaveFileNotFoundError),
    (OutputError, LitweaveIOError),
    (RenderError, LitweavePipelineError),
)


def to_cli_error(exc: WeaveError) -> LitweaveError:
    """Convert a core error into the CLI error carrying its exit code.

    Args:
        exc (WeaveError): Error raised by the core.

    Returns:
        LitweaveError: The matching CLI error; `LitweaveError` for unmapped types.
    """
    for core_cls, cli_cls in _ERROR_MAP:
        if isinstance(exc, core_cls):
            return cli_cls(str(exc))
    return LitweaveError(str(exc))
