# topmark:header:start
#
#   project      : LitWeave
#   file         : weave.py
#   file_relpath : src/litweave/cli/commands/weave.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave `weave` command.

Weaves each source file into an HTML page (or Markdown document) written to
``--outdir``. Resources are loaded once before the first file; the first
error stops the run with the exit code of its category (see
`litweave.cli.exit_codes.ExitCode`).

Examples:
    Weave two Go files into ``docs/`` with the stylesheet in ``docs/css``::

        litweave weave --outdir docs --csspath css main.go util.go

    Print the Markdown rendition of one file::

        litweave weave --md --stdout main.go
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from litweave.cli.console import get_console
from litweave.cli.errors import LitweaveUsageError, to_cli_error
from litweave.cli.options import (
    VERBOSITY_DETAILED,
    VERBOSITY_QUIET,
    common_config_options,
    weave_output_options,
)
from litweave.config.logging import get_logger
from litweave.config.model import MutableConfig
from litweave.config.types import OutputFormat
from litweave.errors import WeaveError
from litweave.files import copy_css_file, process_file
from litweave.languages import get_language
from litweave.resources import load_resources

if TYPE_CHECKING:
    from litweave.cli.console import ConsoleLike
    from litweave.config.logging import WeaveLogger
    from litweave.config.model import Config
    from litweave.resources import Resources

logger: WeaveLogger = get_logger(__name__)


def build_config(
    args: dict[str, Any],
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> Config:
    """Merge defaults, config files and CLI arguments into a frozen `Config`.

    Raises:
        ConfigError: If an explicitly given config file cannot be used.
        UnknownLanguageError: If a configured language name is unknown.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        args,
        extra_config_files=[Path(p) for p in config_paths],
        discover=not no_config,
    )
    config: Config = draft.freeze()
    # Fail before any output is written.
    if config.language:
        get_language(config.language)
    get_language(config.default_language)
    return config


@click.command(
    name="weave",
    help="Weave source files into side-by-side documentation.",
)
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(dir_okay=False, path_type=Path),
)
@weave_output_options
@common_config_options
def weave_command(
    *,
    files: tuple[Path, ...],
    outdir: str | None,
    resdir: str | None,
    csspath: str | None,
    inline: bool,
    output_format: OutputFormat | None,
    markdown: bool,
    bare: bool,
    intro_only: bool,
    language: str | None,
    stdout: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Weave source files into side-by-side documentation.

    Raises:
        LitweaveUsageError: If no file is given, or ``--stdout`` is used with
            more than one file.
        LitweaveError: If configuration, resources, reading, rendering or writing fails.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = int((ctx.obj or {}).get("verbosity_level", 0))

    if not files:
        raise LitweaveUsageError("No input files given.")
    if stdout and len(files) > 1:
        raise LitweaveUsageError("'--stdout' accepts a single input file.")

    args: dict[str, Any] = {
        "outdir": outdir,
        "resdir": resdir,
        "csspath": csspath,
        "output_format": OutputFormat.MARKDOWN if markdown else output_format,
        "bare": bare,
        "inline": inline,
        "intro_only": intro_only,
        "language": language,
        "stdout": stdout,
    }

    try:
        config: Config = build_config(args, config_paths=config_paths, no_config=no_config)
        if vlevel >= VERBOSITY_DETAILED:
            for path in config.config_files:
                console.print(console.styled(f"Using config {path}", dim=True))
        resources: Resources = load_resources(config)

        for path in files:
            result = process_file(path, config, resources)
            if isinstance(result, str):
                console.print(result, nl=False)
            elif vlevel > VERBOSITY_QUIET:
                console.print(f"{path} -> {console.styled(str(result), fg='green')}")

        if not config.to_stdout:
            css = copy_css_file(config, resources)
            if css is not None and vlevel >= VERBOSITY_DETAILED:
                console.print(f"stylesheet -> {console.styled(str(css), fg='green')}")
    except WeaveError as exc:
        logger.debug("Weave failed: %r", exc)
        raise to_cli_error(exc) from exc
