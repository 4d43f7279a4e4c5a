# topmark:header:start
#
#   project      : LitWeave
#   file         : options.py
#   file_relpath : src/litweave/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and option helpers for LitWeave commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from litweave.cli.cli_types import EnumChoiceParam
from litweave.cli.errors import LitweaveUsageError
from litweave.config.types import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels stored in ``ctx.obj["verbosity_level"]``.
VERBOSITY_QUIET: int = -1
VERBOSITY_DEFAULT: int = 0
VERBOSITY_DETAILED: int = 1


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: `VERBOSITY_QUIET`, `VERBOSITY_DEFAULT`, or the number of ``-v`` flags.

    Raises:
        LitweaveUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LitweaveUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return VERBOSITY_DEFAULT


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counting, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress progress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color``."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in console output.",
    )(f)
    return f


def weave_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options controlling where and how documents are written.

    Flags only ever switch features on; an absent flag leaves config file values alone.
    """
    f = click.option(
        "--outdir",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Directory receiving the generated documents (default: current directory).",
    )(f)
    f = click.option(
        "--resdir",
        type=click.Path(exists=True, file_okay=False, path_type=str),
        default=None,
        help="Directory holding a custom litweave.html.j2 and litweave.css.",
    )(f)
    f = click.option(
        "--csspath",
        type=str,
        default=None,
        help="Stylesheet location relative to --outdir; also the <link> href prefix.",
    )(f)
    f = click.option(
        "--inline",
        is_flag=True,
        default=False,
        help="Embed the stylesheet into each page instead of linking it.",
    )(f)
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat, aliases={"md": OutputFormat.MARKDOWN}),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
    f = click.option(
        "--md",
        "markdown",
        is_flag=True,
        default=False,
        help="Shorthand for '--format markdown'.",
    )(f)
    f = click.option(
        "--bare",
        is_flag=True,
        default=False,
        help="Emit only the HTML body fragment, without <html>/<head>/<body>.",
    )(f)
    f = click.option(
        "--intro-only",
        "intro_only",
        is_flag=True,
        default=False,
        help="Keep only the leading comment block of each file.",
    )(f)
    f = click.option(
        "--language",
        type=str,
        default=None,
        help="Force the source language instead of detecting it from the file extension.",
    )(f)
    f = click.option(
        "--stdout",
        is_flag=True,
        default=False,
        help="Print the document to stdout instead of writing a file (single input only).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Additional config file(s) to load and merge (litweave.toml or pyproject.toml).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore local config files (only use defaults, --config files and CLI options).",
    )(f)
    return f
