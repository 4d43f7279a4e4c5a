# topmark:header:start
#
#   project      : LitWeave
#   file         : main.py
#   file_relpath : src/litweave/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the LitWeave CLI.

Group-level options are initialized once and placed into ``ctx.obj``:

* ``verbosity_level``: program-output verbosity from ``-v`` / ``-q``;
* ``log_level``: internal logging level from ``LITWEAVE_LOG_LEVEL``;
* ``console``: the `ClickConsole` used for user-facing output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litweave.cli.commands.languages import languages_command
from litweave.cli.commands.version import version_command
from litweave.cli.commands.weave import weave_command
from litweave.cli.console import ClickConsole
from litweave.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from litweave.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from litweave.cli.console import ConsoleLike
    from litweave.config.logging import WeaveLogger

logger: WeaveLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` will be set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LitWeave: weave commented source files into side-by-side documentation.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the LitWeave CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'litweave weave FILES...' to generate documentation.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(languages_command)

cli.add_command(weave_command)

if __name__ == "__main__":
    cli()
