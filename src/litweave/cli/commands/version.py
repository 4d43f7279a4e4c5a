# topmark:header:start
#
#   project      : LitWeave
#   file         : version.py
#   file_relpath : src/litweave/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave `version` command.

Prints the LitWeave version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litweave.cli.console import get_console
from litweave.constants import LITWEAVE_VERSION

if TYPE_CHECKING:
    from litweave.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LitWeave.",
)
def version_command() -> None:
    """Show the current version of LitWeave."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if int((ctx.obj or {}).get("verbosity_level", 0)) > 0:
        console.print(console.styled("LitWeave version:", bold=True, underline=True))
        console.print(f"    {console.styled(LITWEAVE_VERSION, bold=True)}")
    else:
        console.print(console.styled(LITWEAVE_VERSION, bold=True))
