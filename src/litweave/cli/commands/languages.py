# topmark:header:start
#
#   project      : LitWeave
#   file         : languages.py
#   file_relpath : src/litweave/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave `languages` command.

Lists the languages LitWeave can weave, with their file extensions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litweave.cli.console import get_console
from litweave.languages import get_language_registry

if TYPE_CHECKING:
    from litweave.cli.console import ConsoleLike
    from litweave.languages import Language


def describe_language(lang: Language) -> str:
    """Return a one-line description of the comment syntax of ``lang``."""
    syntax = lang.syntax
    parts: list[str] = [f"line comments '{syntax.line_marker}'"]
    if syntax.has_block_comments:
        parts.append(f"block comments '{syntax.block_open} ... {syntax.block_close}'")
    return ", ".join(parts)


@click.command(
    name="languages",
    help="List the supported languages.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extensions, aliases and comment syntax.",
)
def languages_command(*, show_details: bool = False) -> None:
    """List the supported languages.

    Args:
        show_details (bool): Show extensions, aliases and comment syntax.
    """
    console: ConsoleLike = get_console()
    registry: dict[str, Language] = get_language_registry()

    if not show_details:
        for name in sorted(registry):
            console.print(name)
        return

    console.print(console.styled("Supported languages:", bold=True, underline=True))
    console.print()
    for name in sorted(registry):
        lang: Language = registry[name]
        console.print(f"{console.styled(name, bold=True)}: {lang.description}")
        console.print(f"    extensions : {' '.join(lang.extensions)}")
        if lang.aliases:
            console.print(f"    aliases    : {' '.join(lang.aliases)}")
        console.print(f"    comments   : {describe_language(lang)}")
