# topmark:header:start
#
#   project      : LitWeave
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LitWeave through Click's `CliRunner`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from litweave.cli.exit_codes import ExitCode
from litweave.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
