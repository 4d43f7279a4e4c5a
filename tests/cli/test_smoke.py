# topmark:header:start
#
#   project      : LitWeave
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: group help, version, languages."""

from __future__ import annotations

from litweave.cli.exit_codes import ExitCode
from litweave.constants import LITWEAVE_VERSION
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_group_without_command_prints_help() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "litweave weave FILES..." in result.output
    assert "weave" in result.output
    assert "languages" in result.output


@mark_cli
def test_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == LITWEAVE_VERSION


@mark_cli
def test_version_verbose() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "LitWeave version:" in result.output
    assert LITWEAVE_VERSION in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_languages() -> None:
    result = run_cli(["--no-color", "languages"])
    assert_SUCCESS(result)
    names = result.output.split()
    assert names == sorted(names)
    assert {"go", "python", "shell"} <= set(names)


@mark_cli
def test_languages_long() -> None:
    result = run_cli(["--no-color", "languages", "--long"])
    assert_SUCCESS(result)
    assert "go: Go sources (*.go)" in result.output
    assert "aliases    : golang" in result.output
    assert "block comments '/* ... */'" in result.output
