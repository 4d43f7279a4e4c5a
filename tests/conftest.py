# topmark:header:start
#
#   project      : LitWeave
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LitWeave test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `litweave.config.MutableConfig`, then `freeze()` them into a
    `litweave.config.Config`. Never mutate a frozen `Config`; call
    `Config.thaw()`, edit, and `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from litweave.config import MutableConfig, logging
from litweave.resources import load_resources

if TYPE_CHECKING:
    from litweave.config import Config
    from litweave.resources import Resources

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_litweave_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure the runtime log level is not forced via env during tests.

    CLI invocations reconfigure the root logger with the streams of the Click
    test runner; the suite-wide TRACE setup is restored after each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``LITWEAVE_LOG_LEVEL``.
    """
    monkeypatch.delenv("LITWEAVE_LOG_LEVEL", raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set logging to TRACE so every log call is exercised during the run."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory holds a ``litweave.toml`` with ``root = true`` so that config
    discovery never walks into the surrounding checkout.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "litweave.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): `MutableConfig` fields to set before freezing.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def make_resources(config: Config) -> Resources:
    """Load the bundled resources for ``config``."""
    return load_resources(config)


GO_SAMPLE: str = """\
// Package hello says hello.
//
// It is *small*.
package hello

//go:generate stringer -type=Mood

import "fmt"

/* Greet prints
   a greeting. */
func Greet(name string) {
	fmt.Println("Hello,", name)
}
"""
