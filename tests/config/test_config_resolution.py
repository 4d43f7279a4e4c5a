# topmark:header:start
#
#   project      : LitWeave
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config discovery, merging and freezing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from litweave.config import Config, MutableConfig, OutputFormat
from litweave.errors import ConfigError


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    assert config == Config()
    assert config.outdir == Path(".")
    assert config.output_format is OutputFormat.HTML
    assert config.full_page
    assert not config.is_markdown
    assert config.default_language == "go"


def test_thaw_freeze_round_trip() -> None:
    config = Config(csspath="css", bare=True, language="python")
    assert config.thaw().freeze() == config


def test_from_toml_dict_resolves_paths(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    cfg_file: Path = tmp_path / "conf" / "litweave.toml"
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict(
            {"outdir": "out", "resdir": "res", "format": "md", "bogus": 1},
            config_file=cfg_file,
        )
    assert draft.outdir == tmp_path / "conf" / "out"
    assert draft.resdir == tmp_path / "conf" / "res"
    assert draft.output_format is OutputFormat.MARKDOWN
    assert draft.bare is None
    assert draft.config_files == [cfg_file]
    assert "bogus" in caplog.text


def test_unknown_format_is_ignored() -> None:
    draft = MutableConfig.from_toml_dict({"format": "pdf"})
    assert draft.output_format is None


def test_bare_drops_inline_css(caplog: pytest.LogCaptureFixture) -> None:
    draft = MutableConfig(bare=True, inline_css=True)
    with caplog.at_level(logging.WARNING):
        config = draft.freeze()
    assert config.bare
    assert not config.inline_css
    assert "inline CSS" in caplog.text


def test_merge_precedence() -> None:
    base = MutableConfig(outdir=Path("a"), csspath="css", bare=True)
    other = MutableConfig(outdir=Path("b"), csspath=None, bare=False)
    base.merge_with(other)
    assert base.outdir == Path("b")
    assert base.csspath == "css"
    assert base.bare is False


def test_apply_cli_args() -> None:
    draft = MutableConfig.from_defaults().apply_cli_args(
        {
            "outdir": "docs",
            "csspath": None,
            "output_format": "markdown",
            "inline": True,
            "bare": False,
            "stdout": True,
            "language": "python",
        }
    )
    config = draft.freeze()
    assert config.outdir == Path("docs")
    assert config.csspath == ""
    assert config.output_format is OutputFormat.MARKDOWN
    assert config.inline_css
    assert not config.bare
    assert config.to_stdout
    assert config.language == "python"


def test_discovery_order_and_root(tmp_path: Path) -> None:
    write(tmp_path / "litweave.toml", 'csspath = "outer"\n')
    root: Path = write(tmp_path / "proj" / "litweave.toml", 'root = true\ncsspath = "root"\n')
    pyproject: Path = write(
        tmp_path / "proj" / "pkg" / "pyproject.toml", '[tool.litweave]\ncsspath = "pkg"\n'
    )
    write(tmp_path / "proj" / "pkg" / "sub" / "pyproject.toml", '[project]\nname = "x"\n')
    start: Path = tmp_path / "proj" / "pkg" / "sub"

    found = MutableConfig.discover_local_config_files(start)
    assert found == [root.resolve(), pyproject.resolve()]

    config = MutableConfig.load_merged(start=start).freeze()
    assert config.csspath == "pkg"


def test_same_directory_litweave_toml_wins(tmp_path: Path) -> None:
    write(tmp_path / "pyproject.toml", '[tool.litweave]\nroot = true\ncsspath = "py"\n')
    write(tmp_path / "litweave.toml", 'csspath = "lw"\n')
    assert MutableConfig.load_merged(start=tmp_path).freeze().csspath == "lw"


def test_discovery_skips_broken_files(tmp_path: Path) -> None:
    write(tmp_path / "litweave.toml", "root = true\ncsspath = \n")
    assert MutableConfig.discover_local_config_files(tmp_path) == []


def test_explicit_config_and_cli_override(tmp_path: Path) -> None:
    write(tmp_path / "litweave.toml", 'root = true\nformat = "markdown"\nbare = true\n')
    extra: Path = write(tmp_path / "extra.toml", 'format = "html"\nintro_only = true\n')
    config = MutableConfig.load_merged(
        {"csspath": "cli"}, extra_config_files=[extra], start=tmp_path
    ).freeze()
    assert config.output_format is OutputFormat.HTML
    assert config.bare
    assert config.intro_only
    assert config.csspath == "cli"
    assert config.config_files[-1] == extra


def test_explicit_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        MutableConfig.load_merged(extra_config_files=[tmp_path / "missing.toml"], discover=False)
    pyproject = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    with pytest.raises(ConfigError):
        MutableConfig.load_merged(extra_config_files=[pyproject], discover=False)
    broken = write(tmp_path / "broken.toml", "bare = \n")
    with pytest.raises(ConfigError):
        MutableConfig.load_merged(extra_config_files=[broken], discover=False)


def test_no_discovery(tmp_path: Path) -> None:
    write(tmp_path / "litweave.toml", 'root = true\ncsspath = "x"\n')
    assert MutableConfig.load_merged(start=tmp_path, discover=False).freeze().csspath == ""
