# topmark:header:start
#
#   project      : LitWeave
#   file         : io.py
#   file_relpath : src/litweave/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for LitWeave configuration.

Configuration lives either in a ``litweave.toml`` file or in the
``[tool.litweave]`` table of a ``pyproject.toml``. Both are parsed with
`tomlkit` and handed to the config model as plain dicts. The typed getters
tolerate values of the wrong type: they log a warning and fall back to
``None`` so a stray value never aborts a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from litweave.config.logging import get_logger
from litweave.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from litweave.config.logging import WeaveLogger

logger: WeaveLogger = get_logger(__name__)

TomlTable = dict[str, Any]

LITWEAVE_TOML: Final[str] = "litweave.toml"
PYPROJECT_TOML: Final[str] = "pyproject.toml"


class Toml:
    """Keys recognized in a LitWeave TOML table."""

    KEY_ROOT = "root"
    KEY_OUTDIR = "outdir"
    KEY_RESDIR = "resdir"
    KEY_CSSPATH = "csspath"
    KEY_FORMAT = "format"
    KEY_BARE = "bare"
    KEY_INLINE = "inline"
    KEY_INTRO_ONLY = "intro_only"
    KEY_LANGUAGE = "language"
    KEY_DEFAULT_LANGUAGE = "default_language"

    ALL: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            KEY_OUTDIR,
            KEY_RESDIR,
            KEY_CSSPATH,
            KEY_FORMAT,
            KEY_BARE,
            KEY_INLINE,
            KEY_INTRO_ONLY,
            KEY_LANGUAGE,
            KEY_DEFAULT_LANGUAGE,
        }
    )


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Return True if ``val`` is a TOML table (a dict with string keys)."""
    return isinstance(val, dict)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or None when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring non-string value for '%s': %r", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or None when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Ignoring non-boolean value for '%s': %r", key, value)
    return None


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document.
        source (str): Name used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if is_toml_table(data) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to ``litweave.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed content.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def extract_litweave_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the LitWeave table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.litweave]``; for any other file the
    whole document.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from.

    Returns:
        TomlTable | None: The LitWeave table, or None if a ``pyproject.toml``
            has no ``[tool.litweave]`` table.
    """
    if path.name != PYPROJECT_TOML:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get("litweave") if is_toml_table(tool) else None
    return cast("TomlTable", table) if is_toml_table(table) else None
