# topmark:header:start
#
#   project      : LitWeave
#   file         : registry.py
#   file_relpath : src/litweave/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of languages known to LitWeave.

The registry is built lazily from `litweave.languages.builtins.LANGUAGES` and
cached for the lifetime of the process. It is read-only once built.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from litweave.config.logging import get_logger
from litweave.config.model import DEFAULT_LANGUAGE
from litweave.errors import UnknownLanguageError
from litweave.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from pathlib import Path

    from litweave.config.logging import WeaveLogger
    from litweave.config.model import Config
    from litweave.languages.base import Language

logger: WeaveLogger = get_logger(__name__)


@functools.cache
def get_language_registry() -> dict[str, Language]:
    """Return the mapping of language names to `Language` definitions.

    Returns:
        dict[str, Language]: Languages keyed by their canonical name.

    Raises:
        ValueError: If two built-in languages share a name.
    """
    registry: dict[str, Language] = {}
    for lang in LANGUAGES:
        if lang.name in registry:
            raise ValueError(f"Duplicate language: {lang.name}")
        registry[lang.name] = lang
        logger.trace("Registered language %s (%s)", lang.name, ", ".join(lang.extensions))
    return registry


@functools.cache
def _extension_index() -> dict[str, Language]:
    index: dict[str, Language] = {}
    for lang in get_language_registry().values():
        for ext in lang.extensions:
            index.setdefault(ext.lower(), lang)
    return index


def get_language(name: str) -> Language:
    """Look up a language by name or alias (case-insensitive).

    Args:
        name (str): Canonical name or alias, e.g. ``"go"`` or ``"golang"``.

    Returns:
        Language: The matching language.

    Raises:
        UnknownLanguageError: If no language has that name or alias.
    """
    key: str = name.strip().lower()
    registry: dict[str, Language] = get_language_registry()
    if key in registry:
        return registry[key]
    for lang in registry.values():
        if key in lang.aliases:
            return lang
    raise UnknownLanguageError(
        f"Unknown language '{name}'. Known languages: {', '.join(sorted(registry))}"
    )


def language_for_path(path: Path) -> Language | None:
    """Return the language matching the file extension of ``path``.

    Args:
        path (Path): Source file path.

    Returns:
        Language | None: The matching language, or None if the extension is unknown.
    """
    lang: Language | None = _extension_index().get(path.suffix.lower())
    logger.debug("Resolved %s to language %s", path, lang.name if lang else None)
    return lang


def resolve_language(path: Path, config: Config) -> Language:
    """Select the language used to weave ``path``.

    A language forced by ``config.language`` wins; otherwise the file extension
    decides, falling back to ``config.default_language``.

    Args:
        path (Path): Source file path.
        config (Config): Runtime configuration.

    Returns:
        Language: The language to use.

    Raises:
        UnknownLanguageError: If a configured language name is unknown.
    """
    if config.language:
        return get_language(config.language)
    lang: Language | None = language_for_path(path)
    if lang is not None:
        return lang
    logger.info("No language for %s, using %s", path.name, config.default_language)
    return get_language(config.default_language)
