# topmark:header:start
#
#   project      : LitWeave
#   file         : __init__.py
#   file_relpath : src/litweave/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language definitions and lookup helpers."""

from __future__ import annotations

from litweave.languages.base import CommentSyntax, Language
from litweave.languages.registry import (
    DEFAULT_LANGUAGE,
    get_language,
    get_language_registry,
    language_for_path,
    resolve_language,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "CommentSyntax",
    "Language",
    "get_language",
    "get_language_registry",
    "language_for_path",
    "resolve_language",
]
