# topmark:header:start
#
#   project      : LitWeave
#   file         : __init__.py
#   file_relpath : src/litweave/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave configuration: immutable runtime `Config` and its mutable builder."""

from __future__ import annotations

from litweave.config.model import Config, MutableConfig
from litweave.config.types import OutputFormat

__all__ = [
    "Config",
    "MutableConfig",
    "OutputFormat",
]
