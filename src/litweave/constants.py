# topmark:header:start
#
#   project      : LitWeave
#   file         : constants.py
#   file_relpath : src/litweave/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitWeave Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LITWEAVE_VERSION: str = get_version("litweave")

# Bundled resources live in the package `litweave.resources`:
RESOURCE_PACKAGE: str = "litweave.resources"
TEMPLATE_NAME: str = "litweave.html.j2"
CSS_NAME: str = "litweave.css"
