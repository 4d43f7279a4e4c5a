# topmark:header:start
#
#   project      : LitWeave
#   file         : __main__.py
#   file_relpath : src/litweave/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LitWeave via ``python -m litweave``.

Equivalent to running the ``litweave`` console script; it delegates to
`litweave.cli.main.cli`.

Examples:
    Weave a Go file into HTML::

        python -m litweave weave main.go
"""

from __future__ import annotations

from litweave.cli.main import cli

if __name__ == "__main__":
    cli()
