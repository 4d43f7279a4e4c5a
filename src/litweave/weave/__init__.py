# topmark:header:start
#
#   project      : LitWeave
#   file         : __init__.py
#   file_relpath : src/litweave/weave/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The weave pipeline: classify lines, extract sections, render, assemble."""

from __future__ import annotations

from litweave.weave.assembler import Document, generate_docs, join_sections
from litweave.weave.classifier import ClassifierState, DirectiveFilter, LineClassifier
from litweave.weave.renderer import DocRenderer
from litweave.weave.sections import Section, extract_sections

__all__ = [
    "ClassifierState",
    "DirectiveFilter",
    "DocRenderer",
    "Document",
    "LineClassifier",
    "Section",
    "extract_sections",
    "generate_docs",
    "join_sections",
]
