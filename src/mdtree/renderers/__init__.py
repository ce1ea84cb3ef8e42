#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/renderers/__init__.py
"""Renderers converting document trees to text."""

from mdtree.renderers.base import BaseRenderer
from mdtree.renderers.markdown import (
    MarkdownRenderer,
    ReferenceDefinition,
    block_to_region,
    blocks_to_markdown,
    inline_to_line,
)

__all__ = [
    "BaseRenderer",
    "MarkdownRenderer",
    "ReferenceDefinition",
    "block_to_region",
    "blocks_to_markdown",
    "inline_to_line",
]
