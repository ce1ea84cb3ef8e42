#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/options/__init__.py
"""Configuration options for mdtree parsers and renderers.

Options are immutable frozen dataclasses; use ``create_updated`` to derive a
modified copy.

Examples
--------
    >>> from mdtree.options import MarkdownRendererOptions
    >>> options = MarkdownRendererOptions().create_updated(bullet_marker="*")

"""

from mdtree.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdtree.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
]
