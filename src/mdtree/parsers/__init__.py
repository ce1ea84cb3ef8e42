#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/__init__.py
"""Parsers producing and consuming event streams.

- events: reconstruction of a block tree from an event stream
- markdown: Markdown tokenizer built on mistune (optional dependency,
  imported only when tokenizing)

"""

from mdtree.parsers.base import BaseParser
from mdtree.parsers.events import (
    EventTreeBuilder,
    EventWindow,
    ParseContext,
    parsers_to_hook,
    reconstruct,
    reconstruct_with_parsers,
)
from mdtree.parsers.markdown import MarkdownTokenizer, markdown_to_events

__all__ = [
    "BaseParser",
    "EventTreeBuilder",
    "EventWindow",
    "ParseContext",
    "parsers_to_hook",
    "reconstruct",
    "reconstruct_with_parsers",
    "MarkdownTokenizer",
    "markdown_to_events",
]
