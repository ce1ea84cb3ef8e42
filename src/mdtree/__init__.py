#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/__init__.py
"""mdtree - Markdown document trees and a canonical Markdown writer.

mdtree rebuilds a nested document tree from the flat event stream of a
Markdown tokenizer, writes trees back out as canonical Markdown text, and
lets any node re-emit itself as events. Host applications extend the tree
with custom block and inline nodes, and intercept the event stream with
hooks or block parsers that recognize their own structures.

Key Features
------------
- Stack-based reconstruction that never fails on unexpected event shapes
- Region/Line/Fragment text composition, so nesting is a prefix operation
- Padded pipe tables measured in display columns
- Reference-style link definitions collected and deduplicated per paragraph,
  heading and table
- Optional mistune-based tokenizer for going straight from Markdown text

Requirements
------------
- Python 3.10+
- mistune (optional) for tokenizing Markdown text

Examples
--------
Reformatting Markdown:

    >>> from mdtree import reformat_markdown
    >>> reformat_markdown("Title\\n=====\\n\\n* a\\n* b")
    '# Title\\n\\n- a\\n\\n- b\\n\\n'

Working with events directly:

    >>> from mdtree import events as ev, reconstruct, blocks_to_markdown
    >>> blocks = reconstruct([ev.Start(ev.ParagraphTag()), ev.Text("hi"), ev.End(ev.TagKind.PARAGRAPH)])
    >>> blocks_to_markdown(blocks)
    'hi\\n'

"""

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdtree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdtree import events
from mdtree.api import parse_markdown, reformat_markdown, render_markdown
from mdtree.ast.emitter import blocks_to_events
from mdtree.exceptions import DependencyError, InvalidOptionsError, MdTreeError, ValidationError
from mdtree.options import MarkdownParserOptions, MarkdownRendererOptions
from mdtree.parsers.events import reconstruct, reconstruct_with_parsers
from mdtree.renderers.markdown import MarkdownRenderer, blocks_to_markdown

__all__ = [
    "__version__",
    "events",
    "parse_markdown",
    "reformat_markdown",
    "render_markdown",
    "reconstruct",
    "reconstruct_with_parsers",
    "blocks_to_markdown",
    "blocks_to_events",
    "MarkdownRenderer",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "MdTreeError",
    "ValidationError",
    "InvalidOptionsError",
    "DependencyError",
]
