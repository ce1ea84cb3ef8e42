#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/__init__.py
"""Document tree for Markdown content.

The module consists of several components:

- nodes: block and inline node classes
- custom: extension contract for user-defined nodes and block parsers
- visitors: visitor base class used by the emitter and the writer
- emitter: conversion of nodes back into event sequences
- builder: helpers for constructing trees by hand

Examples
--------
    >>> from mdtree.ast import Heading, Paragraph, Text
    >>> from mdtree.renderers.markdown import MarkdownRenderer
    >>> MarkdownRenderer().render_to_string([Heading(1, [Text("Title")]), Paragraph([Text("Hello")])])
    '# Title\\n\\nHello\\n'

"""

from __future__ import annotations

from mdtree.ast.builder import DocumentBuilder, ListBuilder, TableBuilder, code_block, heading, paragraph, text
from mdtree.ast.custom import BlockNode, BlockParser, HookResult, InlineNode, NoBlock, NoInline, ParseHook
from mdtree.ast.emitter import EventEmitter, block_to_events, blocks_to_events, inline_to_events
from mdtree.ast.nodes import (
    Block,
    BlockQuote,
    Code,
    CodeBlock,
    CustomBlock,
    CustomInline,
    DisplayMath,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Heading,
    Html,
    HtmlBlock,
    Image,
    Inline,
    InlineHtml,
    InlineMath,
    Item,
    Link,
    List,
    Node,
    Paragraph,
    Rule,
    SoftBreak,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableFull,
    TableRow,
    Text,
)
from mdtree.ast.visitors import NodeVisitor

__all__ = [
    # Base classes
    "Node",
    "Block",
    "Inline",
    # Block nodes
    "Paragraph",
    "Heading",
    "BlockQuote",
    "CodeBlock",
    "HtmlBlock",
    "List",
    "Item",
    "Rule",
    "FootnoteDefinition",
    "Table",
    "TableRow",
    "TableFull",
    "CustomBlock",
    # Inline nodes
    "Text",
    "Code",
    "InlineHtml",
    "Html",
    "SoftBreak",
    "HardBreak",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Subscript",
    "Superscript",
    "Link",
    "Image",
    "FootnoteReference",
    "InlineMath",
    "DisplayMath",
    "CustomInline",
    # Extension contract
    "BlockNode",
    "InlineNode",
    "BlockParser",
    "NoBlock",
    "NoInline",
    "HookResult",
    "ParseHook",
    # Visitors and emitter
    "NodeVisitor",
    "EventEmitter",
    "block_to_events",
    "blocks_to_events",
    "inline_to_events",
    # Builders
    "DocumentBuilder",
    "ListBuilder",
    "TableBuilder",
    "code_block",
    "heading",
    "paragraph",
    "text",
]
