#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by the event emitter and
the Markdown renderer. Each node's ``accept`` method dispatches to the
matching ``visit_*`` method, keeping the algorithms separate from the node
structure.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdtree.ast.nodes import (
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
    InlineHtml,
    InlineMath,
    Item,
    Link,
    List,
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node kind. Visitors are
    free to choose their return type; the event emitter returns event lists
    and the Markdown renderer returns regions for blocks and lines for
    inlines.

    Examples
    --------
    Counting text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return 1
        ...     def visit_paragraph(self, node):
        ...         return sum(child.accept(self) for child in node.children)
        ...     # remaining visit_* methods ...

    """

    # Block-level nodes

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The paragraph node to visit

        Returns
        -------
        Any
            Result of processing this node

        """

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_html_block(self, node: HtmlBlock) -> Any:
        """Visit an HtmlBlock node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_item(self, node: Item) -> Any:
        """Visit an Item node."""

    @abstractmethod
    def visit_rule(self, node: Rule) -> Any:
        """Visit a Rule node."""

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_full(self, node: TableFull) -> Any:
        """Visit a TableFull node."""

    @abstractmethod
    def visit_custom_block(self, node: CustomBlock) -> Any:
        """Visit a CustomBlock node."""

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_inline_html(self, node: InlineHtml) -> Any:
        """Visit an InlineHtml node."""

    @abstractmethod
    def visit_html(self, node: Html) -> Any:
        """Visit an Html node."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""

    @abstractmethod
    def visit_inline_math(self, node: InlineMath) -> Any:
        """Visit an InlineMath node."""

    @abstractmethod
    def visit_display_math(self, node: DisplayMath) -> Any:
        """Visit a DisplayMath node."""

    @abstractmethod
    def visit_custom_inline(self, node: CustomInline) -> Any:
        """Visit a CustomInline node."""
