#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/nodes.py
"""AST node classes for document representation.

This module defines the document tree produced by the event reconstruction
engine and consumed by the Markdown writer. The tree is a closed union of
block and inline nodes plus two extension nodes that embed user-defined
content.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Paragraph, Heading, BlockQuote, CodeBlock, HtmlBlock
    - List, Item, Rule, FootnoteDefinition
    - Table, TableRow, TableFull
    - CustomBlock

Inline nodes represent text and formatting:
    - Text, Code, InlineHtml, Html, SoftBreak, HardBreak
    - Emphasis, Strong, Strikethrough, Subscript, Superscript
    - Link, Image, FootnoteReference, InlineMath, DisplayMath
    - CustomInline

Text-carrying nodes store a :class:`~mdtree.text.Region`; plain strings
passed to their constructors are converted automatically.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mdtree.ast.custom import BlockNode, InlineNode
from mdtree.events import Alignment, CodeBlockKind, Indented, LinkType
from mdtree.exceptions import ValidationError
from mdtree.text import Region


def _as_region(value: Union[Region, str]) -> Region:
    if isinstance(value, Region):
        return value
    return Region.from_str(value)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


class Block(Node):
    """Marker base class for block-level nodes."""


class Inline(Node):
    """Marker base class for inline nodes."""


class _RegionContent:
    """Mixin converting a ``content`` string into a Region after init."""

    content: Region

    def __post_init__(self) -> None:
        self.content = _as_region(self.content)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Paragraph(Block):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Inline, default = empty list
        Inline nodes in source order

    """

    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Block):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Inline, default = empty list
        Inline nodes representing heading text
    id : str or None, default = None
        Explicit heading identifier
    classes : list of str, default = empty list
        CSS classes from a heading attribute block
    attrs : list of (str, str or None), default = empty list
        Remaining key/value attributes

    """

    level: int = 1
    children: list[Inline] = field(default_factory=list)
    id: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    attrs: list[tuple[str, Optional[str]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValidationError(
                f"Heading level must be 1-6, got {self.level}", parameter_name="level", parameter_value=self.level
            )

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Block):
    """Block quote containing other blocks."""

    children: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class CodeBlock(_RegionContent, Block):
    """Code block.

    Parameters
    ----------
    kind : CodeBlockKind, default = Indented()
        ``Fenced(language)`` or ``Indented()``
    content : Region or str, default = empty region
        Literal code text, including its trailing newline when present

    """

    kind: CodeBlockKind = field(default_factory=Indented)
    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass
class HtmlBlock(_RegionContent, Block):
    """Raw HTML block, one region line per source line."""

    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_block(self)


@dataclass
class List(Block):
    """List node.

    Items are stored as plain block sequences; the ``Item`` wrapper seen
    while reconstructing events is unwrapped.

    Parameters
    ----------
    items : list of list of Block, default = empty list
        Block content of each item
    start : int or None, default = None
        First number of an ordered list; None for a bullet list

    """

    items: list[list[Block]] = field(default_factory=list)
    start: Optional[int] = None

    @property
    def ordered(self) -> bool:
        return self.start is not None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class Item(Block):
    """List item wrapper, only present in trees built outside a List."""

    children: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_item(self)


@dataclass
class Rule(Block):
    """Thematic break."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_rule(self)


@dataclass
class FootnoteDefinition(Block):
    """Footnote definition.

    Parameters
    ----------
    label : str
        Footnote label referenced by ``[^label]``
    children : list of Block, default = empty list
        Footnote body

    """

    label: str = ""
    children: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_definition(self)


@dataclass
class Table(Block):
    """Bare table header carrying alignments only.

    Reconstruction always produces :class:`TableFull`; this node exists for
    trees assembled by hand and renders as nothing.
    """

    alignments: list[Alignment] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass
class TableRow(Block):
    """One table row; each cell is an inline sequence."""

    cells: list[list[Inline]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class TableFull(Block):
    """Complete table.

    Parameters
    ----------
    alignments : list of Alignment, default = empty list
        Declared column alignments
    rows : list of list of list of Inline, default = empty list
        Rows of cells; ``rows[0]`` is always the header row

    """

    alignments: list[Alignment] = field(default_factory=list)
    rows: list[list[list[Inline]]] = field(default_factory=list)

    @property
    def header(self) -> list[list[Inline]]:
        return self.rows[0] if self.rows else []

    @property
    def body(self) -> list[list[list[Inline]]]:
        return self.rows[1:]

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_full(self)


@dataclass
class CustomBlock(Block):
    """Block embedding a user-defined :class:`~mdtree.ast.custom.BlockNode`."""

    node: BlockNode

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_custom_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(_RegionContent, Inline):
    """Plain text; embedded newlines are soft line breaks."""

    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Code(_RegionContent, Inline):
    """Inline code span."""

    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class InlineHtml(_RegionContent, Inline):
    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_inline_html(self)


@dataclass
class Html(_RegionContent, Inline):
    """Raw HTML met in an inline position."""

    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html(self)


@dataclass
class SoftBreak(Inline):
    def accept(self, visitor: Any) -> Any:
        return visitor.visit_soft_break(self)


@dataclass
class HardBreak(Inline):
    def accept(self, visitor: Any) -> Any:
        return visitor.visit_hard_break(self)


@dataclass
class Emphasis(Inline):
    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Inline):
    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Inline):
    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Subscript(Inline):
    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_subscript(self)


@dataclass
class Superscript(Inline):
    children: list[Inline] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_superscript(self)


@dataclass
class Link(Inline):
    """Hyperlink.

    Parameters
    ----------
    dest : str, default = ""
        Link destination
    children : list of Inline, default = empty list
        Link text
    link_type : LinkType, default = LinkType.INLINE
        Source syntax of the link
    title : str, default = ""
        Optional title
    id : str, default = ""
        Reference label for reference, collapsed and shortcut links

    """

    dest: str = ""
    children: list[Inline] = field(default_factory=list)
    link_type: LinkType = LinkType.INLINE
    title: str = ""
    id: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Inline):
    """Image; ``children`` hold the alt text. Fields mirror :class:`Link`."""

    dest: str = ""
    children: list[Inline] = field(default_factory=list)
    link_type: LinkType = LinkType.INLINE
    title: str = ""
    id: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class FootnoteReference(Inline):
    label: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_reference(self)


@dataclass
class InlineMath(_RegionContent, Inline):
    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_inline_math(self)


@dataclass
class DisplayMath(_RegionContent, Inline):
    content: Region = field(default_factory=Region)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_display_math(self)


@dataclass
class CustomInline(Inline):
    """Inline embedding a user-defined :class:`~mdtree.ast.custom.InlineNode`."""

    node: InlineNode

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_custom_inline(self)


SPAN_INLINE_TYPES = (Emphasis, Strong, Strikethrough, Subscript, Superscript, Link, Image)
