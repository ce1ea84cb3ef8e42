#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/builder.py
"""Helpers for constructing document trees by hand.

Trees normally come out of the reconstruction engine, but tests and host
applications often assemble them directly. The small factory functions cover
the common leaf cases, and the builder classes handle the bookkeeping of
nested lists and tables.

"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from mdtree.ast.nodes import (
    Block,
    CodeBlock,
    Heading,
    Inline,
    List,
    Paragraph,
    Rule,
    TableFull,
    Text,
)
from mdtree.events import Alignment, Fenced, Indented
from mdtree.exceptions import ValidationError

InlineLike = Union[str, Inline]
CellLike = Union[str, Inline, Sequence[Inline]]


def text(content: str) -> Text:
    """Create a Text node."""
    return Text(content)


def _inlines(children: Sequence[InlineLike]) -> list[Inline]:
    return [Text(child) if isinstance(child, str) else child for child in children]


def paragraph(*children: InlineLike) -> Paragraph:
    """Create a paragraph; plain strings become Text nodes.

    Examples
    --------
        >>> from mdtree.ast.nodes import Strong
        >>> paragraph("Hello ", Strong([text("world")]))
        Paragraph(children=[Text(content=Region('Hello ')), Strong(children=[Text(content=Region('world'))])])

    """
    return Paragraph(_inlines(children))


def heading(level: int, *children: InlineLike) -> Heading:
    """Create a heading; raises ValidationError for levels outside 1..6."""
    return Heading(level=level, children=_inlines(children))


def code_block(content: str, language: Optional[str] = None) -> CodeBlock:
    """Create a fenced code block, or an indented one when ``language`` is None."""
    kind = Fenced(language) if language is not None else Indented()
    return CodeBlock(kind=kind, content=content)


def _cell(content: CellLike) -> list[Inline]:
    if isinstance(content, str):
        return [Text(content)]
    if isinstance(content, Inline):
        return [content]
    return list(content)


class ListBuilder:
    """Helper for building nested list structures.

    Items are added with a nesting level; the builder opens and closes
    sub-lists as the level changes. A nested list is appended to the blocks
    of the last item of its parent list.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the top-level list is ordered
    start : int, default = 1
        First number of ordered lists created by this builder

    Examples
    --------
    >>> builder = ListBuilder()
    >>> builder.add_item("Item 1")
    >>> builder.add_item("Nested", level=2)
    >>> builder.add_item("Item 2")
    >>> root = builder.build()

    """

    def __init__(self, ordered: bool = False, start: int = 1):
        """Initialize the builder with an empty top-level list."""
        self.start = start
        self.root = List(start=start if ordered else None)
        self._list_stack: list[List] = [self.root]

    def add_item(
        self,
        *content: Union[InlineLike, Block],
        level: int = 1,
        ordered: Optional[bool] = None,
    ) -> ListBuilder:
        """Add a list item at the specified nesting level.

        Parameters
        ----------
        *content : str, Inline or Block
            Item content. Consecutive strings and inlines are gathered into a
            paragraph; blocks are kept as they are.
        level : int, default = 1
            Nesting level (1 is top-level, 2 is nested once, etc.)
        ordered : bool or None, default = None
            Ordering of a sub-list created by this call; None inherits the
            parent list's ordering

        Returns
        -------
        ListBuilder
            This builder, for chaining

        Raises
        ------
        ValidationError
            If level is less than 1, or nesting skips a level or has no
            parent item to attach to

        """
        if level < 1:
            raise ValidationError(f"Level must be >= 1, got {level}", parameter_name="level", parameter_value=level)
        if level > len(self._list_stack) + 1:
            raise ValidationError(
                f"Cannot nest to level {level} from level {len(self._list_stack)}",
                parameter_name="level",
                parameter_value=level,
            )

        del self._list_stack[level:]

        if level > len(self._list_stack):
            parent = self._list_stack[-1]
            if not parent.items:
                raise ValidationError(
                    f"Cannot nest to level {level} without a parent item at level {level - 1}",
                    parameter_name="level",
                    parameter_value=level,
                )
            is_ordered = parent.ordered if ordered is None else ordered
            nested = List(start=self.start if is_ordered else None)
            parent.items[-1].append(nested)
            self._list_stack.append(nested)

        self._list_stack[-1].items.append(self._item_blocks(content))
        return self

    @staticmethod
    def _item_blocks(content: Sequence[Union[InlineLike, Block]]) -> list[Block]:
        blocks: list[Block] = []
        pending: list[Inline] = []
        for part in content:
            if isinstance(part, Block):
                if pending:
                    blocks.append(Paragraph(pending))
                    pending = []
                blocks.append(part)
            else:
                pending.append(Text(part) if isinstance(part, str) else part)
        if pending:
            blocks.append(Paragraph(pending))
        return blocks

    def build(self) -> List:
        """Return the top-level list."""
        return self.root


class TableBuilder:
    """Helper for building :class:`TableFull` nodes.

    Each cell can be given as a plain string, a single inline node or a
    sequence of inline nodes.

    Examples
    --------
    >>> builder = TableBuilder()
    >>> builder.set_alignments([Alignment.LEFT, Alignment.RIGHT])
    >>> builder.add_header(["Name", "Age"])
    >>> builder.add_row(["Alice", "30"])
    >>> table = builder.build()

    """

    def __init__(self) -> None:
        """Initialize an empty table builder."""
        self.header: Optional[list[list[Inline]]] = None
        self.rows: list[list[list[Inline]]] = []
        self.alignments: list[Alignment] = []

    def set_alignments(self, alignments: Sequence[Alignment]) -> TableBuilder:
        """Set the alignment of every column."""
        self.alignments = list(alignments)
        return self

    def set_column_alignment(self, column_index: int, alignment: Alignment) -> TableBuilder:
        """Set the alignment of one column, padding earlier columns with NONE."""
        while len(self.alignments) <= column_index:
            self.alignments.append(Alignment.NONE)
        self.alignments[column_index] = alignment
        return self

    def add_header(self, cells: Sequence[CellLike]) -> TableBuilder:
        """Set the header row.

        Raises
        ------
        ValidationError
            If the table already has a header

        """
        if self.header is not None:
            raise ValidationError("Table already has a header row", parameter_name="cells")
        self.header = [_cell(cell) for cell in cells]
        if len(self.alignments) < len(self.header):
            self.alignments.extend([Alignment.NONE] * (len(self.header) - len(self.alignments)))
        return self

    def add_row(self, cells: Sequence[CellLike]) -> TableBuilder:
        """Append a body row.

        Raises
        ------
        ValidationError
            If no header row has been added yet

        """
        if self.header is None:
            raise ValidationError("Add a header row before body rows", parameter_name="cells")
        self.rows.append([_cell(cell) for cell in cells])
        return self

    def build(self) -> TableFull:
        """Return the table; the header becomes ``rows[0]``.

        Raises
        ------
        ValidationError
            If no header row has been added

        """
        if self.header is None:
            raise ValidationError("A table needs a header row", parameter_name="header")
        return TableFull(alignments=list(self.alignments), rows=[self.header, *self.rows])


class DocumentBuilder:
    """Fluent builder for a sequence of root blocks.

    Examples
    --------
        >>> blocks = (DocumentBuilder()
        ...     .add_heading(1, "Title")
        ...     .add_paragraph("Body")
        ...     .add_rule()
        ...     .get_blocks())

    """

    def __init__(self) -> None:
        """Initialize the builder with no blocks."""
        self.blocks: list[Block] = []

    def add_block(self, block: Block) -> DocumentBuilder:
        self.blocks.append(block)
        return self

    def add_heading(self, level: int, *children: InlineLike) -> DocumentBuilder:
        return self.add_block(heading(level, *children))

    def add_paragraph(self, *children: InlineLike) -> DocumentBuilder:
        return self.add_block(paragraph(*children))

    def add_code_block(self, content: str, language: Optional[str] = None) -> DocumentBuilder:
        return self.add_block(code_block(content, language))

    def add_rule(self) -> DocumentBuilder:
        return self.add_block(Rule())

    def get_blocks(self) -> list[Block]:
        """Return the collected root blocks."""
        return self.blocks
