#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/emitter.py
"""Conversion of AST nodes back into event sequences.

Any node, including custom nodes, can re-emit itself as a flat event
sequence. This lets trees be fed to event-level consumers (for example an
HTML renderer) and is the basis of the event round-trip property: events ->
tree -> events yields an equivalent stream after canonicalization.

"""

from __future__ import annotations

from typing import Iterable

from mdtree import events as ev
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


class EventEmitter(NodeVisitor):
    """Visitor producing the event sequence equivalent to a node.

    Parameters
    ----------
    emit_tables : bool, default = False
        Emit Table/TableHead/TableRow/TableCell events for ``TableFull``
        nodes. By default tables produce no events, so event-level consumers
        see tables only when they ask for them.

    Examples
    --------
        >>> EventEmitter().emit(Paragraph([Text("hi")]))
        [Start(tag=ParagraphTag()), Text(text='hi'), End(kind=<TagKind.PARAGRAPH: 'paragraph'>)]

    """

    def __init__(self, emit_tables: bool = False):
        """Initialize the emitter."""
        self.emit_tables = emit_tables

    def emit(self, node: Node) -> list[ev.Event]:
        """Return the events for a single node."""
        return node.accept(self)

    def emit_all(self, nodes: Iterable[Node]) -> list[ev.Event]:
        """Return the concatenated events for a sequence of nodes."""
        out: list[ev.Event] = []
        for node in nodes:
            out.extend(node.accept(self))
        return out

    # Block-level nodes

    def visit_paragraph(self, node: Paragraph) -> list[ev.Event]:
        return ev.wrap(ev.ParagraphTag(), self.emit_all(node.children))

    def visit_heading(self, node: Heading) -> list[ev.Event]:
        # Classes and attributes are not re-emitted; only level and id survive.
        tag = ev.HeadingTag(level=node.level, id=node.id)
        return ev.wrap(tag, self.emit_all(node.children))

    def visit_block_quote(self, node: BlockQuote) -> list[ev.Event]:
        return ev.wrap(ev.BlockQuoteTag(), self.emit_all(node.children))

    def visit_code_block(self, node: CodeBlock) -> list[ev.Event]:
        return ev.wrap(ev.CodeBlockTag(node.kind), [ev.Text(node.content.apply())])

    def visit_html_block(self, node: HtmlBlock) -> list[ev.Event]:
        return [ev.Html(node.content.apply())]

    def visit_list(self, node: List) -> list[ev.Event]:
        out: list[ev.Event] = [ev.Start(ev.ListTag(node.start))]
        for item in node.items:
            out.extend(ev.wrap(ev.ItemTag(), self.emit_all(item)))
        out.append(ev.End(ev.TagKind.LIST))
        return out

    def visit_item(self, node: Item) -> list[ev.Event]:
        return ev.wrap(ev.ItemTag(), self.emit_all(node.children))

    def visit_rule(self, node: Rule) -> list[ev.Event]:
        return [ev.Rule()]

    def visit_footnote_definition(self, node: FootnoteDefinition) -> list[ev.Event]:
        return ev.wrap(ev.FootnoteDefinitionTag(node.label), self.emit_all(node.children))

    def visit_table(self, node: Table) -> list[ev.Event]:
        return []

    def visit_table_row(self, node: TableRow) -> list[ev.Event]:
        return []

    def visit_table_full(self, node: TableFull) -> list[ev.Event]:
        if not self.emit_tables:
            return []

        def cells(row: list[list[Inline]]) -> list[ev.Event]:
            out: list[ev.Event] = []
            for cell in row:
                out.extend(ev.wrap(ev.TableCellTag(), self.emit_all(cell)))
            return out

        body: list[ev.Event] = []
        if node.rows:
            body.extend(ev.wrap(ev.TableHeadTag(), cells(node.rows[0])))
            for row in node.rows[1:]:
                body.extend(ev.wrap(ev.TableRowTag(), cells(row)))
        return ev.wrap(ev.TableTag(tuple(node.alignments)), body)

    def visit_custom_block(self, node: CustomBlock) -> list[ev.Event]:
        return list(node.node.to_events())

    # Inline nodes

    def visit_text(self, node: Text) -> list[ev.Event]:
        out: list[ev.Event] = []
        parts = node.content.apply().split("\n")
        for i, part in enumerate(parts):
            out.append(ev.Text(part))
            if i + 1 < len(parts):
                out.append(ev.SoftBreak())
        return out

    def visit_code(self, node: Code) -> list[ev.Event]:
        return [ev.Code(node.content.apply())]

    def visit_inline_html(self, node: InlineHtml) -> list[ev.Event]:
        return [ev.InlineHtml(node.content.apply())]

    def visit_html(self, node: Html) -> list[ev.Event]:
        return [ev.Html(node.content.apply())]

    def visit_soft_break(self, node: SoftBreak) -> list[ev.Event]:
        return [ev.SoftBreak()]

    def visit_hard_break(self, node: HardBreak) -> list[ev.Event]:
        return [ev.HardBreak()]

    def visit_emphasis(self, node: Emphasis) -> list[ev.Event]:
        return ev.wrap(ev.EmphasisTag(), self.emit_all(node.children))

    def visit_strong(self, node: Strong) -> list[ev.Event]:
        return ev.wrap(ev.StrongTag(), self.emit_all(node.children))

    def visit_strikethrough(self, node: Strikethrough) -> list[ev.Event]:
        return ev.wrap(ev.StrikethroughTag(), self.emit_all(node.children))

    def visit_subscript(self, node: Subscript) -> list[ev.Event]:
        return ev.wrap(ev.SubscriptTag(), self.emit_all(node.children))

    def visit_superscript(self, node: Superscript) -> list[ev.Event]:
        return ev.wrap(ev.SuperscriptTag(), self.emit_all(node.children))

    def visit_link(self, node: Link) -> list[ev.Event]:
        tag = ev.LinkTag(link_type=node.link_type, dest=node.dest, title=node.title, id=node.id)
        return ev.wrap(tag, self.emit_all(node.children))

    def visit_image(self, node: Image) -> list[ev.Event]:
        tag = ev.ImageTag(link_type=node.link_type, dest=node.dest, title=node.title, id=node.id)
        return ev.wrap(tag, self.emit_all(node.children))

    def visit_footnote_reference(self, node: FootnoteReference) -> list[ev.Event]:
        return [ev.FootnoteReference(node.label)]

    def visit_inline_math(self, node: InlineMath) -> list[ev.Event]:
        return [ev.InlineMath(node.content.apply())]

    def visit_display_math(self, node: DisplayMath) -> list[ev.Event]:
        return [ev.DisplayMath(node.content.apply())]

    def visit_custom_inline(self, node: CustomInline) -> list[ev.Event]:
        return list(node.node.to_events())


def block_to_events(block: Block) -> list[ev.Event]:
    """Convert a block into its event sequence."""
    return EventEmitter().emit(block)


def inline_to_events(inline: Inline) -> list[ev.Event]:
    """Convert an inline into its event sequence."""
    return EventEmitter().emit(inline)


def blocks_to_events(blocks: Iterable[Block], emit_tables: bool = False) -> list[ev.Event]:
    """Convert a sequence of blocks into one event sequence.

    Parameters
    ----------
    blocks : iterable of Block
        Root blocks of a document
    emit_tables : bool, default = False
        Whether ``TableFull`` blocks emit table events

    Returns
    -------
    list of Event
        Concatenated events

    """
    return EventEmitter(emit_tables=emit_tables).emit_all(blocks)
