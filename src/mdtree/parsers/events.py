#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/events.py
"""Event stream to AST reconstruction.

This module rebuilds the nested block/inline structure of a document from the
flat ``Start``/``End`` tagged event sequence produced by a Markdown tokenizer.
The reconstruction is a stack machine: every ``Start`` pushes a frame, every
``End`` pops the innermost frame, converts it into a node and attaches that
node to the new top of the stack (or to the root block list).

Before each event is processed, registered hooks are offered the remaining
events. A hook that recognizes a custom structure returns how many events it
consumed together with the block that replaces them; the first hook to
answer wins.

Reconstruction never fails on unexpected event shapes: an ``End`` with no
open frame is ignored, frames left open at the end of the stream are
discarded and unknown tags degrade to paragraphs.

Examples
--------
    >>> from mdtree import events as ev
    >>> reconstruct([ev.Start(ev.ParagraphTag()), ev.Text("hi"), ev.End(ev.TagKind.PARAGRAPH)])
    [Paragraph(children=[Text(content=Region('hi'))])]

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union, overload

from mdtree import events as ev
from mdtree.ast.custom import BlockParser, HookResult, ParseHook
from mdtree.ast.nodes import (
    Block,
    BlockQuote,
    Code,
    CodeBlock,
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
    Paragraph,
    Rule,
    SoftBreak,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    TableFull,
    TableRow,
    Text,
)
from mdtree.text import Line, Region

logger = logging.getLogger(__name__)

# Tags whose frames gather inline children rather than blocks
COLLECTS_INLINES = frozenset(
    {
        ev.TagKind.PARAGRAPH,
        ev.TagKind.HEADING,
        ev.TagKind.EMPHASIS,
        ev.TagKind.STRONG,
        ev.TagKind.STRIKETHROUGH,
        ev.TagKind.SUBSCRIPT,
        ev.TagKind.SUPERSCRIPT,
        ev.TagKind.LINK,
        ev.TagKind.IMAGE,
        ev.TagKind.TABLE_CELL,
    }
)


@dataclass(frozen=True)
class ParseContext:
    """Snapshot of the reconstruction state handed to hooks.

    Parameters
    ----------
    depth : int
        Number of open frames
    parent_tag : Tag or None
        Tag of the innermost open frame, None at the root
    parent_collects_inlines : bool
        Whether the innermost open frame gathers inline children
    event_index : int
        Absolute index of the event about to be processed

    """

    depth: int = 0
    parent_tag: Optional[ev.Tag] = None
    parent_collects_inlines: bool = False
    event_index: int = 0


class EventWindow(Sequence[ev.Event]):
    """Read-only view of an event list from a fixed offset onward.

    Hooks are offered the remaining events through a window over the shared
    list, so no tail copy is made per event.

    Parameters
    ----------
    events : sequence of Event
        Underlying event list; must not change while the window is in use
    start : int, default 0
        Index in ``events`` of the window's first event

    """

    __slots__ = ("_events", "_start")

    def __init__(self, events: Sequence[ev.Event], start: int = 0):
        self._events = events
        self._start = start

    def __len__(self) -> int:
        return max(len(self._events) - self._start, 0)

    @overload
    def __getitem__(self, index: int) -> ev.Event: ...

    @overload
    def __getitem__(self, index: slice) -> list[ev.Event]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[ev.Event, list[ev.Event]]:
        size = len(self)
        if isinstance(index, slice):
            return [self._events[self._start + i] for i in range(*index.indices(size))]
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("event window index out of range")
        return self._events[self._start + index]

    def __repr__(self) -> str:
        return f"EventWindow(start={self._start}, length={len(self)})"


@dataclass
class _Frame:
    """One open Start/End pair on the reconstruction stack."""

    tag: ev.Tag
    inlines: list[Inline] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    collects_inlines: bool = False


def _split_html(text: str) -> list[str]:
    # A single trailing newline terminates the last line rather than opening a new one
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def _html_block_content(frame: _Frame) -> Region:
    """Assemble an HtmlBlock region from everything collected by its frame."""
    content = Region()
    for block in frame.blocks:
        if isinstance(block, HtmlBlock):
            for part in _split_html(block.content.apply()):
                content.push_back_line(Line.from_str(part))
        elif isinstance(block, Paragraph):
            for inline in block.children:
                if isinstance(inline, Text):
                    content.push_back_line(Line.from_str(inline.content.apply()))
    for inline in frame.inlines:
        if isinstance(inline, Text):
            content.push_back_line(Line.from_str(inline.content.apply()))
        elif isinstance(inline, Html):
            for part in _split_html(inline.content.apply()):
                content.push_back_line(Line.from_str(part))
    return content


def _code_block_content(frame: _Frame) -> str:
    # Code text arrives as Paragraph-wrapped Text because code frames collect blocks
    parts: list[str] = []
    for block in frame.blocks:
        if isinstance(block, Paragraph):
            for inline in block.children:
                if isinstance(inline, Text):
                    parts.append(inline.content.apply())
    return "".join(parts)


def _table_rows(blocks: Iterable[Block]) -> list[list[list[Inline]]]:
    rows: list[list[list[Inline]]] = []
    for block in blocks:
        if isinstance(block, TableRow):
            rows.append(block.cells)
        elif isinstance(block, Paragraph):
            rows.append([block.children])
        elif isinstance(block, Item):
            cell: list[Inline] = []
            for child in block.children:
                if isinstance(child, Paragraph):
                    cell.extend(child.children)
            rows.append([cell])
    return rows


def _span_inline(tag: ev.Tag, children: list[Inline]) -> Optional[Inline]:
    """Build the inline for a span tag, or None when ``tag`` is not a span."""
    if isinstance(tag, ev.EmphasisTag):
        return Emphasis(children)
    if isinstance(tag, ev.StrongTag):
        return Strong(children)
    if isinstance(tag, ev.StrikethroughTag):
        return Strikethrough(children)
    if isinstance(tag, ev.SubscriptTag):
        return Subscript(children)
    if isinstance(tag, ev.SuperscriptTag):
        return Superscript(children)
    if isinstance(tag, ev.LinkTag):
        return Link(dest=tag.dest, children=children, link_type=tag.link_type, title=tag.title, id=tag.id)
    if isinstance(tag, ev.ImageTag):
        return Image(dest=tag.dest, children=children, link_type=tag.link_type, title=tag.title, id=tag.id)
    return None


def _frame_to_block(frame: _Frame) -> Block:
    """Convert a closed non-span frame into its block."""
    tag = frame.tag
    if isinstance(tag, ev.ParagraphTag):
        return Paragraph(frame.inlines)
    if isinstance(tag, ev.HeadingTag):
        return Heading(
            level=max(1, min(6, tag.level)),
            children=frame.inlines,
            id=tag.id,
            classes=list(tag.classes),
            attrs=list(tag.attrs),
        )
    if isinstance(tag, ev.BlockQuoteTag):
        return BlockQuote(frame.blocks)
    if isinstance(tag, ev.CodeBlockTag):
        return CodeBlock(kind=tag.code_kind, content=Region.from_str(_code_block_content(frame)))
    if isinstance(tag, ev.HtmlBlockTag):
        return HtmlBlock(_html_block_content(frame))
    if isinstance(tag, ev.ListTag):
        items = [block.children if isinstance(block, Item) else [block] for block in frame.blocks]
        return List(items=items, start=tag.start)
    if isinstance(tag, ev.ItemTag):
        return Item(frame.blocks)
    if isinstance(tag, ev.FootnoteDefinitionTag):
        return FootnoteDefinition(label=tag.label, children=frame.blocks)
    if isinstance(tag, ev.TableTag):
        return TableFull(alignments=list(tag.alignments), rows=_table_rows(frame.blocks))
    if isinstance(tag, (ev.TableHeadTag, ev.TableRowTag)):
        return TableRow([block.children for block in frame.blocks if isinstance(block, Paragraph)])
    # TableCell, MetadataBlock and unknown tags keep their text as a paragraph
    children = list(frame.inlines)
    for block in frame.blocks:
        if isinstance(block, Paragraph):
            children.extend(block.children)
    return Paragraph(children)


class EventTreeBuilder:
    """Stack machine rebuilding a block tree from an event sequence.

    Parameters
    ----------
    hooks : sequence of ParseHook, optional
        Callables ``(events, index, context) -> (consumed, block) | None``
        consulted in order before each event is processed. The first hook
        that returns a result wins.

    Notes
    -----
    The builder keeps no state between :meth:`build` calls, so one instance
    can be reused for any number of streams.

    """

    def __init__(self, hooks: Optional[Sequence[ParseHook]] = None):
        """Initialize the builder with optional interception hooks."""
        self.hooks: list[ParseHook] = list(hooks) if hooks else []
        self._stack: list[_Frame] = []
        self._out: list[Block] = []

    def build(self, events: Sequence[ev.Event]) -> list[Block]:
        """Reconstruct the root blocks of ``events``.

        Parameters
        ----------
        events : sequence of Event
            Flat event stream

        Returns
        -------
        list of Block
            Root blocks in source order

        """
        events = list(events)
        self._stack = []
        self._out = []

        i = 0
        while i < len(events):
            result = self._try_hooks(events, i)
            if result is not None:
                consumed, block = result
                if self._stack and self._stack[-1].collects_inlines:
                    logger.debug(
                        "Hook block at event %d lands inside an open %s frame and will be dropped: %r",
                        i,
                        self._stack[-1].tag.kind.value,
                        block,
                    )
                self._destination().append(block)
                i += max(consumed, 1)
                continue
            self._process(events[i])
            i += 1

        if self._stack:
            logger.debug(
                "Discarding %d unclosed frame(s): %s",
                len(self._stack),
                ", ".join(frame.tag.kind.value for frame in self._stack),
            )
        out = self._out
        self._stack = []
        self._out = []
        return out

    def _context(self, index: int) -> ParseContext:
        top = self._stack[-1] if self._stack else None
        return ParseContext(
            depth=len(self._stack),
            parent_tag=top.tag if top else None,
            parent_collects_inlines=top.collects_inlines if top else False,
            event_index=index,
        )

    def _try_hooks(self, events: list[ev.Event], index: int) -> HookResult:
        if not self.hooks:
            return None
        context = self._context(index)
        remaining = EventWindow(events, index)
        for hook in self.hooks:
            result = hook(remaining, index, context)
            if result is not None:
                logger.debug("Hook %r matched at event %d (consumed %d)", hook, index, result[0])
                return result
        return None

    def _destination(self) -> list[Block]:
        return self._stack[-1].blocks if self._stack else self._out

    # Event handling

    def _process(self, event: ev.Event) -> None:
        if isinstance(event, ev.Start):
            self._stack.append(_Frame(tag=event.tag, collects_inlines=event.tag.kind in COLLECTS_INLINES))
        elif isinstance(event, ev.End):
            self._close()
        elif isinstance(event, ev.Text):
            self._push_leaf(Text(event.text))
        elif isinstance(event, ev.Code):
            self._push_leaf(Code(event.text))
        elif isinstance(event, ev.SoftBreak):
            self._push_leaf(SoftBreak())
        elif isinstance(event, ev.HardBreak):
            self._push_leaf(HardBreak())
        elif isinstance(event, ev.Html):
            top = self._stack[-1] if self._stack else None
            if top is not None and top.collects_inlines:
                top.inlines.append(Html(event.text))
            else:
                self._destination().append(HtmlBlock(event.text))
        elif isinstance(event, ev.InlineHtml):
            self._push_leaf(InlineHtml(event.text))
        elif isinstance(event, ev.TaskListMarker):
            self._push_leaf(Text("[x]" if event.checked else "[ ]"))
        elif isinstance(event, ev.FootnoteReference):
            self._push_leaf(FootnoteReference(event.label))
        elif isinstance(event, ev.InlineMath):
            self._push_leaf(InlineMath(event.text))
        elif isinstance(event, ev.DisplayMath):
            self._push_leaf(DisplayMath(event.text))
        elif isinstance(event, ev.Rule):
            self._destination().append(Rule())
        else:
            logger.debug("Ignoring unsupported event %r", event)

    def _push_leaf(self, inline: Inline) -> None:
        """Attach a leaf inline, wrapping it in a paragraph when the top frame collects blocks."""
        if self._stack:
            top = self._stack[-1]
            if top.collects_inlines:
                top.inlines.append(inline)
            else:
                top.blocks.append(Paragraph([inline]))
        else:
            self._out.append(Paragraph([inline]))

    def _close(self) -> None:
        if not self._stack:
            return
        frame = self._stack.pop()
        parent = self._stack[-1] if self._stack else None

        span = _span_inline(frame.tag, frame.inlines)
        if span is not None:
            if parent is None:
                self._out.append(Paragraph([span]))
            elif parent.collects_inlines:
                parent.inlines.append(span)
            elif parent.blocks and isinstance(parent.blocks[-1], Paragraph):
                parent.blocks[-1].children.append(span)
            else:
                parent.blocks.append(Paragraph([span]))
            return

        block = _frame_to_block(frame)
        if parent is None:
            self._out.append(block)
        elif parent.collects_inlines and isinstance(block, Paragraph):
            parent.inlines.extend(block.children)
        else:
            parent.blocks.append(block)


def reconstruct(events: Sequence[ev.Event], hooks: Optional[Sequence[ParseHook]] = None) -> list[Block]:
    """Rebuild the block tree of an event stream.

    Parameters
    ----------
    events : sequence of Event
        Flat event stream
    hooks : sequence of ParseHook, optional
        Interception hooks tried in order before each event

    Returns
    -------
    list of Block
        Root blocks in source order

    """
    return EventTreeBuilder(hooks).build(events)


def parsers_to_hook(parsers: Sequence[BlockParser]) -> ParseHook:
    """Adapt block parsers into a single hook trying each in registration order."""
    registered = list(parsers)

    def hook(events: Sequence[ev.Event], index: int, context: ParseContext) -> HookResult:
        for parser in registered:
            result = parser.try_parse(events, index, context)
            if result is not None:
                return result
        return None

    return hook


def reconstruct_with_parsers(events: Sequence[ev.Event], parsers: Sequence[BlockParser]) -> list[Block]:
    """Rebuild the block tree, offering each event to ``parsers`` first.

    Parameters
    ----------
    events : sequence of Event
        Flat event stream
    parsers : sequence of BlockParser
        Custom block parsers tried in registration order

    Returns
    -------
    list of Block
        Root blocks in source order

    """
    return EventTreeBuilder([parsers_to_hook(parsers)]).build(events)
