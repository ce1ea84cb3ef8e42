#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/events.py
"""Markup event vocabulary.

A tokenizer describes a Markdown document as a flat sequence of events:
``Start``/``End`` pairs delimit nested structures and leaf events carry
text. This module defines that vocabulary as frozen dataclasses so events
are hashable, comparable and safe to share.

Event Vocabulary
----------------
Container tags (used with Start/End):
    - ParagraphTag, HeadingTag, BlockQuoteTag, CodeBlockTag, HtmlBlockTag
    - ListTag, ItemTag, FootnoteDefinitionTag
    - TableTag, TableHeadTag, TableRowTag, TableCellTag
    - EmphasisTag, StrongTag, StrikethroughTag, SubscriptTag, SuperscriptTag
    - LinkTag, ImageTag, MetadataBlockTag

Leaf events:
    - Text, Code, InlineHtml, Html, SoftBreak, HardBreak, Rule
    - TaskListMarker, FootnoteReference, InlineMath, DisplayMath

The module also provides the canonicalization helpers used to compare two
event streams for semantic equivalence.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Optional, Sequence, Union


class TagKind(str, Enum):
    """Kind of a container tag, carried by ``End`` events."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    HTML_BLOCK = "html_block"
    LIST = "list"
    ITEM = "item"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    LINK = "link"
    IMAGE = "image"
    METADATA_BLOCK = "metadata_block"


class LinkType(str, Enum):
    """How a link or image was written in the source."""

    INLINE = "inline"
    REFERENCE = "reference"
    REFERENCE_UNKNOWN = "reference_unknown"
    COLLAPSED = "collapsed"
    COLLAPSED_UNKNOWN = "collapsed_unknown"
    SHORTCUT = "shortcut"
    SHORTCUT_UNKNOWN = "shortcut_unknown"
    AUTOLINK = "autolink"
    EMAIL = "email"
    WIKI_LINK = "wiki_link"


class Alignment(str, Enum):
    """Table column alignment."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ============================================================================
# Code block kinds
# ============================================================================


@dataclass(frozen=True)
class CodeBlockKind:
    """Base class for the two ways a code block can be written."""


@dataclass(frozen=True)
class Fenced(CodeBlockKind):
    """Fenced code block with an info-string language (may be empty)."""

    language: str = ""


@dataclass(frozen=True)
class Indented(CodeBlockKind):
    """Code block written with four-space indentation."""


# ============================================================================
# Tags
# ============================================================================


@dataclass(frozen=True)
class Tag:
    """Base class for container tags."""

    kind: ClassVar[TagKind]


@dataclass(frozen=True)
class ParagraphTag(Tag):
    kind: ClassVar[TagKind] = TagKind.PARAGRAPH


@dataclass(frozen=True)
class HeadingTag(Tag):
    """Heading with optional id, classes and attributes (``{#id .cls k=v}``)."""

    kind: ClassVar[TagKind] = TagKind.HEADING

    level: int = 1
    id: Optional[str] = None
    classes: tuple[str, ...] = ()
    attrs: tuple[tuple[str, Optional[str]], ...] = ()


@dataclass(frozen=True)
class BlockQuoteTag(Tag):
    kind: ClassVar[TagKind] = TagKind.BLOCK_QUOTE


@dataclass(frozen=True)
class CodeBlockTag(Tag):
    kind: ClassVar[TagKind] = TagKind.CODE_BLOCK

    code_kind: CodeBlockKind = Indented()


@dataclass(frozen=True)
class HtmlBlockTag(Tag):
    kind: ClassVar[TagKind] = TagKind.HTML_BLOCK


@dataclass(frozen=True)
class ListTag(Tag):
    """List container; ``start`` is the first number of an ordered list, None for bullets."""

    kind: ClassVar[TagKind] = TagKind.LIST

    start: Optional[int] = None


@dataclass(frozen=True)
class ItemTag(Tag):
    kind: ClassVar[TagKind] = TagKind.ITEM


@dataclass(frozen=True)
class FootnoteDefinitionTag(Tag):
    kind: ClassVar[TagKind] = TagKind.FOOTNOTE_DEFINITION

    label: str = ""


@dataclass(frozen=True)
class TableTag(Tag):
    kind: ClassVar[TagKind] = TagKind.TABLE

    alignments: tuple[Alignment, ...] = ()


@dataclass(frozen=True)
class TableHeadTag(Tag):
    kind: ClassVar[TagKind] = TagKind.TABLE_HEAD


@dataclass(frozen=True)
class TableRowTag(Tag):
    kind: ClassVar[TagKind] = TagKind.TABLE_ROW


@dataclass(frozen=True)
class TableCellTag(Tag):
    kind: ClassVar[TagKind] = TagKind.TABLE_CELL


@dataclass(frozen=True)
class EmphasisTag(Tag):
    kind: ClassVar[TagKind] = TagKind.EMPHASIS


@dataclass(frozen=True)
class StrongTag(Tag):
    kind: ClassVar[TagKind] = TagKind.STRONG


@dataclass(frozen=True)
class StrikethroughTag(Tag):
    kind: ClassVar[TagKind] = TagKind.STRIKETHROUGH


@dataclass(frozen=True)
class SubscriptTag(Tag):
    kind: ClassVar[TagKind] = TagKind.SUBSCRIPT


@dataclass(frozen=True)
class SuperscriptTag(Tag):
    kind: ClassVar[TagKind] = TagKind.SUPERSCRIPT


@dataclass(frozen=True)
class LinkTag(Tag):
    """Hyperlink; ``id`` is the reference label for reference-style links."""

    kind: ClassVar[TagKind] = TagKind.LINK

    link_type: LinkType = LinkType.INLINE
    dest: str = ""
    title: str = ""
    id: str = ""


@dataclass(frozen=True)
class ImageTag(Tag):
    """Image; the alt text is carried by the events between Start and End."""

    kind: ClassVar[TagKind] = TagKind.IMAGE

    link_type: LinkType = LinkType.INLINE
    dest: str = ""
    title: str = ""
    id: str = ""


@dataclass(frozen=True)
class MetadataBlockTag(Tag):
    """Front-matter block (``yaml`` or ``toml``)."""

    kind: ClassVar[TagKind] = TagKind.METADATA_BLOCK

    block_kind: str = "yaml"


# ============================================================================
# Events
# ============================================================================


@dataclass(frozen=True)
class Event:
    """Base class for all events."""


@dataclass(frozen=True)
class Start(Event):
    """Opens a container tag."""

    tag: Tag


@dataclass(frozen=True)
class End(Event):
    """Closes the innermost container of the given kind."""

    kind: TagKind

    @classmethod
    def of(cls, tag: Tag) -> End:
        """Build the End event matching ``tag``."""
        return cls(tag.kind)


@dataclass(frozen=True)
class Text(Event):
    text: str


@dataclass(frozen=True)
class Code(Event):
    """Inline code span."""

    text: str


@dataclass(frozen=True)
class InlineHtml(Event):
    text: str


@dataclass(frozen=True)
class Html(Event):
    """Raw HTML; block-level inside HtmlBlock containers."""

    text: str


@dataclass(frozen=True)
class SoftBreak(Event):
    pass


@dataclass(frozen=True)
class HardBreak(Event):
    pass


@dataclass(frozen=True)
class Rule(Event):
    pass


@dataclass(frozen=True)
class TaskListMarker(Event):
    checked: bool = False


@dataclass(frozen=True)
class FootnoteReference(Event):
    label: str


@dataclass(frozen=True)
class InlineMath(Event):
    text: str


@dataclass(frozen=True)
class DisplayMath(Event):
    text: str


TextLikeEvent = Union[Text, Code, InlineHtml, Html, InlineMath, DisplayMath]

SPAN_TAG_KINDS = frozenset(
    {
        TagKind.EMPHASIS,
        TagKind.STRONG,
        TagKind.STRIKETHROUGH,
        TagKind.SUBSCRIPT,
        TagKind.SUPERSCRIPT,
        TagKind.LINK,
        TagKind.IMAGE,
    }
)


def wrap(tag: Tag, inner: Iterable[Event]) -> list[Event]:
    """Return ``inner`` surrounded by ``Start(tag)`` and the matching ``End``."""
    return [Start(tag), *inner, End.of(tag)]


# ============================================================================
# Canonicalization
# ============================================================================


def _collapse_blank_lines(text: str) -> str:
    kept: list[str] = []
    last_was_blank = False
    for line in text.split("\n"):
        if not line.strip():
            if not last_was_blank and kept:
                kept.append("")
            last_was_blank = True
        else:
            kept.append(line)
            last_was_blank = False
    result = "\n".join(kept)
    if text.endswith("\n") and not result.endswith("\n"):
        result += "\n"
    return result


def normalize_events(events: Iterable[Event]) -> list[Event]:
    """Merge adjacent Text events and collapse blank-line runs in code blocks.

    Parameters
    ----------
    events : iterable of Event
        Events to normalize

    Returns
    -------
    list of Event
        Normalized events

    """
    out: list[Event] = []
    in_code_block = False
    for event in events:
        if isinstance(event, Start) and event.tag.kind is TagKind.CODE_BLOCK:
            in_code_block = True
        elif isinstance(event, End) and event.kind is TagKind.CODE_BLOCK:
            in_code_block = False
        elif isinstance(event, Text):
            text = _collapse_blank_lines(event.text) if in_code_block else event.text
            if out and isinstance(out[-1], Text):
                out[-1] = Text(out[-1].text + text)
            else:
                out.append(Text(text))
            continue
        out.append(event)
    return out


def filter_paragraph_events(events: Iterable[Event]) -> list[Event]:
    """Drop paragraph boundary events."""
    return [
        event
        for event in events
        if not (isinstance(event, Start) and event.tag.kind is TagKind.PARAGRAPH)
        and not (isinstance(event, End) and event.kind is TagKind.PARAGRAPH)
    ]


def canonicalize_events(events: Sequence[Event]) -> list[str]:
    """Reduce an event stream to stable string tokens for comparison.

    The stream is normalized (:func:`normalize_events`), paragraph
    boundaries are dropped, runs of text are collapsed into a single token
    and inline code is represented as backticked text, so that streams that
    differ only in how text was chunked compare equal.

    Parameters
    ----------
    events : sequence of Event
        Events to canonicalize

    Returns
    -------
    list of str
        Canonical tokens

    """
    tokens: list[str] = []
    pending: Optional[str] = None

    def flush() -> None:
        nonlocal pending
        if pending is not None:
            tokens.append(f"Text({pending!r})")
            pending = None

    for event in filter_paragraph_events(normalize_events(events)):
        if isinstance(event, Text):
            pending = event.text if pending is None else pending + event.text
        elif isinstance(event, Code):
            pending = f"`{event.text}`" if pending is None else pending + f"`{event.text}`"
        else:
            flush()
            tokens.append(repr(event))
    flush()
    return tokens
