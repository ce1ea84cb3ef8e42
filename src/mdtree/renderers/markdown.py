#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts a sequence of
root blocks into canonical Markdown text.

Every block is rendered into a :class:`~mdtree.text.Region` and every inline
into a :class:`~mdtree.text.Line`. Container blocks (block quotes, list
items, footnote definitions) render their children first and then prefix or
indent the resulting region, so nesting never requires tracking an
indentation level during traversal.

Reference-style links and images record their definitions while the
enclosing paragraph, heading or table is rendered. The definitions are
emitted once per such region, deduplicated by id, as suffix lines after a
blank line.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Optional, Sequence, Union

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
from mdtree.constants import BLOCK_QUOTE_PREFIX, THEMATIC_BREAK
from mdtree.events import Alignment, Fenced, LinkType
from mdtree.options.markdown import MarkdownRendererOptions
from mdtree.renderers.base import BaseRenderer
from mdtree.text import Fragment, Line, Region
from mdtree.utils.text import display_width, longest_run, pad_to_width

logger = logging.getLogger(__name__)

# Shortest delimiter cell that still marks the alignment
_MIN_DELIMITER_WIDTH = {Alignment.LEFT: 2, Alignment.RIGHT: 2, Alignment.CENTER: 3}

# Markers for span tags met while flattening custom inline events
_SPAN_MARKERS = {
    ev.TagKind.EMPHASIS: ("*", "*"),
    ev.TagKind.STRONG: ("**", "**"),
    ev.TagKind.STRIKETHROUGH: ("~~", "~~"),
    ev.TagKind.SUBSCRIPT: ("~{", "}"),
    ev.TagKind.SUPERSCRIPT: ("^{", "}"),
}


@dataclass(frozen=True)
class ReferenceDefinition:
    """Definition line for a reference-style link or image."""

    id: str
    dest: str
    title: str = ""

    def to_line(self) -> Line:
        if self.title:
            return Line.from_str(f'[{self.id}]: {self.dest} "{self.title}"')
        return Line.from_str(f"[{self.id}]: {self.dest}")


def _escape_dest(dest: str) -> str:
    return dest.replace("\\", "\\\\").replace(")", "\\)").replace("(", "\\(")


def _escape_title(title: str) -> str:
    return title.replace("\\", "\\\\").replace('"', '\\"')


def _inline_target(dest: str, title: str) -> str:
    if title:
        return f'({_escape_dest(dest)} "{_escape_title(title)}")'
    return f"({_escape_dest(dest)})"


def _content_lines(text: str) -> list[str]:
    """Split literal block content into lines; a trailing newline ends the last line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _merge_paragraphs(blocks: Iterable[Block]) -> list[Block]:
    """Merge runs of consecutive paragraphs into one, without touching the originals."""
    merged: list[Block] = []
    for block in blocks:
        if isinstance(block, Paragraph) and merged and isinstance(merged[-1], Paragraph):
            merged[-1] = Paragraph(merged[-1].children + block.children)
        else:
            merged.append(block)
    return merged


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render AST blocks to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from mdtree.ast.nodes import Heading, Paragraph, Text
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_to_string([Heading(1, [Text("Title")]), Paragraph([Text("Body")])])
        '# Title\\n\\nBody\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        # Reference definitions of the paragraph, heading or table being rendered; None elsewhere
        self._refs: Optional[list[ReferenceDefinition]] = None

    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render root blocks to a Markdown string.

        Root regions are separated by ``block_separator_lines`` blank lines
        and every line is terminated with a newline. Blocks that render to
        nothing are skipped.

        Parameters
        ----------
        blocks : sequence of Block
            Root blocks to render

        Returns
        -------
        str
            Markdown text

        """
        self._refs = None
        separator = "\n" * self.options.block_separator_lines
        chunks: list[str] = []
        for block in blocks:
            region = self.block_to_region(block)
            if region.is_empty():
                continue
            chunks.append("".join(line.apply() + "\n" for line in region.lines()))
        self._refs = None
        return separator.join(chunks)

    def render(self, blocks: Sequence[Block], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render blocks to Markdown and write to output.

        Parameters
        ----------
        blocks : sequence of Block
            Root blocks to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        self.write_text_output(self.render_to_string(blocks), output)

    def block_to_region(self, block: Block) -> Region:
        """Render a single block into a region."""
        return block.accept(self)

    def inline_to_line(self, inline: Inline) -> Line:
        """Render a single inline into a line."""
        return inline.accept(self)

    # Helpers

    def _inlines_to_line(self, inlines: Iterable[Inline]) -> Line:
        line = Line()
        for inline in inlines:
            line.extend(inline.accept(self))
        return line

    def _stack_blocks(self, blocks: Iterable[Block]) -> Region:
        """Render blocks one after another with a blank line between them."""
        region = Region()
        first = True
        for block in blocks:
            if not first:
                region.push_back_line(Line.from_str(""))
            first = False
            region.extend(block.accept(self))
        return region

    def _record_reference(self, node: Union[Link, Image]) -> None:
        if self._refs is not None:
            self._refs.append(ReferenceDefinition(node.id, node.dest, node.title))

    def _begin_references(self) -> Optional[list[ReferenceDefinition]]:
        """Start collecting definitions for a new region; returns the outer collection."""
        saved = self._refs
        self._refs = []
        return saved

    def _end_references(self, region: Region, saved: Optional[list[ReferenceDefinition]]) -> Region:
        """Append the collected definitions, deduplicated by id, as suffix lines."""
        definitions: list[ReferenceDefinition] = []
        seen: set[str] = set()
        for definition in self._refs or []:
            if definition.id not in seen:
                seen.add(definition.id)
                definitions.append(definition)
        self._refs = saved

        if definitions:
            region.push_back_line(Line.from_str(""))
            for definition in definitions:
                region.push_back_suffix_line(definition.to_line())
        return region

    def _span(self, opener: str, children: Iterable[Inline], closer: str) -> Line:
        return Line([opener]).extend(self._inlines_to_line(children)).push(closer)

    # Block-level nodes

    def visit_paragraph(self, node: Paragraph) -> Region:
        """Render a paragraph, splitting lines on soft breaks, hard breaks and embedded newlines."""
        saved = self._begin_references()

        region = Region()
        current = Line()
        for inline in node.children:
            if isinstance(inline, SoftBreak):
                region.push_back_line(current)
                current = Line()
            elif isinstance(inline, HardBreak):
                current.push("  ")
                region.push_back_line(current)
                current = Line()
            else:
                parts = inline.accept(self).apply().split("\n")
                for idx, part in enumerate(parts):
                    if part:
                        current.push(part)
                    if idx + 1 < len(parts):
                        region.push_back_line(current)
                        current = Line()
        region.push_back_line(current)
        return self._end_references(region, saved)

    def visit_heading(self, node: Heading) -> Region:
        saved = self._begin_references()
        line = Line(["#" * node.level, " "]).extend(self._inlines_to_line(node.children))
        return self._end_references(Region([line]), saved)

    def visit_block_quote(self, node: BlockQuote) -> Region:
        region = self._stack_blocks(node.children)
        if region.is_empty():
            return Region()
        return region.prefix_each_line(BLOCK_QUOTE_PREFIX)

    def visit_code_block(self, node: CodeBlock) -> Region:
        """Render a code block as a fence or as indented lines.

        Fences use the configured character and grow past the longest run of
        that character in the code so the content can never close the block.
        """
        text = node.content.apply()
        region = Region()
        if isinstance(node.kind, Fenced):
            char = self.options.code_fence_char
            fence = char * max(self.options.code_fence_min, longest_run(text, char) + 1)
            region.push_back_line(Line([fence, node.kind.language]))
            for part in _content_lines(text):
                region.push_back_line(Line.from_str(part))
            region.push_back_line(Line.from_str(fence))
        else:
            for part in _content_lines(text):
                region.push_back_line(Line.from_str(part))
            region.indent_each_line(self.options.indented_code_width)
        return region

    def visit_html_block(self, node: HtmlBlock) -> Region:
        return Region([Line.from_str(part) for part in _content_lines(node.content.apply())])

    def visit_list(self, node: List) -> Region:
        """Render a list, aligning continuation lines under each marker's text."""
        region = Region()
        start = node.start if node.start is not None else 1
        for index, item in enumerate(node.items):
            if node.ordered:
                marker = f"{start + index}. "
            else:
                marker = f"{self.options.bullet_marker} "

            item_region = self._stack_blocks(_merge_paragraphs(item))
            if item_region.is_empty() and not (item and isinstance(item[0], List)):
                item_region.push_back_line(Line.from_str(""))

            item_region.prefix_first_then_indent_rest(marker)
            region.extend(item_region)
            region.push_back_line(Line.from_str(""))
        return region

    def visit_item(self, node: Item) -> Region:
        return Region()

    def visit_rule(self, node: Rule) -> Region:
        return Region([Line.from_str(THEMATIC_BREAK)])

    def visit_footnote_definition(self, node: FootnoteDefinition) -> Region:
        lines = self._stack_blocks(node.children).lines()
        region = Region()
        if not lines:
            return region
        region.push_back_line(Line([f"[^{node.label}]: "]).extend(lines[0]))
        indent = Fragment.spaces(self.options.footnote_indent)
        for line in lines[1:]:
            region.push_back_line(line.prepend(indent) if indent.text and not line.is_empty() else line)
        return region

    def visit_table(self, node: Table) -> Region:
        return Region()

    def visit_table_row(self, node: TableRow) -> Region:
        return Region()

    def _cell_lines(self, cell: list[Inline]) -> list[str]:
        text = self._inlines_to_line(cell).apply()
        if self.options.table_pipe_escape:
            text = text.replace("|", "\\|")
        return text.split("\n")

    def visit_table_full(self, node: TableFull) -> Region:
        """Render a pipe table padded to per-column display widths.

        Multi-line cells are joined with newlines inside the cell; they are
        never split over several physical table lines.
        """
        saved = self._begin_references()
        alignments = node.alignments
        cols = max(len(alignments), max((len(row) for row in node.rows), default=0))

        def alignment(col: int) -> Optional[Alignment]:
            return alignments[col] if col < len(alignments) else None

        cells: list[list[list[str]]] = []
        for row in node.rows:
            cells.append([self._cell_lines(row[col]) if col < len(row) else [""] for col in range(cols)])

        widths = [_MIN_DELIMITER_WIDTH.get(alignment(col), 1) for col in range(cols)]
        for row_cells in cells:
            for col, cell_lines in enumerate(row_cells):
                for text in cell_lines:
                    widths[col] = max(widths[col], display_width(text))

        region = Region()
        if not cells:
            return self._end_references(region, saved)

        def row_line(row_cells: list[list[str]]) -> Line:
            line = Line()
            for col in range(cols):
                if col > 0:
                    line.push(" | ")
                line.push(pad_to_width("\n".join(row_cells[col]), widths[col], alignment(col)))
            return line

        region.push_back_line(row_line(cells[0]))

        separator = Line()
        for col in range(cols):
            if col > 0:
                separator.push(" | ")
            width = widths[col]
            align = alignment(col)
            if align is Alignment.LEFT:
                separator.push(":" + "-" * (width - 1))
            elif align is Alignment.RIGHT:
                separator.push("-" * (width - 1) + ":")
            elif align is Alignment.CENTER:
                separator.push(":" + "-" * (width - 2) + ":")
            else:
                separator.push("-" * width)
        region.push_back_line(separator)

        for row_cells in cells[1:]:
            region.push_back_line(row_line(row_cells))
        return self._end_references(region, saved)

    def visit_custom_block(self, node: CustomBlock) -> Region:
        """Render a custom block directly or by flattening its events."""
        region = node.node.to_region()
        if region is not None:
            return region.copy()

        logger.debug("Flattening events of custom block %r", node.node)
        region = Region()
        for event in node.node.to_events():
            if isinstance(event, (ev.Text, ev.Html)):
                for part in _content_lines(event.text):
                    region.push_back_line(Line.from_str(part))
        return region

    # Inline nodes

    def visit_text(self, node: Text) -> Line:
        return Line.from_str(node.content.apply())

    def visit_code(self, node: Code) -> Line:
        """Render a code span whose delimiter is longer than any backtick run inside it.

        Content starting or ending with a backtick, or wrapped in spaces, is
        padded with one space on each side.
        """
        text = node.content.apply()
        ticks = "`" * (longest_run(text, "`") + 1)
        padded = text.startswith(" ") and text.endswith(" ") and text.strip(" ")
        if text.startswith("`") or text.endswith("`") or padded:
            text = f" {text} "
        return Line([ticks, text, ticks])

    def visit_inline_html(self, node: InlineHtml) -> Line:
        return Line.from_str(node.content.apply())

    def visit_html(self, node: Html) -> Line:
        return Line.from_str(node.content.apply())

    def visit_soft_break(self, node: SoftBreak) -> Line:
        return Line.from_str(" ")

    def visit_hard_break(self, node: HardBreak) -> Line:
        return Line.from_str("  \n")

    def visit_emphasis(self, node: Emphasis) -> Line:
        return self._span("*", node.children, "*")

    def visit_strong(self, node: Strong) -> Line:
        return self._span("**", node.children, "**")

    def visit_strikethrough(self, node: Strikethrough) -> Line:
        return self._span("~~", node.children, "~~")

    def visit_subscript(self, node: Subscript) -> Line:
        return self._span("~{", node.children, "}")

    def visit_superscript(self, node: Superscript) -> Line:
        return self._span("^{", node.children, "}")

    def visit_link(self, node: Link) -> Line:
        """Render a link in the syntax its link type calls for.

        Reference, collapsed and shortcut links with an id keep their
        reference form and record a definition for the enclosing paragraph.
        Autolinks and email links render in angle brackets. Everything else
        becomes an inline link with an escaped destination and title.
        """
        text = self._inlines_to_line(node.children).apply()
        if node.link_type is LinkType.REFERENCE and node.id:
            self._record_reference(node)
            return Line.from_str(f"[{text}][{node.id}]")
        if node.link_type in (LinkType.AUTOLINK, LinkType.EMAIL):
            return Line.from_str(f"<{node.dest}>")
        if node.link_type in (LinkType.SHORTCUT, LinkType.COLLAPSED) and node.id:
            self._record_reference(node)
            return Line.from_str(f"[{text}]")
        return Line.from_str(f"[{text}]{_inline_target(node.dest, node.title)}")

    def visit_image(self, node: Image) -> Line:
        alt = self._inlines_to_line(node.children).apply()
        if node.link_type is LinkType.REFERENCE and node.id:
            self._record_reference(node)
            return Line.from_str(f"![{alt}][{node.id}]")
        if node.link_type in (LinkType.SHORTCUT, LinkType.COLLAPSED) and node.id:
            self._record_reference(node)
            return Line.from_str(f"![{alt}]")
        return Line.from_str(f"![{alt}]{_inline_target(node.dest, node.title)}")

    def visit_footnote_reference(self, node: FootnoteReference) -> Line:
        return Line.from_str(f"[^{node.label}]")

    def visit_inline_math(self, node: InlineMath) -> Line:
        return Line(["$", node.content.apply(), "$"])

    def visit_display_math(self, node: DisplayMath) -> Line:
        return Line(["\n$$\n", node.content.apply(), "\n$$\n"])

    def visit_custom_inline(self, node: CustomInline) -> Line:
        line = node.node.to_line()
        if line is not None:
            return line.copy()
        logger.debug("Flattening events of custom inline %r", node.node)
        return self._flatten_inline_events(node.node.to_events())

    def _flatten_inline_events(self, events: Iterable[ev.Event]) -> Line:
        """Render raw inline events, applying span markers structurally.

        Open spans are tracked on a stack so that links close with their own
        destination even when nested. An ``End`` that matches no open span is
        ignored, and spans still open at the end are closed in order.
        """
        line = Line()
        # (kind, closing text) for every open span
        stack: list[tuple[ev.TagKind, str]] = []

        for event in events:
            if isinstance(event, ev.Start):
                tag = event.tag
                if tag.kind in _SPAN_MARKERS:
                    opener, closer = _SPAN_MARKERS[tag.kind]
                    line.push(opener)
                    stack.append((tag.kind, closer))
                elif isinstance(tag, (ev.LinkTag, ev.ImageTag)):
                    line.push("![" if isinstance(tag, ev.ImageTag) else "[")
                    stack.append((tag.kind, "]" + _inline_target(tag.dest, tag.title)))
            elif isinstance(event, ev.End):
                kinds = [kind for kind, _ in stack]
                if event.kind not in kinds:
                    continue
                while stack:
                    kind, closer = stack.pop()
                    line.push(closer)
                    if kind is event.kind:
                        break
            elif isinstance(event, (ev.Text, ev.InlineHtml, ev.Html)):
                line.push(event.text)
            elif isinstance(event, ev.Code):
                line.extend(self.visit_code(Code(event.text)))
            elif isinstance(event, ev.SoftBreak):
                line.push(" ")
            elif isinstance(event, ev.HardBreak):
                line.push("  \n")
            elif isinstance(event, ev.FootnoteReference):
                line.push(f"[^{event.label}]")
            elif isinstance(event, ev.InlineMath):
                line.push(f"${event.text}$")
            elif isinstance(event, ev.DisplayMath):
                line.push(f"\n$$\n{event.text}\n$$\n")

        while stack:
            line.push(stack.pop()[1])
        return line


def blocks_to_markdown(blocks: Sequence[Block], options: MarkdownRendererOptions | None = None) -> str:
    """Render root blocks to Markdown text.

    Parameters
    ----------
    blocks : sequence of Block
        Root blocks to render
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Returns
    -------
    str
        Markdown text

    Examples
    --------
        >>> from mdtree.ast.nodes import Paragraph, Text
        >>> blocks_to_markdown([Paragraph([Text("a")]), Paragraph([Text("b")])])
        'a\\n\\nb\\n'

    """
    return MarkdownRenderer(options).render_to_string(blocks)


def block_to_region(block: Block, options: MarkdownRendererOptions | None = None) -> Region:
    """Render a single block into a region."""
    return MarkdownRenderer(options).block_to_region(block)


def inline_to_line(inline: Inline, options: MarkdownRendererOptions | None = None) -> Line:
    """Render a single inline into a line."""
    return MarkdownRenderer(options).inline_to_line(inline)
