#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_event_reconstruction.py
"""Unit tests for rebuilding block trees from event streams.

Tests cover:
- Paragraph, heading, quote, code, HTML, list, footnote and table frames
- Inline spans nested inside block and inline frames
- Fallbacks for unexpected shapes (stray End, unclosed frames, unknown tags)

"""

import pytest

from mdtree import events as ev
from mdtree.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    DisplayMath,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Html,
    HtmlBlock,
    InlineHtml,
    Link,
    List,
    Paragraph,
    Rule,
    SoftBreak,
    Strong,
    TableFull,
    Text,
)
from mdtree.events import Alignment, Fenced, LinkType
from mdtree.parsers.events import EventTreeBuilder, reconstruct


def para(*inner):
    return ev.wrap(ev.ParagraphTag(), inner)


def texts(inlines):
    return [inline.content.apply() for inline in inlines]


@pytest.mark.unit
class TestBlockReconstruction:
    """Tests for block-level frames."""

    def test_empty_stream(self):
        assert reconstruct([]) == []

    def test_paragraph(self):
        blocks = reconstruct(para(ev.Text("hello"), ev.SoftBreak(), ev.Text("world")))
        assert len(blocks) == 1
        assert isinstance(blocks[0], Paragraph)
        assert isinstance(blocks[0].children[1], SoftBreak)
        assert blocks[0].children[2] == Text("world")

    def test_heading(self):
        events = ev.wrap(ev.HeadingTag(level=3, id="x", classes=("a",), attrs=(("k", "v"),)), [ev.Text("T")])
        heading = reconstruct(events)[0]
        assert isinstance(heading, Heading)
        assert heading.level == 3
        assert heading.id == "x"
        assert heading.classes == ["a"]
        assert heading.attrs == [("k", "v")]

    def test_heading_level_is_clamped(self):
        assert reconstruct(ev.wrap(ev.HeadingTag(level=9), [ev.Text("T")]))[0].level == 6

    def test_block_quote(self):
        events = ev.wrap(ev.BlockQuoteTag(), para(ev.Text("q")))
        quote = reconstruct(events)[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_code_block_concatenates_text(self):
        events = ev.wrap(ev.CodeBlockTag(Fenced("js")), [ev.Text("a();\n"), ev.Text("b();\n")])
        block = reconstruct(events)[0]
        assert isinstance(block, CodeBlock)
        assert block.kind == Fenced("js")
        assert block.content.apply() == "a();\nb();\n"

    def test_html_block_collects_lines(self):
        events = ev.wrap(ev.HtmlBlockTag(), [ev.Html("<div>\n"), ev.Html("  hi\n"), ev.Html("</div>\n")])
        block = reconstruct(events)[0]
        assert isinstance(block, HtmlBlock)
        assert [line.apply() for line in block.content.lines()] == ["<div>", "  hi", "</div>"]

    def test_html_at_root_is_a_block(self):
        assert isinstance(reconstruct([ev.Html("<hr>")])[0], HtmlBlock)

    def test_html_inside_paragraph_is_inline(self):
        paragraph = reconstruct(para(ev.Text("a"), ev.Html("<b>")))[0]
        assert isinstance(paragraph.children[1], Html)

    def test_rule_inside_quote(self):
        quote = reconstruct(ev.wrap(ev.BlockQuoteTag(), [ev.Rule()]))[0]
        assert quote.children == [Rule()]

    def test_footnote_definition(self):
        events = ev.wrap(ev.FootnoteDefinitionTag("n"), para(ev.Text("note")))
        footnote = reconstruct(events)[0]
        assert isinstance(footnote, FootnoteDefinition)
        assert footnote.label == "n"
        assert isinstance(footnote.children[0], Paragraph)


@pytest.mark.unit
class TestListReconstruction:
    """Tests for list and item frames."""

    def test_tight_list_text_becomes_paragraph(self):
        events = [
            ev.Start(ev.ListTag(None)),
            *ev.wrap(ev.ItemTag(), [ev.Text("a")]),
            *ev.wrap(ev.ItemTag(), [ev.Text("b")]),
            ev.End(ev.TagKind.LIST),
        ]
        lst = reconstruct(events)[0]
        assert isinstance(lst, List)
        assert lst.start is None
        assert len(lst.items) == 2
        assert lst.items[0] == [Paragraph([Text("a")])]

    def test_ordered_start(self):
        events = [ev.Start(ev.ListTag(4)), *ev.wrap(ev.ItemTag(), [ev.Text("a")]), ev.End(ev.TagKind.LIST)]
        assert reconstruct(events)[0].start == 4

    def test_span_after_text_joins_the_trailing_paragraph(self):
        events = ev.wrap(
            ev.ItemTag(),
            [ev.Text("a "), *ev.wrap(ev.EmphasisTag(), [ev.Text("b")])],
        )
        item = reconstruct(ev.wrap(ev.ListTag(None), events))[0].items[0]
        assert len(item) == 1
        assert isinstance(item[0].children[1], Emphasis)

    def test_loose_item_keeps_paragraphs(self):
        events = ev.wrap(ev.ItemTag(), [*para(ev.Text("a")), *para(ev.Text("b"))])
        item = reconstruct(ev.wrap(ev.ListTag(None), events))[0].items[0]
        assert len(item) == 2

    def test_task_marker_in_tight_item_is_kept(self):
        events = ev.wrap(ev.ItemTag(), [ev.TaskListMarker(True), ev.Text(" done")])
        item = reconstruct(ev.wrap(ev.ListTag(None), events))[0].items[0]
        assert item[0] == Paragraph([Text("[x]")])
        assert item[1] == Paragraph([Text(" done")])

    def test_task_marker_in_paragraph(self):
        paragraph = reconstruct(para(ev.TaskListMarker(False), ev.Text(" todo")))[0]
        assert texts(paragraph.children) == ["[ ]", " todo"]

    def test_nested_list(self):
        inner = [ev.Start(ev.ListTag(None)), *ev.wrap(ev.ItemTag(), [ev.Text("b")]), ev.End(ev.TagKind.LIST)]
        events = [
            ev.Start(ev.ListTag(None)),
            *ev.wrap(ev.ItemTag(), [ev.Text("a"), *inner]),
            ev.End(ev.TagKind.LIST),
        ]
        item = reconstruct(events)[0].items[0]
        assert isinstance(item[0], Paragraph)
        assert isinstance(item[1], List)


@pytest.mark.unit
class TestInlineReconstruction:
    """Tests for inline spans and leaves."""

    def test_nested_spans(self):
        events = para(*ev.wrap(ev.StrongTag(), [ev.Text("a"), *ev.wrap(ev.EmphasisTag(), [ev.Text("b")])]))
        strong = reconstruct(events)[0].children[0]
        assert isinstance(strong, Strong)
        assert isinstance(strong.children[1], Emphasis)

    def test_link_fields(self):
        tag = ev.LinkTag(link_type=LinkType.REFERENCE, dest="/u", title="t", id="r")
        link = reconstruct(para(*ev.wrap(tag, [ev.Text("x")])))[0].children[0]
        assert isinstance(link, Link)
        assert (link.dest, link.title, link.id, link.link_type) == ("/u", "t", "r", LinkType.REFERENCE)

    def test_span_at_root_is_wrapped_in_paragraph(self):
        blocks = reconstruct(ev.wrap(ev.EmphasisTag(), [ev.Text("x")]))
        assert blocks == [Paragraph([Emphasis([Text("x")])])]

    def test_leaf_inlines(self):
        events = para(
            ev.Code("c"),
            ev.InlineHtml("<i>"),
            ev.FootnoteReference("1"),
            ev.DisplayMath("x^2"),
        )
        children = reconstruct(events)[0].children
        assert isinstance(children[0], Code)
        assert isinstance(children[1], InlineHtml)
        assert children[2] == FootnoteReference("1")
        assert isinstance(children[3], DisplayMath)

    def test_leaves_at_root_become_paragraphs(self):
        blocks = reconstruct([ev.Text("a"), ev.FootnoteReference("n")])
        assert blocks == [Paragraph([Text("a")]), Paragraph([FootnoteReference("n")])]


@pytest.mark.unit
class TestTableReconstruction:
    """Tests for table frames."""

    def test_table(self):
        def cell(text):
            return ev.wrap(ev.TableCellTag(), [ev.Text(text)])

        events = [
            ev.Start(ev.TableTag((Alignment.LEFT, Alignment.RIGHT))),
            *ev.wrap(ev.TableHeadTag(), [*cell("A"), *cell("B")]),
            *ev.wrap(ev.TableRowTag(), [*cell("1"), *cell("22")]),
            ev.End(ev.TagKind.TABLE),
        ]
        table = reconstruct(events)[0]
        assert isinstance(table, TableFull)
        assert table.alignments == [Alignment.LEFT, Alignment.RIGHT]
        assert len(table.rows) == 2
        assert texts(table.rows[0][0]) == ["A"]
        assert texts(table.rows[1][1]) == ["22"]

    def test_empty_cell(self):
        events = [
            ev.Start(ev.TableTag((Alignment.NONE,))),
            *ev.wrap(ev.TableHeadTag(), ev.wrap(ev.TableCellTag(), [])),
            ev.End(ev.TagKind.TABLE),
        ]
        assert reconstruct(events)[0].rows == [[[]]]


@pytest.mark.unit
class TestFallbacks:
    """Tests for unexpected event shapes."""

    def test_stray_end_is_ignored(self):
        events = [ev.End(ev.TagKind.PARAGRAPH), *para(ev.Text("x"))]
        assert reconstruct(events) == [Paragraph([Text("x")])]

    def test_unclosed_frames_are_discarded(self):
        events = [*para(ev.Text("kept")), ev.Start(ev.BlockQuoteTag()), *para(ev.Text("lost"))]
        assert reconstruct(events) == [Paragraph([Text("kept")])]

    def test_metadata_block_degrades_to_paragraph(self):
        events = ev.wrap(ev.MetadataBlockTag("yaml"), [ev.Text("title: x")])
        assert reconstruct(events) == [Paragraph([Text("title: x")])]

    def test_table_cell_outside_table_is_paragraph(self):
        blocks = reconstruct(ev.wrap(ev.TableCellTag(), [ev.Text("x")]))
        assert blocks == [Paragraph([Text("x")])]

    def test_builder_is_reusable(self):
        builder = EventTreeBuilder()
        first = builder.build([ev.Start(ev.BlockQuoteTag())])
        second = builder.build(para(ev.Text("x")))
        assert first == []
        assert second == [Paragraph([Text("x")])]
