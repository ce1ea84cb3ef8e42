#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_markdown_tokenizer.py
"""Unit tests for the mistune-backed Markdown tokenizer."""

import importlib.util

import pytest

from mdtree import events as ev
from mdtree.events import Alignment, End, Start, TagKind, normalize_events
from mdtree.options import MarkdownParserOptions
from mdtree.parsers.markdown import MarkdownTokenizer, markdown_to_events

HAS_MISTUNE = importlib.util.find_spec("mistune") is not None
requires_mistune = pytest.mark.skipif(not HAS_MISTUNE, reason="mistune not installed")


def tokens(text, **options):
    parser_options = MarkdownParserOptions(**options) if options else None
    return normalize_events(markdown_to_events(text, parser_options))


@requires_mistune
@pytest.mark.unit
class TestBlockTokens:
    """Block-level token translation."""

    def test_empty_document(self):
        assert tokens("") == []

    def test_paragraph(self):
        assert tokens("Hello world") == [Start(ev.ParagraphTag()), ev.Text("Hello world"), End(TagKind.PARAGRAPH)]

    def test_heading_level(self):
        assert tokens("### Title") == [Start(ev.HeadingTag(level=3)), ev.Text("Title"), End(TagKind.HEADING)]

    def test_thematic_break(self):
        assert ev.Rule() in tokens("a\n\n***\n\nb")

    def test_fenced_code_keeps_first_info_word(self):
        assert tokens("```python extra\nx = 1\n```\n") == [
            Start(ev.CodeBlockTag(ev.Fenced("python"))),
            ev.Text("x = 1\n"),
            End(TagKind.CODE_BLOCK),
        ]

    def test_fenced_code_without_info(self):
        assert tokens("```\nx\n```\n")[0] == Start(ev.CodeBlockTag(ev.Fenced("")))

    def test_indented_code(self):
        assert tokens("    code\n") == [
            Start(ev.CodeBlockTag(ev.Indented())),
            ev.Text("code\n"),
            End(TagKind.CODE_BLOCK),
        ]

    @pytest.mark.parametrize("source", ["    code", "    code\n", "    code\n\npara\n"])
    def test_code_block_text_always_ends_with_newline(self, source):
        assert tokens(source)[1] == ev.Text("code\n")

    def test_block_quote(self):
        assert tokens("> quoted") == [
            Start(ev.BlockQuoteTag()),
            Start(ev.ParagraphTag()),
            ev.Text("quoted"),
            End(TagKind.PARAGRAPH),
            End(TagKind.BLOCK_QUOTE),
        ]

    def test_tight_list_items_carry_bare_text(self):
        assert tokens("- a\n- b\n") == [
            Start(ev.ListTag(None)),
            Start(ev.ItemTag()),
            ev.Text("a"),
            End(TagKind.ITEM),
            Start(ev.ItemTag()),
            ev.Text("b"),
            End(TagKind.ITEM),
            End(TagKind.LIST),
        ]

    def test_loose_list_items_carry_paragraphs(self):
        result = tokens("- a\n\n- b\n")
        assert result[:3] == [Start(ev.ListTag(None)), Start(ev.ItemTag()), Start(ev.ParagraphTag())]

    def test_ordered_list_start(self):
        assert tokens("3. a\n4. b\n")[0] == Start(ev.ListTag(3))

    def test_ordered_list_default_start(self):
        assert tokens("1. a\n")[0] == Start(ev.ListTag(1))

    def test_task_list_marker_heads_first_paragraph(self):
        assert tokens("- [x] done\n") == [
            Start(ev.ListTag(None)),
            Start(ev.ItemTag()),
            Start(ev.ParagraphTag()),
            ev.TaskListMarker(True),
            ev.Text(" done"),
            End(TagKind.PARAGRAPH),
            End(TagKind.ITEM),
            End(TagKind.LIST),
        ]

    def test_task_lists_disabled(self):
        assert not any(isinstance(e, ev.TaskListMarker) for e in tokens("- [ ] todo\n", parse_task_lists=False))

    def test_table_alignments_and_cells(self):
        result = tokens("| A | B | C |\n|:--|--:|---|\n| 1 | 2 | 3 |\n")
        assert result[0] == Start(ev.TableTag((Alignment.LEFT, Alignment.RIGHT, Alignment.NONE)))
        assert result[1] == Start(ev.TableHeadTag())
        assert result[2:5] == [Start(ev.TableCellTag()), ev.Text("A"), End(TagKind.TABLE_CELL)]
        assert Start(ev.TableRowTag()) in result
        assert result[-1] == End(TagKind.TABLE)

    def test_tables_disabled(self):
        result = tokens("| A |\n|---|\n| 1 |\n", parse_tables=False)
        assert not any(isinstance(e, Start) and e.tag.kind is TagKind.TABLE for e in result)

    def test_footnotes(self):
        result = tokens("Note[^1].\n\n[^1]: Body.\n")
        assert ev.FootnoteReference("1") in result
        index = result.index(Start(ev.FootnoteDefinitionTag("1")))
        assert result[index + 1 : index + 4] == [Start(ev.ParagraphTag()), ev.Text("Body."), End(TagKind.PARAGRAPH)]
        assert result[-1] == End(TagKind.FOOTNOTE_DEFINITION)

    def test_html_block(self):
        result = tokens("<div>\nhi\n</div>\n")
        assert result[0] == Start(ev.HtmlBlockTag())
        assert isinstance(result[1], ev.Html)
        assert "<div>" in result[1].text

    def test_display_math(self):
        result = tokens("$$\nx^2\n$$\n")
        assert result[0] == Start(ev.ParagraphTag())
        assert isinstance(result[1], ev.DisplayMath)


@requires_mistune
@pytest.mark.unit
class TestInlineTokens:
    """Inline token translation."""

    def inner(self, text, **options):
        result = tokens(text, **options)
        assert result[0] == Start(ev.ParagraphTag())
        assert result[-1] == End(TagKind.PARAGRAPH)
        return result[1:-1]

    def test_emphasis_and_strong(self):
        assert self.inner("Hello *a* **b**") == [
            ev.Text("Hello "),
            Start(ev.EmphasisTag()),
            ev.Text("a"),
            End(TagKind.EMPHASIS),
            ev.Text(" "),
            Start(ev.StrongTag()),
            ev.Text("b"),
            End(TagKind.STRONG),
        ]

    def test_strikethrough(self):
        assert Start(ev.StrikethroughTag()) in self.inner("~~gone~~")

    def test_code_span(self):
        assert self.inner("`x`") == [ev.Code("x")]

    def test_soft_and_hard_breaks(self):
        assert self.inner("a\nb") == [ev.Text("a"), ev.SoftBreak(), ev.Text("b")]
        assert ev.HardBreak() in self.inner("a  \nb")

    def test_inline_link(self):
        assert self.inner('[x](/u "t")') == [
            Start(ev.LinkTag(dest="/u", title="t")),
            ev.Text("x"),
            End(TagKind.LINK),
        ]

    def test_autolink(self):
        assert self.inner("<https://example.com>")[0] == Start(
            ev.LinkTag(link_type=ev.LinkType.AUTOLINK, dest="https://example.com")
        )

    def test_email_autolink(self):
        assert self.inner("<me@example.com>")[0] == Start(
            ev.LinkTag(link_type=ev.LinkType.EMAIL, dest="me@example.com")
        )

    def test_image(self):
        result = self.inner("![alt](i.png)")
        assert result[0] == Start(ev.ImageTag(dest="i.png"))
        assert result[-1] == End(TagKind.IMAGE)

    def test_inline_math(self):
        assert ev.InlineMath("x") in self.inner("a $x$ b")

    def test_inline_html(self):
        assert any(isinstance(e, ev.InlineHtml) for e in self.inner("a <b>c</b>"))


@pytest.mark.unit
class TestTokenTranslationHelpers:
    """Token-dict translation exercised without mistune."""

    def test_unknown_block_token_flattens_children(self, caplog):
        tokenizer = MarkdownTokenizer()
        out = []
        token = {"type": "mystery", "children": [{"type": "paragraph", "children": [{"type": "text", "raw": "x"}]}]}
        with caplog.at_level("DEBUG", logger="mdtree.parsers.markdown"):
            tokenizer._emit_block(token, out)
        assert out == [Start(ev.ParagraphTag()), ev.Text("x"), End(TagKind.PARAGRAPH)]
        assert "mystery" in caplog.text

    def test_unknown_inline_token_keeps_raw_text(self):
        out = []
        MarkdownTokenizer()._emit_inline({"type": "mystery", "raw": "keep"}, out)
        assert out == [ev.Text("keep")]

    def test_blank_lines_are_skipped(self):
        out = []
        MarkdownTokenizer()._emit_block({"type": "blank_line"}, out)
        assert out == []

    def test_reference_link(self):
        token = {"type": "link", "label": "r", "attrs": {"url": "/u"}, "children": [{"type": "text", "raw": "x"}]}
        assert MarkdownTokenizer._link_tag(token) == ev.LinkTag(link_type=ev.LinkType.REFERENCE, dest="/u", id="r")

    def test_reference_image(self):
        token = {"type": "image", "label": "i", "attrs": {"url": "i.png"}, "children": []}
        assert MarkdownTokenizer._link_tag(token) == ev.ImageTag(
            link_type=ev.LinkType.REFERENCE, dest="i.png", id="i"
        )

    def test_titled_link_is_never_autolink(self):
        token = {"type": "link", "attrs": {"url": "/u", "title": "t"}, "children": [{"type": "text", "raw": "/u"}]}
        assert MarkdownTokenizer._link_tag(token).link_type is ev.LinkType.INLINE

    def test_plugins_follow_options(self):
        tokenizer = MarkdownTokenizer(MarkdownParserOptions(parse_tables=False, parse_superscript=True))
        plugins = tokenizer._plugins()
        assert "table" not in plugins
        assert "superscript" in plugins
        assert "strikethrough" in plugins
