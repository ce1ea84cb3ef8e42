#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the tree construction helpers."""
import pytest

from mdtree.ast import (
    CodeBlock,
    Heading,
    List,
    Paragraph,
    Rule,
    Strong,
    TableFull,
    Text,
)
from mdtree.ast.builder import DocumentBuilder, ListBuilder, TableBuilder, code_block, heading, paragraph, text
from mdtree.events import Alignment, Fenced, Indented
from mdtree.exceptions import ValidationError
from mdtree.renderers.markdown import blocks_to_markdown


@pytest.mark.unit
class TestFactories:
    """Test the node factory functions."""

    def test_text(self) -> None:
        assert text("a") == Text("a")

    def test_paragraph_converts_strings(self) -> None:
        node = paragraph("Hello ", Strong([text("world")]))
        assert node == Paragraph([Text("Hello "), Strong([Text("world")])])

    def test_heading(self) -> None:
        assert heading(2, "Title") == Heading(level=2, children=[Text("Title")])

    def test_heading_rejects_bad_level(self) -> None:
        with pytest.raises(ValidationError):
            heading(7, "Title")

    def test_code_block(self) -> None:
        assert code_block("x\n", "py").kind == Fenced("py")
        assert isinstance(code_block("x\n").kind, Indented)
        assert isinstance(code_block("x\n"), CodeBlock)


@pytest.mark.unit
class TestListBuilder:
    """Test ListBuilder."""

    def test_flat_items(self) -> None:
        builder = ListBuilder()
        builder.add_item("Item 1").add_item("Item 2")
        root = builder.build()

        assert isinstance(root, List)
        assert not root.ordered
        assert root.items == [[Paragraph([Text("Item 1")])], [Paragraph([Text("Item 2")])]]

    def test_ordered_start(self) -> None:
        root = ListBuilder(ordered=True, start=3).add_item("a").build()
        assert root.start == 3

    def test_nesting(self) -> None:
        builder = ListBuilder()
        builder.add_item("Item 1")
        builder.add_item("Nested 1", level=2)
        builder.add_item("Nested 2", level=2)
        builder.add_item("Item 2")
        root = builder.build()

        assert len(root.items) == 2
        first = root.items[0]
        assert len(first) == 2
        assert isinstance(first[1], List)
        assert len(first[1].items) == 2

    def test_nested_ordering_override(self) -> None:
        root = ListBuilder().add_item("a").add_item("b", level=2, ordered=True).build()
        assert root.items[0][1].ordered

    def test_mixed_inline_and_block_content(self) -> None:
        root = ListBuilder().add_item("a", Strong([text("b")]), Rule(), "c").build()
        assert root.items[0] == [
            Paragraph([Text("a"), Strong([Text("b")])]),
            Rule(),
            Paragraph([Text("c")]),
        ]

    def test_skipping_levels_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListBuilder().add_item("a").add_item("b", level=3)

    def test_nesting_without_parent_item_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListBuilder().add_item("a", level=2)

    def test_level_below_one_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListBuilder().add_item("a", level=0)

    def test_renders(self) -> None:
        root = ListBuilder().add_item("a").add_item("b").build()
        assert blocks_to_markdown([root]) == "- a\n\n- b\n\n"


@pytest.mark.unit
class TestTableBuilder:
    """Test TableBuilder."""

    def test_build(self) -> None:
        builder = TableBuilder()
        builder.set_alignments([Alignment.LEFT, Alignment.RIGHT])
        builder.add_header(["A", "B"])
        builder.add_row(["1", "22"])
        table = builder.build()

        assert isinstance(table, TableFull)
        assert table.header == [[Text("A")], [Text("B")]]
        assert blocks_to_markdown([table]) == "A  |  B\n:- | -:\n1  | 22\n"

    def test_cells_accept_nodes_and_sequences(self) -> None:
        table = TableBuilder().add_header([Text("a"), [Text("b"), Text("c")]]).build()
        assert table.rows[0] == [[Text("a")], [Text("b"), Text("c")]]

    def test_alignments_padded_to_header(self) -> None:
        table = TableBuilder().add_header(["a", "b"]).build()
        assert table.alignments == [Alignment.NONE, Alignment.NONE]

    def test_set_column_alignment(self) -> None:
        table = TableBuilder().set_column_alignment(1, Alignment.CENTER).add_header(["a", "b"]).build()
        assert table.alignments == [Alignment.NONE, Alignment.CENTER]

    def test_row_before_header_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableBuilder().add_row(["a"])

    def test_second_header_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableBuilder().add_header(["a"]).add_header(["b"])

    def test_build_without_header_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableBuilder().build()


@pytest.mark.unit
class TestDocumentBuilder:
    """Test DocumentBuilder."""

    def test_chaining(self) -> None:
        blocks = (
            DocumentBuilder()
            .add_heading(1, "Title")
            .add_paragraph("Body")
            .add_code_block("x = 1\n", "py")
            .add_rule()
            .get_blocks()
        )
        assert blocks_to_markdown(blocks) == "# Title\n\nBody\n\n```py\nx = 1\n```\n\n---\n"
