#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/text/test_text_primitives.py
"""Unit tests for Fragment, Line and Region.

Tests cover:
- Fragment sharing and coercion
- Line composition (push, prepend, extend, copy)
- Region transforms applied to main and suffix lines
- Marker prefixing with display-width continuation indents

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdtree.text import Fragment, Line, Region


@pytest.mark.unit
class TestFragment:
    """Tests for Fragment."""

    def test_spaces(self):
        assert Fragment.spaces(3).text == "   "
        assert Fragment.spaces(0).text == ""

    def test_coerce_wraps_strings_and_keeps_fragments(self):
        fragment = Fragment("x")
        assert Fragment.coerce(fragment) is fragment
        assert Fragment.coerce("y") == Fragment("y")

    def test_fragments_are_hashable(self):
        assert len({Fragment("a"), Fragment("a"), Fragment("b")}) == 2


@pytest.mark.unit
class TestLine:
    """Tests for Line."""

    def test_push_and_apply(self):
        line = Line()
        line.push("hello").push(" ").push("world")
        assert line.apply() == "hello world"

    def test_prepend(self):
        assert Line.from_str("b").prepend("a").apply() == "ab"

    def test_extend_shares_fragments(self):
        shared = Fragment("x")
        other = Line([shared])
        line = Line.from_str("a").extend(other)
        assert line.fragments[-1] is shared
        assert line.apply() == "ax"

    def test_copy_is_independent(self):
        line = Line.from_str("a")
        clone = line.copy()
        clone.push("b")
        assert line.apply() == "a"
        assert clone.apply() == "ab"

    def test_is_empty(self):
        assert Line().is_empty()
        assert Line([""]).is_empty()
        assert not Line.from_str(" ").is_empty()

    def test_equality_compares_text(self):
        assert Line(["a", "b"]) == Line.from_str("ab")


@pytest.mark.unit
class TestRegion:
    """Tests for Region."""

    def test_from_str_splits_lines(self):
        region = Region.from_str("a\nb")
        assert [line.apply() for line in region.main_lines] == ["a", "b"]

    def test_from_empty_string_has_no_lines(self):
        assert Region.from_str("").is_empty()

    def test_apply_joins_main_then_suffix(self):
        region = Region([Line.from_str("main")])
        region.push_back_suffix_line(Line.from_str("suffix"))
        assert region.apply() == "main\nsuffix"
        assert len(region) == 2

    def test_push_front_and_back(self):
        region = Region.from_str("b")
        region.push_front_line(Line.from_str("a")).push_back_line(Line.from_str("c"))
        assert region.apply() == "a\nb\nc"

    def test_extend_appends_suffix_as_main(self):
        other = Region([Line.from_str("x")], [Line.from_str("[r]: /u")])
        region = Region.from_str("a").extend(other)
        assert [line.apply() for line in region.main_lines] == ["a", "x", "[r]: /u"]
        assert region.suffix_lines == ()

    def test_prefix_each_line_reaches_suffix(self):
        region = Region([Line.from_str("quote")], [Line.from_str("[r]: /u")])
        region.prefix_each_line("> ")
        assert region.apply() == "> quote\n> [r]: /u"

    def test_indent_each_line(self):
        assert Region.from_str("a\nb").indent_each_line(4).apply() == "    a\n    b"

    def test_indent_zero_is_noop(self):
        assert Region.from_str("a").indent_each_line(0).apply() == "a"

    def test_prefix_first_then_indent_rest(self):
        region = Region.from_str("a\nb\nc").prefix_first_then_indent_rest("10. ")
        assert region.apply() == "10. a\n    b\n    c"

    def test_prefix_first_uses_display_width(self):
        region = Region.from_str("a\nb").prefix_first_then_indent_rest("日 ")
        assert region.apply() == "日 a\n   b"

    def test_prefix_first_on_suffix_only_region(self):
        region = Region(suffix=[Line.from_str("x"), Line.from_str("y")])
        region.prefix_first_then_indent_rest("- ")
        assert region.apply() == "- x\n  y"

    def test_prefix_first_indents_suffix_lines(self):
        region = Region([Line.from_str("text")], [Line.from_str("[r]: /u")])
        region.prefix_first_then_indent_rest("- ")
        assert region.apply() == "- text\n  [r]: /u"

    def test_prefix_first_leaves_empty_lines_empty(self):
        region = Region.from_str("a\n\nb").prefix_first_then_indent_rest("- ")
        assert region.apply() == "- a\n\n  b"

    def test_copy_is_deep(self):
        region = Region.from_str("a")
        clone = region.copy()
        clone.prefix_each_line("> ")
        assert region.apply() == "a"
        assert clone.apply() == "> a"

    def test_equality(self):
        assert Region.from_str("a\nb") == Region([Line.from_str("a"), Line.from_str("b")])
        assert Region.from_str("a") != Region(suffix=[Line.from_str("a")])

    @given(st.lists(st.text(alphabet="abc xyz", max_size=10), min_size=1, max_size=8), st.integers(0, 8))
    def test_indent_adds_exact_width(self, lines, count):
        """Every line grows by exactly ``count`` columns."""
        region = Region([Line.from_str(text) for text in lines]).indent_each_line(count)
        for original, line in zip(lines, region.lines()):
            assert line.apply() == " " * count + original
