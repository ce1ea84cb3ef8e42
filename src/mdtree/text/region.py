#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/text/region.py
"""Regions: two-dimensional blocks of lines with a deferred suffix.

A region holds its main lines plus a separately tracked group of suffix
lines that are logically appended after the main content. The writer puts
reference-link definitions in the suffix so that they are emitted after the
paragraph that uses them, while still receiving every prefix or indentation
applied to the region (definitions inside a block quote must be quoted too).

"""

from __future__ import annotations

from typing import Iterator

from mdtree.text.fragment import Fragment, FragmentLike
from mdtree.text.line import Line
from mdtree.utils.text import display_width


class Region:
    """An ordered sequence of lines plus suffix lines.

    All transforms (:meth:`prefix_each_line`, :meth:`indent_each_line`,
    :meth:`prefix_first_then_indent_rest`) apply to both the main lines and
    the suffix lines. Mutating methods return the region for chaining.

    Examples
    --------
        >>> region = Region.from_str("a\\nb")
        >>> region.prefix_first_then_indent_rest("- ").apply()
        '- a\\n  b'

    """

    __slots__ = ("_lines", "_suffix")

    def __init__(self, lines: list[Line] | None = None, suffix: list[Line] | None = None):
        """Initialize the region from optional main and suffix lines."""
        self._lines: list[Line] = list(lines) if lines else []
        self._suffix: list[Line] = list(suffix) if suffix else []

    @classmethod
    def from_str(cls, text: str) -> Region:
        """Create a region by splitting ``text`` on newlines.

        An empty string produces a region with no lines.
        """
        if not text:
            return cls()
        return cls([Line.from_str(part) for part in text.split("\n")])

    @property
    def main_lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def suffix_lines(self) -> tuple[Line, ...]:
        return tuple(self._suffix)

    def push_front_line(self, line: Line) -> Region:
        self._lines.insert(0, line)
        return self

    def push_back_line(self, line: Line) -> Region:
        self._lines.append(line)
        return self

    def push_back_suffix_line(self, line: Line) -> Region:
        """Append a line to the suffix group."""
        self._suffix.append(line)
        return self

    def extend(self, other: Region) -> Region:
        """Append all lines of ``other`` (main then suffix) as main lines."""
        self._lines.extend(other.lines())
        return self

    def prefix_each_line(self, prefix: FragmentLike) -> Region:
        """Prepend ``prefix`` to every main and suffix line."""
        fragment = Fragment.coerce(prefix)
        for line in self._lines:
            line.prepend(fragment)
        for line in self._suffix:
            line.prepend(fragment)
        return self

    def indent_each_line(self, count: int) -> Region:
        """Indent every main and suffix line by ``count`` spaces."""
        if count <= 0:
            return self
        return self.prefix_each_line(Fragment.spaces(count))

    def prefix_first_then_indent_rest(self, prefix: FragmentLike) -> Region:
        """Prefix the first line and align every other line under its text.

        The first main line receives ``prefix``; when there are no main lines
        the first suffix line receives it instead. Every remaining line, main
        and suffix, is indented by the display width of ``prefix``. Empty lines
        stay empty.

        Parameters
        ----------
        prefix : Fragment or str
            Marker placed in front of the first line (e.g. ``"- "``)

        Returns
        -------
        Region
            This region

        """
        fragment = Fragment.coerce(prefix)
        pad = display_width(fragment.text)
        if self._lines:
            first: Line | None = self._lines[0]
        elif self._suffix:
            first = self._suffix[0]
        else:
            first = None
        if first is not None:
            first.prepend(fragment)

        if pad > 0:
            indent = Fragment.spaces(pad)
            for line in self._lines[1:] + self._suffix:
                if line is not first and not line.is_empty():
                    line.prepend(indent)
        return self

    def lines(self) -> list[Line]:
        """Return main lines followed by suffix lines."""
        return self._lines + self._suffix

    def into_lines(self) -> list[Line]:
        return self.lines()

    def is_empty(self) -> bool:
        return not self._lines and not self._suffix

    def copy(self) -> Region:
        return Region([line.copy() for line in self._lines], [line.copy() for line in self._suffix])

    def apply(self) -> str:
        """Join main and suffix lines with newlines.

        This is the only place the final string for the region is built.
        """
        return "\n".join(line.apply() for line in self.lines())

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines())

    def __len__(self) -> int:
        return len(self._lines) + len(self._suffix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return [line.apply() for line in self._lines] == [line.apply() for line in other._lines] and [
            line.apply() for line in self._suffix
        ] == [line.apply() for line in other._suffix]

    def __str__(self) -> str:
        return self.apply()

    def __repr__(self) -> str:
        return f"Region({self.apply()!r})"
