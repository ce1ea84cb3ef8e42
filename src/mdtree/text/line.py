#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/text/line.py
"""Lines: ordered sequences of fragments joined only on demand."""

from __future__ import annotations

from typing import Iterable, Iterator

from mdtree.text.fragment import Fragment, FragmentLike


class Line:
    """A single output line built from fragments.

    Fragments are kept separate until :meth:`apply` so that prefixes and
    indentation can be added cheaply while a region is being laid out.
    Mutating methods return the line itself to allow chaining.

    Parameters
    ----------
    fragments : iterable of Fragment or str, optional
        Initial fragments

    Examples
    --------
        >>> line = Line()
        >>> line.push("hello").push(" ").push("world").apply()
        'hello world'

    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[FragmentLike] | None = None):
        """Initialize the line from optional fragments."""
        self._fragments: list[Fragment] = [Fragment.coerce(f) for f in fragments] if fragments else []

    @classmethod
    def from_str(cls, text: str) -> Line:
        """Create a line holding a single fragment."""
        return cls([Fragment(text)])

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    def push(self, fragment: FragmentLike) -> Line:
        """Append a fragment to the end of the line."""
        self._fragments.append(Fragment.coerce(fragment))
        return self

    def prepend(self, fragment: FragmentLike) -> Line:
        """Insert a fragment at the start of the line."""
        self._fragments.insert(0, Fragment.coerce(fragment))
        return self

    def extend(self, other: Line) -> Line:
        """Append every fragment of ``other``, sharing the fragment objects."""
        self._fragments.extend(other._fragments)
        return self

    def copy(self) -> Line:
        clone = Line()
        clone._fragments = list(self._fragments)
        return clone

    def is_empty(self) -> bool:
        return not any(f.text for f in self._fragments)

    def apply(self) -> str:
        """Join all fragments into the final string."""
        return "".join(f.text for f in self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.apply() == other.apply()

    def __str__(self) -> str:
        return self.apply()

    def __repr__(self) -> str:
        return f"Line({self.apply()!r})"
