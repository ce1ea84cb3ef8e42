#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/text/fragment.py
"""Immutable text atoms used to compose lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

FragmentLike = Union["Fragment", str]


@dataclass(frozen=True)
class Fragment:
    """Smallest unit of composed text.

    Fragments are immutable, so the same instance can be shared by many
    lines (for example one indentation fragment prepended to every line of a
    region) without copying.

    Parameters
    ----------
    text : str, default = ""
        The text carried by this fragment

    """

    text: str = ""

    @classmethod
    def spaces(cls, count: int) -> Fragment:
        """Create a fragment made of ``count`` spaces."""
        return cls(" " * count)

    @classmethod
    def coerce(cls, value: FragmentLike) -> Fragment:
        """Return ``value`` as a fragment, wrapping plain strings."""
        if isinstance(value, Fragment):
            return value
        return cls(value)

    def as_str(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
