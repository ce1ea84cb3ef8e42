#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/ast/custom.py
"""Extension contract for user-defined nodes and parsers.

Host applications plug domain-specific content into the tree by
implementing the capability interfaces below:

- BlockNode: a custom block that can re-emit itself as events and,
  optionally, render itself directly as a :class:`~mdtree.text.Region`
- InlineNode: the inline counterpart, rendering directly to a
  :class:`~mdtree.text.Line`
- BlockParser: recognizes a custom structure in the event stream and
  builds the block that replaces it

Custom node values are embedded by reference in ``CustomBlock`` and
``CustomInline`` nodes and may be shared by several trees and threads, so
implementations must not change after construction. Frozen dataclasses are
the simplest way to honor that.

Examples
--------
A block that is stored as raw HTML:

    >>> @dataclass(frozen=True)
    ... class Figure(BlockNode):
    ...     html: str
    ...
    ...     def to_events(self):
    ...         return [Html(self.html)]

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from mdtree.events import Event
from mdtree.text import Line, Region

if TYPE_CHECKING:
    from mdtree.ast.nodes import Block
    from mdtree.parsers.events import ParseContext

HookResult = Optional[tuple[int, "Block"]]
ParseHook = Callable[[Sequence[Event], int, "ParseContext"], HookResult]


class BlockNode(ABC):
    """Capability interface for a user-defined block."""

    @abstractmethod
    def to_events(self) -> list[Event]:
        """Return an equivalent event sequence for event-level consumers.

        Returns
        -------
        list of Event
            Events describing this block

        """

    def to_region(self) -> Optional[Region]:
        """Render this block directly.

        The writer uses the returned region as is. Returning None (the
        default) makes the writer flatten :meth:`to_events` instead, which
        keeps text and HTML payloads but drops structure.
        """
        return None


class InlineNode(ABC):
    """Capability interface for a user-defined inline."""

    @abstractmethod
    def to_events(self) -> list[Event]:
        """Return an equivalent event sequence for event-level consumers."""

    def to_line(self) -> Optional[Line]:
        """Render this inline directly; None falls back to flattening events."""
        return None


class BlockParser(ABC):
    """Recognizer for custom structures in an event stream.

    Parsers registered with
    :func:`~mdtree.parsers.events.reconstruct_with_parsers` are tried in
    registration order before the default handling of each event.
    Implementations must be conservative: when the structure cannot be
    confirmed (for instance an opening delimiter without its closing
    counterpart) they return None and let the default handling proceed.
    """

    @abstractmethod
    def try_parse(self, events: Sequence[Event], idx: int, context: ParseContext) -> HookResult:
        """Try to recognize a custom block at the head of ``events``.

        Parameters
        ----------
        events : sequence of Event
            Remaining events, starting at the current position
        idx : int
            Absolute index of ``events[0]`` in the full stream
        context : ParseContext
            Snapshot of the reconstruction state

        Returns
        -------
        tuple of (int, Block) or None
            Number of consumed events and the block replacing them, or None
            to decline

        """


class NoBlock(BlockNode):
    """Empty custom block: emits no events and renders nothing."""

    def to_events(self) -> list[Event]:
        return []

    def to_region(self) -> Optional[Region]:
        return Region()

    def __repr__(self) -> str:
        return "NoBlock()"


class NoInline(InlineNode):
    """Empty custom inline: emits no events and renders nothing."""

    def to_events(self) -> list[Event]:
        return []

    def to_line(self) -> Optional[Line]:
        return Line()

    def __repr__(self) -> str:
        return "NoInline()"
