#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/text.py
"""Text measurement and padding utilities for the Markdown writer.

This module provides the column-width helpers used when laying out
aligned output such as pipe tables and list continuation lines.

Functions
---------
char_width : Display width of a single character
display_width : Display width of a string in terminal columns
pad_to_width : Pad a string to a display width honoring column alignment
longest_run : Length of the longest run of a character in a string

Examples
--------
Wide characters count as two columns:

    >>> display_width("abc")
    3
    >>> display_width("日本")
    4

Alignment-aware padding:

    >>> pad_to_width("7", 3, Alignment.RIGHT)
    '  7'

"""

from __future__ import annotations

import unicodedata
from typing import Optional

from mdtree.events import Alignment


def char_width(char: str) -> int:
    """Return the number of terminal columns a single character occupies.

    Combining marks and zero-width format characters occupy no columns,
    East Asian wide and fullwidth characters occupy two, everything else one.

    Parameters
    ----------
    char : str
        A single character

    Returns
    -------
    int
        0, 1 or 2

    """
    category = unicodedata.category(char)
    if category in ("Mn", "Me", "Cf", "Cc"):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the display width of ``text`` in terminal columns.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Sum of the column widths of every character

    """
    if text.isascii():
        return sum(1 for ch in text if ch.isprintable())
    return sum(char_width(ch) for ch in text)


def pad_to_width(text: str, width: int, alignment: Optional[Alignment] = None) -> str:
    """Pad ``text`` with spaces until it reaches ``width`` display columns.

    Left, unspecified and ``Alignment.NONE`` pad on the right; right alignment
    pads on the left; center alignment splits the padding, putting the odd
    space on the right. Text already at or beyond ``width`` is returned as is.

    Parameters
    ----------
    text : str
        Cell text
    width : int
        Target display width
    alignment : Alignment or None, default = None
        Column alignment

    Returns
    -------
    str
        Padded text

    """
    current = display_width(text)
    if width <= current:
        return text

    pad = width - current
    if alignment is Alignment.RIGHT:
        return " " * pad + text
    if alignment is Alignment.CENTER:
        left = pad // 2
        return " " * left + text + " " * (pad - left)
    return text + " " * pad


def longest_run(text: str, char: str) -> int:
    """Return the length of the longest consecutive run of ``char`` in ``text``."""
    longest = 0
    current = 0
    for ch in text:
        if ch == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest
