#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/text/__init__.py
"""Text composition primitives.

The writer builds its output from three layers that know nothing about
Markdown:

- Fragment: an immutable, shareable piece of text
- Line: an ordered sequence of fragments
- Region: an ordered sequence of lines plus deferred suffix lines

"""

from mdtree.text.fragment import Fragment
from mdtree.text.line import Line
from mdtree.text.region import Region

__all__ = ["Fragment", "Line", "Region"]
