#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/options/markdown.py
"""Configuration options for Markdown tokenizing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdtree.constants import (
    BULLET_MARKERS,
    DEFAULT_BLOCK_SEPARATOR_LINES,
    DEFAULT_BULLET_MARKER,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_FOOTNOTE_INDENT,
    DEFAULT_INDENTED_CODE_WIDTH,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_SUBSCRIPT,
    DEFAULT_PARSE_SUPERSCRIPT,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
    DEFAULT_TABLE_PIPE_ESCAPE,
    MIN_CODE_FENCE_LENGTH,
    BulletMarker,
    CodeFenceChar,
)
from mdtree.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-events tokenizing.

    Each flag enables the matching mistune plugin.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_superscript : bool, default False
        Whether to parse superscript syntax (^text^).
    parse_subscript : bool, default False
        Whether to parse subscript syntax (~text~).

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "importance": "core",
        },
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={
            "help": "Parse footnote references and definitions",
            "importance": "core",
        },
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={
            "help": "Parse task list checkboxes (- [ ] and - [x])",
            "importance": "core",
        },
    )
    parse_math: bool = field(
        default=DEFAULT_PARSE_MATH,
        metadata={
            "help": "Parse inline and block math ($...$ and $$...$$)",
            "importance": "core",
        },
    )
    parse_superscript: bool = field(
        default=DEFAULT_PARSE_SUPERSCRIPT,
        metadata={"help": "Parse superscript syntax (^text^)", "importance": "advanced"},
    )
    parse_subscript: bool = field(
        default=DEFAULT_PARSE_SUBSCRIPT,
        metadata={"help": "Parse subscript syntax (~text~)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting the tree to Markdown text.

    Parameters
    ----------
    code_fence_char : {"`", "~"}, default "`"
        Character used for fenced code blocks. The fence grows past the
        longest run of this character inside the code.
    code_fence_min : int, default 3
        Minimum fence length (at least 3).
    indented_code_width : int, default 4
        Number of spaces used to indent indented code blocks.
    bullet_marker : {"-", "*", "+"}, default "-"
        Marker character for bullet list items.
    footnote_indent : int, default 4
        Indentation of footnote definition lines after the first.
    block_separator_lines : int, default 1
        Number of blank lines between root blocks.
    table_pipe_escape : bool, default True
        Whether to escape pipe characters (|) in table cell content.

    Examples
    --------
    Tilde fences and star bullets:

        >>> options = MarkdownRendererOptions(code_fence_char="~", bullet_marker="*")

    """

    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Character for fenced code blocks", "choices": ["`", "~"], "importance": "core"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum code fence length (>= 3)", "type": int, "importance": "advanced"},
    )
    indented_code_width: int = field(
        default=DEFAULT_INDENTED_CODE_WIDTH,
        metadata={"help": "Spaces used to indent indented code blocks", "type": int, "importance": "advanced"},
    )
    bullet_marker: BulletMarker = field(
        default=DEFAULT_BULLET_MARKER,
        metadata={"help": "Marker for bullet list items", "choices": list(BULLET_MARKERS), "importance": "core"},
    )
    footnote_indent: int = field(
        default=DEFAULT_FOOTNOTE_INDENT,
        metadata={"help": "Indentation of footnote continuation lines", "type": int, "importance": "advanced"},
    )
    block_separator_lines: int = field(
        default=DEFAULT_BLOCK_SEPARATOR_LINES,
        metadata={"help": "Blank lines between top-level blocks", "type": int, "importance": "advanced"},
    )
    table_pipe_escape: bool = field(
        default=DEFAULT_TABLE_PIPE_ESCAPE,
        metadata={"help": "Escape pipe characters in table cells", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and choices.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
        if self.code_fence_min < MIN_CODE_FENCE_LENGTH:
            raise ValueError(f"code_fence_min must be at least {MIN_CODE_FENCE_LENGTH}, got {self.code_fence_min}")
        if self.indented_code_width < 1:
            raise ValueError(f"indented_code_width must be positive, got {self.indented_code_width}")
        if self.bullet_marker not in BULLET_MARKERS:
            raise ValueError(f"bullet_marker must be one of {BULLET_MARKERS}, got {self.bullet_marker!r}")
        if self.footnote_indent < 0:
            raise ValueError(f"footnote_indent must be non-negative, got {self.footnote_indent}")
        if self.block_separator_lines < 0:
            raise ValueError(f"block_separator_lines must be non-negative, got {self.block_separator_lines}")
