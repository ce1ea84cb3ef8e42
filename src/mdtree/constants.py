#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/constants.py
"""Constants and default values for the mdtree library.

This module centralizes the default configuration values used by the
Markdown renderer and tokenizer options, and the dependency specifications
consumed by the ``@requires_dependencies`` decorator.

Constants are organized by category:
1. Type Definitions - Literal types for option values
2. Markdown Rendering - Defaults for the Markdown writer
3. Markdown Parsing - Defaults for the tokenizer adapter
4. Dependency Specifications - Optional third-party packages
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CodeFenceChar = Literal["`", "~"]
BulletMarker = Literal["-", "*", "+"]

# =============================================================================
# Markdown Rendering
# =============================================================================

# Code block formatting
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
MIN_CODE_FENCE_LENGTH = 3
DEFAULT_INDENTED_CODE_WIDTH = 4

# Lists and footnotes
DEFAULT_BULLET_MARKER: BulletMarker = "-"
BULLET_MARKERS = ("-", "*", "+")
DEFAULT_FOOTNOTE_INDENT = 4

# Tables
DEFAULT_TABLE_PIPE_ESCAPE = True

# Blank lines between root blocks
DEFAULT_BLOCK_SEPARATOR_LINES = 1

# Block quote and thematic break markers
BLOCK_QUOTE_PREFIX = "> "
THEMATIC_BREAK = "---"

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_MATH = True
DEFAULT_PARSE_SUPERSCRIPT = False
DEFAULT_PARSE_SUBSCRIPT = False

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
