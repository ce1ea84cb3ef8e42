#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/api.py
"""The major exported API functions for parsing and reformatting Markdown."""

import logging
from pathlib import Path
from typing import IO, Any, Optional, Sequence, Union

from mdtree.ast.nodes import Block
from mdtree.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from mdtree.parsers.events import ParseHook, reconstruct
from mdtree.parsers.markdown import MarkdownTokenizer
from mdtree.renderers.markdown import MarkdownRenderer
from mdtree.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _resolve_renderer_options(
    renderer_options: Optional[MarkdownRendererOptions], kwargs: dict[str, Any]
) -> MarkdownRendererOptions:
    """Merge keyword overrides into the renderer options."""
    if kwargs and renderer_options:
        return renderer_options.create_updated(**kwargs)
    if kwargs:
        return MarkdownRendererOptions(**kwargs)
    return renderer_options or MarkdownRendererOptions()


def parse_markdown(
    text: str,
    hooks: Optional[Sequence[ParseHook]] = None,
    options: Optional[MarkdownParserOptions] = None,
) -> list[Block]:
    """Parse Markdown text into a list of root blocks.

    Parameters
    ----------
    text : str
        Markdown source
    hooks : sequence of ParseHook, optional
        Interception hooks consulted by the reconstruction engine
    options : MarkdownParserOptions, optional
        Tokenizer options

    Returns
    -------
    list of Block
        Root blocks of the document

    Raises
    ------
    DependencyError
        If mistune is not installed

    Examples
    --------
        >>> blocks = parse_markdown("# Title\\n\\nSome *text*.")
        >>> blocks[0].level
        1

    """
    with debug_timer(logger, "Tokenizing (markdown)"):
        events = MarkdownTokenizer(options).tokenize(text)
    logger.debug("Tokenized %d events", len(events))

    with debug_timer(logger, "Reconstructing tree"):
        return reconstruct(events, hooks)


def render_markdown(
    blocks: Sequence[Block],
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render root blocks to Markdown.

    Parameters
    ----------
    blocks : sequence of Block
        Root blocks to render
    output : str, Path, IO[bytes], IO[str] or None, default = None
        Where to write the result; None returns it as a string
    renderer_options : MarkdownRendererOptions, optional
        Writer options
    **kwargs
        Individual renderer option overrides (e.g. ``bullet_marker="*"``)

    Returns
    -------
    str or None
        The Markdown text when ``output`` is None, otherwise None

    """
    renderer = MarkdownRenderer(_resolve_renderer_options(renderer_options, kwargs))
    with debug_timer(logger, "Rendering (markdown)"):
        if output is None:
            return renderer.render_to_string(blocks)
        renderer.render(blocks, output)
    return None


def reformat_markdown(
    text: str,
    hooks: Optional[Sequence[ParseHook]] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Parse Markdown and write it back in canonical form.

    Parameters
    ----------
    text : str
        Markdown source
    hooks : sequence of ParseHook, optional
        Interception hooks consulted by the reconstruction engine
    parser_options : MarkdownParserOptions, optional
        Tokenizer options
    renderer_options : MarkdownRendererOptions, optional
        Writer options
    **kwargs
        Individual renderer option overrides

    Returns
    -------
    str
        Reformatted Markdown

    Examples
    --------
        >>> reformat_markdown("* one\\n* two", bullet_marker="+")
        '+ one\\n\\n+ two\\n\\n'

    """
    blocks = parse_markdown(text, hooks=hooks, options=parser_options)
    content = render_markdown(blocks, renderer_options=renderer_options, **kwargs)
    assert content is not None
    return content
