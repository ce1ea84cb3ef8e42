#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/markdown.py
"""Markdown to event stream tokenizer.

This module flattens the token tree produced by mistune into the event
vocabulary of :mod:`mdtree.events`, so that Markdown source can be fed to
the reconstruction engine. Container tokens become ``Start``/``End`` pairs
and leaf tokens become leaf events.

Tight list items carry their inline content directly (mistune's
``block_text``) without a surrounding paragraph, matching the events a
CommonMark tokenizer produces for tight lists.

"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from mdtree import events as ev
from mdtree.constants import DEPS_MARKDOWN
from mdtree.options.markdown import MarkdownParserOptions
from mdtree.parsers.base import BaseParser
from mdtree.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_ALIGNMENTS = {
    "left": ev.Alignment.LEFT,
    "center": ev.Alignment.CENTER,
    "right": ev.Alignment.RIGHT,
}

# Inline tokens that wrap their children in a span tag
_SPAN_TAGS: dict[str, ev.Tag] = {
    "emphasis": ev.EmphasisTag(),
    "strong": ev.StrongTag(),
    "strikethrough": ev.StrikethroughTag(),
    "superscript": ev.SuperscriptTag(),
    "subscript": ev.SubscriptTag(),
}


class MarkdownTokenizer(BaseParser):
    r"""Tokenize Markdown into the mdtree event vocabulary.

    This tokenizer uses mistune to parse Markdown and walks the resulting
    token tree, emitting the same kind of flat, Start/End tagged stream a
    pull parser would.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Tokenizer configuration options

    Examples
    --------
    Basic tokenizing:

        >>> tokenizer = MarkdownTokenizer()
        >>> events = tokenizer.tokenize("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> tokenizer = MarkdownTokenizer(MarkdownParserOptions(parse_tables=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the tokenizer with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def _plugins(self) -> list[str]:
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        if self.options.parse_math:
            plugins.append("math")
        if self.options.parse_superscript:
            plugins.append("superscript")
        if self.options.parse_subscript:
            plugins.append("subscript")
        return plugins

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def tokenize(self, text: str) -> list[ev.Event]:
        """Tokenize Markdown text into events.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        list of Event
            Flat event stream

        """
        import mistune

        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)
        tokens, _state = markdown.parse(text)

        out: list[ev.Event] = []
        if isinstance(tokens, list):
            self._emit_blocks(tokens, out)
        return out

    # Block tokens

    def _emit_blocks(self, tokens: Iterable[dict[str, Any]], out: list[ev.Event]) -> None:
        for token in tokens:
            self._emit_block(token, out)

    def _emit_block(self, token: dict[str, Any], out: list[ev.Event]) -> None:
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children") or []

        if token_type == "blank_line":
            return
        if token_type == "paragraph":
            out.extend(ev.wrap(ev.ParagraphTag(), self._inline_events(children)))
        elif token_type == "block_text":
            self._emit_inlines(children, out)
        elif token_type == "heading":
            out.extend(ev.wrap(ev.HeadingTag(level=int(attrs.get("level", 1))), self._inline_events(children)))
        elif token_type == "thematic_break":
            out.append(ev.Rule())
        elif token_type == "block_code":
            code = token.get("raw", "")
            # Indented code at end of input comes without its final newline
            if code and not code.endswith("\n"):
                code += "\n"
            out.extend(ev.wrap(ev.CodeBlockTag(self._code_kind(token)), [ev.Text(code)]))
        elif token_type == "block_quote":
            out.append(ev.Start(ev.BlockQuoteTag()))
            self._emit_blocks(children, out)
            out.append(ev.End(ev.TagKind.BLOCK_QUOTE))
        elif token_type == "list":
            self._emit_list(token, out)
        elif token_type in ("list_item", "task_list_item"):
            self._emit_list_item(token, out)
        elif token_type == "block_html":
            out.extend(ev.wrap(ev.HtmlBlockTag(), [ev.Html(token.get("raw", ""))]))
        elif token_type == "block_math":
            out.extend(ev.wrap(ev.ParagraphTag(), [ev.DisplayMath(token.get("raw", ""))]))
        elif token_type == "table":
            self._emit_table(token, out)
        elif token_type == "footnotes":
            self._emit_blocks(children, out)
        elif token_type == "footnote_item":
            label = str(attrs.get("key", attrs.get("label", "")))
            out.append(ev.Start(ev.FootnoteDefinitionTag(label)))
            self._emit_blocks(children, out)
            out.append(ev.End(ev.TagKind.FOOTNOTE_DEFINITION))
        else:
            logger.debug("Flattening unknown block token type %r", token_type)
            self._emit_blocks(children, out)

    @staticmethod
    def _code_kind(token: dict[str, Any]) -> ev.CodeBlockKind:
        if token.get("style") == "indent":
            return ev.Indented()
        info = ((token.get("attrs") or {}).get("info") or "").strip()
        return ev.Fenced(info.split()[0] if info else "")

    def _emit_list(self, token: dict[str, Any], out: list[ev.Event]) -> None:
        attrs = token.get("attrs") or {}
        start: Optional[int] = None
        if attrs.get("ordered"):
            start = int(attrs.get("start", 1))
        out.append(ev.Start(ev.ListTag(start)))
        self._emit_blocks(token.get("children") or [], out)
        out.append(ev.End(ev.TagKind.LIST))

    def _emit_list_item(self, token: dict[str, Any], out: list[ev.Event]) -> None:
        """Emit a list item; task items put their marker at the head of the first paragraph."""
        children = list(token.get("children") or [])
        out.append(ev.Start(ev.ItemTag()))
        if token.get("type") == "task_list_item":
            checked = bool((token.get("attrs") or {}).get("checked", False))
            first = children[0] if children else None
            if first is not None and first.get("type") in ("block_text", "paragraph"):
                children.pop(0)
                inner: list[ev.Event] = [ev.TaskListMarker(checked), ev.Text(" ")]
                inner.extend(self._inline_events(first.get("children") or []))
                out.extend(ev.wrap(ev.ParagraphTag(), inner))
            else:
                out.append(ev.TaskListMarker(checked))
        self._emit_blocks(children, out)
        out.append(ev.End(ev.TagKind.ITEM))

    def _emit_table(self, token: dict[str, Any], out: list[ev.Event]) -> None:
        head: list[dict[str, Any]] = []
        body_rows: list[dict[str, Any]] = []
        for part in token.get("children") or []:
            if part.get("type") == "table_head":
                head = part.get("children") or []
            elif part.get("type") == "table_body":
                body_rows = part.get("children") or []

        alignments = tuple(_ALIGNMENTS.get((cell.get("attrs") or {}).get("align"), ev.Alignment.NONE) for cell in head)
        out.append(ev.Start(ev.TableTag(alignments)))
        out.extend(ev.wrap(ev.TableHeadTag(), self._cell_events(head)))
        for row in body_rows:
            out.extend(ev.wrap(ev.TableRowTag(), self._cell_events(row.get("children") or [])))
        out.append(ev.End(ev.TagKind.TABLE))

    def _cell_events(self, cells: Iterable[dict[str, Any]]) -> list[ev.Event]:
        out: list[ev.Event] = []
        for cell in cells:
            out.extend(ev.wrap(ev.TableCellTag(), self._inline_events(cell.get("children") or [])))
        return out

    # Inline tokens

    def _inline_events(self, tokens: Iterable[dict[str, Any]]) -> list[ev.Event]:
        out: list[ev.Event] = []
        self._emit_inlines(tokens, out)
        return out

    def _emit_inlines(self, tokens: Iterable[dict[str, Any]], out: list[ev.Event]) -> None:
        for token in tokens:
            self._emit_inline(token, out)

    def _emit_inline(self, token: dict[str, Any], out: list[ev.Event]) -> None:
        token_type = token.get("type", "")
        children = token.get("children") or []

        if token_type == "text":
            out.append(ev.Text(token.get("raw", "")))
        elif token_type == "codespan":
            out.append(ev.Code(token.get("raw", "")))
        elif token_type == "softbreak":
            out.append(ev.SoftBreak())
        elif token_type == "linebreak":
            out.append(ev.HardBreak())
        elif token_type == "inline_html":
            out.append(ev.InlineHtml(token.get("raw", "")))
        elif token_type == "inline_math":
            out.append(ev.InlineMath(token.get("raw", "")))
        elif token_type == "footnote_ref":
            attrs = token.get("attrs") or {}
            out.append(ev.FootnoteReference(str(token.get("raw") or attrs.get("label", ""))))
        elif token_type in _SPAN_TAGS:
            inner = self._inline_events(children) if children else [ev.Text(token.get("raw", ""))]
            out.extend(ev.wrap(_SPAN_TAGS[token_type], inner))
        elif token_type in ("link", "image"):
            out.extend(ev.wrap(self._link_tag(token), self._inline_events(children)))
        else:
            logger.debug("Flattening unknown inline token type %r", token_type)
            if children:
                self._emit_inlines(children, out)
            elif token.get("raw"):
                out.append(ev.Text(token["raw"]))

    @staticmethod
    def _link_tag(token: dict[str, Any]) -> ev.Tag:
        """Build the Link or Image tag for a mistune link/image token.

        Links whose text equals their destination are autolinks (``<url>``);
        a ``mailto:`` destination matching its text is an email autolink.
        Tokens resolved from a reference definition keep their label as id.
        """
        attrs = token.get("attrs") or {}
        dest = attrs.get("url", "") or ""
        title = attrs.get("title") or ""
        label = token.get("label") or attrs.get("label") or ""
        children = token.get("children") or []
        text = "".join(child.get("raw", "") for child in children if child.get("type") == "text")

        if token.get("type") == "image":
            if label:
                return ev.ImageTag(link_type=ev.LinkType.REFERENCE, dest=dest, title=title, id=label)
            return ev.ImageTag(dest=dest, title=title)

        if label:
            return ev.LinkTag(link_type=ev.LinkType.REFERENCE, dest=dest, title=title, id=label)
        if len(children) == 1 and not title:
            if dest.startswith("mailto:") and text == dest[len("mailto:") :]:
                return ev.LinkTag(link_type=ev.LinkType.EMAIL, dest=text)
            if text == dest:
                return ev.LinkTag(link_type=ev.LinkType.AUTOLINK, dest=dest)
        return ev.LinkTag(dest=dest, title=title)


def markdown_to_events(text: str, options: MarkdownParserOptions | None = None) -> list[ev.Event]:
    r"""Convert a Markdown string to an event stream.

    Parameters
    ----------
    text : str
        Markdown text to tokenize
    options : MarkdownParserOptions or None, default = None
        Tokenizer configuration

    Returns
    -------
    list of Event
        Flat event stream

    Examples
    --------
    >>> events = markdown_to_events("# Hello\\n\\nWorld")
    >>> events[0]
    Start(tag=HeadingTag(level=1, id=None, classes=(), attrs=()))

    """
    return MarkdownTokenizer(options).tokenize(text)
