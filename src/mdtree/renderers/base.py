#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from. A
renderer turns a sequence of root blocks into an output format.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Sequence, Union

from mdtree.ast.nodes import Block
from mdtree.exceptions import InvalidOptionsError
from mdtree.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class CountingRenderer(BaseRenderer):
        ...     def render_to_string(self, blocks):
        ...         return str(len(blocks))
        ...
        ...     def render(self, blocks, output):
        ...         self.write_text_output(self.render_to_string(blocks), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, blocks: Sequence[Block], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render ``blocks`` and write the result to ``output``.

        Parameters
        ----------
        blocks : sequence of Block
            Root blocks to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        pass

    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render ``blocks`` to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            File path, binary stream (UTF-8 encoded) or text stream

        Raises
        ------
        TypeError
            If output type is not supported

        Examples
        --------
            >>> buffer = io.StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> buffer.getvalue()
            '# Hello'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, io.TextIOBase):
            output.write(text)
        elif hasattr(output, "write"):
            if "b" in getattr(output, "mode", "b") or isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
                output.write(text.encode("utf-8"))  # type: ignore[arg-type]
            else:
                output.write(text)  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
