#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/parsers/base.py
"""Base classes for tokenizers.

This module defines the abstract base class for components that turn source
text into the flat event stream consumed by the reconstruction engine.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from mdtree.events import Event
from mdtree.exceptions import InvalidOptionsError
from mdtree.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all tokenizers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def tokenize(self, text: str) -> list[Event]:
        """Turn source text into a flat event stream.

        Parameters
        ----------
        text : str
            Source document

        Returns
        -------
        list of Event
            Events in document order

        Raises
        ------
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
